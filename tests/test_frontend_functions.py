from unittest.mock import patch

from MUSHFORM.frontend_functions import background, feature_label, option_label, widget_key


def test_background_only_styles_used_selectors():
    with patch("MUSHFORM.frontend_functions.st") as st:
        background()
    css = st.markdown.call_args[0][0]
    assert ".stButton>button" in css
    for unused in (".card", ".required", ".optional"):
        assert unused not in css


def test_labels():
    assert feature_label("odor") == "Odor :red[*]"
    assert feature_label("veil-type") == "Veil Type :gray[(Optional)]"
    assert option_label("") == "Select..."
    assert option_label("evanescent") == "Evanescent"
    assert widget_key("cap-color") == "feature_cap-color"
