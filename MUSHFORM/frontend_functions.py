import streamlit as st

from MUSHFORM.features import humanize, is_required


def background():
    # IMPORTANT : call st.set_page_config before background()
    st.markdown("""
    <style>
    /* ================== Palette ================== */
    :root{
      --bg:#ffffff;
      --ink:#111827;
      --accent:#4f46e5;    /* indigo */
      --muted:#6b7280;
    }

    [data-testid="stHeader"]{ background: transparent; }
    [data-testid="stAppViewContainer"]{ background: var(--bg); }

    /* ================== Titles ================== */
    h1, h2, h3 { color:var(--ink); letter-spacing:.2px; }

    /* ================== Buttons ================== */
    .stButton>button{
      border-radius:8px; padding:10px 16px; font-weight:600; min-width:200px;
    }
    .stButton>button[kind="primary"]{ background:var(--accent); color:white; }
    </style>
    """, unsafe_allow_html=True)
    return 1


def title():
    st.markdown("""
    <h1 style="text-align:center; font-size:52px; margin-bottom:4px;">
      🍄 Mushroom Classifier
    </h1>
    """, unsafe_allow_html=True)
    st.markdown(
        "<p style='text-align:center; color:#6b7280;'>"
        "Upload a photo or enter characteristics to determine if a mushroom is edible or poisonous. "
        "NOTE: Image uploading is inconsistent and limited to a few features. "
        "You are required to fill in the rest of the features.</p>",
        unsafe_allow_html=True,
    )
    return 1


def feature_label(feature: str) -> str:
    # st.selectbox labels are markdown, not html
    if is_required(feature):
        return f"{humanize(feature)} :red[*]"
    return f"{humanize(feature)} :gray[(Optional)]"


def option_label(value: str) -> str:
    return humanize(value) if value else "Select..."


def widget_key(feature: str) -> str:
    return f"feature_{feature}"


def apply_upload(form, client, uploaded, state) -> dict:
    """
    Run image analysis for a Streamlit upload and copy the detected values
    into the select box state. Must run before the select boxes are drawn,
    i.e. from a widget callback.
    """
    applied = form.upload_image(
        client,
        uploaded.getvalue(),
        filename=uploaded.name,
        content_type=uploaded.type or "image/jpeg",
    )
    for feature, value in applied.items():
        state[widget_key(feature)] = value
    return applied
