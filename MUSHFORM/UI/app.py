# app.py
# Streamlit form: mushroom characteristics (or a photo) -> prediction API -> edible / poisonous
import io

import streamlit as st
from PIL import Image, UnidentifiedImageError

from MUSHFORM.api.client import ApiClient
from MUSHFORM.features import FEATURE_OPTIONS, feature_frame
from MUSHFORM.form import FormController, check_service
from MUSHFORM.frontend_functions import (
    apply_upload,
    background,
    feature_label,
    option_label,
    title,
    widget_key,
)
from MUSHFORM.params import HEALTH_CACHE_TTL

# ========= HEADER =========

st.set_page_config(page_title="Mushroom Classifier", page_icon="🍄", layout="wide")

background()
title()
st.markdown("---")


# ========= HELPERS =========
@st.cache_resource
def get_client() -> ApiClient:
    return ApiClient()


@st.cache_data(ttl=HEALTH_CACHE_TTL)
def service_status(base_url: str, routes: str) -> bool:
    # arguments only key the cache
    return check_service(get_client())


if "form" not in st.session_state:
    st.session_state["form"] = FormController()
form: FormController = st.session_state["form"]
client = get_client()


# ========= CALLBACKS =========
def on_feature_change(feature: str):
    form.set_feature(feature, st.session_state[widget_key(feature)])


def on_image_upload():
    uploaded = st.session_state.get("image_upload")
    if uploaded is None:
        return
    with st.spinner("Analyzing image..."):
        apply_upload(form, client, uploaded, st.session_state)


def on_submit():
    with st.spinner("Analyzing..."):
        form.submit(client)


# ========= SIDEBAR =========
with st.sidebar:
    st.header("Prediction service")
    st.caption(f"Endpoint: {client.base_url}")
    st.caption(f"Routes: {client.routes_variant}")
    if service_status(client.base_url, client.routes_variant):
        st.success("Service reachable")
    else:
        st.error("Service unreachable")


# ========= IMAGE =========
left, right = st.columns([1, 1])

with left:
    st.markdown("### Upload Mushroom Image (Optional)")
    st.file_uploader(
        "PNG, JPG up to 10MB",
        type=["png", "jpg", "jpeg"],
        key="image_upload",
        on_change=on_image_upload,
    )
    if form.analyzing:
        st.caption("Analyzing image...")

with right:
    if form.image:
        try:
            st.image(Image.open(io.BytesIO(form.image)), caption="Uploaded mushroom", width=240)
        except UnidentifiedImageError:
            st.caption("Preview not available for this file.")
    else:
        st.info("Upload a photo to pre-fill some of the characteristics.")


# ========= FEATURES =========
st.markdown("### Characteristics")
cols = st.columns(3)
for idx, (feature, options) in enumerate(FEATURE_OPTIONS.items()):
    key = widget_key(feature)
    if key not in st.session_state:
        st.session_state[key] = form.features[feature]
    cols[idx % 3].selectbox(
        feature_label(feature),
        [""] + options,
        format_func=option_label,
        key=key,
        on_change=on_feature_change,
        args=(feature,),
    )

with st.expander("Your specimen", expanded=False):
    st.dataframe(feature_frame(form.features), hide_index=True, use_container_width=True)


# ========= SUBMIT =========
# can_submit only turns False while on_submit runs, so on a rerun the button is
# always enabled. The flag is for callers driving FormController directly.
st.button(
    "Analyze Mushroom",
    type="primary",
    disabled=not form.can_submit,
    on_click=on_submit,
)

if form.error:
    st.error(form.error, icon="❌")

if form.result is not None:
    result = form.result
    if result.is_edible:
        st.success(result.headline, icon="✅")
    else:
        st.error(result.headline, icon="☠️")
    st.markdown(f"**{result.confidence_text}**")
    st.markdown("###### ⚠️ This is purely informational. Our model may be wrong. Never eat mushrooms based on an app prediction.")
