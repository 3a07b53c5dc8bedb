import logging
from dataclasses import replace

import streamlit as st
import streamlit.components.v1 as components
from streamlit.errors import StreamlitAPIException

from store_schema.config import load_default_fields
from store_schema.extractors.sheet import ExtractionStatus
from store_schema.state import CopyOutput, EditInput, FormState, Generate, reduce
from store_schema.utils.clipboard import clipboard_script
from store_schema.utils.helpers import slugify


def _configure_console_logging() -> None:
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    root.setLevel(logging.INFO)

    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s - %(message)s"))
    root.addHandler(ch)


_configure_console_logging()
logger = logging.getLogger("store_schema.app")


def get_default_fields_path() -> str:
    try:
        return st.secrets.get("DEFAULT_FIELDS_PATH", "")
    except (FileNotFoundError, StreamlitAPIException):
        return ""


def write_to_clipboard(text: str) -> None:
    """Copy `text` in the browser; the component shows whether it worked."""
    components.html(clipboard_script(text), height=32)


# ─── Page Config ────────────────────────────────────────────────────────────
st.set_page_config(
    page_title="Store Schema Generator",
    page_icon="🏬",
    layout="wide",
)

# ─── CSS ────────────────────────────────────────────────────────────────────
st.markdown("""
<style>
.step-header { font-size: 1.4rem; font-weight: 700; margin-bottom: 0.5rem; color: #1F2937; }
.section-header { font-size: 1rem; font-weight: 600; color: #4F46E5; margin-top: 1.5rem; margin-bottom: 0.5rem; }
</style>
""", unsafe_allow_html=True)

# ─── Session State Init ──────────────────────────────────────────────────────
if "form" not in st.session_state:
    st.session_state["form"] = FormState()
if "default_fields" not in st.session_state:
    try:
        st.session_state["default_fields"] = load_default_fields(get_default_fields_path() or None)
    except (OSError, ValueError) as e:
        logger.error("Could not load configured default fields: %s", e)
        st.error(f"Could not load default fields ({e}); using built-in defaults.")
        st.session_state["default_fields"] = load_default_fields()


def dispatch(action) -> None:
    st.session_state["form"] = reduce(st.session_state["form"], action)


def on_input_change() -> None:
    dispatch(EditInput(st.session_state["sheet_input"]))


# ─── Sidebar ────────────────────────────────────────────────────────────────
with st.sidebar:
    st.title("🏬 Store Schema")
    st.markdown("---")
    st.markdown(
        "Paste a row from the store sheet. The tool looks for the **name**, "
        "**description** and **url** columns; every other field keeps its default."
    )
    with st.expander("Default fields"):
        st.json(st.session_state["default_fields"].to_dict(), expanded=False)

    st.markdown("---")
    if st.button("🔄 Start Over", use_container_width=True):
        for k in list(st.session_state.keys()):
            del st.session_state[k]
        st.rerun()

# ─── Input ──────────────────────────────────────────────────────────────────
st.markdown('<div class="step-header">Store JSON-LD Generator</div>', unsafe_allow_html=True)
st.text_area(
    "Paste your sheet data (or leave empty for default values):",
    key="sheet_input",
    height=160,
    placeholder="Paste your Google Sheets data here...",
    on_change=on_input_change,
)

col_gen, col_copy = st.columns(2)
with col_gen:
    if st.button("Generate Schema", type="primary", use_container_width=True):
        dispatch(EditInput(st.session_state["sheet_input"]))
        dispatch(Generate(st.session_state["default_fields"]))
        logger.info("Generated schema (extraction %s)", st.session_state["form"].extraction)
with col_copy:
    if st.session_state["form"].output:
        if st.button("Copy to Clipboard", use_container_width=True):
            dispatch(CopyOutput(write_to_clipboard))

form: FormState = st.session_state["form"]

# ─── Messages ───────────────────────────────────────────────────────────────
if form.error:
    st.error(form.error)
if form.extraction == ExtractionStatus.UNMATCHED.value and form.output:
    st.info("No name / description / url columns found; default values were used.")
if form.notice:
    st.toast(form.notice)
    st.session_state["form"] = replace(form, notice="")

# ─── Output ─────────────────────────────────────────────────────────────────
if form.output:
    st.markdown('<div class="section-header">Liquid snippet</div>', unsafe_allow_html=True)
    st.code(form.output, language="html")
    st.download_button(
        label="⬇️ Download snippet",
        data=form.output,
        file_name=f"{slugify(form.store_name) or 'store'}-schema.liquid",
        mime="text/plain",
    )
