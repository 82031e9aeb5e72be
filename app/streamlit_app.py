import os, sys, logging
import streamlit as st

APP_DIR = os.path.dirname(__file__)
MOD_DIR = os.path.join(APP_DIR, "modules")
if MOD_DIR not in sys.path:
    sys.path.append(MOD_DIR)

from settings import load_settings
from data_source import DatasetFetchError, decode_upload, fetch_dataset, upload_fingerprint
from detail_view import detail_lines, glyph_html
from ingest import IngestResult, IngestionPipeline
from lookup_session import LookupSession

SETTINGS = load_settings()
logging.basicConfig(
    level=getattr(logging, SETTINGS.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)
logger = logging.getLogger("sijiao_lookup")

st.set_page_config(page_title="Four Corner Lookup", layout="wide")
st.title("四角號碼 Four Corner Code Lookup")

def make_pipeline() -> IngestionPipeline:
    return IngestionPipeline(delimiter=SETTINGS.delimiter, sample_size=SETTINGS.sample_size,
                             min_columns=SETTINGS.min_columns)

def load_text(session: LookupSession, text: str) -> None:
    ticket = session.begin_load()
    session.publish(ticket, make_pipeline().run(text))

if 'session' not in st.session_state:
    session = LookupSession(max_query_length=SETTINGS.max_query_length, max_results=SETTINGS.max_results)
    ticket = session.begin_load()
    with st.spinner("Processing Unihan Database..."):
        try:
            result = make_pipeline().run(fetch_dataset(SETTINGS.data_url, timeout=SETTINGS.fetch_timeout))
        except DatasetFetchError as e:
            result = IngestResult.failed(str(e))
    session.publish(ticket, result)
    st.session_state['session'] = session
    st.session_state['upload_seen'] = None

session: LookupSession = st.session_state['session']

with st.sidebar:
    st.subheader("Dataset")
    if session.error:
        st.error(f"Error Loading Data: {session.error}")
    elif session.index is not None:
        st.success(f"Database loaded: {session.count:,} characters")
    if session.needs_manual_input or session.index is not None:
        uploaded = st.file_uploader("Upload unihan.csv manually", type=["csv", "txt"])
        if uploaded is not None:
            key = upload_fingerprint(uploaded.getvalue())
            if st.session_state['upload_seen'] != key:
                st.session_state['upload_seen'] = key
                with st.spinner("Processing upload..."):
                    load_text(session, decode_upload(uploaded.getvalue()))
                st.rerun()
    st.caption(f"Source: {SETTINGS.data_url}")

def on_digit(d: str): session.submit_digit(d)

left, right = st.columns([1, 2])
with left:
    st.markdown("### Current Code")
    st.code(session.query.ljust(SETTINGS.max_query_length, "_"))
    for row in (("1", "2", "3"), ("4", "5", "6"), ("7", "8", "9")):
        cols = st.columns(3)
        for c, d in zip(cols, row):
            c.button(d, key=f"k{d}", on_click=on_digit, args=(d,), use_container_width=True)
    c0, c1 = st.columns(2)
    c0.button("0", key="k0", on_click=on_digit, args=("0",), use_container_width=True)
    c1.button("⌫", key="kdel", on_click=session.delete_last_digit, use_container_width=True)
    st.button("Clear Input", on_click=session.clear_query, use_container_width=True)

with right:
    results = session.results
    st.markdown(f"### Results ({len(results)})")
    if not session.query:
        st.info("Enter a Four Corner code on the keypad.")
    elif not results:
        st.warning("No characters match this code.")
    else:
        import pandas as pd
        df = pd.DataFrame([r.to_dict() for r in results],
                          columns=["character", "code", "pinyin", "cantonese", "definition"])
        st.dataframe(df, use_container_width=True, hide_index=True)
        pick = st.selectbox("Details", options=range(len(results)),
                            format_func=lambda i: f"{results[i].character}  {results[i].code}")
        rec = results[pick]
        st.markdown(glyph_html(rec), unsafe_allow_html=True)
        for line in detail_lines(rec):
            st.text(line)
