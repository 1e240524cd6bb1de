import streamlit as st
import sys
from pathlib import Path

# Make sure we can import local packages when running from /pages
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from ui.helpers import ensure_session_keys, get_session
from ui.sections import render_logs

st.set_page_config(page_title="Booking Log", layout="wide")
st.title("🐞 Booking Log")

ensure_session_keys()

if not get_session().log_lines:
    st.info("No logs yet. Make or remove a booking on the Home page.")
else:
    render_logs(height=300)
