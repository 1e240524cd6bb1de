import streamlit as st

# --- Ensure local packages (ui/, booking/) are importable --------------------
import sys
from pathlib import Path
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
# -----------------------------------------------------------------------------

from ui.helpers import ensure_session_keys, get_session
from ui.sections import (
    render_booking_form,
    render_bookings,
    render_insights,
    render_logs,
)

st.set_page_config(
    page_title="Study Pod Booking",
    layout="wide",
    initial_sidebar_state="collapsed",
)

st.title("📚 Study Pod Booking System")

# init session keys
ensure_session_keys()

# Form (submit runs validate -> book as a callback before this rerun renders)
render_booking_form()

session = get_session()

# Sections
render_bookings(session.bookings)
render_insights(session.insights())
render_logs()
