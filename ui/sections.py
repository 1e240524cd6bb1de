from __future__ import annotations
import streamlit as st

from booking import InsightsSnapshot, Booking
from booking.insights import fill_rates_frame

from .helpers import get_session, default_time, bookings_table, to_csv_bytes
from .runner import submit_booking, remove_booking


# ---------- Messages ----------------------------------------------------------
def show_message(kind: str, text: str):
    if not text:
        return
    if kind == "error":
        st.error(text)
    else:
        st.success(text)


def render_flash():
    flash = st.session_state.get("flash")
    if flash:
        show_message(*flash)
        st.session_state["flash"] = None


# ---------- Booking form ------------------------------------------------------
def render_booking_form():
    st.markdown("## 📝 Book a Study Pod")
    session = get_session()
    pods = {p.id: p for p in session.pods}

    if "time_input" not in st.session_state:
        st.session_state["time_input"] = default_time()

    with st.form("booking_form", clear_on_submit=False):
        col1, col2 = st.columns(2)
        with col1:
            st.selectbox(
                "Study pod",
                list(pods),
                index=None,
                key="pod_select",
                placeholder="Choose a study pod...",
                format_func=lambda pid: pods[pid].label(),
            )
        with col2:
            st.time_input("Time", key="time_input", step=60)
        st.text_input(
            "Student IDs",
            key="students_input",
            placeholder="e.g. SIT-001, SIT-045",
            help="Comma-separated. IDs are trimmed and upper-cased.",
        )
        st.form_submit_button("📅 Book", on_click=submit_booking)

    render_flash()


# ---------- Bookings table ----------------------------------------------------
def render_bookings(bookings: tuple[Booking, ...]):
    st.markdown("---")
    st.markdown("## 📋 Current Bookings")

    if not bookings:
        st.info("No bookings yet. Create your first booking above! 📅")
        return

    header = st.columns([1, 2, 2, 2, 5, 2])
    for col, title in zip(header, ["#", "Pod", "Time", "Students", "Student IDs", ""]):
        col.markdown(f"**{title}**")

    for i, b in enumerate(bookings):
        c = st.columns([1, 2, 2, 2, 5, 2])
        c[0].write(i + 1)
        c[1].write(b.pod_id)
        c[2].write(b.time)
        c[3].write(len(b.students))
        c[4].write(", ".join(b.students))
        c[5].button("🗑️ Remove", key=f"remove_{i}", on_click=remove_booking, args=(i,))

    st.download_button(
        "📥 Download Bookings",
        to_csv_bytes(bookings_table(bookings)),
        file_name="bookings.csv",
        mime="text/csv",
    )


# ---------- Insights ----------------------------------------------------------
def render_insights(snapshot: InsightsSnapshot):
    st.markdown("---")
    st.markdown("## 📈 Daily Insights")

    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Total Bookings Made Today", snapshot.total_bookings)
    c2.metric("👥 Total Unique Students Served", snapshot.unique_students)
    c3.metric("⏰ Busiest Hour", snapshot.busiest_hour)
    c4.metric("🚫 Flagged Duplicate Attempts", snapshot.duplicate_attempts)

    st.markdown("#### 📊 Pod Fill Rates (% of capacity used)")
    for rate in snapshot.pod_fill_rates:
        st.write(f"**{rate.pod_id}:** {rate.label()}")

    rates_df = fill_rates_frame(snapshot)
    st.download_button(
        "📥 Download Fill Rates",
        to_csv_bytes(rates_df),
        file_name="pod_fill_rates.csv",
        mime="text/csv",
    )


# ---------- Logs --------------------------------------------------------------
def render_logs(height: int = 200):
    lines = get_session().log_lines
    if not lines:
        return
    st.markdown("---")
    st.markdown("### 🐞 Booking Log")

    n = st.slider("Show last N lines", min_value=20, max_value=1000,
                  value=st.session_state.get("log_tail", 200), step=20)
    tail = lines[-n:]
    st.text_area("Log (compact)", value="\n".join(tail), height=height, label_visibility="collapsed")

    log_bytes = "\n".join(lines).encode("utf-8-sig")
    st.download_button("📥 Download Log", log_bytes, file_name="booking.log", mime="text/plain")
