from __future__ import annotations
import streamlit as st
import pandas as pd
from datetime import datetime as dt, time

from booking import BookingSession, Booking
from booking.config import OPEN_HOUR, TIME_FMT, log_tail_default

# ----------------- Session helpers -----------------

def ensure_session_keys() -> None:
    """Create all session_state keys used by the app if missing."""
    defaults = [
        ("flash",        None),
        ("log_tail",     log_tail_default()),
    ]
    for k, v in defaults:
        if k not in st.session_state:
            st.session_state[k] = v
    if "pod_session" not in st.session_state:
        st.session_state["pod_session"] = BookingSession()


def get_session() -> BookingSession:
    ensure_session_keys()
    return st.session_state["pod_session"]


def default_time(now: dt | None = None) -> time:
    """Current hour when it leaves room for a booking (08..18), else 09:00."""
    now = now or dt.now()
    hour = now.hour if OPEN_HOUR <= now.hour < 19 else 9
    return time(hour, 0)


def time_to_str(value) -> str:
    if value is None:
        return ""
    if isinstance(value, time):
        return value.strftime(TIME_FMT)
    return str(value).strip()

# ----------------- DataFrame helpers -----------------

def bookings_table(bookings: tuple[Booking, ...] | list[Booking]) -> pd.DataFrame:
    """Display table: 1-based position, pod, time, count, IDs."""
    rows = [
        {
            "#": i + 1,
            "pod": b.pod_id,
            "time": b.time,
            "students": len(b.students),
            "student_ids": ", ".join(b.students),
        }
        for i, b in enumerate(bookings)
    ]
    return pd.DataFrame(rows, columns=["#", "pod", "time", "students", "student_ids"])


def to_csv_bytes(df: pd.DataFrame) -> bytes:
    return df.to_csv(index=False).encode("utf-8-sig")


__all__ = [
    "ensure_session_keys",
    "get_session",
    "default_time",
    "time_to_str",
    "bookings_table",
    "to_csv_bytes",
]
