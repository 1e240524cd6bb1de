# ui/runner.py
from __future__ import annotations
import streamlit as st

from .helpers import get_session, time_to_str


def submit_booking():
    # 1) read form widgets
    pod_id = st.session_state.get("pod_select")
    slot = time_to_str(st.session_state.get("time_input"))
    raw = st.session_state.get("students_input", "")

    # 2) validate + mutate in one step
    result = get_session().submit(pod_id, slot, raw)

    # 3) flash message for the next render; clear IDs for quick re-entry
    if result.ok:
        st.session_state["flash"] = ("success", f"✅ {result.text}")
        st.session_state["students_input"] = ""
    else:
        st.session_state["flash"] = ("error", result.error_text)
    return result


def remove_booking(index: int):
    result = get_session().remove(index)
    if result.ok:
        st.session_state["flash"] = ("success", f"🗑️ {result.text}")
    else:
        st.session_state["flash"] = ("error", result.text)
    return result
