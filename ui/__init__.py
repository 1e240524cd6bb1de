# ui/__init__.py
from .sections import render_booking_form, render_bookings, render_insights, show_message, render_logs
__all__ = ["render_booking_form", "render_bookings", "render_insights", "show_message", "render_logs"]
