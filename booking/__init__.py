# booking/__init__.py
from .config import PODS, NO_BOOKINGS
from .models import Booking, InsightsSnapshot, Pod, PodFillRate, Violation, ViolationKind
from .utils import parse_student_ids, is_within_operating_hours, normalize_time, find_in_request_duplicate
from .rules import check_booking, validate
from .store import BookingStore
from .insights import compute_insights
from .session import BookingSession, SubmitResult

__all__ = [
    "PODS", "NO_BOOKINGS",
    "Booking", "InsightsSnapshot", "Pod", "PodFillRate", "Violation", "ViolationKind",
    "parse_student_ids", "is_within_operating_hours", "normalize_time", "find_in_request_duplicate",
    "check_booking", "validate",
    "BookingStore",
    "compute_insights",
    "BookingSession", "SubmitResult",
]
