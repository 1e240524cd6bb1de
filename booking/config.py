from __future__ import annotations
import os

from .models import Pod

# -------------------------- Configuration / Globals --------------------------

TIME_FMT = "%H:%M"

# Operating hours: [OPEN_HOUR:00, CLOSE_HOUR:00)
OPEN_HOUR = 8
CLOSE_HOUR = 20

POD_CAPACITY = 4

PODS: tuple[Pod, ...] = (
    Pod("POD-A", POD_CAPACITY),
    Pod("POD-B", POD_CAPACITY),
    Pod("POD-C", POD_CAPACITY),
)

NO_BOOKINGS = "No bookings yet"

# Seed rows loaded into every fresh session (copied, never shared).
INITIAL_BOOKINGS: list[dict] = [
    {"pod_id": "POD-A", "time": "09:00", "students": ["SIT-001", "SIT-045"]},
    {"pod_id": "POD-B", "time": "10:00", "students": ["SMC-210"]},
]


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no", "off", ""}


def seed_enabled() -> bool:
    """STUDY_PODS_SEED=0 starts sessions with an empty store."""
    return _env_flag("STUDY_PODS_SEED", True)


def log_tail_default() -> int:
    """STUDY_PODS_LOG_TAIL, snapped to the log slider's 20..1000 step-20 range."""
    try:
        n = int(os.environ.get("STUDY_PODS_LOG_TAIL", "200"))
    except ValueError:
        return 200
    return min(1000, max(20, n - n % 20))
