from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

from .config import PODS, OPEN_HOUR, CLOSE_HOUR
from .models import Booking, Pod, Violation, ViolationKind, COUNTED_KINDS
from .utils import is_within_operating_hours, normalize_time


def find_pod(pod_id: str, pods: Sequence[Pod] = PODS) -> Optional[Pod]:
    for p in pods:
        if p.id == pod_id:
            return p
    return None


def find_booking(bookings: Sequence[Booking], pod_id: str, time: str) -> Optional[Booking]:
    for b in bookings:
        if b.pod_id == pod_id and b.time == time:
            return b
    return None


def _hours_message() -> str:
    last = f"{CLOSE_HOUR - 1:02d}:59"
    return (
        f"Booking time must be between {OPEN_HOUR:02d}:00 and {last} "
        f"({CLOSE_HOUR:02d}:00 is not available)"
    )


def check_booking(
    pod_id: str,
    time: str,
    student_ids: Sequence[str],
    bookings: Sequence[Booking],
    pods: Sequence[Pod] = PODS,
) -> List[Violation]:
    """
    Evaluate every rule against the current bookings and collect all violations.
    Does not mutate ``bookings``.
    """
    violations: List[Violation] = []
    # slots are keyed by "HH:MM"; "9:00" must hit the "09:00" booking
    time = normalize_time(time) or time

    # Operating hours
    if not is_within_operating_hours(time):
        violations.append(Violation(ViolationKind.MALFORMED_TIME, _hours_message()))

    # Roster
    if len(student_ids) == 0:
        violations.append(Violation(ViolationKind.EMPTY_ROSTER, "At least one valid student ID is required"))

    existing = find_booking(bookings, pod_id, time)
    pod = find_pod(pod_id, pods)
    capacity = pod.capacity if pod else 0

    # Capacity
    current = len(existing.students) if existing else 0
    if current + len(student_ids) > capacity:
        violations.append(Violation(
            ViolationKind.CAPACITY_EXCEEDED,
            f"Pod capacity exceeded. Current: {current}, Adding: {len(student_ids)}, Maximum: {capacity}",
        ))

    # Students already in another pod at this time
    clashing = set()
    for b in bookings:
        if b.time == time and b.pod_id != pod_id:
            clashing.update(b.students)

    in_slot = set(existing.students) if existing else set()
    for sid in student_ids:
        if sid in in_slot:
            violations.append(Violation(
                ViolationKind.INTRA_SLOT_DUPLICATE,
                f"Student {sid} is already booked in {pod_id} at {time}",
            ))
        if sid in clashing:
            violations.append(Violation(
                ViolationKind.CROSS_POD_CLASH,
                f"Student {sid} already has a booking in another pod at {time}",
            ))

    return violations


def validate(
    pod_id: str,
    time: str,
    student_ids: Sequence[str],
    bookings: Sequence[Booking],
    duplicate_attempts: int = 0,
    pods: Sequence[Pod] = PODS,
) -> Tuple[List[str], int]:
    """
    Returns:
      messages (list[str]) - empty when the booking is acceptable,
      duplicate_attempts (int) - the counter after this check
    """
    violations = check_booking(pod_id, time, student_ids, bookings, pods)
    hits = sum(1 for v in violations if v.kind in COUNTED_KINDS)
    return [v.message for v in violations], duplicate_attempts + hits
