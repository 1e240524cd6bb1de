from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from .config import PODS, INITIAL_BOOKINGS, seed_enabled
from .insights import compute_insights
from .models import Booking, InsightsSnapshot, Pod
from .rules import find_pod, validate
from .store import BookingStore
from .utils import find_in_request_duplicate, normalize_time, parse_student_ids, plural


@dataclass
class SubmitResult:
    ok: bool
    messages: List[str] = field(default_factory=list)
    booking: Optional[Booking] = None

    @property
    def error_text(self) -> str:
        return " | ".join(self.messages) if not self.ok else ""

    @property
    def text(self) -> str:
        return " | ".join(self.messages)


class BookingSession:
    """
    Everything one user's page holds: the store, the duplicate-attempt
    counter and the log. submit()/remove() each run validate -> mutate as a
    single step; insights() recomputes from the current state.
    """

    def __init__(
        self,
        pods: Sequence[Pod] = PODS,
        seed: Optional[Sequence[dict]] = None,
        log_func: Callable[[str], None] = print,
    ):
        self.pods = tuple(pods)
        self.store = BookingStore(self.pods)
        self._duplicate_attempts = 0
        self.log_lines: List[str] = []
        self._log_func = log_func
        if seed is None:
            seed = INITIAL_BOOKINGS if seed_enabled() else []
        self.store.load(seed)

    @property
    def bookings(self) -> tuple[Booking, ...]:
        return self.store.bookings

    @property
    def duplicate_attempts(self) -> int:
        return self._duplicate_attempts

    def _log(self, line: str) -> None:
        self.log_lines.append(line)
        self._log_func(line)

    def _reject(self, message: str) -> SubmitResult:
        self._log(f"❌ {message}")
        return SubmitResult(ok=False, messages=[message])

    def submit(self, pod_id: Optional[str], time: Optional[str], raw_students: Optional[str]) -> SubmitResult:
        pod_id = (pod_id or "").strip()
        time = (time or "").strip()

        if not pod_id or find_pod(pod_id, self.pods) is None:
            return self._reject("Please select a study pod")
        if not time:
            return self._reject("Please select a booking time")
        if raw_students is None or not raw_students.strip():
            return self._reject("Please enter at least one student ID")

        student_ids = parse_student_ids(raw_students)
        if not student_ids:
            return self._reject("No valid student IDs found. Please check your input format.")

        dup = find_in_request_duplicate(student_ids)
        if dup is not None:
            return self._reject(f"Duplicate student ID found in request: {dup}")

        # slot key is the zero-padded form; unparseable times are left as-is for the hours rule
        slot_time = normalize_time(time) or time

        messages, self._duplicate_attempts = validate(
            pod_id, slot_time, student_ids, self.store.bookings,
            duplicate_attempts=self._duplicate_attempts, pods=self.pods,
        )
        if messages:
            self._log(f"❌ {pod_id}@{slot_time}: " + " | ".join(messages))
            return SubmitResult(ok=False, messages=messages)

        booking = self.store.add(pod_id, slot_time, student_ids)
        msg = f"Successfully booked {plural(len(student_ids), 'student')} in {pod_id} at {slot_time}"
        self._log(f"✅ {msg} ({', '.join(student_ids)})")
        return SubmitResult(ok=True, messages=[msg], booking=booking)

    def remove(self, index: int) -> SubmitResult:
        removed = self.store.remove(index)
        if removed is None:
            return self._reject(f"No booking at position {index + 1}")
        msg = (
            f"Removed booking: {plural(len(removed.students), 'student')} "
            f"from {removed.pod_id} at {removed.time}"
        )
        self._log(f"🗑️ {msg}")
        return SubmitResult(ok=True, messages=[msg], booking=removed)

    def insights(self) -> InsightsSnapshot:
        return compute_insights(self.store.bookings, self.pods, self._duplicate_attempts)
