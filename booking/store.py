from __future__ import annotations
import copy
from typing import Iterable, Iterator, List, Optional, Sequence

from .config import PODS
from .models import Booking, Pod
from .rules import find_booking, find_pod
from .utils import normalize_time


class BookingStore:
    """Ordered (insertion-order) list of slot bookings for one session."""

    def __init__(self, pods: Sequence[Pod] = PODS):
        self.pods = tuple(pods)
        self._bookings: List[Booking] = []

    def __len__(self) -> int:
        return len(self._bookings)

    def __iter__(self) -> Iterator[Booking]:
        return iter(self._bookings)

    def __getitem__(self, index: int) -> Booking:
        return self._bookings[index]

    @property
    def bookings(self) -> tuple[Booking, ...]:
        return tuple(self._bookings)

    def find(self, pod_id: str, time: str) -> Optional[Booking]:
        return find_booking(self._bookings, pod_id, time)

    def add(self, pod_id: str, time: str, student_ids: Iterable[str]) -> Booking:
        """Append to the slot's booking, or create it with a copy of the IDs."""
        existing = self.find(pod_id, time)
        if existing is not None:
            existing.students.extend(student_ids)
            return existing
        booking = Booking(pod_id=pod_id, time=time, students=list(student_ids))
        self._bookings.append(booking)
        return booking

    def remove(self, index: int) -> Optional[Booking]:
        """Remove by 0-based position; out-of-range is a no-op returning None."""
        if 0 <= index < len(self._bookings):
            return self._bookings.pop(index)
        return None

    def load(self, rows: Iterable[dict]) -> None:
        """Replace contents with deep copies of seed rows."""
        self._bookings = []
        for row in copy.deepcopy(list(rows)):
            pod_id = str(row["pod_id"]).strip()
            pod = find_pod(pod_id, self.pods)
            if pod is None:
                raise ValueError(f"Seed booking references unknown pod {pod_id!r}.")
            slot = normalize_time(row.get("time"))
            if slot is None:
                raise ValueError(f"Seed booking for {pod_id} has an invalid time {row.get('time')!r}.")
            students = [str(s).strip().upper() for s in row.get("students", [])]
            if len(students) > pod.capacity:
                raise ValueError(
                    f"Seed booking {pod_id}@{slot} has {len(students)} students; capacity is {pod.capacity}."
                )
            self._bookings.append(Booking(pod_id=pod_id, time=slot, students=students))
