from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List


@dataclass(frozen=True)
class Pod:
    """A fixed-capacity study room from the catalog."""

    id: str
    capacity: int

    def __post_init__(self):
        if self.capacity < 1:
            raise ValueError(f"Pod {self.id!r} must have a positive capacity, got {self.capacity}")

    def label(self) -> str:
        return f"{self.id} (Capacity: {self.capacity} students)"


@dataclass
class Booking:
    """
    One (pod, time) slot.

    students: upper-cased IDs, unique within the slot, never more than the
    pod's capacity.
    """

    pod_id: str
    time: str  # "HH:MM"
    students: List[str] = field(default_factory=list)

    def as_dict(self):
        return {
            "pod_id": self.pod_id,
            "time": self.time,
            "students": list(self.students),
        }


class ViolationKind(str, Enum):
    MISSING_FIELD = "MissingField"
    MALFORMED_TIME = "MalformedTime"
    EMPTY_ROSTER = "EmptyRoster"
    CAPACITY_EXCEEDED = "CapacityExceeded"
    INTRA_SLOT_DUPLICATE = "IntraSlotDuplicate"
    CROSS_POD_CLASH = "CrossPodClash"
    IN_REQUEST_DUPLICATE = "InRequestDuplicate"


# Kinds that bump the duplicate-attempt counter.
COUNTED_KINDS = frozenset({ViolationKind.INTRA_SLOT_DUPLICATE, ViolationKind.CROSS_POD_CLASH})


@dataclass(frozen=True)
class Violation:
    kind: ViolationKind
    message: str


@dataclass(frozen=True)
class PodFillRate:
    pod_id: str
    capacity: int
    booked_seats: int
    slots_used: int
    fill_rate: float

    @property
    def possible_seats(self) -> int:
        return self.capacity * self.slots_used

    def label(self) -> str:
        return f"{self.fill_rate}% ({self.booked_seats}/{self.possible_seats} seats)"


@dataclass(frozen=True)
class InsightsSnapshot:
    total_bookings: int
    unique_students: int
    busiest_hour: str
    pod_fill_rates: tuple[PodFillRate, ...]
    duplicate_attempts: int
