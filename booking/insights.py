from __future__ import annotations
from typing import List, Sequence

import pandas as pd

from .config import NO_BOOKINGS
from .models import Booking, InsightsSnapshot, Pod, PodFillRate
from .utils import round1

_COLUMNS = ["pod_id", "time", "students", "n"]


def bookings_frame(bookings: Sequence[Booking]) -> pd.DataFrame:
    """One row per booking, in store order: [pod_id, time, students, n]."""
    rows = [
        {"pod_id": b.pod_id, "time": b.time, "students": list(b.students), "n": len(b.students)}
        for b in bookings
    ]
    return pd.DataFrame(rows, columns=_COLUMNS)


def busiest_hour(df: pd.DataFrame) -> str:
    if df.empty:
        return NO_BOOKINGS
    # sort=False keeps first-seen order, idxmax returns the first maximum
    totals = df.groupby("time", sort=False)["n"].sum()
    if totals.max() <= 0:
        return NO_BOOKINGS
    return str(totals.idxmax())


def pod_fill_rates(df: pd.DataFrame, pods: Sequence[Pod]) -> List[PodFillRate]:
    out: List[PodFillRate] = []
    for pod in pods:
        grp = df[df["pod_id"] == pod.id]
        booked = int(grp["n"].sum()) if not grp.empty else 0
        slots = int(grp["time"].nunique()) if not grp.empty else 0
        rate = round1(booked / (pod.capacity * slots) * 100) if slots > 0 else 0.0
        out.append(PodFillRate(
            pod_id=pod.id,
            capacity=pod.capacity,
            booked_seats=booked,
            slots_used=slots,
            fill_rate=rate,
        ))
    return out


def compute_insights(
    bookings: Sequence[Booking],
    pods: Sequence[Pod],
    duplicate_attempts: int = 0,
) -> InsightsSnapshot:
    df = bookings_frame(bookings)
    unique = int(df["students"].explode().dropna().nunique()) if not df.empty else 0
    return InsightsSnapshot(
        total_bookings=len(df),
        unique_students=unique,
        busiest_hour=busiest_hour(df),
        pod_fill_rates=tuple(pod_fill_rates(df, pods)),
        duplicate_attempts=int(duplicate_attempts),
    )


def fill_rates_frame(snapshot: InsightsSnapshot) -> pd.DataFrame:
    """Tabular view of the per-pod fill rates (for display / CSV)."""
    return pd.DataFrame(
        [
            {
                "pod": r.pod_id,
                "booked_seats": r.booked_seats,
                "slots_used": r.slots_used,
                "possible_seats": r.possible_seats,
                "fill_rate": r.fill_rate,
            }
            for r in snapshot.pod_fill_rates
        ],
        columns=["pod", "booked_seats", "slots_used", "possible_seats", "fill_rate"],
    )
