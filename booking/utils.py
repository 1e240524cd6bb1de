from __future__ import annotations
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Tuple

from .config import OPEN_HOUR, CLOSE_HOUR

_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})$")


def parse_student_ids(text: Optional[str]) -> List[str]:
    """Comma-separated IDs -> trimmed, upper-cased, non-empty tokens (order kept, no dedup)."""
    if text is None or not str(text).strip():
        return []
    out: List[str] = []
    for token in str(text).split(","):
        s = token.strip()
        if s:
            out.append(s.upper())
    return out


def find_in_request_duplicate(student_ids: List[str]) -> Optional[str]:
    """Return the first ID that repeats within one request, or None."""
    seen = set()
    for sid in student_ids:
        key = sid.upper()
        if key in seen:
            return key
        seen.add(key)
    return None


def parse_time(text: Optional[str]) -> Optional[Tuple[int, int]]:
    if text is None:
        return None
    m = _TIME_RE.match(str(text).strip())
    if not m:
        return None
    hour, minute = int(m.group(1)), int(m.group(2))
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        return None
    return hour, minute


def normalize_time(text: Optional[str]) -> Optional[str]:
    """'9:05' -> '09:05'; None when the value is not a valid clock time."""
    parsed = parse_time(text)
    if parsed is None:
        return None
    return f"{parsed[0]:02d}:{parsed[1]:02d}"


def is_within_operating_hours(text: Optional[str]) -> bool:
    # half-open [08:00, 20:00)
    parsed = parse_time(text)
    if parsed is None:
        return False
    return OPEN_HOUR <= parsed[0] < CLOSE_HOUR


def round1(value: float) -> float:
    """One decimal place, halves away from zero (37.45 -> 37.5)."""
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def plural(n: int, word: str) -> str:
    return f"{n} {word}" if n == 1 else f"{n} {word}s"
