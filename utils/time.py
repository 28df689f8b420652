"""Clock-time helpers for "HH:MM" values with 24h wraparound."""

from __future__ import annotations

import datetime as dt
import math
import re

from config import MINUTES_PER_DAY

_CLOCK_RE = re.compile(r"^([0-9]{1,2}):([0-9]{1,2})$")


def parse_time(time_str: str) -> int:
    """Return minutes since midnight for an "H:M" / "HH:MM" string.

    Raises ValueError when the string is not a valid 24h clock time.
    """
    match = _CLOCK_RE.match(str(time_str).strip())
    if match is None:
        raise ValueError(f"Invalid clock time '{time_str}'")
    hours = int(match.group(1))
    minutes = int(match.group(2))
    if not (hours < 24 and minutes < 60):
        raise ValueError(f"Invalid clock time '{time_str}'")
    return hours * 60 + minutes


def normalize_time(time_str: str) -> str:
    """Canonical "HH:MM" form of a clock string, e.g. "7:5" -> "07:05"."""
    return format_time(parse_time(time_str))


def is_valid_time(value: object) -> bool:
    try:
        parse_time(value)  # type: ignore[arg-type]
    except ValueError:
        return False
    return True


def format_time(total_minutes: float) -> str:
    # Round half up so 59.5 -> 60 rather than banker's rounding
    mins = int(math.floor(total_minutes + 0.5))
    hours = (mins // 60) % 24
    mins = mins % 60
    return f"{hours:02d}:{mins:02d}"


def add_minutes(time_str: str, minutes_to_add: float) -> str:
    return format_time(parse_time(time_str) + minutes_to_add)


def duration_minutes(start: str, end: str) -> int:
    """Minutes from start to end, assuming an overnight crossing when end < start."""
    s = parse_time(start)
    e = parse_time(end)
    if e < s:
        e += MINUTES_PER_DAY
    return e - s


def time_diff_hours(start: str, end: str) -> float:
    return duration_minutes(start, end) / 60.0


def now_iso() -> str:
    return dt.datetime.now(dt.timezone.utc).isoformat()
