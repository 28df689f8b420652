"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Edit handlers for the segment table.

Every handler is copy-on-write: it builds a new segment list from the
current one, applies the edit, and passes the result through `recalculate`.
Raw editor input is coerced here so only clean, non-negative numbers reach
the engine.
"""

from __future__ import annotations

import string
from dataclasses import dataclass, field, replace
from typing import Any, List, Optional, Sequence

from streamlit.logger import get_logger

from config import (
    DEFAULT_START_TIME,
    DEFAULT_TARGET_EPH,
    DUPLICATE_SUFFIX,
    FIRST_LEG_NAME,
    MIN_FIXED_DURATION_MINS,
    PLACEHOLDER_NAME,
    START_ROW_DESCRIPTION,
    START_ROW_NAME,
)
from services.recalculation import recalculate
from services.segments import Segment, create_segment, with_mode
from services.session import TrainingSession, build_session
from utils.coercion import coerce_non_negative
from utils.ids import new_id
from utils.time import duration_minutes, is_valid_time, normalize_time

logger = get_logger(__name__)

TEXT_FIELDS = ("name", "description")
NUMERIC_FIELDS = ("split_dist_km", "split_elev_m")


def new_segments(default_eph: float = DEFAULT_TARGET_EPH) -> List[Segment]:
    """Initial rows of a new plan: the Start point and a first leg."""
    start = create_segment(START_ROW_NAME, START_ROW_DESCRIPTION, target_eph=0.0)
    first = create_segment(
        FIRST_LEG_NAME, f"{START_ROW_NAME} To {FIRST_LEG_NAME}", target_eph=default_eph
    )
    return [start, first]


def next_segment_name(previous_name: str) -> str:
    """Letter following the previous row's label, keeping its case.

    Duplicate primes are ignored ("B'" -> "C"); past "z"/"Z", or after a
    label that is not a single letter, the placeholder is used.
    """
    base = previous_name.rstrip(DUPLICATE_SUFFIX)
    if base == START_ROW_NAME:
        return FIRST_LEG_NAME
    for letters in (string.ascii_uppercase, string.ascii_lowercase):
        if len(base) == 1 and base in letters[:-1]:
            return letters[letters.index(base) + 1]
    return PLACEHOLDER_NAME


def update_segment(
    segments: Sequence[Segment],
    global_start: str,
    index: int,
    field_name: str,
    value: Any,
) -> List[Segment]:
    """Apply one raw field edit and recalculate.

    Editing `target_eph` always returns the row to fixed-intensity mode.
    """
    updated = list(segments)
    seg = updated[index]
    if field_name in TEXT_FIELDS:
        seg = replace(seg, **{field_name: "" if value is None else str(value)})
    elif field_name in NUMERIC_FIELDS:
        seg = replace(seg, **{field_name: coerce_non_negative(value)})
    elif field_name == "target_eph":
        if seg.is_fixed_duration:
            logger.debug("Segment %s back to fixed intensity", seg.id)
        seg = with_mode(seg, seg.mode.with_target_eph(coerce_non_negative(value)))
    else:
        raise ValueError(f"Field '{field_name}' is not editable")
    updated[index] = seg
    return recalculate(updated, global_start)


def set_end_time(
    segments: Sequence[Segment],
    global_start: str,
    index: int,
    end_time: str,
) -> List[Segment]:
    """Pin a leg's end time, switching it to fixed-duration mode.

    The duration is measured from the leg's current start time, wrapping past
    midnight when needed, and never drops below one minute.
    """
    updated = list(segments)
    seg = updated[index]
    minutes = max(MIN_FIXED_DURATION_MINS, duration_minutes(seg.start_time, end_time))
    logger.debug("Segment %s fixed to %s min", seg.id, minutes)
    updated[index] = with_mode(seg, seg.mode.with_duration(minutes))
    return recalculate(updated, global_start)


def append_segment(
    segments: Sequence[Segment],
    global_start: str,
    default_eph: float = DEFAULT_TARGET_EPH,
) -> List[Segment]:
    previous = segments[-1].name if segments else START_ROW_NAME
    name = next_segment_name(previous)
    new_seg = create_segment(name, f"{previous} To {name}", target_eph=default_eph)
    return recalculate([*segments, new_seg], global_start)


def duplicate_segment(segments: Sequence[Segment], global_start: str, index: int) -> List[Segment]:
    source = segments[index]
    copy = replace(source, id=new_id(), name=source.name + DUPLICATE_SUFFIX)
    updated = list(segments)
    updated.insert(index + 1, copy)
    return recalculate(updated, global_start)


def delete_segment(segments: Sequence[Segment], global_start: str, index: int) -> List[Segment]:
    """Remove a row. The last remaining row is never removed."""
    if len(segments) <= 1:
        logger.debug("Refusing to delete the last segment")
        return list(segments)
    # Resolve negative positions before filtering, like list indexing does
    target = range(len(segments))[index]
    updated = [seg for i, seg in enumerate(segments) if i != target]
    return recalculate(updated, global_start)


@dataclass
class SessionEditor:
    """In-memory editing state for one training session.

    Holds the session metadata and the current recalculated segment list,
    which every operation replaces wholesale.
    """

    name: str = "New Morning Run"
    global_start_time: str = DEFAULT_START_TIME
    default_eph: float = DEFAULT_TARGET_EPH
    session_id: Optional[str] = None
    date: Optional[str] = None
    segments: List[Segment] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.segments:
            self.segments = new_segments(self.default_eph)
        self.global_start_time = normalize_time(self.global_start_time)
        self.segments = recalculate(self.segments, self.global_start_time)

    @classmethod
    def from_session(
        cls, session: TrainingSession, default_eph: float = DEFAULT_TARGET_EPH
    ) -> "SessionEditor":
        return cls(
            name=session.name,
            global_start_time=session.global_start_time,
            default_eph=default_eph,
            session_id=session.id,
            date=session.date,
            segments=list(session.segments),
        )

    def update_field(self, index: int, field_name: str, value: Any) -> None:
        self.segments = update_segment(self.segments, self.global_start_time, index, field_name, value)

    def set_target_eph(self, index: int, value: Any) -> None:
        self.update_field(index, "target_eph", value)

    def set_start_time(self, start_time: str) -> bool:
        if not is_valid_time(start_time):
            logger.warning("Ignoring invalid start time %r", start_time)
            return False
        self.global_start_time = normalize_time(start_time)
        self.segments = recalculate(self.segments, self.global_start_time)
        return True

    def set_end_time(self, index: int, end_time: str) -> bool:
        # The start row has no duration: its clock time is the global start
        if index == 0:
            return self.set_start_time(end_time)
        if not is_valid_time(end_time):
            logger.warning("Ignoring invalid end time %r for row %s", end_time, index)
            return False
        self.segments = set_end_time(
            self.segments, self.global_start_time, index, normalize_time(end_time)
        )
        return True

    def append(self) -> None:
        self.segments = append_segment(self.segments, self.global_start_time, self.default_eph)

    def duplicate(self, index: int) -> None:
        self.segments = duplicate_segment(self.segments, self.global_start_time, index)

    def delete(self, index: int) -> bool:
        before = len(self.segments)
        self.segments = delete_segment(self.segments, self.global_start_time, index)
        return len(self.segments) < before

    def to_session(self) -> TrainingSession:
        session = build_session(
            self.name,
            self.global_start_time,
            self.segments,
            session_id=self.session_id,
            date=self.date,
        )
        # Keep identity stable across repeated saves
        self.session_id = session.id
        self.date = session.date
        return session
