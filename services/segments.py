"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Segment records and their per-row timing mode.

A segment is either in fixed-intensity mode (its duration floats with the
effort score and the target EPH) or in fixed-duration mode (the user pinned
the end time). Both modes carry the target EPH the user last typed.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Optional, Union

from config import DEFAULT_START_TIME
from utils.ids import new_id


@dataclass(frozen=True)
class FixedIntensity:
    target_eph: float

    @property
    def custom_duration_mins(self) -> Optional[float]:
        return None

    def with_target_eph(self, target_eph: float) -> "FixedIntensity":
        return FixedIntensity(target_eph)

    def with_duration(self, minutes: float) -> "FixedDuration":
        return FixedDuration(minutes=minutes, target_eph=self.target_eph)


@dataclass(frozen=True)
class FixedDuration:
    minutes: float
    # Last target typed by the user; never derived from `minutes`
    target_eph: float

    def __post_init__(self) -> None:
        if not (self.minutes > 0 and math.isfinite(self.minutes)):
            raise ValueError(f"Fixed duration must be positive and finite, got {self.minutes!r}")

    @property
    def custom_duration_mins(self) -> Optional[float]:
        return self.minutes

    def with_target_eph(self, target_eph: float) -> FixedIntensity:
        return FixedIntensity(target_eph)

    def with_duration(self, minutes: float) -> "FixedDuration":
        return FixedDuration(minutes=minutes, target_eph=self.target_eph)


SegmentMode = Union[FixedIntensity, FixedDuration]


@dataclass(frozen=True)
class Segment:
    id: str
    name: str
    description: str
    split_dist_km: float
    split_elev_m: float
    mode: SegmentMode
    # Derived fields, overwritten by every recalculation
    ep: float = 0.0
    target_time_hours: float = 0.0
    target_time_mins: float = 0.0
    start_time: str = DEFAULT_START_TIME
    end_time: str = DEFAULT_START_TIME
    total_dist_km: float = 0.0
    accu_elev_m: float = 0.0
    accu_time_hours: float = 0.0
    accu_eph: float = 0.0

    @property
    def target_eph(self) -> float:
        return self.mode.target_eph

    @property
    def custom_duration_mins(self) -> Optional[float]:
        return self.mode.custom_duration_mins

    @property
    def is_fixed_duration(self) -> bool:
        return isinstance(self.mode, FixedDuration)


def create_segment(
    name: str,
    description: str,
    *,
    target_eph: float,
    split_dist_km: float = 0.0,
    split_elev_m: float = 0.0,
    custom_duration_mins: Optional[float] = None,
    segment_id: Optional[str] = None,
) -> Segment:
    """Build a segment from raw inputs. A positive finite custom duration selects fixed-duration mode."""
    mode: SegmentMode
    if (
        custom_duration_mins is not None
        and custom_duration_mins > 0
        and math.isfinite(custom_duration_mins)
    ):
        mode = FixedDuration(minutes=custom_duration_mins, target_eph=target_eph)
    else:
        mode = FixedIntensity(target_eph)
    return Segment(
        id=segment_id or new_id(),
        name=name,
        description=description,
        split_dist_km=split_dist_km,
        split_elev_m=split_elev_m,
        mode=mode,
    )


def with_mode(segment: Segment, mode: SegmentMode) -> Segment:
    return replace(segment, mode=mode)
