"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Segment recalculation engine.

`recalculate` folds the ordered segments into a new list where every derived
field (effort, duration, clock placement, running totals) is recomputed from
the raw inputs and the global start time. It is pure and total: it never
mutates its input and never raises for numeric input.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import List, Sequence, Tuple

from services.segments import FixedDuration, Segment
from utils.metrics_formulas import calculate_ep, cumulative_eph
from utils.time import add_minutes


@dataclass(frozen=True)
class _Totals:
    distance_km: float
    elev_m: float
    time_hours: float
    clock: str

    def advance(self, segment: Segment, hours: float, end_time: str) -> "_Totals":
        return _Totals(
            distance_km=self.distance_km + segment.split_dist_km,
            elev_m=self.elev_m + segment.split_elev_m,
            time_hours=self.time_hours + hours,
            clock=end_time,
        )


def leg_duration(segment: Segment, ep: float, index: int) -> Tuple[float, float]:
    """Return (hours, minutes) for one leg according to its mode.

    The start row (index 0) marks a point and always lasts zero. A leg whose
    duration overflows to infinity also lasts zero.
    """
    if index == 0:
        return 0.0, 0.0
    mode = segment.mode
    if isinstance(mode, FixedDuration):
        minutes = mode.minutes
        return minutes / 60.0, minutes
    safe_eph = mode.target_eph if mode.target_eph > 0 else 1.0
    hours = ep / safe_eph
    minutes = hours * 60.0
    # Durations too large to place on the clock count as zero
    if not math.isfinite(minutes):
        return 0.0, 0.0
    return hours, minutes


def _fold_segment(
    totals: _Totals, index: int, segment: Segment, global_start: str
) -> Tuple[_Totals, Segment]:
    ep = calculate_ep(segment.split_dist_km, segment.split_elev_m)
    hours, minutes = leg_duration(segment, ep, index)

    # Clock time wraps at 24h, so carry the cursor rather than re-deriving from hours
    start_time = global_start if index == 0 else totals.clock
    end_time = add_minutes(start_time, minutes)
    totals = totals.advance(segment, hours, end_time)

    accu_eph = 0.0 if index == 0 else cumulative_eph(totals.distance_km, totals.elev_m, totals.time_hours)

    updated = replace(
        segment,
        ep=ep,
        target_time_hours=hours,
        target_time_mins=minutes,
        start_time=start_time,
        end_time=end_time,
        total_dist_km=totals.distance_km,
        accu_elev_m=totals.elev_m,
        accu_time_hours=totals.time_hours,
        accu_eph=accu_eph,
    )
    return totals, updated


def recalculate(segments: Sequence[Segment], global_start: str) -> List[Segment]:
    """Recompute every derived field of `segments` starting the timeline at `global_start`."""
    totals = _Totals(distance_km=0.0, elev_m=0.0, time_hours=0.0, clock=global_start)
    result: List[Segment] = []
    for index, segment in enumerate(segments):
        totals, updated = _fold_segment(totals, index, segment, global_start)
        result.append(updated)
    return result
