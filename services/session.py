"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

from services.segments import Segment
from utils.ids import new_id
from utils.time import now_iso


@dataclass(frozen=True)
class TrainingSession:
    id: str
    name: str
    date: str
    global_start_time: str
    segments: Tuple[Segment, ...]
    total_distance: float
    total_elevation: float
    total_ep: float
    total_duration_hours: float


def summarize_segments(segments: Sequence[Segment]) -> Dict[str, float]:
    """Summary totals of already recalculated segments.

    Distance, elevation and duration come from the last row's running totals;
    EP is the sum over every row.
    """
    if not segments:
        return {
            "totalDistance": 0.0,
            "totalElevation": 0.0,
            "totalEP": 0.0,
            "totalDurationHours": 0.0,
        }
    last = segments[-1]
    return {
        "totalDistance": last.total_dist_km,
        "totalElevation": last.accu_elev_m,
        "totalEP": sum(seg.ep for seg in segments),
        "totalDurationHours": last.accu_time_hours,
    }


def build_session(
    name: str,
    global_start_time: str,
    segments: Sequence[Segment],
    *,
    session_id: Optional[str] = None,
    date: Optional[str] = None,
) -> TrainingSession:
    """Snapshot recalculated segments into a session, keeping id and date when given."""
    totals = summarize_segments(segments)
    return TrainingSession(
        id=session_id or new_id(),
        name=name,
        date=date or now_iso(),
        global_start_time=global_start_time,
        segments=tuple(segments),
        total_distance=totals["totalDistance"],
        total_elevation=totals["totalElevation"],
        total_ep=totals["totalEP"],
        total_duration_hours=totals["totalDurationHours"],
    )
