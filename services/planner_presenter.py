"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Pure helpers to build editor and progress view models for unit testing.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

import pandas as pd

from config import SEGMENT_COLUMNS
from services.segments import Segment
from services.session import TrainingSession

PROGRESS_COLUMNS = [
    "date",
    "name",
    "distanceKm",
    "elevationM",
    "ep",
    "durationHours",
    "avgEPH",
]


def format_duration_hours(hours: float) -> str:
    total = max(0, int(round(hours * 60)))
    h, m = divmod(total, 60)
    return f"{h}h{m:02d}"


def build_segments_frame(segments: Sequence[Segment]) -> pd.DataFrame:
    rows: List[Dict[str, object]] = []
    for seg in segments:
        rows.append(
            {
                "name": seg.name,
                "description": seg.description,
                "startTime": seg.start_time,
                "endTime": seg.end_time,
                "splitDistKm": seg.split_dist_km,
                "splitElevM": seg.split_elev_m,
                "ep": seg.ep,
                "targetEPH": seg.target_eph,
                "targetTimeMins": seg.target_time_mins,
                "totalDistKm": seg.total_dist_km,
                "accuElevM": seg.accu_elev_m,
                "accuTimeHours": seg.accu_time_hours,
                "accuEPH": seg.accu_eph,
                "mode": "duration" if seg.is_fixed_duration else "intensity",
            }
        )
    return pd.DataFrame(rows, columns=SEGMENT_COLUMNS)


def build_progress_frame(sessions: Sequence[TrainingSession]) -> pd.DataFrame:
    """One row per session, oldest first, with its average intensity."""
    if not sessions:
        return pd.DataFrame(columns=PROGRESS_COLUMNS)
    rows = [
        {
            "date": s.date,
            "name": s.name,
            "distanceKm": s.total_distance,
            "elevationM": s.total_elevation,
            "ep": s.total_ep,
            "durationHours": s.total_duration_hours,
            "avgEPH": s.total_ep / s.total_duration_hours if s.total_duration_hours > 0 else 0.0,
        }
        for s in sessions
    ]
    df = pd.DataFrame(rows, columns=PROGRESS_COLUMNS)
    df["date"] = pd.to_datetime(df["date"], utc=True, format="ISO8601", errors="coerce")
    df = df.sort_values("date", kind="stable", na_position="last")
    return df.reset_index(drop=True)


def summarize_progress(frame: pd.DataFrame) -> Dict[str, float]:
    if frame.empty:
        return {"sessions": 0, "avgEP": 0.0, "avgEPH": 0.0}
    return {
        "sessions": int(len(frame)),
        "avgEP": float(frame["ep"].mean()),
        "avgEPH": float(frame["avgEPH"].mean()),
    }
