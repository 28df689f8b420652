"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Record <-> object conversion for sessions and segments.

Records use camelCase keys. `customDurationMins` is only present for
fixed-duration rows, so "no custom duration" can never be confused with a
stored zero.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from config import DEFAULT_START_TIME
from services.recalculation import recalculate
from services.segments import Segment, create_segment
from services.session import TrainingSession, build_session
from utils.coercion import coerce_non_negative, safe_float_optional
from utils.time import is_valid_time, normalize_time


def segment_to_record(segment: Segment) -> Dict[str, Any]:
    record: Dict[str, Any] = {
        "id": segment.id,
        "name": segment.name,
        "description": segment.description,
        "splitDistKm": segment.split_dist_km,
        "splitElevM": segment.split_elev_m,
        "targetEPH": segment.target_eph,
        "ep": segment.ep,
        "targetTimeHours": segment.target_time_hours,
        "targetTimeMins": segment.target_time_mins,
        "startTime": segment.start_time,
        "endTime": segment.end_time,
        "totalDistKm": segment.total_dist_km,
        "accuElevM": segment.accu_elev_m,
        "accuTimeHours": segment.accu_time_hours,
        "accuEPH": segment.accu_eph,
    }
    if segment.custom_duration_mins is not None:
        record["customDurationMins"] = segment.custom_duration_mins
    return record


def segment_from_record(record: Dict[str, Any]) -> Segment:
    """Rebuild a segment from its raw inputs; derived fields are left to `recalculate`."""
    custom = safe_float_optional(record.get("customDurationMins"))
    return create_segment(
        str(record.get("name") or ""),
        str(record.get("description") or ""),
        target_eph=coerce_non_negative(record.get("targetEPH")),
        split_dist_km=coerce_non_negative(record.get("splitDistKm")),
        split_elev_m=coerce_non_negative(record.get("splitElevM")),
        custom_duration_mins=custom if custom is not None and custom > 0 else None,
        segment_id=str(record["id"]) if record.get("id") else None,
    )


def session_to_record(session: TrainingSession) -> Dict[str, Any]:
    return {
        "id": session.id,
        "name": session.name,
        "date": session.date,
        "globalStartTime": session.global_start_time,
        "segments": [segment_to_record(seg) for seg in session.segments],
        "totalDistance": session.total_distance,
        "totalElevation": session.total_elevation,
        "totalEP": session.total_ep,
        "totalDurationHours": session.total_duration_hours,
    }


def session_from_record(record: Dict[str, Any]) -> TrainingSession:
    """Rebuild a session, recalculating so derived fields and totals match the inputs."""
    start = record.get("globalStartTime")
    global_start = normalize_time(start) if is_valid_time(start) else DEFAULT_START_TIME
    segments: List[Segment] = [
        segment_from_record(item) for item in record.get("segments") or []
    ]
    return build_session(
        str(record.get("name") or ""),
        global_start,
        recalculate(segments, global_start),
        session_id=str(record["id"]) if record.get("id") else None,
        date=str(record["date"]) if record.get("date") else None,
    )


def dumps_session(session: TrainingSession) -> str:
    return json.dumps(session_to_record(session), ensure_ascii=False, separators=(",", ":"))


def loads_session(payload: Optional[str]) -> Optional[TrainingSession]:
    if not payload:
        return None
    return session_from_record(json.loads(payload))
