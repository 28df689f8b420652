"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later
"""

import sys
from pathlib import Path

import pytest


# Ensure project root is importable for tests
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


from services.recalculation import recalculate
from services.segments import create_segment


@pytest.fixture
def raw_segments():
    return [
        create_segment("Start", "Start Point", target_eph=0.0, segment_id="s0"),
        create_segment(
            "A", "Start To A", target_eph=10.0, split_dist_km=13.2, split_elev_m=1260, segment_id="s1"
        ),
        create_segment(
            "B", "A To B", target_eph=8.0, split_dist_km=6.0, split_elev_m=200, segment_id="s2"
        ),
        create_segment(
            "C",
            "B To C",
            target_eph=12.0,
            split_dist_km=4.5,
            split_elev_m=50,
            custom_duration_mins=45,
            segment_id="s3",
        ),
    ]


@pytest.fixture
def segments(raw_segments):
    return recalculate(raw_segments, "07:00")
