"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later
"""

from __future__ import annotations

DEFAULT_START_TIME = "07:00"
DEFAULT_TARGET_EPH = 10.0

START_ROW_NAME = "Start"
START_ROW_DESCRIPTION = "Start Point"
FIRST_LEG_NAME = "A"
# Label used once the letter sequence runs past Z
PLACEHOLDER_NAME = "X"
DUPLICATE_SUFFIX = "'"

# 1 EP per km, 1 EP per 100 m of climb
ELEVATION_M_PER_EP = 100.0

MINUTES_PER_DAY = 24 * 60
MIN_FIXED_DURATION_MINS = 1

# Columns shown by the editor table, in display order
SEGMENT_COLUMNS = [
    "name",
    "description",
    "startTime",
    "endTime",
    "splitDistKm",
    "splitElevM",
    "ep",
    "targetEPH",
    "targetTimeMins",
    "totalDistKm",
    "accuElevM",
    "accuTimeHours",
    "accuEPH",
    "mode",
]
