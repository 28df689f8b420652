"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later
"""

from __future__ import annotations

from config import ELEVATION_M_PER_EP


def calculate_ep(distance_km: float, elev_m: float) -> float:
    """Effort points for a leg: 1 EP per km plus 1 EP per 100 m of climb."""
    return distance_km + elev_m / ELEVATION_M_PER_EP


def cumulative_eph(distance_km: float, elev_m: float, hours: float) -> float:
    """Effort-weighted intensity so far: EP accumulated divided by time elapsed."""
    if hours <= 0:
        return 0.0
    return calculate_ep(distance_km, elev_m) / hours
