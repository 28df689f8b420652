"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Type coercion utilities for turning raw editor input into safe numbers.
"""

from __future__ import annotations

import math
from typing import Any, Optional


def coerce_float(value: Any, default: float = 0.0) -> float:
    """Coerce a value to a finite float with a default fallback.

    Handles None, empty strings, "NaN", infinities and conversion errors by
    returning the default.

    Args:
        value: Value to coerce (can be None, str, int, float, etc.)
        default: Default value to return if coercion fails (default: 0.0)

    Returns:
        float: Coerced value or default if coercion fails
    """
    try:
        if value in (None, "", "NaN"):
            return default
        result = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(result):
        return default
    return result


def coerce_non_negative(value: Any, default: float = 0.0) -> float:
    """Coerce raw numeric input the way the editor needs it: invalid -> default, negative -> 0."""
    return max(coerce_float(value, default), 0.0)


def safe_float_optional(value: object) -> Optional[float]:
    """Safely convert a value to float, returning None on failure.

    Handles None, empty strings, "NaN", math.nan and infinities by returning None.
    """
    try:
        if value in (None, "", "NaN"):
            return None
        result = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if not math.isfinite(result):
        return None
    return result
