"""
Locale-aware display helpers for decimals and units.

Serialized records keep plain floats; these helpers are for UI rendering only.
"""

from __future__ import annotations

from typing import Optional

from babel import numbers

LOCALE = "en_US"


def set_locale(locale_str: str = "en_US") -> None:
    global LOCALE
    try:
        # Validate by formatting a simple number
        numbers.format_decimal(1.0, locale=locale_str)
        LOCALE = locale_str
    except Exception:
        LOCALE = "en_US"


def _nbsp() -> str:
    return "\u00A0"


def fmt_decimal(value: Optional[float], digits: Optional[int] = None) -> str:
    if value is None:
        return ""
    fmt = None
    if digits is not None:
        fmt = "#,##0" if digits == 0 else "#,##0." + ("0" * digits)
    return numbers.format_decimal(value, format=fmt, locale=LOCALE)


def fmt_km(km: Optional[float]) -> str:
    if km is None:
        return ""
    return f"{fmt_decimal(km, 1)}{_nbsp()}km"


def fmt_m(meters: Optional[float]) -> str:
    if meters is None:
        return ""
    # integers preferred
    return f"{numbers.format_decimal(int(round(meters)), locale=LOCALE)}{_nbsp()}m"


def fmt_ep(ep: Optional[float]) -> str:
    if ep is None:
        return ""
    return f"{fmt_decimal(ep, 1)}{_nbsp()}EP"


def fmt_eph(eph: Optional[float]) -> str:
    if eph is None:
        return ""
    return f"{fmt_decimal(eph, 2)}{_nbsp()}EP/h"
