"""
Configuration loading utilities.

Loads environment variables from `.env` and validates the editor defaults.
Invalid values fall back to the built-in defaults with a warning.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv, find_dotenv
from streamlit.logger import get_logger

from config import DEFAULT_START_TIME, DEFAULT_TARGET_EPH
from utils.coercion import coerce_float
from utils.time import is_valid_time, normalize_time

logger = get_logger(__name__)


@dataclass(frozen=True)
class Config:
    default_start_time: str
    default_target_eph: float
    locale: str


def _load_start_time() -> str:
    raw = os.getenv("DEFAULT_START_TIME", DEFAULT_START_TIME)
    if not is_valid_time(raw):
        logger.warning("Invalid DEFAULT_START_TIME %r, using %s", raw, DEFAULT_START_TIME)
        return DEFAULT_START_TIME
    return normalize_time(raw)


def _load_target_eph() -> float:
    raw = os.getenv("DEFAULT_TARGET_EPH")
    value = coerce_float(raw, DEFAULT_TARGET_EPH)
    if value <= 0:
        logger.warning("Invalid DEFAULT_TARGET_EPH %r, using %s", raw, DEFAULT_TARGET_EPH)
        return DEFAULT_TARGET_EPH
    return value


def load_config() -> Config:
    """Load configuration from `.env` and the environment."""
    load_dotenv(find_dotenv(usecwd=True), override=False)

    locale_str = os.getenv("LOCALE", "en_US")
    cfg = Config(
        default_start_time=_load_start_time(),
        default_target_eph=_load_target_eph(),
        locale=locale_str,
    )
    logger.debug("Loaded config: %s", cfg)
    return cfg
