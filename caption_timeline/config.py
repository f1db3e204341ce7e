"""Configuration constants, presentation choices, and .env loading.

WHY: Centralizes every tunable value (group word cap, pause threshold,
frame rate, default style/alignment/preset, API bind address) so they are
easy to find and override without touching the timing logic.

HOW: python-dotenv loads the .env file on import. Defaults are module-level
constants read from the environment once. Invalid numeric values raise a
ValueError naming the offending variable.

RULES:
- MAX_GROUP_WORDS defaults to 4, PAUSE_THRESHOLD_MS to 100
- Style/alignment/preset defaults are stored as their string values;
  the enums that parse them live next to the code that uses them
- Never read os.environ anywhere else in the package
"""

from __future__ import annotations

import os
from typing import Tuple

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(
            "{} must be an integer, got '{}'".format(name, raw)
        ) from None
    if value <= 0:
        raise ValueError("{} must be positive, got {}".format(name, value))
    return value


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(
            "{} must be a number, got '{}'".format(name, raw)
        ) from None
    if value < 0:
        raise ValueError("{} must not be negative, got {}".format(name, value))
    return value


# ---------------------------------------------------------------------------
# Grouping defaults
# ---------------------------------------------------------------------------

MAX_GROUP_WORDS = _env_int("CAPTION_MAX_WORDS", 4)
"""Maximum number of words shown together in one caption group."""

PAUSE_THRESHOLD_MS = _env_float("CAPTION_PAUSE_THRESHOLD_MS", 100.0)
"""A gap strictly longer than this (ms) before a word starts a new group."""

# ---------------------------------------------------------------------------
# Playback and presentation defaults
# ---------------------------------------------------------------------------

DEFAULT_FPS = _env_int("CAPTION_DEFAULT_FPS", 30)
DEFAULT_STYLE = os.getenv("CAPTION_DEFAULT_STYLE", "plain")
DEFAULT_ALIGNMENT = os.getenv("CAPTION_DEFAULT_ALIGNMENT", "bottom")
DEFAULT_PRESET = os.getenv("CAPTION_DEFAULT_PRESET", "BASIC")

ALIGNMENTS: Tuple[str, ...] = ("top", "middle", "bottom")

PRESETS: Tuple[str, ...] = (
    "BASIC", "REVID", "HORMOZI", "WRAP 1", "WRAP 2", "FACELESS", "ALL",
)
"""Visual themes offered by the hosting UI. Presentation only."""

# ---------------------------------------------------------------------------
# HTTP API
# ---------------------------------------------------------------------------

API_HOST = os.getenv("CAPTION_API_HOST", "0.0.0.0")
API_PORT = _env_int("CAPTION_API_PORT", 8000)
