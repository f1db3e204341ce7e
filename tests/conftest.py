"""Shared test fixtures for the caption_timeline test suite.

WHY: Grouping, lookup, style, engine, and API tests all reason about the
same reference transcript. Centralizing it here keeps the expected
groups and timings in one place.

HOW: Plain module-level constants hold the reference word list; fixtures
hand out TimedWord lists and ready-built engines.

RULES:
- SCENARIO_A_WORDS: "the cat sat down" then a 400 ms pause, then "quietly"
- SIX_EVEN_WORDS: six back-to-back 100 ms words, no pauses
- GAPPED_WORDS: one group with a 50 ms gap between two of its words
"""

from typing import Any, Dict, List

import pytest

from caption_timeline.core.ir import TimedWord
from caption_timeline.engine import CaptionTimelineEngine


# ---------------------------------------------------------------------------
# Reference word lists
# ---------------------------------------------------------------------------

SCENARIO_A_ITEMS: List[Dict[str, Any]] = [
    {"text": "the",     "start": 0,    "end": 200},
    {"text": "cat",     "start": 200,  "end": 500},
    {"text": "sat",     "start": 500,  "end": 700},
    {"text": "down",    "start": 700,  "end": 1000},
    {"text": "quietly", "start": 1400, "end": 1800},
]

SIX_EVEN_ITEMS: List[Dict[str, Any]] = [
    {"text": "one",   "start": 0,   "end": 100},
    {"text": "two",   "start": 100, "end": 200},
    {"text": "three", "start": 200, "end": 300},
    {"text": "four",  "start": 300, "end": 400},
    {"text": "five",  "start": 400, "end": 500},
    {"text": "six",   "start": 500, "end": 600},
]

# "hello" ends at 300, "there" starts at 350: a 50 ms gap that is below the
# pause threshold, so both stay in one group with a hole at 301..349.
GAPPED_ITEMS: List[Dict[str, Any]] = [
    {"text": "hello", "start": 0,   "end": 300},
    {"text": "there", "start": 350, "end": 600},
]


def make_words(items: List[Dict[str, Any]]) -> List[TimedWord]:
    return [TimedWord(text=i["text"], start=i["start"], end=i["end"]) for i in items]


@pytest.fixture
def scenario_a_items():
    return [dict(i) for i in SCENARIO_A_ITEMS]


@pytest.fixture
def scenario_a_words():
    return make_words(SCENARIO_A_ITEMS)


@pytest.fixture
def six_even_words():
    return make_words(SIX_EVEN_ITEMS)


@pytest.fixture
def gapped_words():
    return make_words(GAPPED_ITEMS)


@pytest.fixture
def scenario_a_engine(scenario_a_words):
    return CaptionTimelineEngine(scenario_a_words)


@pytest.fixture
def gapped_engine(gapped_words):
    return CaptionTimelineEngine(gapped_words)
