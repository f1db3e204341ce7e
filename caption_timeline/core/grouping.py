"""Word-list validation and caption grouping.

WHY: Captions must be short enough to read in real time and must not glue
together words separated by a natural pause, or the on-screen pacing lies
about the speech. This module turns a flat, validated word list into the
ordered sequence of CaptionGroups the rest of the package works with.

HOW: A single left-to-right pass keeps a running group (words, start, end).
Each word either extends the running group or starts a new one. A new
group starts when:
  1. the word is the first word overall,
  2. adding it would push the running group past ``max_words``, or
  3. it starts more than ``pause_threshold_ms`` after the running end.
The finished group is appended verbatim; no timing is adjusted.

RULES:
- validate_words() rejects the whole list on the first bad word
- group_words() assumes a validated list and never raises
- Output order equals input order; every word lands in exactly one group
- cached_group_words() memoises the partition on the word tuple and policy,
  then rebuilds groups from the caller's words
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Sequence, Tuple

from caption_timeline.config import MAX_GROUP_WORDS, PAUSE_THRESHOLD_MS
from caption_timeline.core.errors import InvalidTimingError, InvalidWordError
from caption_timeline.core.ir import CaptionGroup, Milliseconds, TimedWord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GroupingPolicy:
    """Limits that decide where one caption group ends and the next begins.

    RULES:
    - max_words >= 1
    - pause_threshold_ms >= 0; the comparison is strictly greater-than
    """

    max_words: int = MAX_GROUP_WORDS
    pause_threshold_ms: Milliseconds = PAUSE_THRESHOLD_MS

    def __post_init__(self) -> None:
        if self.max_words < 1:
            raise ValueError(
                "max_words must be at least 1, got {}".format(self.max_words)
            )
        if self.pause_threshold_ms < 0:
            raise ValueError(
                "pause_threshold_ms must not be negative, got {}".format(
                    self.pause_threshold_ms
                )
            )


DEFAULT_POLICY = GroupingPolicy()


def validate_words(words: Sequence[TimedWord]) -> None:
    """Reject a word list that the grouping rules cannot represent faithfully.

    WHY: Silently dropping one bad word would produce a grouping that no
    longer matches what the transcription service meant. Failing the whole
    list keeps ingestion all-or-nothing.

    RULES:
    - text must be non-empty after stripping and contain no whitespace
    - start and end must be finite numbers (no NaN or infinity)
    - start must be >= 0 and end must be > start
    - start times must be non-decreasing across the list

    Raises:
        InvalidWordError: On empty or whitespace-containing text.
        InvalidTimingError: On bad intervals or out-of-order words.
    """
    previous_start = None
    for index, word in enumerate(words):
        if not word.text or not word.text.strip():
            raise InvalidWordError(
                "Word {} has empty text".format(index), index=index
            )
        if any(ch.isspace() for ch in word.text):
            raise InvalidWordError(
                "Word {} ({!r}) contains whitespace".format(index, word.text),
                index=index,
            )
        if not (math.isfinite(word.start) and math.isfinite(word.end)):
            raise InvalidTimingError(
                "Word {} ({!r}) has a non-finite interval {}-{}".format(
                    index, word.text, word.start, word.end
                ),
                index=index,
            )
        if word.start < 0:
            raise InvalidTimingError(
                "Word {} ({!r}) has negative start {}".format(
                    index, word.text, word.start
                ),
                index=index,
            )
        if word.end <= word.start:
            raise InvalidTimingError(
                "Word {} ({!r}) ends at {} which is not after its start {}".format(
                    index, word.text, word.end, word.start
                ),
                index=index,
            )
        if previous_start is not None and word.start < previous_start:
            raise InvalidTimingError(
                "Word {} ({!r}) starts at {} before the previous word ({})".format(
                    index, word.text, word.start, previous_start
                ),
                index=index,
            )
        previous_start = word.start


def group_words(
    words: Sequence[TimedWord],
    policy: GroupingPolicy = DEFAULT_POLICY,
) -> List[CaptionGroup]:
    """Partition an ordered word list into caption groups.

    Args:
        words: Validated TimedWords, ordered by start.
        policy: Word cap and pause threshold. Defaults to 4 words / 100 ms.

    Returns:
        CaptionGroups in input order. Empty list for empty input.
    """
    groups: List[CaptionGroup] = []
    running: List[TimedWord] = []
    running_end: Milliseconds = 0

    for word in words:
        starts_new = (
            not running
            or len(running) + 1 > policy.max_words
            or word.start > running_end + policy.pause_threshold_ms
        )
        if starts_new:
            if running:
                groups.append(CaptionGroup.from_words(tuple(running)))
            running = [word]
        else:
            running.append(word)
        running_end = word.end

    if running:
        groups.append(CaptionGroup.from_words(tuple(running)))

    return groups


@lru_cache(maxsize=32)
def _group_sizes_cached(
    words: Tuple[TimedWord, ...],
    policy: GroupingPolicy,
) -> Tuple[int, ...]:
    sizes = tuple(len(g.words) for g in group_words(words, policy))
    logger.debug("Grouped %d words into %d caption groups", len(words), len(sizes))
    return sizes


def cached_group_words(
    words: Sequence[TimedWord],
    policy: GroupingPolicy = DEFAULT_POLICY,
) -> Tuple[CaptionGroup, ...]:
    """Memoised group_words() for callers that regroup the same transcript.

    Only the partition (words per group) is cached, keyed on the word tuple
    and policy. Groups are rebuilt from the caller's own TimedWord objects,
    so equal-content lists from different callers never share word objects.
    """
    words = tuple(words)
    groups: List[CaptionGroup] = []
    offset = 0
    for size in _group_sizes_cached(words, policy):
        groups.append(CaptionGroup.from_words(words[offset:offset + size]))
        offset += size
    return tuple(groups)


def ingest_words(
    words: Sequence[TimedWord],
    policy: GroupingPolicy = DEFAULT_POLICY,
) -> Tuple[CaptionGroup, ...]:
    """Validate a new word list and return its (cached) caption groups."""
    validate_words(words)
    return cached_group_words(words, policy)
