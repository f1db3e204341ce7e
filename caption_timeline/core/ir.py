"""Intermediate representation dataclasses for timed captions.

WHY: The transcription collaborator returns a flat list of words with
millisecond timings. Styles, exporters and the HTTP API all need the same
view of those words and of the short caption groups built from them. The
IR gives them one well-typed, immutable form.

HOW: Two frozen dataclasses plus one enum:
  TimedWord    : one transcribed token with start/end in ms
  CaptionGroup : a run of consecutive words shown together on screen
  GroupState   : where a group sits relative to the playback clock

RULES:
- All times are in milliseconds (int or float), never seconds
- TimedWord is immutable once produced by an adapter
- CaptionGroup.words holds the exact input TimedWord objects
- Both dataclasses are hashable so word lists can key a cache
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

Milliseconds = Union[int, float]


@dataclass(frozen=True)
class TimedWord:
    """A single transcribed word with its spoken interval.

    RULES:
    - text: non-empty, no internal whitespace
    - start / end: non-negative milliseconds, end > start
    - Validation is done by core.grouping.validate_words, not here, so
      adapters can build words first and reject the whole list at once
    """

    text: str
    start: Milliseconds
    end: Milliseconds

    def contains(self, time_ms: Milliseconds) -> bool:
        """True if time_ms falls inside the closed interval [start, end]."""
        return self.start <= time_ms <= self.end


@dataclass(frozen=True)
class CaptionGroup:
    """A short run of consecutive words displayed as one caption line.

    WHY: Showing the whole transcript at once is unreadable; showing one
    word at a time loses context. Groups of a few words are the unit the
    caption area swaps in and out.

    HOW: Built by core.grouping.group_words. start/end come straight from
    the first and last member word, with no padding or offsets.

    RULES:
    - text is the member texts joined by single spaces
    - start is words[0].start, end is words[-1].end
    - words is never empty
    """

    text: str
    start: Milliseconds
    end: Milliseconds
    words: Tuple[TimedWord, ...]

    @classmethod
    def from_words(cls, words: Tuple[TimedWord, ...]) -> "CaptionGroup":
        return cls(
            text=" ".join(w.text for w in words),
            start=words[0].start,
            end=words[-1].end,
            words=tuple(words),
        )

    def contains(self, time_ms: Milliseconds) -> bool:
        """True if time_ms falls inside the closed interval [start, end]."""
        return self.start <= time_ms <= self.end


class GroupState(str, Enum):
    """Position of a group relative to the current playback time."""

    UPCOMING = "upcoming"
    ACTIVE = "active"
    PAST = "past"
