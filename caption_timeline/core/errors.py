"""Error taxonomy for caption ingestion.

WHY: The core is total over well-formed input, so the only failures are
malformed word lists and malformed transcription payloads. Callers (CLI,
HTTP API) need to tell those apart from programming errors and report
them cleanly.

HOW: A small hierarchy rooted at CaptionTimelineError, which subclasses
ValueError so existing ``except ValueError`` handlers keep working.

RULES:
- Raised only at ingestion, never from per-frame queries
- An empty word list is NOT an error
- index is the position of the offending word (None for payload-level errors)
"""

from __future__ import annotations

from typing import Optional


class CaptionTimelineError(ValueError):
    """Base class for all caption ingestion errors."""

    def __init__(self, message: str, index: Optional[int] = None) -> None:
        super().__init__(message)
        self.index = index


class InvalidTimingError(CaptionTimelineError):
    """A word has end <= start, a negative start, or breaks start ordering."""


class InvalidWordError(CaptionTimelineError):
    """A word's text is empty or contains whitespace."""


class TranscriptFormatError(CaptionTimelineError):
    """A transcription payload does not match the expected JSON shape."""
