"""Adapter modules for converting external payloads into the caption IR.

WHY: Transcription services describe timings in their own JSON shapes.
Adapters bridge those shapes and the core's TimedWord so each side can
evolve independently.

RULES:
- Adapters are pure data transformations, no network I/O
- Adapters must not modify the source payloads
"""

from caption_timeline.adapters.transcript_adapter import (
    load_transcript_file,
    payload_to_words,
    words_from_captions,
)

__all__ = ["load_transcript_file", "payload_to_words", "words_from_captions"]
