"""Adapter: transcription payloads to TimedWord lists.

WHY: The transcription collaborator hands back JSON, either word-level
timings (``{"words": [...], "text": ...}`` or a bare word array) or, when
word timings are unavailable, phrase-level captions. The core only deals
in validated TimedWords, so this adapter checks the payload shape and
converts it.

HOW: Two steps:
  1. Shape check: the payload is validated against
     schemas/transcript_words.schema.json with jsonschema. Schema
     violations become TranscriptFormatError.
  2. Conversion: word items map 1:1 to TimedWords (extra keys such as
     confidence or speaker are ignored). Phrase captions are split on
     whitespace and their span is divided evenly across the words; the
     last word ends exactly at the caption end.

RULES:
- Input payloads are never modified
- Timing validity (end > start, ordering) is NOT checked here; the
  engine rejects bad timings at ingestion with InvalidTimingError
- Captions whose text is empty after stripping contribute no words
- When a payload has both "words" and "captions", words win
- Python 3.9 compatible: no match/case, no X | Y unions
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import jsonschema

from caption_timeline.core.errors import TranscriptFormatError
from caption_timeline.core.ir import TimedWord

_SCHEMA_PATH = Path(__file__).resolve().parent.parent / "schemas" / "transcript_words.schema.json"

_CACHED_SCHEMA: Optional[dict] = None


def _get_schema() -> dict:
    """Load and cache the word list JSON schema."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def validate_payload(payload: Any) -> None:
    """Check a transcription payload against the word list schema.

    Raises:
        TranscriptFormatError: With the JSON path of the first violation.
    """
    try:
        jsonschema.validate(instance=payload, schema=_get_schema())
    except jsonschema.ValidationError as exc:
        location = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        raise TranscriptFormatError(
            "Invalid transcript payload at {}: {}".format(location, exc.message)
        ) from exc


def words_from_items(items: List[Dict[str, Any]]) -> List[TimedWord]:
    """Map word-level items straight to TimedWords."""
    return [
        TimedWord(text=item["text"].strip(), start=item["start"], end=item["end"])
        for item in items
    ]


def words_from_captions(captions: List[Dict[str, Any]]) -> List[TimedWord]:
    """Expand phrase-level captions into words by evenly dividing each span.

    WHY: Some transcription paths only return caption phrases with one
    start/end each. Styles that follow the spoken word still need a time
    per word, so each phrase's span is shared out equally.

    HOW: For a caption with n words spanning [start, end], word i covers
    [start + i*d, start + (i+1)*d] with d = (end - start) / n. The last
    word's end is set to the caption end exactly, so rounding never
    leaves a gap at the phrase boundary.

    RULES:
    - Even division ignores real pacing; uneven words get equal time
    - Empty captions are skipped
    """
    words: List[TimedWord] = []
    for caption in captions:
        tokens = caption["text"].split()
        if not tokens:
            continue
        start = caption["start"]
        end = caption["end"]
        count = len(tokens)
        step = (end - start) / count
        for index, token in enumerate(tokens):
            word_start = start + index * step
            word_end = end if index == count - 1 else start + (index + 1) * step
            words.append(TimedWord(text=token, start=word_start, end=word_end))
    return words


def payload_to_words(payload: Any, captions: bool = False) -> List[TimedWord]:
    """Convert a parsed transcription payload into TimedWords.

    Args:
        payload: A bare list of items, or an object with a "words" or
                 "captions" list.
        captions: Treat a bare list as phrase captions rather than words.

    Returns:
        TimedWords in payload order (not yet validated for timing).

    Raises:
        TranscriptFormatError: If the payload does not match the schema.
    """
    validate_payload(payload)

    if isinstance(payload, list):
        if captions:
            return words_from_captions(payload)
        return words_from_items(payload)

    if "words" in payload:
        return words_from_items(payload["words"])
    return words_from_captions(payload["captions"])


def load_transcript_file(path: Union[str, Path], captions: bool = False) -> List[TimedWord]:
    """Read a transcription JSON file and convert it to TimedWords.

    Raises:
        TranscriptFormatError: If the file is not valid JSON or fails the schema.
        OSError: If the file cannot be read.
    """
    path = Path(path)
    raw = path.read_text(encoding="utf-8")
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise TranscriptFormatError(
            "{} is not valid JSON: {}".format(path.name, exc)
        ) from exc
    return payload_to_words(payload, captions=captions)
