"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation.

HOW: One request model per operation (grouping, rendering) sharing a
common word-list base, and one response model per payload shape. The
presentation enums are reused from caption_timeline.styles so the API
accepts exactly what the engine accepts.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Times are milliseconds throughout
- Shape checks (types, finite non-negative times) happen here; timing validity
  (end > start, ordering) is left to the engine so errors are identical
  across CLI and API
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from caption_timeline.config import DEFAULT_FPS, DEFAULT_STYLE
from caption_timeline.styles import Alignment, Preset


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class TimedItem(BaseModel):
    """A word (or phrase caption) with its interval in milliseconds."""

    text: str = Field(description="Word text, or phrase text for captions.")
    start: float = Field(ge=0, allow_inf_nan=False, description="Start time in milliseconds.")
    end: float = Field(ge=0, allow_inf_nan=False, description="End time in milliseconds.")


class GroupsRequest(BaseModel):
    """A word list (or phrase captions) plus optional grouping limits.

    RULES:
    - words takes precedence; captions are only used when words is empty
    - an empty request is valid and yields no groups
    """

    words: List[TimedItem] = Field(
        default_factory=list,
        description="Word-level timings from the transcription service, ordered by start.",
    )
    captions: Optional[List[TimedItem]] = Field(
        default=None,
        description="Phrase-level captions, split into evenly timed words when no words are given.",
    )
    max_words: Optional[int] = Field(
        default=None,
        ge=1,
        description="Maximum words per caption group (server default when omitted).",
    )
    pause_threshold_ms: Optional[float] = Field(
        default=None,
        ge=0,
        allow_inf_nan=False,
        description="Gap in ms before a word that forces a new group (server default when omitted).",
    )


class RenderRequest(GroupsRequest):
    """Render the caption shown at one instant.

    RULES:
    - Exactly one of time_ms or frame must be given
    - frame is converted with floor(frame / fps * 1000)
    """

    time_ms: Optional[float] = Field(
        default=None,
        allow_inf_nan=False,
        description="Playback time in milliseconds.",
    )
    frame: Optional[int] = Field(
        default=None,
        ge=0,
        description="Playback frame index; converted using fps.",
    )
    fps: float = Field(
        default=DEFAULT_FPS,
        gt=0,
        allow_inf_nan=False,
        description="Frame rate used to convert frame to milliseconds.",
    )
    style: str = Field(
        default=DEFAULT_STYLE,
        description="Caption style: plain, highlight-all, highlight-current, word-by-word.",
    )
    alignment: Alignment = Field(
        default=Alignment.BOTTOM,
        description="Vertical caption alignment. Presentation only.",
    )
    preset: Preset = Field(
        default=Preset.BASIC,
        description="Visual caption preset. Presentation only.",
    )


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class WordOut(BaseModel):
    text: str = Field(description="Word text.")
    start: float = Field(description="Start time in milliseconds.")
    end: float = Field(description="End time in milliseconds.")


class GroupOut(BaseModel):
    text: str = Field(description="Member word texts joined by spaces.")
    start: float = Field(description="Start of the first word (ms).")
    end: float = Field(description="End of the last word (ms).")
    words: List[WordOut] = Field(description="Member words in order.")


class GroupsResponse(BaseModel):
    groups: List[GroupOut] = Field(description="Caption groups in display order.")
    duration_ms: float = Field(description="End of the last group, 0 when empty.")


class RenderedWordOut(BaseModel):
    text: str = Field(description="Shown word text.")
    emphasized: bool = Field(description="Whether the word is drawn emphasized.")


class CaptionOut(BaseModel):
    """What the caption area paints at the requested instant."""

    style: str = Field(description="Style policy that produced this caption.")
    text: str = Field(description="Shown words joined by spaces.")
    words: List[RenderedWordOut] = Field(description="Shown words with emphasis flags.")
    group: GroupOut = Field(description="The active caption group.")
    active_word: Optional[WordOut] = Field(
        default=None,
        description="The word being spoken, absent between words.",
    )
    alignment: Alignment = Field(description="Vertical caption alignment.")
    preset: Preset = Field(description="Visual caption preset.")


class RenderResponse(BaseModel):
    time_ms: float = Field(description="Playback time the caption was rendered for (ms).")
    caption: Optional[CaptionOut] = Field(
        default=None,
        description="Rendered caption, or null when nothing is shown.",
    )

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "time_ms": 650,
                "caption": {
                    "style": "highlight-current",
                    "text": "the cat sat down",
                    "words": [
                        {"text": "the", "emphasized": False},
                        {"text": "cat", "emphasized": False},
                        {"text": "sat", "emphasized": True},
                        {"text": "down", "emphasized": False},
                    ],
                    "group": {
                        "text": "the cat sat down",
                        "start": 0,
                        "end": 1000,
                        "words": [
                            {"text": "the", "start": 0, "end": 200},
                            {"text": "cat", "start": 200, "end": 500},
                            {"text": "sat", "start": 500, "end": 700},
                            {"text": "down", "start": 700, "end": 1000},
                        ],
                    },
                    "active_word": {"text": "sat", "start": 500, "end": 700},
                    "alignment": "bottom",
                    "preset": "BASIC",
                },
            }
        ]
    }}


class StylesResponse(BaseModel):
    styles: List[str] = Field(description="Accepted caption style names.")
    alignments: List[str] = Field(description="Accepted vertical alignments.")
    presets: List[str] = Field(description="Accepted visual presets.")


class FormatInfo(BaseModel):
    key: str = Field(description="Format identifier used in export requests.")
    name: str = Field(description="Human-readable format name.")
    suffix: str = Field(description="File suffix of the exported file.")


class HealthResponse(BaseModel):
    status: str = Field(description="Service status ('ok').")
    version: str = Field(description="Package version.")


class ErrorResponse(BaseModel):
    detail: str = Field(description="Human-readable error message.")
