"""FastAPI application exposing caption grouping and per-frame rendering.

WHY: The page-level UI and external render workers need the caption
engine without embedding Python. A small HTTP API lets them post a word
list and get back caption groups, the caption for one instant, or an
exported caption file.

HOW: Each request builds a CaptionTimelineEngine from the posted words
(grouping is memoised, so repeated requests for the same transcript are
cheap) and answers from it. Ingestion errors become 422 responses.

RULES:
- All endpoints have OpenAPI descriptions and documented error responses
- InvalidTimingError / InvalidWordError / unknown style → 422
- /render needs exactly one of time_ms or frame → otherwise 400
- Unknown export format → 404
- Python 3.9+ compatible (no match/case, no PEP 604 unions)
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response

from caption_timeline import __version__
from caption_timeline.adapters.transcript_adapter import words_from_captions, words_from_items
from caption_timeline.config import API_HOST, API_PORT
from caption_timeline.core.clock import frame_to_ms
from caption_timeline.core.grouping import DEFAULT_POLICY, GroupingPolicy
from caption_timeline.core.ir import CaptionGroup, TimedWord
from caption_timeline.engine import CaptionTimelineEngine
from caption_timeline.formatters import FORMATTERS
from caption_timeline.server.models import (
    CaptionOut,
    ErrorResponse,
    FormatInfo,
    GroupOut,
    GroupsRequest,
    GroupsResponse,
    HealthResponse,
    RenderedWordOut,
    RenderRequest,
    RenderResponse,
    StylesResponse,
    WordOut,
)
from caption_timeline.styles import Alignment, Preset, StylePolicy

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Caption Timeline API",
    description=(
        "Groups word-level transcript timings into short captions and "
        "renders the caption shown at any playback time in one of four "
        "styles (plain, highlight-all, highlight-current, word-by-word)."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _request_words(request: GroupsRequest) -> List[TimedWord]:
    if request.words or request.captions is None:
        return words_from_items([w.model_dump() for w in request.words])
    return words_from_captions([c.model_dump() for c in request.captions])


def _request_policy(request: GroupsRequest) -> GroupingPolicy:
    return GroupingPolicy(
        max_words=(
            request.max_words if request.max_words is not None
            else DEFAULT_POLICY.max_words
        ),
        pause_threshold_ms=(
            request.pause_threshold_ms if request.pause_threshold_ms is not None
            else DEFAULT_POLICY.pause_threshold_ms
        ),
    )


def _build_engine(request: GroupsRequest) -> CaptionTimelineEngine:
    """Build an engine from a request, translating ingestion errors to 422."""
    try:
        return CaptionTimelineEngine(_request_words(request), _request_policy(request))
    except ValueError as exc:
        logger.info("Rejected word list: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc))


def _word_out(word: TimedWord) -> WordOut:
    return WordOut(text=word.text, start=word.start, end=word.end)


def _group_out(group: CaptionGroup) -> GroupOut:
    return GroupOut(
        text=group.text,
        start=group.start,
        end=group.end,
        words=[_word_out(w) for w in group.words],
    )


# ---------------------------------------------------------------------------
# Endpoints: Captions
# ---------------------------------------------------------------------------


@app.post(
    "/groups",
    response_model=GroupsResponse,
    tags=["captions"],
    summary="Group words into captions",
    description=(
        "Splits an ordered word list into caption groups of at most "
        "max_words words, starting a new group after any pause longer "
        "than pause_threshold_ms."
    ),
    responses={422: {"model": ErrorResponse, "description": "Invalid word timings or text."}},
)
async def create_groups(request: GroupsRequest) -> GroupsResponse:
    engine = _build_engine(request)
    return GroupsResponse(
        groups=[_group_out(g) for g in engine.groups],
        duration_ms=engine.duration_ms,
    )


@app.post(
    "/render",
    response_model=RenderResponse,
    tags=["captions"],
    summary="Render the caption at one instant",
    description=(
        "Returns what the caption area shows at time_ms (or at frame / fps) "
        "for the requested style. caption is null when nothing is shown."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Missing or conflicting time."},
        422: {"model": ErrorResponse, "description": "Invalid word timings, text, or style."},
    },
)
async def render_caption(request: RenderRequest) -> RenderResponse:
    if (request.time_ms is None) == (request.frame is None):
        raise HTTPException(
            status_code=400,
            detail="Provide exactly one of time_ms or frame.",
        )
    time_ms = (
        request.time_ms if request.time_ms is not None
        else frame_to_ms(request.frame, request.fps)
    )

    engine = _build_engine(request)
    try:
        caption = engine.query(time_ms, request.style, request.alignment, request.preset)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    if caption is None:
        return RenderResponse(time_ms=time_ms, caption=None)

    return RenderResponse(
        time_ms=time_ms,
        caption=CaptionOut(
            style=caption.style.value,
            text=caption.text,
            words=[
                RenderedWordOut(text=w.text, emphasized=w.emphasized)
                for w in caption.words
            ],
            group=_group_out(caption.group),
            active_word=(
                None if caption.active_word is None else _word_out(caption.active_word)
            ),
            alignment=caption.alignment,
            preset=caption.preset,
        ),
    )


@app.get(
    "/styles",
    response_model=StylesResponse,
    tags=["captions"],
    summary="List caption styles and presentation options",
)
async def list_styles() -> StylesResponse:
    return StylesResponse(
        styles=[s.value for s in StylePolicy],
        alignments=[a.value for a in Alignment],
        presets=[p.value for p in Preset],
    )


# ---------------------------------------------------------------------------
# Endpoints: Export
# ---------------------------------------------------------------------------


@app.get(
    "/formats",
    response_model=List[FormatInfo],
    tags=["export"],
    summary="List available export formats",
)
async def list_formats() -> List[FormatInfo]:
    result = []
    for key, formatter_cls in sorted(FORMATTERS.items()):
        formatter = formatter_cls()
        outputs = formatter.format([])
        result.append(FormatInfo(
            key=key,
            name=formatter.name,
            suffix=outputs[0].suffix if outputs else "",
        ))
    return result


@app.post(
    "/export/{format_key}",
    tags=["export"],
    summary="Export caption groups as a file",
    description="Groups the posted words and returns them in the requested format.",
    responses={
        200: {"description": "Exported file content."},
        404: {"model": ErrorResponse, "description": "Unknown export format."},
        422: {"model": ErrorResponse, "description": "Invalid word timings or text."},
    },
)
async def export_captions(format_key: str, request: GroupsRequest) -> Response:
    formatter_cls = FORMATTERS.get(format_key)
    if formatter_cls is None:
        raise HTTPException(
            status_code=404,
            detail="Unknown format '{}'. Available formats: {}".format(
                format_key, ", ".join(sorted(FORMATTERS.keys()))
            ),
        )
    engine = _build_engine(request)
    output = formatter_cls().format(engine.groups)[0]
    return Response(
        content=output.content,
        media_type=output.media_type,
        headers={
            "Content-Disposition": 'attachment; filename="captions{}"'.format(output.suffix)
        },
    )


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api(host: Optional[str] = None, port: Optional[int] = None) -> None:
    """Entry point for the caption-timeline-api console script."""
    import uvicorn
    uvicorn.run(app, host=host or API_HOST, port=port or API_PORT)
