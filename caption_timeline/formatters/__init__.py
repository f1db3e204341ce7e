"""Caption exporter registry: pluggable format hub.

WHY: The CLI and HTTP API need a single lookup to find an exporter by
name. Adding a format is one new module plus one line here.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["srt_captions"]()``.

RULES:
- Keys are snake_case identifiers (used in CLI flags and API responses)
- Values are BaseFormatter subclasses (not instances)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from caption_timeline.formatters.srt_captions import SRTCaptionFormatter
from caption_timeline.formatters.timeline_json import TimelineJSONFormatter

if TYPE_CHECKING:
    from caption_timeline.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "srt_captions": SRTCaptionFormatter,
    "timeline_json": TimelineJSONFormatter,
}
