"""Timeline JSON exporter: caption groups with their word timings.

WHY: An external renderer (the video composition that paints captions
frame by frame) needs the grouping plus every word's interval so it can
apply the highlight styles itself. A JSON document is the hand-off.

HOW: Builds a dict with the format version, total duration and one entry
per group (index, text, start, end, words), validates it against
schemas/caption_timeline.schema.json, and serialises it.

RULES:
- Word timings are copied verbatim from the input words
- duration_ms is the last group's end, 0 when there are no groups
- Output is validated with jsonschema before returning
- Registered as "timeline_json" in the FORMATTERS dict
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import jsonschema

from caption_timeline import __version__
from caption_timeline.core.ir import CaptionGroup
from caption_timeline.formatters.base import BaseFormatter, FormatterOutput

_SCHEMA_PATH = Path(__file__).resolve().parent.parent / "schemas" / "caption_timeline.schema.json"

_CACHED_SCHEMA: Optional[dict] = None


def _get_schema() -> dict:
    """Load and cache the caption timeline JSON schema."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def groups_to_dict(groups: Sequence[CaptionGroup]) -> Dict[str, Any]:
    return {
        "version": __version__,
        "duration_ms": groups[-1].end if groups else 0,
        "groups": [
            {
                "index": index,
                "text": group.text,
                "start": group.start,
                "end": group.end,
                "words": [
                    {"text": w.text, "start": w.start, "end": w.end}
                    for w in group.words
                ],
            }
            for index, group in enumerate(groups)
        ],
    }


class TimelineJSONFormatter(BaseFormatter):

    @property
    def name(self) -> str:
        return "Caption Timeline JSON"

    def format(self, groups: Sequence[CaptionGroup]) -> List[FormatterOutput]:
        """Serialise caption groups as a schema-validated JSON document.

        Raises:
            jsonschema.ValidationError: If the generated document does not
                conform to the caption timeline schema.
        """
        document = groups_to_dict(groups)
        jsonschema.validate(instance=document, schema=_get_schema())
        return [
            FormatterOutput(
                suffix="-timeline.json",
                content=json.dumps(document, indent=2, ensure_ascii=False),
                media_type="application/json",
            )
        ]
