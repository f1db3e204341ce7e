"""Caption style registry: one renderer per StylePolicy.

WHY: The engine, CLI, and HTTP API need a single lookup from a style
policy to its renderer. A central dict is the whole dispatch table for
the style matrix.

HOW: STYLES maps each StylePolicy member to a renderer *instance*
(renderers are stateless). get_style() parses names and looks them up.

RULES:
- Every StylePolicy member must have an entry; this is checked on import
- Renderers must be importable without side effects
"""

from __future__ import annotations

from typing import Dict, Union

from caption_timeline.styles.base import (
    Alignment,
    BaseStyle,
    Preset,
    RenderedCaption,
    RenderedWord,
    StylePolicy,
)
from caption_timeline.styles.highlight import HighlightAllStyle, HighlightCurrentStyle
from caption_timeline.styles.plain import PlainStyle
from caption_timeline.styles.word_by_word import WordByWordStyle

STYLES: Dict[StylePolicy, BaseStyle] = {
    StylePolicy.PLAIN: PlainStyle(),
    StylePolicy.HIGHLIGHT_ALL: HighlightAllStyle(),
    StylePolicy.HIGHLIGHT_CURRENT: HighlightCurrentStyle(),
    StylePolicy.WORD_BY_WORD: WordByWordStyle(),
}

_missing = set(StylePolicy) - set(STYLES)
if _missing:
    raise RuntimeError(
        "No renderer registered for: {}".format(
            ", ".join(sorted(p.value for p in _missing))
        )
    )


def get_style(style: Union[StylePolicy, str]) -> BaseStyle:
    """Return the renderer for a StylePolicy or style name."""
    return STYLES[StylePolicy.parse(style)]


__all__ = [
    "Alignment",
    "BaseStyle",
    "Preset",
    "RenderedCaption",
    "RenderedWord",
    "STYLES",
    "StylePolicy",
    "get_style",
]
