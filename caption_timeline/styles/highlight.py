"""Highlight styles: emphasis on every word, or only on the spoken word.

WHY: Social-video captions often color the words of the live caption.
"Highlight all" paints the whole group; "highlight current" follows the
narration word by word while keeping the rest of the group visible.

RULES:
- highlight-all ignores the active word entirely
- highlight-current emphasizes only the active word; with no active word
  (a gap between words) every word is shown plain, never a stale word
- The active word is matched by identity, since groups hold the exact
  input TimedWord objects
"""

from __future__ import annotations

from typing import List, Optional

from caption_timeline.core.ir import CaptionGroup, TimedWord
from caption_timeline.styles.base import BaseStyle, RenderedWord, StylePolicy


class HighlightAllStyle(BaseStyle):

    @property
    def policy(self) -> StylePolicy:
        return StylePolicy.HIGHLIGHT_ALL

    def render_words(
        self,
        group: CaptionGroup,
        active_word: Optional[TimedWord],
    ) -> Optional[List[RenderedWord]]:
        return [RenderedWord(text=w.text, emphasized=True) for w in group.words]


class HighlightCurrentStyle(BaseStyle):

    @property
    def policy(self) -> StylePolicy:
        return StylePolicy.HIGHLIGHT_CURRENT

    def render_words(
        self,
        group: CaptionGroup,
        active_word: Optional[TimedWord],
    ) -> Optional[List[RenderedWord]]:
        return [
            RenderedWord(text=w.text, emphasized=w is active_word)
            for w in group.words
        ]
