"""Plain style: the whole group, nothing emphasized."""

from __future__ import annotations

from typing import List, Optional

from caption_timeline.core.ir import CaptionGroup, TimedWord
from caption_timeline.styles.base import BaseStyle, RenderedWord, StylePolicy


class PlainStyle(BaseStyle):

    @property
    def policy(self) -> StylePolicy:
        return StylePolicy.PLAIN

    def render_words(
        self,
        group: CaptionGroup,
        active_word: Optional[TimedWord],
    ) -> Optional[List[RenderedWord]]:
        return [RenderedWord(text=w.text) for w in group.words]
