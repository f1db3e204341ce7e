"""Word-by-word style: only the word being spoken is on screen.

RULES:
- With an active word, show exactly that word (not emphasized)
- Without one, show nothing even though the group is active; showing the
  previous word would misrepresent timing
"""

from __future__ import annotations

from typing import List, Optional

from caption_timeline.core.ir import CaptionGroup, TimedWord
from caption_timeline.styles.base import BaseStyle, RenderedWord, StylePolicy


class WordByWordStyle(BaseStyle):

    @property
    def policy(self) -> StylePolicy:
        return StylePolicy.WORD_BY_WORD

    def render_words(
        self,
        group: CaptionGroup,
        active_word: Optional[TimedWord],
    ) -> Optional[List[RenderedWord]]:
        if active_word is None:
            return None
        return [RenderedWord(text=active_word.text)]
