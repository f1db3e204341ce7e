"""CaptionTimelineEngine: ingest a word list once, query it every frame.

WHY: A renderer asks "what should the caption area show?" once per frame,
but the word list only changes when a new transcription arrives. The
engine splits the two: validation and grouping happen at construction,
and every query after that is a cheap, pure lookup that never fails.

HOW: The constructor validates the words and builds (cached) caption
groups. query() finds the active group and word for a time in ms and
hands them to the renderer registered for the requested style.
query_frame() and render() are the frame-counter and injected-clock
variants of the same call.

RULES:
- Construction raises InvalidTimingError / InvalidWordError on bad input
- query() and render() never raise for any time value; query_frame()
  rejects a negative frame or non-positive fps, as frame_to_ms() does
- Alignment and preset are passed through to the RenderedCaption only
- The engine keeps no per-query state; seeking backwards is safe
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple, Union

from caption_timeline.config import DEFAULT_ALIGNMENT, DEFAULT_PRESET, DEFAULT_STYLE
from caption_timeline.core.clock import Clock, frame_to_ms
from caption_timeline.core.grouping import DEFAULT_POLICY, GroupingPolicy, ingest_words
from caption_timeline.core.ir import CaptionGroup, GroupState, Milliseconds, TimedWord
from caption_timeline.core.lookup import (
    ends_are_monotonic,
    find_active_group,
    find_active_group_bisect,
    find_active_word,
    group_state,
)
from caption_timeline.styles import Alignment, Preset, RenderedCaption, StylePolicy, get_style

logger = logging.getLogger(__name__)

StyleLike = Union[StylePolicy, str]
AlignmentLike = Union[Alignment, str]
PresetLike = Union[Preset, str]

# Below this many groups a linear scan is as fast as bisecting.
_BISECT_MIN_GROUPS = 16


class CaptionTimelineEngine:
    """Caption grouping and per-frame rendering for one word list.

    Args:
        words: TimedWords from the transcription collaborator, ordered
               by start. An empty list is valid and renders nothing.
        policy: Grouping limits. Defaults to 4 words / 100 ms pause.

    Raises:
        InvalidTimingError: If a word has end <= start, a negative start,
            or starts before the previous word.
        InvalidWordError: If a word's text is empty or has whitespace.
    """

    def __init__(
        self,
        words: Sequence[TimedWord],
        policy: GroupingPolicy = DEFAULT_POLICY,
    ) -> None:
        self.words: Tuple[TimedWord, ...] = tuple(words)
        self.policy = policy
        self.groups: Tuple[CaptionGroup, ...] = ingest_words(self.words, policy)
        self._starts: List[Milliseconds] = [g.start for g in self.groups]
        self._use_bisect = (
            len(self.groups) >= _BISECT_MIN_GROUPS and ends_are_monotonic(self.groups)
        )
        logger.debug(
            "Engine ready: %d words, %d groups (bisect=%s)",
            len(self.words), len(self.groups), self._use_bisect,
        )

    @property
    def duration_ms(self) -> Milliseconds:
        """End of the last group, or 0 for an empty word list."""
        return self.groups[-1].end if self.groups else 0

    def active_group(self, time_ms: Milliseconds) -> Optional[CaptionGroup]:
        if self._use_bisect:
            return find_active_group_bisect(self.groups, self._starts, time_ms)
        return find_active_group(self.groups, time_ms)

    def active_word(self, time_ms: Milliseconds) -> Optional[TimedWord]:
        return find_active_word(self.active_group(time_ms), time_ms)

    def states(self, time_ms: Milliseconds) -> List[GroupState]:
        """Upcoming / active / past state of every group at time_ms."""
        return [group_state(g, time_ms) for g in self.groups]

    def query(
        self,
        time_ms: Milliseconds,
        style: StyleLike = DEFAULT_STYLE,
        alignment: AlignmentLike = DEFAULT_ALIGNMENT,
        preset: PresetLike = DEFAULT_PRESET,
    ) -> Optional[RenderedCaption]:
        """What the caption area shows at time_ms, or None for nothing.

        Style, alignment and preset names are parsed here, so an unknown
        name raises ValueError; any time value is accepted.
        """
        renderer = get_style(style)
        group = self.active_group(time_ms)
        word = find_active_word(group, time_ms)
        return renderer.render(group, word, Alignment(alignment), Preset(preset))

    def query_frame(
        self,
        frame: int,
        fps: float,
        style: StyleLike = DEFAULT_STYLE,
        alignment: AlignmentLike = DEFAULT_ALIGNMENT,
        preset: PresetLike = DEFAULT_PRESET,
    ) -> Optional[RenderedCaption]:
        return self.query(frame_to_ms(frame, fps), style, alignment, preset)

    def render(
        self,
        clock: Clock,
        style: StyleLike = DEFAULT_STYLE,
        alignment: AlignmentLike = DEFAULT_ALIGNMENT,
        preset: PresetLike = DEFAULT_PRESET,
    ) -> Optional[RenderedCaption]:
        """Read the clock once and query at that time."""
        return self.query(clock.now(), style, alignment, preset)
