"""Active group / active word lookup against a playback time.

WHY: Every rendered frame asks the same question: which caption group,
and which word inside it, is being spoken right now. The answer must be
a pure function of (groups, time) so seeking backwards, pausing, or
re-rendering a frame always gives the same picture.

HOW: Closed-interval [start, end] membership tests. find_active_group()
scans in order and returns the first match; find_active_group_bisect()
narrows the scan with bisect over group starts and returns the same
answer. Words are capped at a handful per group, so the word scan is
always linear.

RULES:
- Both ends of every interval are inclusive (no flicker at boundaries)
- First match wins when intervals touch
- Out-of-range times return None, never raise
"""

from __future__ import annotations

from bisect import bisect_right
from typing import Optional, Sequence

from caption_timeline.core.ir import CaptionGroup, GroupState, Milliseconds, TimedWord


def find_active_group(
    groups: Sequence[CaptionGroup],
    time_ms: Milliseconds,
) -> Optional[CaptionGroup]:
    """Return the first group whose [start, end] contains time_ms, or None."""
    for group in groups:
        if group.contains(time_ms):
            return group
    return None


def find_active_group_bisect(
    groups: Sequence[CaptionGroup],
    starts: Sequence[Milliseconds],
    time_ms: Milliseconds,
) -> Optional[CaptionGroup]:
    """Same answer as find_active_group(), using a precomputed start index.

    Args:
        groups: Caption groups ordered by start.
        starts: ``[g.start for g in groups]``, kept alongside by the caller.
        time_ms: Current playback time.

    Only groups starting at or before time_ms can contain it; when two
    groups touch at a boundary the earlier one must win, so the scan
    walks back from the bisect point to the first candidate.

    Requires group ends to be non-decreasing (see ends_are_monotonic).
    """
    hi = bisect_right(starts, time_ms)
    if hi == 0:
        return None
    # Touching groups share a boundary: step back over equal starts and
    # any earlier group still covering time_ms.
    index = hi - 1
    while index > 0 and groups[index - 1].end >= time_ms:
        index -= 1
    for group in groups[index:hi]:
        if group.contains(time_ms):
            return group
    return None


def ends_are_monotonic(groups: Sequence[CaptionGroup]) -> bool:
    """True if each group ends no earlier than the one before it."""
    return all(a.end <= b.end for a, b in zip(groups, groups[1:]))


def find_active_word(
    group: Optional[CaptionGroup],
    time_ms: Milliseconds,
) -> Optional[TimedWord]:
    """Return the first word in group whose [start, end] contains time_ms.

    None when there is no group or time_ms sits in a gap between words.
    """
    if group is None:
        return None
    for word in group.words:
        if word.contains(time_ms):
            return word
    return None


def group_state(group: CaptionGroup, time_ms: Milliseconds) -> GroupState:
    if time_ms < group.start:
        return GroupState.UPCOMING
    if time_ms > group.end:
        return GroupState.PAST
    return GroupState.ACTIVE
