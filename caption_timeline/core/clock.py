"""Playback clocks: frame index and frame rate to milliseconds.

WHY: The caption engine must not depend on any particular rendering loop.
Whatever drives playback (a video renderer, a preview player, a test)
only has to say what time it is.

HOW: ``Clock`` is a Protocol with a single ``now()`` method returning
milliseconds. FrameClock derives the time from a frame counter and a
fixed frame rate; FixedClock returns a constant, for tests and one-off
queries.

RULES:
- current_ms = floor(frame / fps * 1000)
- fps must be positive, frame must be non-negative
- Clocks are read once per evaluation; the engine never stores them
"""

from __future__ import annotations

import math
from typing import Protocol

from caption_timeline.core.ir import Milliseconds


def frame_to_ms(frame: int, fps: float) -> int:
    """Convert a frame index at a fixed frame rate to whole milliseconds."""
    if fps <= 0:
        raise ValueError("fps must be positive, got {}".format(fps))
    if frame < 0:
        raise ValueError("frame must not be negative, got {}".format(frame))
    return math.floor(frame / fps * 1000)


class Clock(Protocol):
    def now(self) -> Milliseconds:
        ...


class FrameClock:
    """Clock driven by a frame counter, as a video renderer advances it.

    The renderer (or a test) moves ``frame`` forward with advance() or by
    assigning it directly; seeking backwards is allowed down to frame 0.
    A negative frame is rejected when it is set, so now() never raises.
    """

    def __init__(self, fps: float, frame: int = 0) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive, got {}".format(fps))
        self.fps = fps
        self.frame = frame

    @property
    def frame(self) -> int:
        return self._frame

    @frame.setter
    def frame(self, value: int) -> None:
        if value < 0:
            raise ValueError("frame must not be negative, got {}".format(value))
        self._frame = value

    def advance(self, frames: int = 1) -> None:
        self.frame = self._frame + frames

    def now(self) -> int:
        return frame_to_ms(self.frame, self.fps)


class FixedClock:
    """Clock frozen at a single instant."""

    def __init__(self, time_ms: Milliseconds) -> None:
        self.time_ms = time_ms

    def now(self) -> Milliseconds:
        return self.time_ms
