"""SRT caption exporter: one cue per caption group.

WHY: Editors and players that cannot run the per-frame engine still need
the same chunking. An SRT file with one cue per group reproduces the
"plain" style statically.

HOW: Each group becomes a cue numbered from 1, timed with the group's own
start/end converted from milliseconds to HH:MM:SS,mmm.

RULES:
- Cue timing is the group timing verbatim, with no minimum duration and no
  overlap trimming or padding
- Fractional milliseconds are rounded to the nearest whole millisecond
- Empty group list produces an empty string
- Registered as "srt_captions" in the FORMATTERS dict
"""

from __future__ import annotations

from typing import List, Sequence

from caption_timeline.core.ir import CaptionGroup, Milliseconds
from caption_timeline.formatters.base import BaseFormatter, FormatterOutput


def ms_to_srt_time(time_ms: Milliseconds) -> str:
    """Format milliseconds as an SRT timestamp, e.g. 3723004 → '01:02:03,004'."""
    total = int(round(time_ms))
    hours, rest = divmod(total, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    seconds, millis = divmod(rest, 1000)
    return "{:02d}:{:02d}:{:02d},{:03d}".format(hours, minutes, seconds, millis)


class SRTCaptionFormatter(BaseFormatter):

    @property
    def name(self) -> str:
        return "SRT Captions"

    def format(self, groups: Sequence[CaptionGroup]) -> List[FormatterOutput]:
        lines: List[str] = []
        for index, group in enumerate(groups, 1):
            lines.append(str(index))
            lines.append("{} --> {}".format(
                ms_to_srt_time(group.start), ms_to_srt_time(group.end)
            ))
            lines.append(group.text)
            lines.append("")

        return [
            FormatterOutput(
                suffix="-captions.srt",
                content="\n".join(lines),
                media_type="application/x-subrip",
            )
        ]
