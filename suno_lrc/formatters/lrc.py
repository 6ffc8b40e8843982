"""LRC (line-synced lyrics) formatter.

WHY: Music players and karaoke apps read LRC: one ``[mm:ss.xx]text``
line per lyric line, keyed on the time the line starts.

RULES:
- One output line per AlignedLine, in the order given
- Lines joined by a single "\\n", no trailing newline, no ID tags
- Only start times are written; end times are ignored
- No ordering validation: edited, unsorted lists are written as-is
- Output suffix: ".lrc"
"""

from __future__ import annotations

from typing import List, Sequence

from suno_lrc.core.ir import AlignedLine
from suno_lrc.formatters.base import BaseFormatter, FormatterOutput
from suno_lrc.formatters.timecode import format_lrc_time


def generate_lrc(lines: Sequence[AlignedLine]) -> str:
    """Render ``lines`` as LRC text."""
    return "\n".join(
        "{}{}".format(format_lrc_time(line.start_s), line.text) for line in lines
    )


class LRCFormatter(BaseFormatter):
    """Formatter that produces a single ``.lrc`` file."""

    @property
    def name(self) -> str:
        return "LRC (Synced Lyrics)"

    def format(self, lines: Sequence[AlignedLine]) -> List[FormatterOutput]:
        return [
            FormatterOutput(
                suffix=".lrc",
                content=generate_lrc(lines),
                media_type="text/plain",
            )
        ]
