"""SRT caption formatter.

WHY: Video editors and players read SRT. Each aligned line becomes one
numbered caption block spanning the line's start and end time.

HOW: Each block is rendered as "index\\nstart --> end\\ntext\\n" and the
blocks are joined with "\\n", which leaves exactly one blank line between
consecutive blocks.

RULES:
- Index is the 1-based position in the list given (renumbered on every
  call, not a stable ID)
- Timecodes: HH:MM:SS,mmm with truncated milliseconds
- Start/end values are not validated
- An empty line list produces an empty string
- Output suffix: ".srt", media type "application/x-subrip"
"""

from __future__ import annotations

from typing import List, Sequence

from suno_lrc.core.ir import AlignedLine
from suno_lrc.formatters.base import BaseFormatter, FormatterOutput
from suno_lrc.formatters.timecode import format_srt_time


def generate_srt(lines: Sequence[AlignedLine]) -> str:
    """Render ``lines`` as SRT text."""
    blocks = []
    for index, line in enumerate(lines, start=1):
        blocks.append("{}\n{} --> {}\n{}\n".format(
            index,
            format_srt_time(line.start_s),
            format_srt_time(line.end_s),
            line.text,
        ))
    return "\n".join(blocks)


class SRTFormatter(BaseFormatter):
    """Formatter that produces a single ``.srt`` caption file."""

    @property
    def name(self) -> str:
        return "SRT (Subtitles)"

    def format(self, lines: Sequence[AlignedLine]) -> List[FormatterOutput]:
        """Convert aligned lines into one SRT file.

        Args:
            lines: Aligned lines, already in playback order.

        Returns:
            A single-element list containing the SRT output.
        """
        return [
            FormatterOutput(
                suffix=".srt",
                content=generate_srt(lines),
                media_type="application/x-subrip",
            )
        ]
