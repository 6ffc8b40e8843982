"""Generation pipeline: validate inputs, align, and render both formats.

WHY: The aligner and serializers are total functions that never fail,
but a user who gets an empty subtitle file needs to know why. This
module is the calling layer that turns "nothing to do" situations into
clear errors, and that re-renders outputs after a line is edited.

HOW: generate() checks the lyric prompt and the word list, runs the
aligner, checks that at least one line was anchored, and renders LRC
and SRT. GenerationResult.update_line() returns a new result with one
line replaced, mirroring an editor changing a single row.

RULES:
- Empty prompt → MissingLyricsError
- Empty word list → MissingWordsError
- Alignment with zero lines → EmptyAlignmentError
- All three subclass LyricsProcessingError (a ValueError)
- Results are never mutated in place; update_line() returns a copy
- Edited times are not re-validated against the word list
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from suno_lrc.core.aligner import align_lyrics
from suno_lrc.core.ir import AlignedLine, TimedWord
from suno_lrc.formatters.lrc import generate_lrc
from suno_lrc.formatters.srt import generate_srt

logger = logging.getLogger(__name__)


class LyricsProcessingError(ValueError):
    """Base class for user-facing generation failures."""


class MissingLyricsError(LyricsProcessingError):
    """Raised when the lyric prompt is empty."""


class MissingWordsError(LyricsProcessingError):
    """Raised when no aligned words are available."""


class EmptyAlignmentError(LyricsProcessingError):
    """Raised when no lyric line could be anchored to the words."""


@dataclass
class GenerationResult:
    """Aligned lines plus both rendered outputs.

    RULES:
    - lrc_content and srt_content are always rendered from ``lines``
    """

    lines: List[AlignedLine]
    lrc_content: str
    srt_content: str

    def update_line(
        self,
        index: int,
        text: Optional[str] = None,
        start_s: Optional[float] = None,
        end_s: Optional[float] = None,
    ) -> GenerationResult:
        """Return a new result with line ``index`` changed and outputs re-rendered.

        Raises:
            IndexError: if ``index`` is outside the line list.
        """
        if not 0 <= index < len(self.lines):
            raise IndexError("Line index {} out of range (0-{})".format(index, len(self.lines) - 1))

        changes = {}
        if text is not None:
            changes["text"] = text
        if start_s is not None:
            changes["start_s"] = start_s
        if end_s is not None:
            changes["end_s"] = end_s

        new_lines = list(self.lines)
        new_lines[index] = dataclasses.replace(new_lines[index], **changes)
        return render(new_lines)


def render(lines: Sequence[AlignedLine]) -> GenerationResult:
    """Render LRC and SRT for an already aligned (possibly edited) line list."""
    line_list = list(lines)
    return GenerationResult(
        lines=line_list,
        lrc_content=generate_lrc(line_list),
        srt_content=generate_srt(line_list),
    )


def generate(prompt: Optional[str], words: Sequence[TimedWord]) -> GenerationResult:
    """Align ``prompt`` to ``words`` and render both output formats.

    Args:
        prompt: The lyric text (Suno clip metadata "prompt").
        words: Time-ordered words from the aligned_lyrics endpoint.

    Returns:
        GenerationResult with at least one line.

    Raises:
        MissingLyricsError, MissingWordsError, EmptyAlignmentError.
    """
    if not prompt:
        raise MissingLyricsError("No lyrics found in metadata.")
    if not words:
        logger.warning("Empty word list received. Prompt start: %r", prompt[:50])
        raise MissingWordsError(
            "No aligned lyrics data found. The API response might have been "
            "empty or had an unrecognized structure."
        )

    lines = align_lyrics(prompt, words)
    if not lines:
        raise EmptyAlignmentError(
            "None of the lyric lines could be matched to the aligned words. "
            "Check that the lyrics belong to this song."
        )

    logger.info("Aligned %d line(s) against %d word(s)", len(lines), len(words))
    return render(lines)
