"""Intermediate representation dataclasses for lyric alignment.

WHY: Suno returns a flat, time-ordered list of sung words with no line
structure, while the lyric prompt is plain text with line breaks. The
aligner joins the two, and the formatters (LRC, SRT) need one small,
well-typed form to consume. These dataclasses are that contract.

HOW: Two dataclasses:
  TimedWord    one sung token with timing and optional confidence
  AlignedLine  one lyric line anchored to a start and end time

RULES:
- All times are float seconds
- TimedWord is frozen: the core never mutates its input
- TimedWord.end_s is None when the payload carried no usable end time
- AlignedLine is mutable: an editor may change text/times and re-render
- AlignedLine.words is reserved for future use and always empty today
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TimedWord:
    """A single sung word from the alignment service.

    RULES:
    - text: the word as reported, punctuation included
    - start_s / end_s: float seconds; end_s may be None
    - confidence: alignment score (Suno "score" or "p_align"), or None
    """

    text: str
    start_s: float
    end_s: float | None = None
    confidence: float | None = None


@dataclass
class AlignedLine:
    """A lyric line with the time span it is sung in.

    WHY: Both output formats are line based. LRC only needs the start,
    SRT needs start and end.

    RULES:
    - text: the source line, whitespace-trimmed, otherwise untouched
    - start_s: start of the anchor word
    - end_s: start of the next line, or the end of the song for the last line
    - words: reserved, always [] (callers must not assume it is populated)
    """

    text: str
    start_s: float
    end_s: float
    words: list[TimedWord] = field(default_factory=list)
