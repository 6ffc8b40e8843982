"""Line alignment: anchor each lyric line on the sung word stream.

WHY: Suno's aligned_lyrics endpoint returns a flat list of timed words,
but LRC and SRT are line based. The lyric prompt tells us where lines
break; this module finds where each line starts in the word stream.

HOW: A single cursor walks forward through the words. For every lyric
line, the first occurrence of its first token at or after the cursor is
the anchor. If the first token never occurs, the line's second token is
tried instead. The cursor then moves past the anchor, so lines are
matched in text order and no word is used twice. A second pass derives
end times: each line ends where the next one starts, and the last line
ends with the last sung word (or 5 seconds after its start).

RULES:
- Blank lines are ignored and do not touch the cursor
- Section markers ("[Verse]", "[Chorus]") are never matched or emitted
- A first-token match is always accepted; the second token is only a
  confirmation and never causes a rejection or backtrack
- The fallback (second-token) search restarts from the same cursor
- Lines without an anchor are dropped; there is no interpolation
- The cursor never moves backwards
- Never raises for well-typed input; an empty list is a valid result
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from suno_lrc.core.ir import AlignedLine, TimedWord
from suno_lrc.core.normalize import normalize_token, tokenize_line

logger = logging.getLogger(__name__)

# Seconds added after the last line's start when the word stream has no
# usable end time past it.
LAST_LINE_BUFFER_S = 5.0


def split_source_lines(raw_text: str) -> List[str]:
    """Split raw lyric text into trimmed, non-blank lines."""
    lines = (line.strip() for line in raw_text.split("\n"))
    return [line for line in lines if line]


def is_section_marker(line: str) -> bool:
    """Return True for structural markers such as ``[Chorus]``."""
    return line.startswith("[") and line.endswith("]")


def _match_first_token(
    tokens: Sequence[str],
    keys: Sequence[str],
    cursor: int,
) -> Tuple[Optional[int], bool]:
    """Find the first word at or after ``cursor`` matching ``tokens[0]``.

    Returns ``(index, confirmed)``. ``confirmed`` is True when the word
    after the match also equals the line's second token. An unconfirmed
    match is still returned.
    """
    first = tokens[0]
    for w in range(cursor, len(keys)):
        if keys[w] != first:
            continue
        confirmed = len(tokens) > 1 and w + 1 < len(keys) and keys[w + 1] == tokens[1]
        return w, confirmed
    return None, False


def _match_second_token(
    tokens: Sequence[str],
    keys: Sequence[str],
    cursor: int,
) -> Optional[int]:
    """Find the first word at or after ``cursor`` matching ``tokens[1]``."""
    second = tokens[1]
    for w in range(cursor, len(keys)):
        if keys[w] == second:
            return w
    return None


def find_anchor(
    tokens: Sequence[str],
    keys: Sequence[str],
    cursor: int,
) -> Optional[int]:
    """Return the index of the word a line starts at, or None.

    Args:
        tokens: The line's normalized tokens (at least one).
        keys: Normalized text of every word in the stream.
        cursor: First word index eligible for matching.
    """
    index, confirmed = _match_first_token(tokens, keys, cursor)
    if index is not None:
        if len(tokens) > 1 and not confirmed:
            logger.debug("Anchor at word %d not confirmed by second token %r", index, tokens[1])
        return index

    if len(tokens) > 1:
        return _match_second_token(tokens, keys, cursor)
    return None


def resolve_end_times(lines: List[AlignedLine], words: Sequence[TimedWord]) -> None:
    """Fill in ``end_s`` for every line, in place.

    RULES:
    - Every line but the last ends at the next line's start
    - The last line ends at the last word's end, if that is later than
      the line's start; otherwise at start + LAST_LINE_BUFFER_S
    """
    for current, following in zip(lines, lines[1:]):
        current.end_s = following.start_s

    if not lines:
        return

    last_line = lines[-1]
    last_word = words[-1] if words else None
    if last_word is not None and last_word.end_s is not None and last_word.end_s > last_line.start_s:
        last_line.end_s = last_word.end_s
    else:
        last_line.end_s = last_line.start_s + LAST_LINE_BUFFER_S


def align_lyrics(raw_text: str, words: Sequence[TimedWord]) -> List[AlignedLine]:
    """Align lyric lines in ``raw_text`` to the timed ``words``.

    Args:
        raw_text: The lyric prompt, lines separated by ``\\n``.
        words: Time-ordered words from the alignment service.

    Returns:
        Aligned lines in source order. May be empty.
    """
    keys = [normalize_token(word.text) for word in words]
    lines: List[AlignedLine] = []
    cursor = 0

    for line_text in split_source_lines(raw_text):
        if is_section_marker(line_text):
            continue

        tokens = tokenize_line(line_text)
        if not tokens:
            continue

        anchor = find_anchor(tokens, keys, cursor)
        if anchor is None:
            logger.debug("Dropping unmatched line %r (cursor=%d)", line_text, cursor)
            continue

        lines.append(AlignedLine(
            text=line_text,
            start_s=words[anchor].start_s,
            end_s=0.0,  # resolved below
            words=[],
        ))
        cursor = anchor + 1

    resolve_end_times(lines, words)
    return lines
