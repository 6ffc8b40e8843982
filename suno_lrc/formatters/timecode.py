"""Timestamp formatting for LRC, SRT, and the line editor.

RULES:
- LRC: mm:ss.xx, minutes never wrap into hours, hundredths truncated
- SRT: HH:MM:SS,mmm, hours never wrap, milliseconds truncated
- Editor: mm:ss.xx with hundredths rounded; parsing accepts "mm:ss.xx"
  or plain seconds
"""

from __future__ import annotations

import math
from typing import Optional


def format_lrc_time(seconds: float) -> str:
    """Format ``seconds`` as an LRC tag, e.g. 65.256 -> ``[01:05.25]``."""
    mins = math.floor(seconds / 60)
    secs = math.floor(seconds % 60)
    hundredths = math.floor((seconds % 1) * 100)
    return "[{:02d}:{:02d}.{:02d}]".format(mins, secs, hundredths)


def format_srt_time(seconds: float) -> str:
    """Format ``seconds`` as an SRT timecode, e.g. 3661.0005 -> ``01:01:01,000``."""
    hrs = math.floor(seconds / 3600)
    mins = math.floor((seconds % 3600) / 60)
    secs = math.floor(seconds % 60)
    millis = math.floor((seconds % 1) * 1000)
    return "{:02d}:{:02d}:{:02d},{:03d}".format(hrs, mins, secs, millis)


def format_editor_time(seconds: float) -> str:
    """Format ``seconds`` for the line editor's time field (``mm:ss.xx``)."""
    total_hundredths = round(seconds * 100)
    mins, rest = divmod(total_hundredths, 6000)
    secs, hundredths = divmod(rest, 100)
    return "{:02d}:{:02d}.{:02d}".format(mins, secs, hundredths)


def _number_or_zero(text: str, cast) -> float:
    try:
        return float(cast(text.strip()))
    except ValueError:
        return 0.0


def parse_editor_time(text: str) -> Optional[float]:
    """Parse a time typed into the editor, returning seconds.

    RULES:
    - "mm:ss.xx" → minutes * 60 + seconds; unparsable parts count as 0
    - minutes must be a whole number: "1.5:30" reads the minutes as 0,
      giving 30.0 (not 90.0)
    - anything else is read as plain seconds; the whole string must be
      numeric, so "5abc" is rejected rather than read as 5
    - negative, infinite or non-numeric input → None (the edit is rejected)
    """
    if ":" in text:
        minutes, _, secs = text.partition(":")
        value = _number_or_zero(minutes, int) * 60 + _number_or_zero(secs.split(":")[0], float)
    else:
        try:
            value = float(text.strip())
        except ValueError:
            return None

    if not math.isfinite(value) or value < 0:
        return None
    return value
