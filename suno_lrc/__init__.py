"""Suno LRC: synchronized LRC and SRT files from Suno aligned lyrics.

WHY: Suno exposes per-word timestamps for a song, but players and editors
want line-synced lyrics (LRC) or captions (SRT). This package anchors the
song's lyric lines on the word stream and renders both formats.

HOW: Three-stage pipeline: ingest (API client or pasted JSON), align
(core), format (pluggable formatters). Each stage is independently
testable.

RULES:
- The core (aligner + serializers) is pure and never raises on
  well-typed input
- All formatters consume the same list of AlignedLine
- Adding a new output format = one new formatter module, no core changes
"""

__version__ = "0.1.0"
