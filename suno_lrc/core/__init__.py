"""Core alignment engine: IR, normalization, line aligner, and pipeline."""

from suno_lrc.core.aligner import align_lyrics
from suno_lrc.core.ir import AlignedLine, TimedWord

__all__ = ["AlignedLine", "TimedWord", "align_lyrics"]
