"""Output formatter registry.

WHY: The CLI and HTTP layers need a single lookup to find the right
formatter by name. Adding a format means creating the formatter class,
importing it here, and adding one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["lrc"]()``.

RULES:
- Keys are short lowercase identifiers (used in CLI flags and the API)
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from suno_lrc.formatters.lrc import LRCFormatter, generate_lrc
from suno_lrc.formatters.srt import SRTFormatter, generate_srt

if TYPE_CHECKING:
    from suno_lrc.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "lrc": LRCFormatter,
    "srt": SRTFormatter,
}

__all__ = ["FORMATTERS", "LRCFormatter", "SRTFormatter", "generate_lrc", "generate_srt"]
