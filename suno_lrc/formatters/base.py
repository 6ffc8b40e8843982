"""Abstract base formatter and output container.

WHY: Every output format consumes the same aligned line list but produces
different file content. This base class gives the CLI and HTTP layers one
interface to work with any formatter generically.

HOW: BaseFormatter is an ABC with two requirements: a ``name`` property
and a ``format()`` method. FormatterOutput bundles a file suffix with its
content and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns a list; the current formatters return one item
- ``suffix`` is appended to the output stem, e.g. ``".lrc"``
- Formatters never modify the lines they are given
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Sequence

from suno_lrc.core.ir import AlignedLine


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the output stem,
                e.g. ``".srt"`` → ``"my_song.srt"``.
        content: The file content.
        media_type: MIME type for the content, e.g. ``"application/x-subrip"``.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Common interface for the LRC and SRT writers.

    New formats live in their own module under formatters/, subclass this,
    and get a key in ``FORMATTERS`` so the CLI and API can list them.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'LRC (Synced Lyrics)'."""

    @abstractmethod
    def format(self, lines: Sequence[AlignedLine]) -> List[FormatterOutput]:
        """Convert aligned lines into one or more output files.

        Args:
            lines: Aligned lines in the order they should be written.

        Returns:
            List of FormatterOutput objects.
        """
