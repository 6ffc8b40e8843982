"""Suno API response dataclasses.

WHY: The clip endpoint returns a nested JSON object where the lyric text
lives under metadata.prompt. A typed dataclass makes the fields the
pipeline relies on explicit.

RULES:
- id is always present
- prompt defaults to "" when metadata or prompt is missing or not a string
- title is None unless it is a string
- A record of the wrong shape raises KeyError, TypeError or AttributeError;
  the client turns those into SunoAPIError
- tags, duration, audio_url and title are optional
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class ClipMetadata:
    """Metadata for one Suno clip, as returned by GET /clip/{id}.

    RULES:
    - prompt: the lyric text the song was generated from
    - title: used as the default output file stem
    """

    id: str
    prompt: str
    tags: Optional[str] = None
    duration: Optional[float] = None
    audio_url: Optional[str] = None
    title: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ClipMetadata:
        """Parse ClipMetadata from a raw API response dict."""
        metadata = data.get("metadata") or {}
        prompt = metadata.get("prompt")
        title = data.get("title")
        return cls(
            id=data["id"],
            prompt=prompt if isinstance(prompt, str) else "",
            tags=metadata.get("tags"),
            duration=metadata.get("duration"),
            audio_url=data.get("audio_url"),
            title=title if isinstance(title, str) else None,
        )
