"""Suno API client package: async HTTP interface to the Suno studio API.

WHY: The aligner needs a clip's timed words and its lyric prompt. This
package encapsulates all Suno communication behind an async client class.

RULES:
- All HTTP calls go through SunoClient (no direct httpx usage elsewhere)
- Authentication is an optional Bearer session token
"""

from suno_lrc.api.client import SunoAPIError, SunoClient, is_valid_clip_id
from suno_lrc.api.models import ClipMetadata

__all__ = ["ClipMetadata", "SunoAPIError", "SunoClient", "is_valid_clip_id"]
