"""Async HTTP client for the Suno studio API.

WHY: A Suno clip's timed words and its lyric prompt live behind two
separate endpoints. This module wraps both behind one client class so
the CLI, the HTTP server and tests don't need to know HTTP details.

HOW: Uses httpx.AsyncClient for non-blocking HTTP. SunoClient is an
async context manager. Enter it to get a configured client, exit to
close the connection pool. fetch_clip() runs both requests concurrently.

RULES:
- Always use the async context manager (async with SunoClient(...) as client:)
- A proxy URL, when given, replaces the base URL (trailing slash stripped)
- Authorization: Bearer <token> is only sent when a token is set
- 401 → SunoAPIError with the "Unauthorized" message and status 401
- Other non-2xx → SunoAPIError with the response reason and status
- A body that is not JSON, or a clip record of the wrong shape →
  SunoAPIError "invalid response" with no status (the server answers 502)
- If one of the two concurrent requests fails, the other is cancelled
- Word payloads are parsed leniently; an unknown shape yields []
"""

from __future__ import annotations

import asyncio
import logging
import re
from typing import List, Optional, Tuple

import httpx

from suno_lrc.api.models import ClipMetadata
from suno_lrc.config import REQUEST_TIMEOUT_S, SUNO_BASE_URL, SUNO_PROXY_URL, load_session_token
from suno_lrc.core.ir import TimedWord
from suno_lrc.core.words import parse_words

logger = logging.getLogger(__name__)

_CLIP_ID_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def is_valid_clip_id(value: str) -> bool:
    """Loosely check that ``value`` looks like a Suno clip UUID."""
    return bool(_CLIP_ID_RE.match(value or ""))


def resolve_base_url(base_url: Optional[str] = None, proxy_url: Optional[str] = None) -> str:
    """Pick the API root: the proxy if one is set, else the base URL."""
    if proxy_url:
        return proxy_url.rstrip("/")
    return (base_url or SUNO_BASE_URL).rstrip("/")


class SunoAPIError(Exception):
    """Raised when the Suno API returns an error response.

    RULES:
    - message is user-facing
    - status_code is the HTTP status, or None when no usable response
      arrived (transport failure, undecodable body)
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class SunoClient:
    """Async client for the two Suno endpoints the aligner needs.

    RULES:
    - Use as: async with SunoClient() as client: ...
    - token defaults to load_session_token() from .env (may be None)
    - proxy_url defaults to SUNO_PROXY_URL from config
    - transport is for tests (httpx.MockTransport)
    """

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        proxy_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._token = token or load_session_token()
        self._base_url = resolve_base_url(base_url, proxy_url or SUNO_PROXY_URL)
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self) -> SunoClient:
        headers = {}
        if self._token:
            headers["Authorization"] = "Bearer {}".format(self._token)
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers=headers,
            timeout=httpx.Timeout(REQUEST_TIMEOUT_S),
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        if self._client:
            await self._client.aclose()
            self._client = None

    def _ensure_client(self) -> httpx.AsyncClient:
        """Return the active httpx client, raising if not in context manager."""
        if self._client is None:
            raise RuntimeError(
                "SunoClient must be used as an async context manager: "
                "async with SunoClient() as client: ..."
            )
        return self._client

    async def _get_json(self, path: str, what: str):
        client = self._ensure_client()
        logger.debug("GET %s%s", self._base_url, path)
        try:
            resp = await client.get(path)
        except httpx.HTTPError as exc:
            raise SunoAPIError("Failed to fetch {}: {}".format(what, exc)) from exc

        if resp.status_code == 401:
            raise SunoAPIError(
                "Unauthorized: Please provide a valid Suno session token.", 401
            )
        if not resp.is_success:
            raise SunoAPIError(
                "Failed to fetch {}: {}".format(what, resp.reason_phrase),
                resp.status_code,
            )
        try:
            return resp.json()
        except ValueError as exc:
            logger.warning("Non-JSON body from %s%s: %r", self._base_url, path, resp.text[:80])
            raise SunoAPIError("Failed to fetch {}: invalid response".format(what)) from exc

    async def fetch_aligned_words(self, clip_id: str) -> List[TimedWord]:
        """Fetch the timed words for ``clip_id``.

        RULES:
        - GET /gen/{clip_id}/aligned_lyrics/v2
        - Bare arrays and wrapped objects are both accepted
        - Returns [] when no word array is recognised (logged as a warning)
        """
        data = await self._get_json(
            "/gen/{}/aligned_lyrics/v2".format(clip_id), "aligned lyrics"
        )
        words = parse_words(data)
        logger.info("Fetched %d aligned word(s) for clip %s", len(words), clip_id)
        return words

    async def fetch_clip_metadata(self, clip_id: str) -> ClipMetadata:
        """Fetch the clip record (title, prompt) for ``clip_id``."""
        data = await self._get_json("/clip/{}".format(clip_id), "clip metadata")
        try:
            return ClipMetadata.from_dict(data)
        except (KeyError, TypeError, AttributeError) as exc:
            raise SunoAPIError("Failed to fetch clip metadata: invalid response") from exc

    async def fetch_clip(self, clip_id: str) -> Tuple[List[TimedWord], ClipMetadata]:
        """Fetch words and metadata concurrently.

        If either request fails, the other is cancelled and awaited before
        the error propagates, so nothing is left running on the client.
        """
        tasks = [
            asyncio.ensure_future(self.fetch_aligned_words(clip_id)),
            asyncio.ensure_future(self.fetch_clip_metadata(clip_id)),
        ]
        try:
            words, metadata = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        return words, metadata
