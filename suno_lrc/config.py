"""Configuration constants and .env loading.

WHY: Centralizes the Suno endpoint, the optional session token and proxy,
and output defaults so they are easy to find and override without
touching code.

HOW: python-dotenv loads the .env file on import. Values are read from
the environment with sensible defaults. load_session_token() returns the
token or None, because public clips can be fetched without one.

RULES:
- SUNO_BASE_URL: the Suno studio API root
- SUNO_PROXY_URL: optional CORS/egress proxy that replaces the base URL
- SUNO_SESSION_TOKEN: optional "__session" cookie value, never hardcoded
- DEFAULT_OUTPUT_STEM: file stem used when the clip has no title
"""

from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

DEFAULT_SUNO_BASE_URL = "https://studio-api.prod.suno.com/api"

SUNO_BASE_URL = os.getenv("SUNO_BASE_URL", DEFAULT_SUNO_BASE_URL)
SUNO_PROXY_URL = os.getenv("SUNO_PROXY_URL", "").strip() or None
DEFAULT_OUTPUT_STEM = os.getenv("DEFAULT_OUTPUT_STEM", "suno_lyrics")

REQUEST_TIMEOUT_S = float(os.getenv("SUNO_REQUEST_TIMEOUT", "30"))


def load_session_token() -> Optional[str]:
    """Return the Suno session token from the environment, or None.

    RULES:
    - Reads SUNO_SESSION_TOKEN (populated by python-dotenv)
    - Empty or whitespace-only values count as missing
    """
    token = os.getenv("SUNO_SESSION_TOKEN", "").strip()
    return token or None
