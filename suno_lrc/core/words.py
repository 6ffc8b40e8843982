"""Normalization of raw aligned-lyrics JSON into TimedWord lists.

WHY: The aligned_lyrics payload is not stable. It may be a bare array or
an object wrapping the array under one of several keys (including the
misspelled "alligned_words"), and items use either start/end or
start_s/end_s. Users can also paste the JSON by hand. The aligner only
wants clean TimedWord objects, so all of that tolerance lives here.

HOW: extract_raw_words() locates the word array, normalize_word() maps
one item to a TimedWord (or rejects it), and parse_words() combines the
two. In strict mode (pasted JSON) every failure raises WordPayloadError
with a user-facing message. In lenient mode (API responses) failures
produce an empty list and the caller reports "no data".

RULES:
- Known wrapper keys are tried in order before any other key; an empty
  keyed array falls through to the scan
- Fallback: first non-empty array whose first item is a dict with "word"
- start comes from a numeric "start", else a numeric "start_s"; end likewise
- confidence comes from "score", else "p_align"
- Items need a string "word" and a numeric start; others are dropped
- Booleans, NaN and infinities are not numbers
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any, List, Optional

from suno_lrc.core.ir import TimedWord

logger = logging.getLogger(__name__)

WORD_ARRAY_KEYS = ("aligned_words", "alligned_words", "words", "lyrics", "aligned_lyrics")


class WordPayloadError(ValueError):
    """Raised when a pasted word payload cannot be used.

    RULES:
    - The message is shown to the user as-is
    """


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    # json.loads accepts NaN and Infinity
    return math.isfinite(value)


def _find_word_array(payload: dict) -> Optional[list]:
    for key in WORD_ARRAY_KEYS:
        value = payload.get(key)
        if isinstance(value, list) and value:
            return value

    for value in payload.values():
        if isinstance(value, list) and value:
            first = value[0]
            if isinstance(first, dict) and "word" in first:
                return value
    return None


def extract_raw_words(payload: Any) -> list:
    """Return the raw word items inside ``payload``.

    Args:
        payload: Decoded JSON: a list of word dicts, or a dict wrapping one.

    Returns:
        The word array, or [] when none can be found.
    """
    if isinstance(payload, list):
        return payload
    if not isinstance(payload, dict):
        return []

    found = _find_word_array(payload)
    if found is None:
        logger.warning(
            "Word payload has no known lyrics array. Keys found: %s",
            ", ".join(sorted(str(k) for k in payload)),
        )
        return []
    return found


def _pick_time(item: dict, key: str) -> Optional[float]:
    for candidate in (key, key + "_s"):
        value = item.get(candidate)
        if _is_number(value):
            return float(value)
    return None


def normalize_word(item: Any) -> Optional[TimedWord]:
    """Convert one raw word item into a TimedWord, or None if unusable."""
    if not isinstance(item, dict):
        return None

    text = item.get("word")
    start_s = _pick_time(item, "start")
    if not isinstance(text, str) or start_s is None:
        return None

    confidence = item.get("score")
    if confidence is None:
        confidence = item.get("p_align")

    return TimedWord(
        text=text,
        start_s=start_s,
        end_s=_pick_time(item, "end"),
        confidence=float(confidence) if _is_number(confidence) else None,
    )


def normalize_words(items: list) -> List[TimedWord]:
    """Normalize every usable item, preserving order."""
    words = []
    for item in items:
        word = normalize_word(item)
        if word is not None:
            words.append(word)
    dropped = len(items) - len(words)
    if dropped:
        logger.debug("Dropped %d word item(s) without word/start fields", dropped)
    return words


def parse_words(payload: Any, strict: bool = False) -> List[TimedWord]:
    """Extract and normalize the word list from a decoded JSON payload.

    RULES:
    - strict=False: never raises, may return []
    - strict=True: raises WordPayloadError with a user-facing message when
      the payload shape is wrong or no item is usable
    """
    if not strict:
        return normalize_words(extract_raw_words(payload))

    if not isinstance(payload, (list, dict)):
        raise WordPayloadError("JSON must be an array of words or an object containing them.")

    raw = extract_raw_words(payload)
    if isinstance(payload, dict) and not raw:
        raise WordPayloadError("Could not find a valid lyrics array in the JSON object.")

    words = normalize_words(raw)
    if not words:
        raise WordPayloadError(
            "Found array, but items are missing 'word' or 'start/start_s' properties."
        )
    return words


def load_words_json(text: str) -> List[TimedWord]:
    """Parse pasted aligned-lyrics JSON text (strict mode)."""
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise WordPayloadError(
            "Invalid JSON format. Please check your input ({}).".format(exc.msg)
        ) from exc
    return parse_words(payload, strict=True)
