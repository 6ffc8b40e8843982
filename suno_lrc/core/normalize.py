"""Comparison keys for lyric and audio tokens."""

from __future__ import annotations

import unicodedata

# Unicode general-category prefixes kept in a comparison key:
# letters (Lu, Ll, Lt, Lm, Lo) and numbers (Nd, Nl, No).
_KEPT_CATEGORIES = frozenset({"L", "N"})


def normalize_token(text: str) -> str:
    """Return the comparison key for ``text``.

    Lowercases, then drops every character that is not a Unicode letter or
    number, so "Hello," and "hello" compare equal and non-Latin scripts
    survive intact.
    """
    return "".join(
        ch for ch in text.lower()
        if unicodedata.category(ch)[0] in _KEPT_CATEGORIES
    )


def tokenize_line(line: str) -> list[str]:
    """Split a lyric line on whitespace and return its non-empty keys."""
    keys = (normalize_token(part) for part in line.split())
    return [key for key in keys if key]
