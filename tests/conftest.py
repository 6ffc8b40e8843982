"""Shared test fixtures for the suno_lrc test suite.

WHY: Several test modules need the same small song: a lyric prompt with
section markers and blank lines, the matching Suno aligned-lyrics
payload, and the TimedWord list it normalizes to.

RULES:
- Times are exactly representable floats (.0, .25, .5, .75) so that
  truncating timecode assertions are exact.
- SAMPLE_PROMPT aligns to three lines: (0.5, 2.0), (2.0, 4.0), (4.0, 5.75).
"""

from typing import Any, Dict, List

import pytest

from suno_lrc.core.ir import TimedWord


SAMPLE_PROMPT = "[Verse]\nHello world\n\nThe sun is up\n[Chorus]\nSing it loud!\n"

# Raw items as returned by GET /gen/{id}/aligned_lyrics/v2
SAMPLE_RAW_WORDS: List[Dict[str, Any]] = [
    {"word": "Hello", "start_s": 0.50, "end_s": 0.75, "p_align": 0.97},
    {"word": "world", "start_s": 0.75, "end_s": 1.50, "p_align": 0.95},
    {"word": "The",   "start_s": 2.00, "end_s": 2.25, "p_align": 0.90},
    {"word": "sun",   "start_s": 2.25, "end_s": 2.50, "p_align": 0.93},
    {"word": "is",    "start_s": 2.50, "end_s": 2.75, "p_align": 0.88},
    {"word": "up",    "start_s": 2.75, "end_s": 3.50, "p_align": 0.96},
    {"word": "Sing",  "start_s": 4.00, "end_s": 4.25, "p_align": 0.99},
    {"word": "it",    "start_s": 4.25, "end_s": 4.50, "p_align": 0.94},
    {"word": "loud!", "start_s": 4.50, "end_s": 5.75, "p_align": 0.92},
]

CLIP_ID = "0f8b2a1c-3d4e-4f56-8a7b-9c0d1e2f3a4b"


@pytest.fixture
def sample_prompt():
    return SAMPLE_PROMPT


@pytest.fixture
def sample_raw_words():
    return [dict(item) for item in SAMPLE_RAW_WORDS]


@pytest.fixture
def sample_aligned_payload(sample_raw_words):
    """Aligned-lyrics response wrapped in an object, as Suno returns it."""
    return {"aligned_words": sample_raw_words, "waveform_data": [0.1, 0.2], "hoot_cer": 0.02}


@pytest.fixture
def sample_words():
    return [
        TimedWord(text=w["word"], start_s=w["start_s"], end_s=w["end_s"], confidence=w["p_align"])
        for w in SAMPLE_RAW_WORDS
    ]


@pytest.fixture
def sample_clip_response():
    """GET /clip/{id} response for the sample song."""
    return {
        "id": CLIP_ID,
        "title": "Sunny Day",
        "audio_url": "https://cdn1.suno.ai/{}.mp3".format(CLIP_ID),
        "metadata": {
            "prompt": SAMPLE_PROMPT,
            "tags": "upbeat pop",
            "duration": 6.0,
        },
    }
