"""Tests for aligned-lyrics payload normalization.

WHY: Suno has shipped several shapes of the aligned-lyrics response, and
users paste it by hand. Every tolerated shape, and every strict-mode
error message, is checked here.
"""

import logging

import pytest

from suno_lrc.core.ir import TimedWord
from suno_lrc.core.words import (
    WORD_ARRAY_KEYS,
    WordPayloadError,
    extract_raw_words,
    load_words_json,
    normalize_word,
    parse_words,
)


class TestExtractRawWords:

    def test_bare_array(self, sample_raw_words):
        assert extract_raw_words(sample_raw_words) is sample_raw_words

    @pytest.mark.parametrize("key", WORD_ARRAY_KEYS)
    def test_known_wrapper_keys(self, key, sample_raw_words):
        assert extract_raw_words({key: sample_raw_words}) == sample_raw_words

    def test_known_key_preferred_over_other_arrays(self, sample_raw_words):
        other = [{"word": "decoy", "start": 0}]
        payload = {"alpha": other, "aligned_words": sample_raw_words}
        assert extract_raw_words(payload) == sample_raw_words

    def test_fallback_to_any_word_array(self, sample_raw_words):
        payload = {"waveform": [0.1, 0.2], "tokens": sample_raw_words}
        assert extract_raw_words(payload) == sample_raw_words

    def test_empty_known_key_falls_through_to_scan(self):
        payload = {"words": [], "data": [{"word": "Hello", "start": 1.0}]}
        assert extract_raw_words(payload) == [{"word": "Hello", "start": 1.0}]

    def test_fallback_skips_empty_and_non_word_arrays(self):
        payload = {"a": [], "b": [{"text": "no"}], "c": [{"word": "yes", "start": 1}]}
        assert extract_raw_words(payload) == [{"word": "yes", "start": 1}]

    def test_unknown_object_logs_keys(self, caplog):
        with caplog.at_level(logging.WARNING, logger="suno_lrc.core.words"):
            assert extract_raw_words({"status": "ok", "detail": "x"}) == []
        assert "detail, status" in caplog.text

    def test_scalars(self):
        assert extract_raw_words("words") == []
        assert extract_raw_words(None) == []
        assert extract_raw_words(42) == []


class TestNormalizeWord:

    def test_start_s_end_s_and_p_align(self):
        word = normalize_word({"word": "Hi", "start_s": 1.5, "end_s": 2.0, "p_align": 0.9})
        assert word == TimedWord(text="Hi", start_s=1.5, end_s=2.0, confidence=0.9)

    def test_start_end_and_score(self):
        word = normalize_word({"word": "Hi", "start": 1, "end": 2, "score": 0.5})
        assert word == TimedWord(text="Hi", start_s=1.0, end_s=2.0, confidence=0.5)

    def test_start_preferred_over_start_s(self):
        word = normalize_word({"word": "Hi", "start": 3.0, "start_s": 9.0})
        assert word.start_s == 3.0

    def test_score_preferred_over_p_align(self):
        word = normalize_word({"word": "Hi", "start": 0, "score": 0.25, "p_align": 0.75})
        assert word.confidence == 0.25

    def test_missing_end_is_none(self):
        word = normalize_word({"word": "Hi", "start": 0.5})
        assert word.end_s is None
        assert word.confidence is None

    def test_non_finite_end_and_confidence_are_dropped(self):
        word = normalize_word({"word": "Hi", "start": 1.0, "end": float("inf"), "score": float("nan")})
        assert word == TimedWord(text="Hi", start_s=1.0, end_s=None, confidence=None)

    def test_zero_start_is_valid(self):
        assert normalize_word({"word": "Hi", "start": 0}).start_s == 0.0

    @pytest.mark.parametrize("item", [
        {"word": "Hi"},
        {"word": 5, "start": 1.0},
        {"text": "Hi", "start": 1.0},
        {"word": "Hi", "start": "1.0"},
        {"word": "Hi", "start": True},
        {"word": "Hi", "start": float("nan")},
        {"word": "Hi", "start": float("-inf")},
        "Hi",
        None,
    ])
    def test_unusable_items(self, item):
        assert normalize_word(item) is None


class TestParseWords:

    def test_lenient_wrapped_payload(self, sample_aligned_payload, sample_words):
        assert parse_words(sample_aligned_payload) == sample_words

    def test_lenient_never_raises(self):
        assert parse_words({"nothing": 1}) == []
        assert parse_words("oops") == []
        assert parse_words([{"bad": 1}]) == []

    def test_drops_bad_items_keeps_order(self):
        items = [
            {"word": "a", "start": 0.0},
            {"word": "b"},
            {"word": "c", "start_s": 1.0},
        ]
        assert [w.text for w in parse_words(items)] == ["a", "c"]

    def test_strict_rejects_scalar(self):
        with pytest.raises(WordPayloadError, match="must be an array of words"):
            parse_words("text", strict=True)

    def test_strict_rejects_object_without_array(self):
        with pytest.raises(WordPayloadError, match="Could not find a valid lyrics array"):
            parse_words({"foo": "bar"}, strict=True)

    def test_strict_rejects_unusable_items(self):
        with pytest.raises(WordPayloadError, match="missing 'word' or 'start/start_s'"):
            parse_words([{"word": "x"}], strict=True)

    def test_strict_rejects_empty_array(self):
        with pytest.raises(WordPayloadError, match="missing 'word'"):
            parse_words([], strict=True)

    def test_strict_empty_known_key_uses_other_array(self):
        words = parse_words({"words": [], "data": [{"word": "Hello", "start": 1.0}]}, strict=True)
        assert words == [TimedWord(text="Hello", start_s=1.0)]

    def test_strict_all_arrays_empty(self):
        with pytest.raises(WordPayloadError, match="Could not find a valid lyrics array"):
            parse_words({"words": [], "lyrics": []}, strict=True)

    def test_strict_accepts_good_payload(self, sample_aligned_payload):
        assert len(parse_words(sample_aligned_payload, strict=True)) == 9


class TestLoadWordsJson:

    def test_valid_text(self):
        words = load_words_json('[{"word": "Hi", "start_s": 0.5, "end_s": 1.0}]')
        assert words == [TimedWord(text="Hi", start_s=0.5, end_s=1.0)]

    def test_nan_start_items_are_dropped(self):
        words = load_words_json(
            '[{"word": "Hello", "start": NaN, "end": 1.0}, {"word": "world", "start": 2.0, "end": Infinity}]'
        )
        assert words == [TimedWord(text="world", start_s=2.0, end_s=None)]

    def test_only_nan_starts_is_rejected(self):
        with pytest.raises(WordPayloadError, match="missing 'word' or 'start/start_s'"):
            load_words_json('[{"word": "Hello", "start": NaN, "end": 1.0}]')

    def test_invalid_json(self):
        with pytest.raises(WordPayloadError, match="Invalid JSON format"):
            load_words_json("{not json")

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            load_words_json("null")
