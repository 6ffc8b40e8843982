"""Tests for timecode helpers, the LRC and SRT formatters, and the registry.

WHY: Players and video editors reject files whose timecodes or block
layout are off by a character. These tests pin the exact text output.

HOW: Small AlignedLine lists with exactly representable times, compared
against literal expected strings.
"""

import pytest

from suno_lrc.core.ir import AlignedLine
from suno_lrc.formatters import FORMATTERS, generate_lrc, generate_srt
from suno_lrc.formatters.base import BaseFormatter, FormatterOutput
from suno_lrc.formatters.lrc import LRCFormatter
from suno_lrc.formatters.srt import SRTFormatter
from suno_lrc.formatters.timecode import (
    format_editor_time,
    format_lrc_time,
    format_srt_time,
    parse_editor_time,
)


@pytest.fixture
def sample_lines():
    return [
        AlignedLine(text="Hello world", start_s=0.5, end_s=2.0),
        AlignedLine(text="The sun is up", start_s=2.0, end_s=4.0),
        AlignedLine(text="Sing it loud!", start_s=4.0, end_s=5.75),
    ]


# ---------------------------------------------------------------------------
# Timecodes
# ---------------------------------------------------------------------------


class TestLrcTime:

    def test_zero(self):
        assert format_lrc_time(0.0) == "[00:00.00]"

    def test_truncates_hundredths(self):
        assert format_lrc_time(65.256) == "[01:05.25]"

    def test_minutes_do_not_wrap_into_hours(self):
        assert format_lrc_time(3725.5) == "[62:05.50]"

    def test_exact_minute(self):
        assert format_lrc_time(120.0) == "[02:00.00]"


class TestSrtTime:

    def test_zero(self):
        assert format_srt_time(0.0) == "00:00:00,000"

    def test_truncates_milliseconds(self):
        assert format_srt_time(3661.0005) == "01:01:01,000"

    def test_quarter_seconds(self):
        assert format_srt_time(5.75) == "00:00:05,750"

    def test_hours(self):
        assert format_srt_time(3725.5) == "01:02:05,500"


class TestEditorTime:

    def test_format_rounds_hundredths(self):
        assert format_editor_time(65.256) == "01:05.26"

    def test_format_carries_into_seconds(self):
        assert format_editor_time(59.999) == "01:00.00"

    def test_parse_minutes_seconds(self):
        assert parse_editor_time("01:05.26") == pytest.approx(65.26)

    def test_parse_plain_seconds(self):
        assert parse_editor_time(" 12.5 ") == 12.5

    def test_parse_round_trips_formatted_value(self):
        assert parse_editor_time(format_editor_time(83.25)) == pytest.approx(83.25)

    def test_parse_unparsable_parts_count_as_zero(self):
        assert parse_editor_time("x:30") == 30.0
        assert parse_editor_time("01:05.2x") == 60.0

    def test_parse_fractional_minutes_count_as_zero(self):
        assert parse_editor_time("1.5:30") == 30.0

    def test_parse_rejects_trailing_text(self):
        assert parse_editor_time("5abc") is None

    def test_parse_rejects_garbage(self):
        assert parse_editor_time("abc") is None
        assert parse_editor_time("") is None

    def test_parse_rejects_negative_and_infinite(self):
        assert parse_editor_time("-3") is None
        assert parse_editor_time("inf") is None
        assert parse_editor_time("nan") is None


# ---------------------------------------------------------------------------
# LRC
# ---------------------------------------------------------------------------


class TestGenerateLrc:

    def test_sample_song(self, sample_lines):
        assert generate_lrc(sample_lines) == (
            "[00:00.50]Hello world\n"
            "[00:02.00]The sun is up\n"
            "[00:04.00]Sing it loud!"
        )

    def test_one_row_per_line_no_trailing_newline(self, sample_lines):
        content = generate_lrc(sample_lines)
        assert not content.endswith("\n")
        assert len(content.split("\n")) == len(sample_lines)

    def test_empty(self):
        assert generate_lrc([]) == ""

    def test_unsorted_lines_written_as_given(self):
        lines = [
            AlignedLine(text="late", start_s=9.0, end_s=10.0),
            AlignedLine(text="early", start_s=1.0, end_s=2.0),
        ]
        assert generate_lrc(lines) == "[00:09.00]late\n[00:01.00]early"

    def test_end_times_ignored(self):
        a = [AlignedLine(text="x", start_s=1.0, end_s=2.0)]
        b = [AlignedLine(text="x", start_s=1.0, end_s=99.0)]
        assert generate_lrc(a) == generate_lrc(b)


# ---------------------------------------------------------------------------
# SRT
# ---------------------------------------------------------------------------


class TestGenerateSrt:

    def test_sample_song(self, sample_lines):
        assert generate_srt(sample_lines) == (
            "1\n00:00:00,500 --> 00:00:02,000\nHello world\n"
            "\n"
            "2\n00:00:02,000 --> 00:00:04,000\nThe sun is up\n"
            "\n"
            "3\n00:00:04,000 --> 00:00:05,750\nSing it loud!\n"
        )

    def test_block_count_and_indexes(self, sample_lines):
        blocks = generate_srt(sample_lines).strip("\n").split("\n\n")
        assert len(blocks) == 3
        assert [block.split("\n")[0] for block in blocks] == ["1", "2", "3"]

    def test_single_line(self):
        lines = [AlignedLine(text="Solo", start_s=2.0, end_s=7.0)]
        assert generate_srt(lines) == "1\n00:00:02,000 --> 00:00:07,000\nSolo\n"

    def test_empty(self):
        assert generate_srt([]) == ""

    def test_renumbers_on_every_call(self, sample_lines):
        content = generate_srt(sample_lines[1:])
        assert content.startswith("1\n00:00:02,000")


# ---------------------------------------------------------------------------
# Formatter classes / registry
# ---------------------------------------------------------------------------


class TestFormatterClasses:

    def test_lrc_formatter_output(self, sample_lines):
        outputs = LRCFormatter().format(sample_lines)
        assert len(outputs) == 1
        assert isinstance(outputs[0], FormatterOutput)
        assert outputs[0].suffix == ".lrc"
        assert outputs[0].media_type == "text/plain"
        assert outputs[0].content == generate_lrc(sample_lines)

    def test_srt_formatter_output(self, sample_lines):
        outputs = SRTFormatter().format(sample_lines)
        assert len(outputs) == 1
        assert outputs[0].suffix == ".srt"
        assert outputs[0].media_type == "application/x-subrip"
        assert outputs[0].content == generate_srt(sample_lines)

    def test_formatters_do_not_mutate_input(self, sample_lines):
        before = [(l.text, l.start_s, l.end_s) for l in sample_lines]
        LRCFormatter().format(sample_lines)
        SRTFormatter().format(sample_lines)
        assert [(l.text, l.start_s, l.end_s) for l in sample_lines] == before

    def test_registry_keys(self):
        assert set(FORMATTERS) == {"lrc", "srt"}

    def test_registry_values_are_formatter_classes(self):
        for cls in FORMATTERS.values():
            assert issubclass(cls, BaseFormatter)
            assert cls().name
