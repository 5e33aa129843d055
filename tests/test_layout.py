"""Tests for the reference-time layout formatter."""

import re
from datetime import datetime, timedelta, timezone

import pytest

from paralog.layout import TOKENS, Chunk, format_time, parse_layout


class TestDateAndClockTokens:
    """Calendar and clock fields."""

    def test_iso_like_layout(self, fixed_moment):
        assert format_time(fixed_moment, "2006-01-02 15:04:05") == "2026-10-19 14:05:09"

    def test_names(self, fixed_moment):
        assert format_time(fixed_moment, "Monday, January 2") == "Monday, October 19"
        assert format_time(fixed_moment, "Mon. Jan. 2 2006") == "Mon. Oct. 19 2026"

    def test_twelve_hour_clock(self, fixed_moment):
        assert format_time(fixed_moment, "3:04 PM") == "2:05 PM"
        assert format_time(fixed_moment, "03pm") == "02pm"

    def test_midnight_is_twelve_am(self):
        moment = datetime(2026, 3, 1, 0, 30)
        assert format_time(moment, "3:04 PM") == "12:30 AM"

    def test_unpadded_and_padded_numbers(self):
        moment = datetime(2026, 1, 5, 7, 8, 9)
        assert format_time(moment, "1/2 15:4:5") == "1/5 07:8:9"
        assert format_time(moment, "01/02") == "01/05"
        assert format_time(moment, "[_2]") == "[ 5]"

    def test_day_of_year(self, fixed_moment):
        assert format_time(fixed_moment, "002") == "292"
        moment = datetime(2026, 1, 5)
        assert format_time(moment, "002") == "005"
        assert format_time(moment, "[__2]") == "[  5]"

    def test_years(self, fixed_moment):
        assert format_time(fixed_moment, "06") == "26"
        assert re.match(r"^\d{4}$", format_time(datetime.now(), "2006"))

    def test_underscore_before_year_is_literal(self, fixed_moment):
        assert format_time(fixed_moment, "_2006") == "_2026"


class TestZoneTokens:
    """Zone names and numeric offsets."""

    def test_zone_abbreviation(self, fixed_moment):
        assert format_time(fixed_moment, "MST") == "CEST"

    @pytest.mark.parametrize(
        "layout,expected",
        [
            ("-0700", "+0200"),
            ("-07:00", "+02:00"),
            ("-07", "+02"),
            ("-070000", "+020000"),
            ("-07:00:00", "+02:00:00"),
            ("Z07:00", "+02:00"),
        ],
    )
    def test_numeric_offsets(self, fixed_moment, layout, expected):
        assert format_time(fixed_moment, layout) == expected

    def test_negative_offset(self):
        moment = datetime(2026, 1, 1, tzinfo=timezone(-timedelta(hours=5, minutes=30)))
        assert format_time(moment, "-07:00") == "-05:30"
        assert format_time(moment, "Z0700") == "-0530"

    def test_iso8601_utc_is_z(self):
        moment = datetime(2026, 1, 1, tzinfo=timezone.utc)
        assert format_time(moment, "Z07:00") == "Z"
        assert format_time(moment, "-07:00") == "+00:00"


class TestFractionalSeconds:
    """Runs of 0 or 9 after a dot or a comma."""

    def test_fixed_width(self, fixed_moment):
        assert format_time(fixed_moment, "05.000") == "09.123"
        assert format_time(fixed_moment, "05,000000") == "09,123000"

    def test_trimmed(self, fixed_moment):
        assert format_time(fixed_moment, "05.999999999") == "09.123"

    def test_trimmed_zero_drops_separator(self):
        moment = datetime(2026, 1, 1, 0, 0, 7)
        assert format_time(moment, "05.999") == "07"
        assert format_time(moment, "05.000") == "07.000"


class TestLiterals:
    """Anything that is not a token is copied."""

    def test_plain_text(self, fixed_moment):
        assert format_time(fixed_moment, "today at ") == "today at "

    def test_lower_case_after_jan_and_mon_is_literal(self, fixed_moment):
        assert format_time(fixed_moment, "Janet") == "Janet"
        assert format_time(fixed_moment, "Monkey") == "Monkey"

    def test_empty_layout(self, fixed_moment):
        assert format_time(fixed_moment, "") == ""

    def test_parse_layout_chunks(self):
        assert parse_layout("15:04") == (
            Chunk("15", "15"),
            Chunk(":"),
            Chunk("04", "04"),
        )

    def test_every_documented_token_is_recognized(self):
        for token, _ in TOKENS:
            chunks = parse_layout(token)
            assert len(chunks) == 1, token
            assert chunks[0].token is not None, token
