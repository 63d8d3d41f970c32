"""Tests for the TimeOfDay value type."""

import pytest

from academic_schedule.core.time_of_day import (
    MINUTES_PER_DAY,
    InvalidTimeFormatError,
    TimeOfDay,
    format_window,
)


class TestParse:
    @pytest.mark.parametrize(
        "text,minutes",
        [("07:30", 450), ("7:30", 450), ("00:00", 0), ("23:59", 1439), (" 13:05 ", 785)],
    )
    def test_valid_times(self, text, minutes):
        assert TimeOfDay.parse(text).minutes == minutes

    @pytest.mark.parametrize("text", ["24:00", "07:60", "0730", "7h30", "", "ab:cd", "07:3"])
    def test_invalid_times(self, text):
        with pytest.raises(InvalidTimeFormatError):
            TimeOfDay.parse(text)

    def test_trailing_newline_rejected(self):
        with pytest.raises(InvalidTimeFormatError):
            TimeOfDay.parse("07:30\n", strict=True)

    @pytest.mark.parametrize("text", ["8:00", " 13:00 ", "07:30 ", "7:05"])
    def test_strict_requires_two_digit_hour(self, text):
        with pytest.raises(InvalidTimeFormatError):
            TimeOfDay.parse(text, strict=True)

    def test_strict_accepts_hh_mm(self):
        assert TimeOfDay.parse("08:00", strict=True) == TimeOfDay.of(8)

    def test_end_of_day_only_when_allowed(self):
        assert TimeOfDay.parse("24:00", allow_end_of_day=True).minutes == MINUTES_PER_DAY
        assert TimeOfDay.parse("24:00", allow_end_of_day=True).isoformat() == "24:00"
        with pytest.raises(InvalidTimeFormatError):
            TimeOfDay.parse("24:01", allow_end_of_day=True)

    def test_non_string_rejected(self):
        with pytest.raises(InvalidTimeFormatError):
            TimeOfDay.parse(730)  # type: ignore[arg-type]

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            TimeOfDay.parse("nope")


class TestArithmetic:
    def test_plus_minutes(self):
        assert TimeOfDay.of(7, 30).plus_minutes(50) == TimeOfDay.of(8, 20)

    def test_end_of_day_renders_as_24(self):
        end = TimeOfDay.of(23, 10).plus_minutes(50)
        assert end.minutes == MINUTES_PER_DAY
        assert end.isoformat() == "24:00"

    def test_past_midnight_rejected(self):
        with pytest.raises(ValueError):
            TimeOfDay.of(23, 30).plus_minutes(31)

    def test_minutes_until(self):
        assert TimeOfDay.of(7, 30).minutes_until(TimeOfDay.of(9, 10)) == 100

    def test_out_of_range_construction(self):
        with pytest.raises(ValueError):
            TimeOfDay(-1)
        with pytest.raises(ValueError):
            TimeOfDay(MINUTES_PER_DAY + 1)

    def test_bool_is_not_minutes(self):
        with pytest.raises(TypeError):
            TimeOfDay(True)  # type: ignore[arg-type]


class TestOrderingAndFormatting:
    def test_ordering_is_numeric_not_lexicographic(self):
        # "9:00" sorts after "10:00" as text
        assert TimeOfDay.parse("9:00") < TimeOfDay.parse("10:00")

    def test_total_ordering(self):
        early, late = TimeOfDay.of(8), TimeOfDay.of(9)
        assert late > early
        assert early <= TimeOfDay.of(8)
        assert sorted([late, early]) == [early, late]

    def test_str_pads(self):
        assert str(TimeOfDay.parse("7:05")) == "07:05"

    def test_format_window(self):
        assert format_window(TimeOfDay.of(7, 30), TimeOfDay.of(8, 20)) == "07:30-08:20"

    def test_hashable_and_equal(self):
        assert {TimeOfDay.of(7, 30), TimeOfDay.parse("07:30")} == {TimeOfDay(450)}
