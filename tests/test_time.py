# SPDX-License-Identifier: MIT

"""Tests for calendar date helpers."""

import pytest

from heatgrid.time import (
    InvalidFormatError,
    add_days,
    calendar_date,
    calendar_date_from_str,
    calendar_date_from_str_optional,
    calendar_date_to_display_str,
    calendar_date_to_str,
    day_of_week_index,
    days_between,
    generate_date_range,
    get_weekday_labels,
    native_day_of_week,
)


class TestParsing:
    def test_parses_iso_date(self):
        assert calendar_date_from_str("2024-01-15") == calendar_date(2024, 1, 15)

    def test_ignores_surrounding_whitespace(self):
        assert calendar_date_from_str("  2024-03-01 ") == calendar_date(2024, 3, 1)

    @pytest.mark.parametrize("text", ["2024-1-15", "15/01/2024", "2024-02-30", ""])
    def test_rejects_invalid_text(self, text):
        with pytest.raises(InvalidFormatError):
            calendar_date_from_str(text)

    def test_invalid_format_error_is_value_error(self):
        assert issubclass(InvalidFormatError, ValueError)

    def test_optional_returns_none_for_blank_and_invalid(self):
        assert calendar_date_from_str_optional(None) is None
        assert calendar_date_from_str_optional("   ") is None
        assert calendar_date_from_str_optional("not a date") is None
        assert calendar_date_from_str_optional("2023-02-29") is None

    def test_leap_day(self):
        assert calendar_date_from_str_optional("2024-02-29") == calendar_date(2024, 2, 29)


class TestFormatting:
    def test_to_str_pads(self):
        assert calendar_date_to_str(calendar_date(2024, 3, 5)) == "2024-03-05"

    def test_display_str(self):
        date = calendar_date(2024, 1, 15)
        assert calendar_date_to_display_str(date) == "Mon, Jan 15, 2024"


class TestArithmetic:
    def test_add_days_crosses_month_and_year(self):
        assert add_days(calendar_date(2023, 12, 31), 1) == calendar_date(2024, 1, 1)
        assert add_days(calendar_date(2024, 3, 1), -1) == calendar_date(2024, 2, 29)

    def test_days_between_is_signed(self):
        start = calendar_date(2024, 1, 1)
        assert days_between(start, calendar_date(2024, 12, 31)) == 365
        assert days_between(calendar_date(2024, 1, 10), start) == -9

    def test_generate_date_range_inclusive(self):
        dates = generate_date_range(calendar_date(2024, 1, 1), calendar_date(2024, 1, 3))
        assert [calendar_date_to_str(d) for d in dates] == [
            "2024-01-01",
            "2024-01-02",
            "2024-01-03",
        ]

    def test_generate_date_range_single_day(self):
        day = calendar_date(2024, 6, 1)
        assert generate_date_range(day, day) == [day]

    def test_generate_date_range_inverted_is_empty(self):
        assert generate_date_range(calendar_date(2024, 1, 3), calendar_date(2024, 1, 1)) == []


class TestDayOfWeek:
    def test_native_day_of_week_starts_on_sunday(self):
        assert native_day_of_week(calendar_date(2024, 1, 7)) == 0  # Sunday
        assert native_day_of_week(calendar_date(2024, 1, 13)) == 6  # Saturday

    def test_index_with_sunday_start(self):
        assert day_of_week_index(calendar_date(2024, 1, 7), 0) == 0
        assert day_of_week_index(calendar_date(2024, 1, 8), 0) == 1

    def test_index_with_monday_start(self):
        assert day_of_week_index(calendar_date(2024, 1, 8), 1) == 0
        assert day_of_week_index(calendar_date(2024, 1, 7), 1) == 6

    def test_weekday_labels(self):
        assert get_weekday_labels(0) == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
        assert get_weekday_labels(1) == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
