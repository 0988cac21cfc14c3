# SPDX-License-Identifier: MIT

"""Tests for month label spans."""

from heatgrid.service.month_label import (
    generate_month_labels,
    generate_vertical_month_labels,
)
from heatgrid.time import calendar_date


class TestGenerateMonthLabels:
    def test_full_year(self):
        labels = generate_month_labels(
            calendar_date(2024, 1, 1), calendar_date(2024, 12, 31), 0
        )
        assert [label["name"] for label in labels] == [
            "Jan",
            "Feb",
            "Mar",
            "Apr",
            "May",
            "Jun",
            "Jul",
            "Aug",
            "Sep",
            "Oct",
            "Nov",
            "Dec",
        ]
        for label in labels:
            assert label["end_index"] >= label["start_index"]

    def test_spans_are_contiguous(self):
        labels = generate_month_labels(
            calendar_date(2024, 1, 1), calendar_date(2024, 12, 31), 1
        )
        assert labels[0]["start_index"] == 1
        for current, following in zip(labels, labels[1:]):
            assert current["end_index"] == following["start_index"]
        assert labels[-1]["end_index"] == 53 + 1

    def test_straddling_week_gets_later_month(self):
        # 2024-01-28 (Sun) .. 2024-02-03 (Sat) is one Sunday-start week
        labels = generate_month_labels(
            calendar_date(2024, 1, 28), calendar_date(2024, 2, 10), 0
        )
        assert [(label["name"], label["start_index"]) for label in labels] == [
            ("Feb", 1)
        ]

    def test_year_boundary_week_is_december(self):
        # Largest month number wins, so a Dec/Jan week is labelled Dec
        labels = generate_month_labels(
            calendar_date(2024, 12, 29), calendar_date(2025, 1, 11), 0
        )
        assert [label["name"] for label in labels] == ["Dec", "Jan"]
        assert labels[1]["start_index"] == 2

    def test_inverted_range_is_empty(self):
        assert generate_month_labels(
            calendar_date(2024, 2, 1), calendar_date(2024, 1, 1), 0
        ) == []

    def test_vertical_matches_horizontal(self):
        start, end = calendar_date(2024, 3, 10), calendar_date(2024, 7, 4)
        assert generate_vertical_month_labels(start, end, 1) == generate_month_labels(
            start, end, 1
        )
