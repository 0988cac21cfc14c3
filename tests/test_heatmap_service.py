# SPDX-License-Identifier: MIT

"""Tests for the full layout pass."""

import pytest

from heatgrid.service.heatmap import (
    EmptyDatasetError,
    HeatmapError,
    MissingValuePropertyError,
    NoDatedEntriesError,
    UnsupportedValueTypeError,
    compute_heatmap,
)
from heatgrid.template.color_scheme import get_default_color_schemes
from heatgrid.template.configuration import get_view_config_template
from heatgrid.time import calendar_date

from conftest import make_record

TODAY = calendar_date(2024, 1, 31)


def view_config(**overrides):
    config = get_view_config_template()
    config["value_property"] = "steps"
    config.update(overrides)
    return config


def compute(records, is_dark=True, **overrides):
    return compute_heatmap(
        records,
        view_config(**overrides),
        get_default_color_schemes(),
        is_dark=is_dark,
        today=TODAY,
    )


RECORDS = [
    make_record("2024-01-02.md", steps=2000),
    make_record("2024-01-10.md", steps=8000),
    make_record("2024-01-10 evening.md", steps=3000),
    make_record("2024-01-20.md", steps="skipped"),
    make_record("2024-01-21.md"),
]


class TestComputeHeatmap:
    def test_layout(self):
        layout = compute(RECORDS[:3])

        assert layout["date_range"] == {
            "start": calendar_date(2024, 1, 2),
            "end": TODAY,
        }
        assert len(layout["cells"]) == 30
        assert layout["total_weeks"] == 5
        assert [label["name"] for label in layout["month_labels"]] == ["Jan"]
        assert layout["weekday_labels"][0] == "Sun"
        assert layout["is_dark"] is True

        stats = layout["dataset"]["stats"]
        assert (stats["min"], stats["max"], stats["count"]) == (2000, 8000, 2)

    def test_cell_states(self):
        layout = compute(RECORDS[:3])
        cells = {cell["date"]: cell for cell in layout["cells"]}

        first = cells[calendar_date(2024, 1, 2)]
        assert first["state"]["type"] == "filled"
        assert first["state"]["intensity"] == 0.0
        assert first["color"] == layout["scheme"]["dark"]["zero"]

        peak = cells[calendar_date(2024, 1, 10)]
        assert peak["state"]["intensity"] == 1.0
        assert peak["state"]["source"] == "2024-01-10.md"
        assert peak["color"] == "#39d353"

        assert cells[calendar_date(2024, 1, 3)]["state"] == {"type": "empty"}

    def test_unset_value_gives_zero_cell(self):
        records = [make_record("2024-01-02.md", steps=5), make_record("2024-01-05.md")]
        layout = compute(records)
        cells = {cell["date"]: cell for cell in layout["cells"]}
        assert cells[calendar_date(2024, 1, 5)]["state"]["type"] == "zero"
        assert cells[calendar_date(2024, 1, 5)]["color"] is None

    def test_overrides_and_options(self):
        layout = compute(
            RECORDS[:3],
            is_dark=False,
            start_date="2024-01-01",
            end_date="2024-01-14",
            week_start=1,
            orientation="vertical",
            color_scheme="purple",
            min_value=0,
            max_value=16000,
        )
        assert layout["total_weeks"] == 2
        assert layout["weekday_labels"][0] == "Mon"
        assert layout["scheme"]["light"]["max"] == "#a78bfa"
        cells = {cell["date"]: cell for cell in layout["cells"]}
        peak = cells[calendar_date(2024, 1, 10)]
        assert peak["state"]["intensity"] == pytest.approx(0.5)
        assert (peak["row"], peak["column"]) == (2, 3)

    def test_unknown_scheme_falls_back(self):
        layout = compute(RECORDS[:3], color_scheme="nope")
        assert layout["scheme"]["dark"]["max"] == "#39d353"

    def test_boolean_dataset(self):
        records = [
            make_record("2024-01-02.md", done=True),
            make_record("2024-01-03.md", done=False),
        ]
        layout = compute(records, value_property="done")
        cells = {cell["date"]: cell for cell in layout["cells"]}
        assert cells[calendar_date(2024, 1, 2)]["state"]["intensity"] == 1.0
        assert cells[calendar_date(2024, 1, 3)]["state"]["intensity"] == 0.0


class TestComputeHeatmapErrors:
    def test_missing_value_property(self):
        with pytest.raises(MissingValuePropertyError):
            compute(RECORDS, value_property="")

    def test_no_records(self):
        with pytest.raises(EmptyDatasetError):
            compute([])

    def test_no_dated_records(self):
        with pytest.raises(NoDatedEntriesError):
            compute([make_record("notes.md", steps=3)])

    def test_unsupported_type(self):
        with pytest.raises(UnsupportedValueTypeError) as excinfo:
            compute(RECORDS)
        assert "steps" in excinfo.value.description

    def test_errors_carry_titles(self):
        with pytest.raises(HeatmapError) as excinfo:
            compute([])
        assert excinfo.value.title == "No data to display"
