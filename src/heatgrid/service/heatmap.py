# SPDX-License-Identifier: MIT

import pendulum
from loguru import logger

from heatgrid.model.color_scheme import ColorSchemeItem
from heatgrid.model.heatmap import HeatmapLayout
from heatgrid.model.record import RawRecord
from heatgrid.model.view_config import HeatmapViewConfig
from heatgrid.service.color_scheme import find_color_scheme, get_scheme_definition
from heatgrid.service.dataset import apply_stat_overrides, process_records
from heatgrid.service.date_range import resolve_date_range
from heatgrid.service.grid import build_cells, get_total_weeks
from heatgrid.service.month_label import (
    generate_month_labels,
    generate_vertical_month_labels,
)
from heatgrid.service.record import detect_value_type, extract_records
from heatgrid.time import get_weekday_labels


class HeatmapError(Exception):
    """Raised when a heatmap cannot be drawn; rendered as an empty state."""

    title = "Cannot display heatmap"

    def __init__(self, description: str) -> None:
        super().__init__(description)
        self.description = description


class MissingValuePropertyError(HeatmapError):
    title = "Configure value property"


class EmptyDatasetError(HeatmapError):
    title = "No data to display"


class NoDatedEntriesError(HeatmapError):
    title = "No dated notes found"


class UnsupportedValueTypeError(HeatmapError):
    title = "Unsupported property type"


def compute_heatmap(
    records: list[RawRecord],
    view_config: HeatmapViewConfig,
    color_schemes: list[ColorSchemeItem],
    is_dark: bool,
    today: pendulum.Date,
) -> HeatmapLayout:
    """
    Run one full layout pass over a snapshot of records.

    The dataset-level checks run before any cell is built, in this order:
    missing value property, no records, no dated records, unsupported
    value type. Each raises its own HeatmapError subclass.
    """
    value_property = view_config["value_property"]
    date_property = view_config["date_property"]

    if not value_property:
        raise MissingValuePropertyError(
            "Select a property to visualize with --value or in the configuration."
        )

    if not records:
        raise EmptyDatasetError("No records found in the data source.")

    dated_records = extract_records(records, date_property, value_property)
    if all(record["date"] is None for record in dated_records):
        raise NoDatedEntriesError(
            "No records with valid dates were found. Check the date property setting."
        )

    if detect_value_type(records, value_property, date_property) == "unsupported":
        raise UnsupportedValueTypeError(
            f"{value_property!r} is not a boolean or number property. "
            "Heatmaps require boolean or number properties."
        )

    dataset = apply_stat_overrides(
        process_records(dated_records),
        view_config["min_value"],
        view_config["max_value"],
    )

    date_range = resolve_date_range(
        dataset["entries"].keys(),
        view_config["start_date"],
        view_config["end_date"],
        today,
    )

    week_start = view_config["week_start"]
    orientation = view_config["orientation"]
    scheme = get_scheme_definition(
        find_color_scheme(color_schemes, view_config["color_scheme"])
    )

    if orientation == "vertical":
        month_labels = generate_vertical_month_labels(
            date_range["start"], date_range["end"], week_start
        )
    else:
        month_labels = generate_month_labels(
            date_range["start"], date_range["end"], week_start
        )

    cells = build_cells(dataset, date_range, week_start, orientation, scheme, is_dark)
    logger.debug(
        f"Built {len(cells)} cells from {len(dataset['entries'])} entries "
        f"(min={dataset['stats']['min']}, max={dataset['stats']['max']})"
    )

    return {
        "dataset": dataset,
        "date_range": date_range,
        "week_start": week_start,
        "orientation": orientation,
        "total_weeks": get_total_weeks(date_range, week_start),
        "cells": cells,
        "month_labels": month_labels,
        "weekday_labels": get_weekday_labels(week_start),
        "scheme": scheme,
        "is_dark": is_dark,
    }
