# SPDX-License-Identifier: MIT

import pendulum

from heatgrid.model.cell import CellData, Orientation
from heatgrid.model.color_scheme import ColorSchemeDefinition
from heatgrid.model.dataset import ProcessedDataset
from heatgrid.model.date_range import DateRange
from heatgrid.model.entry import CellState
from heatgrid.service.color_scheme import color_for_intensity
from heatgrid.service.intensity import calculate_entry_intensity
from heatgrid.time import (
    WeekStart,
    day_of_week_index,
    days_between,
    generate_date_range,
)


def get_week_number(
    date: pendulum.Date, range_start: pendulum.Date, week_start: WeekStart
) -> int:
    """
    Range-relative week number of a date; week 1 always holds range_start.

    The count rolls over whenever the date crosses into a new week, measured
    from the start date's own position within its first week.
    """
    offset = days_between(range_start, date) + day_of_week_index(range_start, week_start)
    return offset // 7 + 1


def get_total_weeks(date_range: DateRange, week_start: WeekStart) -> int:
    if date_range["start"] > date_range["end"]:
        return 0
    return get_week_number(date_range["end"], date_range["start"], week_start)


def get_cell_position(
    date: pendulum.Date, range_start: pendulum.Date, week_start: WeekStart
) -> tuple[int, int]:
    """Return (day_index, week_index) for a date within a range."""
    return (
        day_of_week_index(date, week_start),
        get_week_number(date, range_start, week_start),
    )


def orient(day_index: int, week_index: int, orientation: Orientation) -> tuple[int, int]:
    """
    Convert a grid position into 1-based (row, column).

    Horizontal grids put weekdays on rows and weeks on columns; vertical
    grids swap the two.
    """
    if orientation == "vertical":
        return week_index, day_index + 1
    return day_index + 1, week_index


def get_cell_state(date: pendulum.Date, dataset: ProcessedDataset) -> CellState:
    entry = dataset["entries"].get(date)

    if entry is None:
        return {"type": "empty"}

    if entry["value"] is None:
        return {"type": "zero", "source": entry["source"]}

    return {
        "type": "filled",
        "source": entry["source"],
        "intensity": calculate_entry_intensity(entry["value"], dataset["stats"]),
    }


def build_cells(
    dataset: ProcessedDataset,
    date_range: DateRange,
    week_start: WeekStart,
    orientation: Orientation,
    scheme: ColorSchemeDefinition,
    is_dark: bool,
) -> list[CellData]:
    """
    Build one cell per date in the range.

    Returns:
        List of CellData in date order, each with its grid coordinates and,
        for filled cells, the interpolated color
    """
    cells: list[CellData] = []

    for date in generate_date_range(date_range["start"], date_range["end"]):
        day_index, week_index = get_cell_position(date, date_range["start"], week_start)
        row, column = orient(day_index, week_index, orientation)
        state = get_cell_state(date, dataset)

        color = None
        if state["type"] == "filled":
            color = color_for_intensity(state["intensity"], scheme, is_dark)

        cells.append(
            {
                "date": date,
                "state": state,
                "day_index": day_index,
                "week_index": week_index,
                "row": row,
                "column": column,
                "color": color,
            }
        )

    return cells
