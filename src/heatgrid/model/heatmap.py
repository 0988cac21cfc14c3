# SPDX-License-Identifier: MIT

from typing import TypedDict

from heatgrid.model.cell import CellData, Orientation
from heatgrid.model.color_scheme import ColorSchemeDefinition
from heatgrid.model.dataset import ProcessedDataset
from heatgrid.model.date_range import DateRange
from heatgrid.model.month_label import MonthLabelSpan
from heatgrid.time import WeekStart


class HeatmapLayout(TypedDict):
    dataset: ProcessedDataset
    date_range: DateRange
    week_start: WeekStart
    orientation: Orientation
    total_weeks: int
    cells: list[CellData]
    month_labels: list[MonthLabelSpan]
    weekday_labels: list[str]
    scheme: ColorSchemeDefinition
    is_dark: bool
