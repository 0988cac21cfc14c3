# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

from heatgrid.model.cell import Orientation
from heatgrid.time import WeekStart

Theme = Literal["dark", "light"]


class HeatmapViewConfig(TypedDict):
    date_property: str  # property name or "__filename__"
    value_property: str
    start_date: Optional[str]  # YYYY-MM-DD or None for auto
    end_date: Optional[str]  # YYYY-MM-DD or None for today
    color_scheme: str  # scheme id
    week_start: WeekStart
    show_weekday_labels: bool
    show_month_labels: bool
    min_value: Optional[float]  # overrides the computed minimum
    max_value: Optional[float]  # overrides the computed maximum
    orientation: Orientation
    theme: Theme
