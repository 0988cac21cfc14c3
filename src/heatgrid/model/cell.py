# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum

from heatgrid.model.entry import CellState

Orientation = Literal["horizontal", "vertical"]


class CellData(TypedDict):
    date: pendulum.Date
    state: CellState
    day_index: int  # 0-6, relative to the configured week start
    week_index: int  # 1-based, range relative
    row: int
    column: int
    color: Optional[str]  # None for empty and zero cells
