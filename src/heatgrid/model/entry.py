# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict, Union

import pendulum


class Entry(TypedDict):
    date: pendulum.Date
    value: Optional[float]  # None = record exists but carries nothing to plot
    source: str  # opaque reference to the originating record
    display_text: str


class EmptyCell(TypedDict):
    type: Literal["empty"]


class ZeroCell(TypedDict):
    type: Literal["zero"]
    source: str


class FilledCell(TypedDict):
    type: Literal["filled"]
    source: str
    intensity: float  # 0-1


CellState = Union[EmptyCell, ZeroCell, FilledCell]
