# SPDX-License-Identifier: MIT

from typing import TypedDict


class MonthLabelSpan(TypedDict):
    name: str  # "Jan" .. "Dec"
    start_index: int  # week ordinal: column when horizontal, row when vertical
    end_index: int  # exclusive
