# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from heatgrid.model.entry import Entry


class DatasetStats(TypedDict):
    min: float
    max: float
    count: int  # entries with a non-null value
    has_numeric: bool  # False if every value is 0 or 1


class ProcessedDataset(TypedDict):
    entries: dict[pendulum.Date, Entry]
    stats: DatasetStats
    skipped: int  # records dropped for lack of a date
