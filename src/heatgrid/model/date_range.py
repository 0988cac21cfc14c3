# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class DateRange(TypedDict):
    start: pendulum.Date
    end: pendulum.Date  # inclusive
