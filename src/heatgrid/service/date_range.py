# SPDX-License-Identifier: MIT

from typing import Iterable, Optional

import pendulum
from loguru import logger

from heatgrid.model.date_range import DateRange
from heatgrid.time import calendar_date, calendar_date_from_str_optional


def _parse_explicit_date(text: Optional[str], label: str) -> Optional[pendulum.Date]:
    if text is None or text.strip() == "":
        return None
    parsed = calendar_date_from_str_optional(text)
    if parsed is None:
        logger.warning(f"Ignoring unparseable {label} date {text!r}, using default")
    return parsed


def resolve_date_range(
    entry_dates: Iterable[pendulum.Date],
    start_date: Optional[str],
    end_date: Optional[str],
    today: pendulum.Date,
) -> DateRange:
    """
    Resolve the visualized range.

    The end is the explicit end date, else today. The start is the explicit
    start date, else the earliest entry date, else January 1 of the end's
    year. Explicit dates that fail to parse fall back to these defaults
    rather than raising. A start after the end is returned as given.
    """
    end = _parse_explicit_date(end_date, "end")
    if end is None:
        end = today

    start = _parse_explicit_date(start_date, "start")
    if start is None:
        start = min(entry_dates, default=None)
    if start is None:
        start = calendar_date(end.year, 1, 1)

    if start > end:
        logger.warning(f"Start date {start} is after end date {end}; range is empty")

    logger.debug(f"Resolved date range {start} .. {end}")
    return {"start": start, "end": end}
