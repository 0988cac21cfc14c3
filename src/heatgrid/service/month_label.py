# SPDX-License-Identifier: MIT

import pendulum

from heatgrid.model.month_label import MonthLabelSpan
from heatgrid.service.grid import get_week_number
from heatgrid.time import MONTH_NAMES, WeekStart, generate_date_range


def _months_by_week(
    range_start: pendulum.Date, range_end: pendulum.Date, week_start: WeekStart
) -> dict[int, set[int]]:
    weeks: dict[int, set[int]] = {}
    for date in generate_date_range(range_start, range_end):
        week = get_week_number(date, range_start, week_start)
        weeks.setdefault(week, set()).add(date.month)
    return weeks


def generate_month_labels(
    range_start: pendulum.Date, range_end: pendulum.Date, week_start: WeekStart
) -> list[MonthLabelSpan]:
    """
    Group weeks into month label spans.

    A week that straddles two months is labelled with the later one, so
    each label begins at the week in which its month starts. A span ends
    (exclusive) where the next one begins; the last ends at total weeks + 1.
    """
    if range_start > range_end:
        return []

    months_by_week = _months_by_week(range_start, range_end, week_start)
    total_weeks = get_week_number(range_end, range_start, week_start)

    labels: list[MonthLabelSpan] = []
    current_month = -1

    for week in range(1, total_weeks + 1):
        months_in_week = months_by_week.get(week)
        if not months_in_week:
            continue

        primary_month = max(months_in_week)
        if primary_month != current_month:
            if labels:
                labels[-1]["end_index"] = week
            labels.append(
                {
                    "name": MONTH_NAMES[primary_month - 1],
                    "start_index": week,
                    "end_index": total_weeks + 1,
                }
            )
            current_month = primary_month

    return labels


def generate_vertical_month_labels(
    range_start: pendulum.Date, range_end: pendulum.Date, week_start: WeekStart
) -> list[MonthLabelSpan]:
    """Month label spans for a vertical grid, where indices are rows."""
    return generate_month_labels(range_start, range_end, week_start)
