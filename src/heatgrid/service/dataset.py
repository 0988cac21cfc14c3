# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Iterable, Optional

import pendulum
from loguru import logger

from heatgrid.model.dataset import DatasetStats, ProcessedDataset
from heatgrid.model.entry import Entry
from heatgrid.model.record import DatedRecord


def process_records(records: Iterable[DatedRecord]) -> ProcessedDataset:
    """
    Fold dated records into one entry per calendar date plus aggregate stats.

    - Records without a date are dropped and counted in "skipped".
    - Unsupported values keep their slot with value None.
    - On duplicate dates the higher non-null value wins, a non-null value
      beats a null one, and of two nulls the first is kept.
    - Stats cover the retained non-null values. With no values the bounds
      are 0..1; a single distinct positive value gets a minimum of 0.
    """
    entries: dict[pendulum.Date, Entry] = {}
    skipped = 0
    total = 0

    for record in records:
        total += 1
        date = record["date"]
        if date is None:
            skipped += 1
            continue

        extracted = record["value"]
        value = extracted["value"] if extracted["kind"] != "unsupported" else None
        entry: Entry = {
            "date": date,
            "value": value,
            "source": record["source"],
            "display_text": extracted["display_text"],
        }

        existing = entries.get(date)
        if existing is None:
            entries[date] = entry
        elif value is not None and (
            existing["value"] is None or value > existing["value"]
        ):
            entries[date] = entry

    if skipped > 0:
        logger.warning(
            f"{skipped} of {total} records skipped due to missing or invalid dates "
            f"({len(entries)} dated entries kept)"
        )

    return {
        "entries": entries,
        "stats": calculate_stats(entries.values()),
        "skipped": skipped,
    }


def calculate_stats(entries: Iterable[Entry]) -> DatasetStats:
    values = [entry["value"] for entry in entries if entry["value"] is not None]

    if not values:
        return {"min": 0, "max": 1, "count": 0, "has_numeric": False}

    min_value = min(values)
    max_value = max(values)
    if min_value == max_value and min_value > 0:
        # A lone positive value is scaled against an implied zero baseline
        min_value = 0

    return {
        "min": min_value,
        "max": max_value,
        "count": len(values),
        "has_numeric": any(value not in (0, 1) for value in values),
    }


def apply_stat_overrides(
    dataset: ProcessedDataset,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
) -> ProcessedDataset:
    """Return a copy of the dataset with user-supplied intensity bounds."""
    overridden = deepcopy(dataset)
    stats = overridden["stats"]

    new_min = stats["min"] if min_value is None else min_value
    new_max = stats["max"] if max_value is None else max_value
    if new_min > new_max:
        logger.warning(
            f"Ignoring min/max override {new_min}..{new_max}: minimum exceeds maximum"
        )
        return overridden

    stats["min"] = new_min
    stats["max"] = new_max
    return overridden
