# SPDX-License-Identifier: MIT

import math

from heatgrid.model.dataset import DatasetStats


def calculate_intensity_numeric(
    value: float, min_value: float, max_value: float
) -> float:
    """
    Map a numeric value onto [0, 1] relative to the dataset bounds.

    A degenerate range (min_value == max_value) renders at full intensity.
    """
    if max_value == min_value:
        return 1.0
    if value <= min_value:
        return 0.0
    if value >= max_value:
        return 1.0
    intensity = (value - min_value) / (max_value - min_value)
    if math.isnan(intensity):
        return 0.0
    return max(0.0, min(1.0, intensity))


def calculate_intensity_boolean(value: bool) -> float:
    return 1.0 if value else 0.0


def calculate_entry_intensity(value: float, stats: DatasetStats) -> float:
    """Intensity of a non-null entry value under the dataset's mode."""
    if stats["has_numeric"]:
        return calculate_intensity_numeric(value, stats["min"], stats["max"])
    return calculate_intensity_boolean(value > 0)
