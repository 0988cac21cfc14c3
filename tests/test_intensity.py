# SPDX-License-Identifier: MIT

import pytest

from heatgrid.service.intensity import (
    calculate_entry_intensity,
    calculate_intensity_boolean,
    calculate_intensity_numeric,
)


class TestNumericIntensity:
    def test_bounds_map_to_zero_and_one(self):
        assert calculate_intensity_numeric(2, 2, 12) == 0.0
        assert calculate_intensity_numeric(12, 2, 12) == 1.0

    def test_linear_between_bounds(self):
        assert calculate_intensity_numeric(7, 2, 12) == pytest.approx(0.5)

    def test_out_of_range_is_clamped(self):
        assert calculate_intensity_numeric(-5, 0, 10) == 0.0
        assert calculate_intensity_numeric(50, 0, 10) == 1.0

    @pytest.mark.parametrize("value", [-100, 0, 3, 1e9])
    def test_degenerate_range_is_full_intensity(self, value):
        assert calculate_intensity_numeric(value, 3, 3) == 1.0

    def test_monotonic(self):
        values = [calculate_intensity_numeric(v / 4, 0, 10) for v in range(-8, 48)]
        assert values == sorted(values)

    def test_nan_is_zero(self):
        assert calculate_intensity_numeric(float("nan"), 0, 10) == 0.0


class TestBooleanIntensity:
    def test_boolean(self):
        assert calculate_intensity_boolean(True) == 1.0
        assert calculate_intensity_boolean(False) == 0.0


class TestEntryIntensity:
    def test_numeric_mode_uses_stats(self):
        stats = {"min": 0, "max": 8, "count": 3, "has_numeric": True}
        assert calculate_entry_intensity(2, stats) == pytest.approx(0.25)

    def test_boolean_mode(self):
        stats = {"min": 0, "max": 1, "count": 2, "has_numeric": False}
        assert calculate_entry_intensity(1, stats) == 1.0
        assert calculate_entry_intensity(0, stats) == 0.0
