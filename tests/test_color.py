# SPDX-License-Identifier: MIT

"""Tests for hex parsing, Oklab conversion and interpolation."""

import pytest

from heatgrid.color import (
    hex_to_rgb,
    interpolate_color,
    is_valid_hex_color,
    normalize_hex,
    relative_luminance,
    rgb_to_hex,
    rgb_to_oklab,
    oklab_to_rgb,
)
from heatgrid.time import InvalidFormatError


class TestHex:
    def test_valid_colors(self):
        assert is_valid_hex_color("#39d353")
        assert is_valid_hex_color("39D353")

    @pytest.mark.parametrize("color", ["#fff", "#12345g", "", "#1234567"])
    def test_invalid_colors(self, color):
        assert not is_valid_hex_color(color)

    def test_normalize(self):
        assert normalize_hex("39D353") == "#39d353"

    def test_hex_to_rgb(self):
        assert hex_to_rgb("#ff8000") == (255, 128, 0)

    def test_hex_to_rgb_rejects_malformed(self):
        with pytest.raises(InvalidFormatError):
            hex_to_rgb("red")

    def test_rgb_to_hex_rounds_and_clamps(self):
        assert rgb_to_hex(0.5, 254.6, 300) == "#01ffff"
        assert rgb_to_hex(-10, 15.49, 16) == "#000f10"

    def test_rgb_hex_round_trip_every_channel_value(self):
        for value in range(256):
            for rgb in (
                (value, 0, 255),
                (255, value, 0),
                (0, 255, value),
                (value, value, value),
            ):
                assert hex_to_rgb(rgb_to_hex(*rgb)) == rgb


class TestOklab:
    def test_white_has_unit_lightness(self):
        lightness, a, b = rgb_to_oklab(255, 255, 255)
        assert lightness == pytest.approx(1.0, abs=1e-4)
        assert a == pytest.approx(0.0, abs=1e-4)
        assert b == pytest.approx(0.0, abs=1e-4)

    @pytest.mark.parametrize("rgb", [(57, 211, 83), (22, 27, 34), (167, 139, 250)])
    def test_conversion_is_reversible(self, rgb):
        assert oklab_to_rgb(*rgb_to_oklab(*rgb)) == rgb


class TestLuminance:
    def test_black_and_white(self):
        assert relative_luminance("#000000") == pytest.approx(0.0, abs=1e-5)
        assert relative_luminance("#ffffff") == pytest.approx(1.0, abs=1e-5)

    def test_dark_background_is_dark(self):
        assert relative_luminance("#161b22") < 0.15


class TestInterpolate:
    def test_endpoints_are_exact(self):
        assert interpolate_color("#161B22", "#39d353", 0) == "#161b22"
        assert interpolate_color("#161b22", "#39D353", 1) == "#39d353"

    def test_self_interpolation_is_identity(self):
        for t in (0.0, 0.3, 0.5, 1.0):
            assert interpolate_color("#a78bfa", "#a78bfa", t) == "#a78bfa"

    def test_t_is_clamped(self):
        assert interpolate_color("#000000", "#ffffff", -1) == "#000000"
        assert interpolate_color("#000000", "#ffffff", 2) == "#ffffff"

    def test_midpoint_is_between_endpoints(self):
        mid = interpolate_color("#000000", "#ffffff", 0.5)
        red, green, blue = hex_to_rgb(mid)
        assert red == green == blue
        assert 0 < red < 255
        assert relative_luminance(mid) < 0.5

    def test_lightness_increases_with_t(self):
        steps = [interpolate_color("#161b22", "#39d353", t / 10) for t in range(11)]
        lightness = [rgb_to_oklab(*hex_to_rgb(color))[0] for color in steps]
        assert lightness == sorted(lightness)
