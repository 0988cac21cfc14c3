# SPDX-License-Identifier: MIT

import math
import re

from heatgrid.time import InvalidFormatError

HEX_COLOR_PATTERN = re.compile(r"^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$", re.I)

# Canonical backgrounds that theme-adjusted zero colors are pulled toward
DARK_BACKGROUND = "#161b22"
LIGHT_BACKGROUND = "#ebedf0"


def is_valid_hex_color(color: str) -> bool:
    """Accept a 6-digit hex color with or without a leading '#'."""
    return HEX_COLOR_PATTERN.match(color) is not None


def normalize_hex(color: str) -> str:
    """Return the color as lowercase '#rrggbb'."""
    if not is_valid_hex_color(color):
        raise InvalidFormatError(f"Not a 6-digit hex color: {color!r}")
    return "#" + color.lstrip("#").lower()


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    match = HEX_COLOR_PATTERN.match(color)
    if match is None:
        raise InvalidFormatError(f"Not a 6-digit hex color: {color!r}")
    red, green, blue = (int(channel, 16) for channel in match.groups())
    return red, green, blue


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def rgb_to_hex(red: float, green: float, blue: float) -> str:
    channels = [max(0, min(255, _round_half_up(c))) for c in (red, green, blue)]
    return "#" + "".join(f"{channel:02x}" for channel in channels)


def srgb_to_linear(c: float) -> float:
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def linear_to_srgb(c: float) -> float:
    if c <= 0.0031308:
        return c * 12.92
    return 1.055 * c ** (1 / 2.4) - 0.055


def rgb_to_oklab(red: int, green: int, blue: int) -> tuple[float, float, float]:
    """Convert 8-bit sRGB channels to Oklab (L, a, b)."""
    lr = srgb_to_linear(red / 255)
    lg = srgb_to_linear(green / 255)
    lb = srgb_to_linear(blue / 255)

    l = 0.4122214708 * lr + 0.5363325363 * lg + 0.0514459929 * lb  # noqa: E741
    m = 0.2119034982 * lr + 0.6806995451 * lg + 0.1073969566 * lb
    s = 0.0883024619 * lr + 0.2817188376 * lg + 0.6299787005 * lb

    l_ = math.cbrt(l)
    m_ = math.cbrt(m)
    s_ = math.cbrt(s)

    return (
        0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_,
        1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_,
        0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_,
    )


def oklab_to_rgb(
    lightness: float, a: float, b: float
) -> tuple[int, int, int]:
    """Convert Oklab back to 8-bit sRGB channels (not yet clamped)."""
    l_ = lightness + 0.3963377774 * a + 0.2158037573 * b
    m_ = lightness - 0.1055613458 * a - 0.0638541728 * b
    s_ = lightness - 0.0894841775 * a - 1.2914855480 * b

    l = l_ * l_ * l_  # noqa: E741
    m = m_ * m_ * m_
    s = s_ * s_ * s_

    lr = +4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s
    lg = -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s
    lb = -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s

    return (
        _round_half_up(linear_to_srgb(lr) * 255),
        _round_half_up(linear_to_srgb(lg) * 255),
        _round_half_up(linear_to_srgb(lb) * 255),
    )


def relative_luminance(color: str) -> float:
    """WCAG relative luminance of a hex color, in [0, 1]."""
    red, green, blue = hex_to_rgb(color)
    return (
        0.2126 * srgb_to_linear(red / 255)
        + 0.7152 * srgb_to_linear(green / 255)
        + 0.0722 * srgb_to_linear(blue / 255)
    )


def interpolate_color(color_a: str, color_b: str, t: float) -> str:
    """
    Interpolate between two hex colors in Oklab space.

    Args:
        color_a: Starting color, returned unchanged (normalized) at t <= 0
        color_b: Ending color, returned unchanged (normalized) at t >= 1
        t: Interpolation factor, clamped to [0, 1]

    Returns:
        Interpolated color as lowercase '#rrggbb'
    """
    t = max(0.0, min(1.0, t))
    start = normalize_hex(color_a)
    end = normalize_hex(color_b)
    if t == 0 or start == end:
        return start
    if t == 1:
        return end

    lab_a = rgb_to_oklab(*hex_to_rgb(start))
    lab_b = rgb_to_oklab(*hex_to_rgb(end))
    lab = [ca + (cb - ca) * t for ca, cb in zip(lab_a, lab_b)]
    return rgb_to_hex(*oklab_to_rgb(*lab))
