# SPDX-License-Identifier: MIT

from typing import Optional

from loguru import logger

from heatgrid.color import (
    DARK_BACKGROUND,
    LIGHT_BACKGROUND,
    interpolate_color,
    normalize_hex,
    relative_luminance,
)
from heatgrid.model.color_scheme import ColorSchemeDefinition, ColorSchemeItem
from heatgrid.template.color_scheme import DEFAULT_COLOR_SCHEMES

DARK_ZERO_MAX_LUMINANCE = 0.15
LIGHT_ZERO_MIN_LUMINANCE = 0.85
THEME_BLEND_FACTOR = 0.7


def _is_within_theme_band(color: str, is_dark: bool) -> bool:
    luminance = relative_luminance(color)
    if is_dark:
        return luminance <= DARK_ZERO_MAX_LUMINANCE
    return luminance >= LIGHT_ZERO_MIN_LUMINANCE


def adjust_zero_color_for_theme(color: str, is_dark: bool) -> str:
    """
    Pull a zero color toward the theme background when it is out of band.

    Dark themes want a zero color with luminance <= 0.15, light themes one
    with luminance >= 0.85. An out-of-band color is blended 70% of the way
    toward the canonical background once; in-band colors are returned
    unchanged.
    """
    normalized = normalize_hex(color)
    if _is_within_theme_band(normalized, is_dark):
        return normalized
    background = DARK_BACKGROUND if is_dark else LIGHT_BACKGROUND
    return interpolate_color(normalized, background, THEME_BLEND_FACTOR)


def build_scheme(zero_color: str, max_color: str) -> ColorSchemeDefinition:
    """Build dark and light variants sharing one max color."""
    zero = normalize_hex(zero_color)
    max_ = normalize_hex(max_color)
    return {
        "dark": {"zero": adjust_zero_color_for_theme(zero, True), "max": max_},
        "light": {"zero": adjust_zero_color_for_theme(zero, False), "max": max_},
    }


def get_scheme_definition(scheme: ColorSchemeItem) -> ColorSchemeDefinition:
    return build_scheme(scheme["zero_color"], scheme["max_color"])


def find_color_scheme(
    schemes: list[ColorSchemeItem], scheme_id: Optional[str]
) -> ColorSchemeItem:
    """Look up a scheme by id, falling back to the first available scheme."""
    for scheme in schemes:
        if scheme["id"] == scheme_id:
            return scheme

    fallback = schemes[0] if schemes else DEFAULT_COLOR_SCHEMES[0]
    logger.warning(
        f"Unknown color scheme {scheme_id!r}, using {fallback['id']!r} instead"
    )
    return fallback


def color_for_intensity(
    intensity: float, scheme: ColorSchemeDefinition, is_dark: bool
) -> str:
    """
    Get the color for an intensity under the active theme variant.

    Intensities at or below zero return the zero color itself, without a
    round trip through Oklab.
    """
    colors = scheme["dark"] if is_dark else scheme["light"]
    if intensity <= 0:
        return colors["zero"]
    return interpolate_color(colors["zero"], colors["max"], min(1.0, intensity))
