# SPDX-License-Identifier: MIT

from typing import NotRequired, TypedDict


class ThemeColors(TypedDict):
    zero: str
    max: str


class ColorSchemeDefinition(TypedDict):
    dark: ThemeColors
    light: ThemeColors


class ColorSchemeItem(TypedDict):
    id: str  # e.g. "green", "my-custom"
    name: str
    zero_color: str
    max_color: str
    is_default: NotRequired[bool]
