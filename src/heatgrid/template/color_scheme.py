# SPDX-License-Identifier: MIT

from copy import deepcopy

from heatgrid.model.color_scheme import ColorSchemeItem

DEFAULT_COLOR_SCHEMES: list[ColorSchemeItem] = [
    {
        "id": "green",
        "name": "Green",
        "zero_color": "#ebedf0",
        "max_color": "#39d353",
        "is_default": True,
    },
    {
        "id": "purple",
        "name": "Purple",
        "zero_color": "#ebedf0",
        "max_color": "#a78bfa",
        "is_default": True,
    },
    {
        "id": "blue",
        "name": "Blue",
        "zero_color": "#ebedf0",
        "max_color": "#38bdf8",
        "is_default": True,
    },
    {
        "id": "orange",
        "name": "Orange",
        "zero_color": "#ebedf0",
        "max_color": "#fb923c",
        "is_default": True,
    },
    {
        "id": "gray",
        "name": "Gray",
        "zero_color": "#ebedf0",
        "max_color": "#adbac7",
        "is_default": True,
    },
]


def get_default_color_schemes() -> list[ColorSchemeItem]:
    return deepcopy(DEFAULT_COLOR_SCHEMES)


def get_color_scheme_template() -> ColorSchemeItem:
    return {
        "id": "",
        "name": "",
        "zero_color": "#ebedf0",
        "max_color": "#39d353",
        "is_default": False,
    }
