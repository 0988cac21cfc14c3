# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import TypedDict

import platformdirs

from heatgrid.model.color_scheme import ColorSchemeItem
from heatgrid.model.view_config import HeatmapViewConfig

APP_NAME = "heatgrid"

CONFIG_PATH: Path = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH: Path = CONFIG_PATH / "config.yaml"


class ConfigurationError(Exception):
    """Raised when the configuration file cannot be used."""

    pass


class Configuration(TypedDict):
    show_header: bool
    show_legend: bool
    view: HeatmapViewConfig  # defaults for the render command
    color_schemes: list[ColorSchemeItem]
