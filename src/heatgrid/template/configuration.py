# SPDX-License-Identifier: MIT

from heatgrid.configuration import Configuration
from heatgrid.model.record import FILENAME_DATE_PROPERTY
from heatgrid.model.view_config import HeatmapViewConfig
from heatgrid.template.color_scheme import get_default_color_schemes


def get_view_config_template() -> HeatmapViewConfig:
    return {
        "date_property": FILENAME_DATE_PROPERTY,
        "value_property": "",
        "start_date": None,
        "end_date": None,
        "color_scheme": "green",
        "week_start": 0,
        "show_weekday_labels": True,
        "show_month_labels": True,
        "min_value": None,
        "max_value": None,
        "orientation": "horizontal",
        "theme": "dark",
    }


def get_configuration_template() -> Configuration:
    return {
        "show_header": True,
        "show_legend": True,
        "view": get_view_config_template(),
        "color_schemes": get_default_color_schemes(),
    }
