# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.table import Table

from heatgrid import configuration
from heatgrid.configuration import Configuration


def _enabled(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"


def _optional(value: Optional[object]) -> str:
    return "auto" if value is None else str(value)


def configuration_view(config: Configuration, title: Optional[str] = None) -> None:
    """Display configuration settings and render defaults."""
    view = config["view"]

    console = Console()
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("show_header", _enabled(config["show_header"]))
    table.add_row("show_legend", _enabled(config["show_legend"]))
    table.add_row("date_property", view["date_property"])
    table.add_row("value_property", view["value_property"] or "None")
    table.add_row("start_date", _optional(view["start_date"]))
    table.add_row("end_date", view["end_date"] or "today")
    table.add_row("color_scheme", view["color_scheme"])
    table.add_row("week_start", "Monday" if view["week_start"] == 1 else "Sunday")
    table.add_row("show_weekday_labels", _enabled(view["show_weekday_labels"]))
    table.add_row("show_month_labels", _enabled(view["show_month_labels"]))
    table.add_row("min_value", _optional(view["min_value"]))
    table.add_row("max_value", _optional(view["max_value"]))
    table.add_row("orientation", view["orientation"])
    table.add_row("theme", view["theme"])
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)
