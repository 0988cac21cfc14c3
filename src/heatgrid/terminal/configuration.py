# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console

from heatgrid.repository.configuration import CONFIGURATION_REPO
from heatgrid.terminal.custom_typer import AliasedTyperGroup
from heatgrid.time import calendar_date_from_str_optional
from heatgrid.view.configuration import configuration_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    configuration_view(CONFIGURATION_REPO.get_config())


@app.command("set, s")
def set(
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--no-show-header", help="Print the header"),
    ] = None,
    show_legend: Annotated[
        Optional[bool],
        typer.Option("--show-legend/--no-show-legend", help="Print the legend"),
    ] = None,
    date_property: Annotated[
        Optional[str],
        typer.Option("--date", "-d", help="property name or __filename__"),
    ] = None,
    value_property: Annotated[
        Optional[str],
        typer.Option("--value", "-v", help="property to visualize"),
    ] = None,
    start_date: Annotated[
        Optional[str], typer.Option("--start", help="YYYY-MM-DD")
    ] = None,
    remove_start_date: Annotated[
        bool, typer.Option("--remove-start", help="Start at the earliest record")
    ] = False,
    end_date: Annotated[Optional[str], typer.Option("--end", help="YYYY-MM-DD")] = None,
    remove_end_date: Annotated[
        bool, typer.Option("--remove-end", help="End today")
    ] = False,
    color_scheme: Annotated[
        Optional[str], typer.Option("--scheme", "-s", help="color scheme id")
    ] = None,
    week_start: Annotated[
        Optional[int], typer.Option("--week-start", "-w", help="0 = Sunday, 1 = Monday")
    ] = None,
    show_weekday_labels: Annotated[
        Optional[bool],
        typer.Option("--weekday-labels/--no-weekday-labels"),
    ] = None,
    show_month_labels: Annotated[
        Optional[bool],
        typer.Option("--month-labels/--no-month-labels"),
    ] = None,
    min_value: Annotated[Optional[float], typer.Option("--min")] = None,
    remove_min_value: Annotated[bool, typer.Option("--remove-min")] = False,
    max_value: Annotated[Optional[float], typer.Option("--max")] = None,
    remove_max_value: Annotated[bool, typer.Option("--remove-max")] = False,
    orientation: Annotated[
        Optional[str],
        typer.Option("--orientation", "-o", help="horizontal or vertical"),
    ] = None,
    theme: Annotated[
        Optional[str], typer.Option("--theme", "-t", help="dark or light")
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    for label, value in (("start", start_date), ("end", end_date)):
        if value is not None and calendar_date_from_str_optional(value) is None:
            raise typer.BadParameter(f"The {label} date must be YYYY-MM-DD, got {value!r}")
    if week_start is not None and week_start not in (0, 1):
        raise typer.BadParameter(
            f"Week start must be 0 (Sunday) or 1 (Monday), got {week_start}"
        )
    if orientation is not None and orientation not in ("horizontal", "vertical"):
        raise typer.BadParameter(
            f"Orientation must be 'horizontal' or 'vertical', got {orientation!r}"
        )
    if theme is not None and theme not in ("dark", "light"):
        raise typer.BadParameter(f"Theme must be 'dark' or 'light', got {theme!r}")

    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        show_legend=show_legend,
        date_property=date_property,
        value_property=value_property,
        start_date=start_date,
        remove_start_date=remove_start_date,
        end_date=end_date,
        remove_end_date=remove_end_date,
        color_scheme=color_scheme,
        week_start=week_start,
        show_weekday_labels=show_weekday_labels,
        show_month_labels=show_month_labels,
        min_value=min_value,
        remove_min_value=remove_min_value,
        max_value=max_value,
        remove_max_value=remove_max_value,
        orientation=orientation,
        theme=theme,
    )

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    configuration_view(CONFIGURATION_REPO.get_config(), title="Updated Configuration")
