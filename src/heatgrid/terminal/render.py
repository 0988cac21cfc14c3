# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from heatgrid import time
from heatgrid.configuration import ConfigurationError
from heatgrid.model.view_config import HeatmapViewConfig
from heatgrid.repository.configuration import CONFIGURATION_REPO
from heatgrid.repository.record import RecordFileError, RecordRepository
from heatgrid.service.heatmap import HeatmapError, compute_heatmap
from heatgrid.view.heatmap import empty_state_view, heatmap_details_view, heatmap_view


def build_view_config(
    defaults: HeatmapViewConfig,
    value_property: Optional[str] = None,
    date_property: Optional[str] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    color_scheme: Optional[str] = None,
    week_start: Optional[int] = None,
    vertical: Optional[bool] = None,
    theme: Optional[str] = None,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
    hide_weekday_labels: bool = False,
    hide_month_labels: bool = False,
) -> HeatmapViewConfig:
    """Layer command line options over the configured view defaults."""
    view_config: HeatmapViewConfig = {**defaults}

    if week_start is not None and week_start not in (0, 1):
        raise typer.BadParameter(
            f"Week start must be 0 (Sunday) or 1 (Monday), got {week_start}"
        )
    if theme is not None and theme not in ("dark", "light"):
        raise typer.BadParameter(f"Theme must be 'dark' or 'light', got {theme!r}")

    if value_property is not None:
        view_config["value_property"] = value_property
    if date_property is not None:
        view_config["date_property"] = date_property
    if start_date is not None:
        view_config["start_date"] = start_date
    if end_date is not None:
        view_config["end_date"] = end_date
    if color_scheme is not None:
        view_config["color_scheme"] = color_scheme
    if week_start is not None:
        view_config["week_start"] = week_start  # type: ignore[typeddict-item]
    if vertical is not None:
        view_config["orientation"] = "vertical" if vertical else "horizontal"
    if theme is not None:
        view_config["theme"] = theme  # type: ignore[typeddict-item]
    if min_value is not None:
        view_config["min_value"] = min_value
    if max_value is not None:
        view_config["max_value"] = max_value
    if hide_weekday_labels:
        view_config["show_weekday_labels"] = False
    if hide_month_labels:
        view_config["show_month_labels"] = False

    return view_config


def render(
    records_file: Annotated[
        Path,
        typer.Argument(help="YAML file with the records to plot"),
    ],
    value_property: Annotated[
        Optional[str],
        typer.Option("--value", "-v", help="property to visualize"),
    ] = None,
    date_property: Annotated[
        Optional[str],
        typer.Option(
            "--date",
            "-d",
            help="property holding the date, or __filename__ for daily notes",
        ),
    ] = None,
    start_date: Annotated[
        Optional[str],
        typer.Option("--start", help="YYYY-MM-DD, earliest record by default"),
    ] = None,
    end_date: Annotated[
        Optional[str],
        typer.Option("--end", help="YYYY-MM-DD, today by default"),
    ] = None,
    color_scheme: Annotated[
        Optional[str],
        typer.Option("--scheme", "-s", help="color scheme id"),
    ] = None,
    week_start: Annotated[
        Optional[int],
        typer.Option("--week-start", "-w", help="0 = Sunday, 1 = Monday"),
    ] = None,
    vertical: Annotated[
        Optional[bool],
        typer.Option("--vertical/--horizontal", help="grid orientation"),
    ] = None,
    theme: Annotated[
        Optional[str],
        typer.Option("--theme", "-t", help="dark or light"),
    ] = None,
    min_value: Annotated[
        Optional[float],
        typer.Option("--min", help="value rendered at zero intensity"),
    ] = None,
    max_value: Annotated[
        Optional[float],
        typer.Option("--max", help="value rendered at full intensity"),
    ] = None,
    hide_weekday_labels: Annotated[
        bool, typer.Option("--no-weekday-labels", "-nw")
    ] = False,
    hide_month_labels: Annotated[bool, typer.Option("--no-month-labels", "-nm")] = False,
    legend: Annotated[
        Optional[bool],
        typer.Option("--legend/--no-legend"),
    ] = None,
    details: Annotated[
        bool,
        typer.Option("--details", "-dt", help="list every day that has a record"),
    ] = False,
    show_hex: Annotated[
        bool,
        typer.Option("--hex", help="include cell colors in the details list"),
    ] = False,
) -> None:
    """Render a calendar heatmap of a records file."""
    try:
        config = CONFIGURATION_REPO.get_config()
        color_schemes = CONFIGURATION_REPO.get_color_schemes()
    except ConfigurationError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    view_config = build_view_config(
        config["view"],
        value_property=value_property,
        date_property=date_property,
        start_date=start_date,
        end_date=end_date,
        color_scheme=color_scheme,
        week_start=week_start,
        vertical=vertical,
        theme=theme,
        min_value=min_value,
        max_value=max_value,
        hide_weekday_labels=hide_weekday_labels,
        hide_month_labels=hide_month_labels,
    )

    try:
        records = RecordRepository(records_file).get_records()
    except RecordFileError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    try:
        layout = compute_heatmap(
            records,
            view_config,
            color_schemes,
            is_dark=view_config["theme"] == "dark",
            today=time.today(),
        )
    except HeatmapError as e:
        empty_state_view(e.title, e.description)
        raise typer.Exit(1)

    heatmap_view(
        layout,
        title=f"{records_file.name}: {view_config['value_property']}",
        show_weekday_labels=view_config["show_weekday_labels"],
        show_month_labels=view_config["show_month_labels"],
        show_legend=config["show_legend"] if legend is None else legend,
    )

    if details:
        heatmap_details_view(layout, show_hex_color=show_hex)
