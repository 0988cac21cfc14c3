# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from heatgrid.model.cell import CellData
from heatgrid.model.color_scheme import ColorSchemeDefinition
from heatgrid.model.entry import Entry
from heatgrid.model.heatmap import HeatmapLayout
from heatgrid.model.month_label import MonthLabelSpan
from heatgrid.service.color_scheme import color_for_intensity
from heatgrid.time import (
    calendar_date_to_display_str,
    calendar_date_to_str,
)
from heatgrid.view.header import header

HORIZONTAL_CELL_WIDTH = 2
VERTICAL_CELL_WIDTH = 4
LABEL_COLUMN_WIDTH = 4

FILLED_SYMBOL = "■"
ZERO_SYMBOL = "□"
EMPTY_SYMBOL = "·"

LEGEND_STEPS = [0.0, 0.25, 0.5, 0.75, 1.0]


def get_cell_symbol(cell: Optional[CellData]) -> tuple[str, str]:
    """
    Get the symbol and style for a grid cell.

    Args:
        cell: The cell, or None for a grid position outside the date range

    Returns:
        Tuple of (symbol, style)
    """
    if cell is None:
        return (" ", "")

    state = cell["state"]
    if state["type"] == "filled":
        return (FILLED_SYMBOL, cell["color"] or "")
    elif state["type"] == "zero":
        return (ZERO_SYMBOL, "dim")
    else:
        return (EMPTY_SYMBOL, "dim")


def describe_cell(cell: CellData, entries: dict[pendulum.Date, Entry]) -> str:
    """Text shown for a cell, e.g. 'Mon, Jan 15, 2024: 5'."""
    entry = entries.get(cell["date"])
    display_value = entry["display_text"] if entry is not None else "No note"
    return f"{calendar_date_to_display_str(cell['date'])}: {display_value}"


def build_month_label_row(
    month_labels: list[MonthLabelSpan],
    total_weeks: int,
    left_column_width: int,
) -> Text:
    """
    Month names placed above the week columns they start at.

    A name wider than its span runs on into the following columns; a label
    that would collide with it starts one space after it instead.
    """
    chars = [" "] * (total_weeks * HORIZONTAL_CELL_WIDTH)
    cursor = 0
    for label in month_labels:
        offset = max((label["start_index"] - 1) * HORIZONTAL_CELL_WIDTH, cursor)
        end = offset + len(label["name"])
        if end > len(chars):
            chars.extend([" "] * (end - len(chars)))
        chars[offset:end] = label["name"]
        cursor = end + 1

    row = Text(" " * left_column_width)
    row.append("".join(chars).rstrip(), style="bold")
    return row


def build_horizontal_rows(
    layout: HeatmapLayout,
    show_weekday_labels: bool,
    show_month_labels: bool,
) -> list[Text]:
    """Weekdays as rows and weeks as columns."""
    cells_by_position = {(cell["row"], cell["column"]): cell for cell in layout["cells"]}
    left_column_width = LABEL_COLUMN_WIDTH if show_weekday_labels else 0
    # Only every other weekday is labelled: Mon, Wed, Fri
    labelled_days = [0, 2, 4] if layout["week_start"] == 1 else [1, 3, 5]

    rows: list[Text] = []
    if show_month_labels:
        rows.append(
            build_month_label_row(
                layout["month_labels"], layout["total_weeks"], left_column_width
            )
        )

    for day_index in range(7):
        row = Text()
        if show_weekday_labels:
            label = layout["weekday_labels"][day_index] if day_index in labelled_days else ""
            row.append(label.ljust(left_column_width), style="dim")

        for week in range(1, layout["total_weeks"] + 1):
            symbol, style = get_cell_symbol(cells_by_position.get((day_index + 1, week)))
            if style:
                row.append(symbol, style=style)
            else:
                row.append(symbol)
            row.append(" " * (HORIZONTAL_CELL_WIDTH - 1))

        rows.append(row)

    return rows


def build_vertical_rows(
    layout: HeatmapLayout,
    show_weekday_labels: bool,
    show_month_labels: bool,
) -> list[Text]:
    """Weeks as rows and weekdays as columns, month names on the left."""
    cells_by_position = {(cell["row"], cell["column"]): cell for cell in layout["cells"]}
    left_column_width = LABEL_COLUMN_WIDTH if show_month_labels else 0
    label_starts = {label["start_index"]: label["name"] for label in layout["month_labels"]}

    rows: list[Text] = []
    if show_weekday_labels:
        weekday_row = Text(" " * left_column_width)
        for label in layout["weekday_labels"]:
            weekday_row.append(label.ljust(VERTICAL_CELL_WIDTH), style="dim")
        rows.append(weekday_row)

    for week in range(1, layout["total_weeks"] + 1):
        row = Text()
        if show_month_labels:
            row.append(label_starts.get(week, "").ljust(left_column_width), style="bold")

        for day in range(1, 8):
            symbol, style = get_cell_symbol(cells_by_position.get((week, day)))
            if style:
                row.append(symbol, style=style)
            else:
                row.append(symbol)
            row.append(" " * (VERTICAL_CELL_WIDTH - 1))

        rows.append(row)

    return rows


def build_legend(scheme: ColorSchemeDefinition, is_dark: bool) -> Text:
    legend = Text("Less ", style="dim")
    for step in LEGEND_STEPS:
        legend.append(FILLED_SYMBOL, style=color_for_intensity(step, scheme, is_dark))
        legend.append(" ")
    legend.append("More", style="dim")
    return legend


def heatmap_view(
    layout: HeatmapLayout,
    title: Optional[str] = None,
    show_weekday_labels: bool = True,
    show_month_labels: bool = True,
    show_legend: bool = True,
) -> None:
    """Display the heatmap grid."""
    console = Console()
    header(console, title)

    if layout["orientation"] == "vertical":
        rows = build_vertical_rows(layout, show_weekday_labels, show_month_labels)
    else:
        rows = build_horizontal_rows(layout, show_weekday_labels, show_month_labels)

    console.print()
    for row in rows:
        console.print(row, overflow="ignore", no_wrap=True, crop=False)

    stats = layout["dataset"]["stats"]
    date_range = layout["date_range"]
    summary = Text(
        f"{calendar_date_to_str(date_range['start'])} .. "
        f"{calendar_date_to_str(date_range['end'])}   "
        f"{stats['count']} values",
        style="dim",
    )
    if stats["has_numeric"]:
        summary.append(f"   scale {stats['min']} .. {stats['max']}", style="dim")

    console.print()
    console.print(summary)
    if show_legend:
        console.print(build_legend(layout["scheme"], layout["is_dark"]))


def heatmap_details_view(layout: HeatmapLayout, show_hex_color: bool = False) -> None:
    """Display one row per cell that has a record."""
    entries = layout["dataset"]["entries"]

    table = Table(box=box.SIMPLE)
    table.add_column("")
    table.add_column("day")
    table.add_column("intensity")
    if show_hex_color:
        table.add_column("color")
    table.add_column("source")

    for cell in layout["cells"]:
        state = cell["state"]
        if state["type"] == "empty":
            continue

        intensity = f"{state['intensity']:.2f}" if state["type"] == "filled" else ""
        symbol, style = get_cell_symbol(cell)
        row = [
            Text(symbol, style=style),
            Text(describe_cell(cell, entries)),
            Text(intensity),
        ]
        if show_hex_color:
            row.append(Text(cell["color"] or ""))
        row.append(Text(state["source"]))
        table.add_row(*row)

    console = Console()
    console.print(table)


def empty_state_view(title: str, description: str) -> None:
    console = Console()
    console.print(
        Panel(
            f"[bold]⚠ {title}[/bold]\n{description}",
            box=box.ROUNDED,
            expand=False,
        )
    )
