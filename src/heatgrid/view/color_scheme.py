# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from heatgrid.model.color_scheme import ColorSchemeItem
from heatgrid.service.color_scheme import color_for_intensity, get_scheme_definition
from heatgrid.view.header import header

SWATCH_STEPS = [0.0, 0.2, 0.4, 0.6, 0.8, 1.0]


def build_swatch(scheme: ColorSchemeItem, is_dark: bool) -> Text:
    definition = get_scheme_definition(scheme)
    swatch = Text()
    for step in SWATCH_STEPS:
        swatch.append("██", style=color_for_intensity(step, definition, is_dark))
    return swatch


def color_schemes_view(schemes: list[ColorSchemeItem], active_scheme_id: str) -> None:
    """Display the configured color schemes with dark and light swatches."""
    console = Console()
    header(console, "color schemes")

    table = Table(box=box.SIMPLE)
    table.add_column("id")
    table.add_column("name")
    table.add_column("zero")
    table.add_column("max")
    table.add_column("dark")
    table.add_column("light")

    for scheme in schemes:
        scheme_id = scheme["id"]
        if scheme_id == active_scheme_id:
            scheme_id = f"{scheme_id} *"
        if scheme.get("is_default", False):
            scheme_id = f"[dim]{scheme_id}[/dim]"
        table.add_row(
            scheme_id,
            scheme["name"],
            scheme["zero_color"],
            scheme["max_color"],
            build_swatch(scheme, True),
            build_swatch(scheme, False),
        )

    console.print(table)


def color_scheme_preview_view(scheme: ColorSchemeItem) -> None:
    """Display the derived theme variants of one scheme."""
    definition = get_scheme_definition(scheme)
    console = Console()
    header(console, f"color scheme: {scheme['name']}")

    table = Table(box=box.SIMPLE)
    table.add_column("theme")
    table.add_column("zero")
    table.add_column("max")
    table.add_column("gradient")

    for theme, is_dark in (("dark", True), ("light", False)):
        colors = definition[theme]  # type: ignore[literal-required]
        table.add_row(
            theme,
            Text(colors["zero"], style=colors["zero"]),
            Text(colors["max"], style=colors["max"]),
            build_swatch(scheme, is_dark),
        )

    console.print(table)
