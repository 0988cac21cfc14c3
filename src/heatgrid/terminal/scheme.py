# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from heatgrid.color import is_valid_hex_color
from heatgrid.model.color_scheme import ColorSchemeItem
from heatgrid.repository.configuration import CONFIGURATION_REPO
from heatgrid.terminal.custom_typer import AliasedTyperGroup
from heatgrid.template.color_scheme import get_color_scheme_template
from heatgrid.view.color_scheme import color_scheme_preview_view, color_schemes_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("list, ls")
def list_schemes() -> None:
    """List the available color schemes."""
    config = CONFIGURATION_REPO.get_config()
    color_schemes_view(config["color_schemes"], config["view"]["color_scheme"])


@app.command("add, a", no_args_is_help=True)
def add(
    scheme_id: Annotated[str, typer.Argument(metavar="ID")],
    zero_color: Annotated[str, typer.Argument(help="hex color for zero values")],
    max_color: Annotated[str, typer.Argument(help="hex color for the maximum")],
    name: Annotated[Optional[str], typer.Option("--name", "-n")] = None,
) -> None:
    """Add or replace a color scheme."""
    for color in (zero_color, max_color):
        if not is_valid_hex_color(color):
            typer.echo(f"Invalid hex color: {color}. Expected a 6-digit value like #39d353")
            raise typer.Exit(1)

    scheme = get_color_scheme_template()
    scheme["id"] = scheme_id
    scheme["name"] = name or scheme_id
    scheme["zero_color"] = zero_color
    scheme["max_color"] = max_color
    CONFIGURATION_REPO.add_color_scheme(scheme)

    color_scheme_preview_view(_get_scheme(scheme_id))


@app.command("remove, rm", no_args_is_help=True)
def remove(scheme_id: Annotated[str, typer.Argument(metavar="ID")]) -> None:
    """Remove a color scheme."""
    if not CONFIGURATION_REPO.remove_color_scheme(scheme_id):
        typer.echo(f"Color scheme not found: {scheme_id}")
        raise typer.Exit(1)
    typer.echo(f"Removed color scheme: {scheme_id}")


@app.command("preview, p", no_args_is_help=True)
def preview(scheme_id: Annotated[str, typer.Argument(metavar="ID")]) -> None:
    """Show the dark and light variants derived from a scheme."""
    color_scheme_preview_view(_get_scheme(scheme_id))


def _get_scheme(scheme_id: str) -> ColorSchemeItem:
    for scheme in CONFIGURATION_REPO.get_color_schemes():
        if scheme["id"] == scheme_id:
            return scheme
    typer.echo(f"Color scheme not found: {scheme_id}")
    raise typer.Exit(1)
