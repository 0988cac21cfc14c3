# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from heatgrid.log import configure_logging
from heatgrid.terminal import configuration, scheme
from heatgrid.terminal.custom_typer import HeatgridGroup
from heatgrid.terminal.render import render
from heatgrid.view import state as view_state

app = typer.Typer(
    cls=HeatgridGroup,
    help="Heatgrid - Calendar heatmaps of dated records in the CLI",
    no_args_is_help=True,
)
app.command(name="render, r")(render)
app.add_typer(scheme.app, name="scheme, s", help="Manage color schemes")
app.add_typer(configuration.app, name="config, c", help="View and change settings")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            help="Log debug output to stderr",
        ),
    ] = False,
) -> None:
    """
    Heatgrid - Calendar heatmaps of dated records in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if verbose:
        configure_logging(verbose=True)


def run() -> None:
    app()
