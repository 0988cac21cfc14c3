# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.padding import Padding

from heatgrid.view.state import get_show_header


def header(console: Console, sub_header: Optional[str] = None) -> None:
    """Print the application header.

    Args:
        console: Console to print to
        sub_header: Optional sub-header text to display
    """
    if not get_show_header():
        return

    console.print(Padding("[dark_orange]heatgrid[/dark_orange]", (1, 0, 0, 1)))
    if sub_header is not None:
        console.print(Padding(f"[sandy_brown]{sub_header}[/sandy_brown]", (0, 1)))
