# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core


class AliasedTyperGroup(typer.core.TyperGroup):
    """TyperGroup that resolves comma-separated command aliases ("render, r")"""

    _CMD_SPLIT_P = re.compile(r" ?, ?")

    # Commands listed first in help output, in this order
    command_order: list[str] = []

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self._group_cmd_name(cmd_name))

    def _group_cmd_name(self, default_name: str) -> str:
        """Find the full command name if default_name is an alias"""
        for cmd in self.commands.values():
            name = cmd.name
            if name and default_name in self._CMD_SPLIT_P.split(name):
                return name
        return default_name

    def list_commands(self, ctx: click.Context) -> list[str]:
        ordered = [name for name in self.command_order if name in self.commands]
        return ordered + [name for name in self.commands if name not in ordered]


class HeatgridGroup(AliasedTyperGroup):
    command_order = [
        "render, r",
        "scheme, s",
        "config, c",
    ]
