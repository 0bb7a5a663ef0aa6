"""Subcommand modules for agelum.

register_commands() uses deferred imports so ``agelum --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from agelum.commands.config_cmd import config

    cli.add_command(config)

    # --- Standalone commands ---
    from agelum.commands.documents import create, get, list_cmd, move
    from agelum.commands.repos import repos
    from agelum.commands.serve import serve

    cli.add_command(create)
    cli.add_command(move)
    cli.add_command(get)
    cli.add_command(list_cmd)
    cli.add_command(repos)
    cli.add_command(serve)
