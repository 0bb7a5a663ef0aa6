"""config: inspect and update ~/.agelum/config.json."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from agelum.commands._base import AgelumGroup

if TYPE_CHECKING:
    from agelum.commands._context import AppContext


@click.group(
    cls=AgelumGroup,
    examples="""\
  agelum config show
  agelum config set-root ~/code""",
)
def config() -> None:
    """Show or change the persisted fallback root."""


@config.command()
@click.pass_obj
def show(app: AppContext) -> None:
    """Show the config file, rootGitDirectory, and the resolved root."""
    from agelum.services.repositories import RepositoryService

    app.emit_call("config_show", lambda: RepositoryService(app.workspace).show_config())


@config.command("set-root")
@click.argument("directory", type=click.Path(file_okay=False, path_type=Path))
@click.pass_obj
def set_root(app: AppContext, directory: Path) -> None:
    """Persist DIRECTORY as the fallback repository root."""
    from agelum.services.repositories import RepositoryService

    app.emit_call(
        "config_set_root", lambda: RepositoryService(app.workspace).set_root(directory)
    )
