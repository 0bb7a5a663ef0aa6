"""Command: list repositories under the configured root directory."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from agelum.commands._base import AgelumCommand

if TYPE_CHECKING:
    from agelum.commands._context import AppContext


@click.command(
    cls=AgelumCommand,
    examples="""\
  agelum repos
  agelum --root-hint ~/code repos""",
)
@click.pass_obj
def repos(app: AppContext) -> None:
    """List repositories (visible subdirectories) under rootGitDirectory."""
    from agelum.services.repositories import RepositoryService

    app.emit_call("repos", lambda: RepositoryService(app.workspace).list_repositories())
