"""Document commands: create, move, get, list."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from agelum.commands._base import AgelumCommand
from agelum.domain.types import DocumentType, TaskState

if TYPE_CHECKING:
    from agelum.commands._context import AppContext

_TYPES = click.Choice([t.value for t in DocumentType])
_STATES = click.Choice([s.value for s in TaskState])


@click.command(
    cls=AgelumCommand,
    examples="""\
  # Task in tasks/pending: "03 Fix bug (5).md"
  agelum create task "Fix bug" --priority 3 --story-points 5

  # Straight into doing, with a body
  agelum create task "Ship it" --priority 1 --story-points 2 --state doing \\
      --content "Release checklist"

  # Other types need only a title
  agelum create doc "Architecture overview" --content-file notes.md
  agelum create epic "Billing" --story-points 40""",
)
@click.argument("doc_type", metavar="TYPE", type=_TYPES)
@click.argument("title")
@click.option("--content", default="", help="Markdown body.")
@click.option(
    "--content-file",
    type=click.File("r", encoding="utf-8"),
    default=None,
    help="Read the body from a file ('-' for stdin).",
)
@click.option("--state", type=_STATES, default="pending", show_default=True, help="Task state.")
@click.option("--priority", type=float, default=None, help="Task priority (required for tasks).")
@click.option("--story-points", type=float, default=None, help="Story points.")
@click.option("--file-name", default=None, help="Explicit file name (with or without .md).")
@click.pass_obj
def create(
    app: AppContext,
    doc_type: str,
    title: str,
    content: str,
    content_file: IO[str] | None,
    state: str,
    priority: float | None,
    story_points: float | None,
    file_name: str | None,
) -> None:
    """Create a new document in the agelum tree."""
    from agelum.services.documents import DocumentService

    body = content_file.read() if content_file is not None else content
    app.emit_call(
        "create",
        lambda: DocumentService(app.workspace).create(
            doc_type,
            title,
            content=body,
            state=state,
            priority=priority,
            story_points=story_points,
            file_name=file_name,
        ),
    )


@click.command(
    cls=AgelumCommand,
    examples="""\
  agelum move "Fix bug" --priority 3 --story-points 5 --from pending --to doing
  agelum move --file-name "03 Fix bug (5).md" --from doing --to done""",
)
@click.argument("title", required=False, default="")
@click.option("--from", "from_state", type=_STATES, required=True, help="Current state.")
@click.option("--to", "to_state", type=_STATES, required=True, help="Target state.")
@click.option("--priority", type=float, default=None, help="Priority used at creation.")
@click.option("--story-points", type=float, default=None, help="Story points used at creation.")
@click.option("--file-name", default=None, help="Explicit file name.")
@click.pass_obj
def move(
    app: AppContext,
    title: str,
    from_state: str,
    to_state: str,
    priority: float | None,
    story_points: float | None,
    file_name: str | None,
) -> None:
    """Move a task between states."""
    from agelum.services.documents import DocumentService

    app.emit_call(
        "move",
        lambda: DocumentService(app.workspace).move(
            from_state,
            to_state,
            title=title,
            priority=priority,
            story_points=story_points,
            file_name=file_name,
        ),
    )


@click.command(
    cls=AgelumCommand,
    examples="""\
  agelum get doc "Architecture overview"
  agelum get task --file-name "03 Fix bug (5).md"
  agelum -q get task "Fix bug" --priority 3 --story-points 5 --state doing""",
)
@click.argument("doc_type", metavar="TYPE", type=_TYPES)
@click.argument("title", required=False, default="")
@click.option("--state", type=_STATES, default=None, help="Only look in this task state.")
@click.option("--priority", type=float, default=None, help="Task priority.")
@click.option("--story-points", type=float, default=None, help="Story points.")
@click.option("--file-name", default=None, help="Explicit file name.")
@click.pass_obj
def get(
    app: AppContext,
    doc_type: str,
    title: str,
    state: str | None,
    priority: float | None,
    story_points: float | None,
    file_name: str | None,
) -> None:
    """Resolve the path of a document (existing or expected)."""
    from agelum.services.documents import DocumentService

    app.emit_call(
        "get",
        lambda: DocumentService(app.workspace).get(
            doc_type,
            title=title,
            state=state,
            priority=priority,
            story_points=story_points,
            file_name=file_name,
        ),
    )


@click.command(
    "list",
    cls=AgelumCommand,
    examples="""\
  agelum list task
  agelum list task --state doing
  agelum --json list plan""",
)
@click.argument("doc_type", metavar="TYPE", type=_TYPES)
@click.option("--state", type=_STATES, default=None, help="Only list tasks in this state.")
@click.pass_obj
def list_cmd(app: AppContext, doc_type: str, state: str | None) -> None:
    """List documents of a type (tasks grouped by state)."""
    from agelum.services.documents import DocumentService

    app.emit_call(
        "list",
        lambda: DocumentService(app.workspace).list_documents(doc_type, state=state),
    )
