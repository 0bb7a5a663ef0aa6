"""MCP tool definitions: create, move, get.

Each tool has a ``<name>_impl`` function testable without the mcp package.
``register_tools()`` wraps them with FastMCP decorators.

Tool failures are *results*, not transport faults: an ``_impl`` returns
``{"isError": True, "message": ...}`` and the registered tool raises
``ToolError`` so the client sees ``isError: true`` with the message.
Argument names keep the camelCase spelling of the published schema.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Annotated, Any, Literal

from pydantic import Field

from agelum.services.documents import DocumentService
from agelum.services.result import ServiceResult

logger = logging.getLogger(__name__)

DocTypeArg = Literal["task", "epic", "plan", "doc", "command", "skill", "agent", "context"]
TaskStateArg = Literal["pending", "doing", "done"]

TOOL_NAMES: tuple[str, ...] = ("create", "move", "get")


def _to_mcp_response(result: ServiceResult) -> dict[str, Any]:
    """Success payload as-is; failures as ``{isError, message, code}``."""
    if result.ok:
        return dict(result.data)
    code = result.error.code if result.error else "UNKNOWN"
    message = result.error.message if result.error else "Unknown error"
    return {"isError": True, "message": message, "code": code}


def _error_response(code: str, message: str) -> dict[str, Any]:
    return {"isError": True, "message": message, "code": code}


def _run(op: str, call: Callable[[], ServiceResult]) -> dict[str, Any]:
    """Run a service call, reporting unexpected filesystem errors as tool errors."""
    try:
        result = call()
    except OSError as exc:
        logger.warning("%s failed with filesystem error: %s", op, exc)
        return _error_response("FILESYSTEM_ERROR", str(exc))
    return _to_mcp_response(result)


# ---------------------------------------------------------------------------
# Tool implementations
# ---------------------------------------------------------------------------


def create_impl(
    workspace: Any,
    type: str,
    title: str,
    *,
    content: str = "",
    state: str = "pending",
    priority: float | None = None,
    story_points: float | None = None,
    file_name: str | None = None,
) -> dict[str, Any]:
    """Create a new document. Returns ``{path}``."""
    return _run(
        "create",
        lambda: DocumentService(workspace).create(
            type,
            title,
            content=content,
            state=state,
            priority=priority,
            story_points=story_points,
            file_name=file_name,
        ),
    )


def move_impl(
    workspace: Any,
    from_state: str,
    to_state: str,
    *,
    type: str = "task",
    title: str = "",
    priority: float | None = None,
    story_points: float | None = None,
    file_name: str | None = None,
) -> dict[str, Any]:
    """Move a task between states. Returns ``{from, to}``."""
    return _run(
        "move",
        lambda: DocumentService(workspace).move(
            from_state,
            to_state,
            doc_type=type,
            title=title,
            priority=priority,
            story_points=story_points,
            file_name=file_name,
        ),
    )


def get_impl(
    workspace: Any,
    type: str,
    *,
    title: str = "",
    state: str | None = None,
    priority: float | None = None,
    story_points: float | None = None,
    file_name: str | None = None,
) -> dict[str, Any]:
    """Resolve a document path. Returns ``{path, exists, resolution}``."""
    return _run(
        "get",
        lambda: DocumentService(workspace).get(
            type,
            title=title,
            state=state,
            priority=priority,
            story_points=story_points,
            file_name=file_name,
        ),
    )


def call_tool_impl(
    workspace: Any,
    name: str,
    arguments: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Dispatch a tool call by name using the published argument names.

    Entry point for hosts that embed the tools without FastMCP (and for
    tests). A FastMCP server dispatches registered tools itself and answers
    unknown names with its own error, so ``UNKNOWN_OPERATION`` comes only
    from this function.
    """
    args = dict(arguments or {})
    if name == "create":
        return create_impl(
            workspace,
            args.get("type", ""),
            args.get("title", ""),
            content=args.get("content") or "",
            state=args.get("state", "pending"),
            priority=args.get("priority"),
            story_points=args.get("storyPoints"),
            file_name=args.get("fileName"),
        )
    if name == "move":
        return move_impl(
            workspace,
            args.get("fromState", ""),
            args.get("toState", ""),
            type=args.get("type", "task"),
            title=args.get("title", ""),
            priority=args.get("priority"),
            story_points=args.get("storyPoints"),
            file_name=args.get("fileName"),
        )
    if name == "get":
        return get_impl(
            workspace,
            args.get("type", ""),
            title=args.get("title", ""),
            state=args.get("state"),
            priority=args.get("priority"),
            story_points=args.get("storyPoints"),
            file_name=args.get("fileName"),
        )
    return _error_response("UNKNOWN_OPERATION", f"Unknown tool: {name}")


# ---------------------------------------------------------------------------
# Registration: wraps _impl functions with FastMCP decorators
# ---------------------------------------------------------------------------


def _raise_on_error(response: dict[str, Any]) -> dict[str, Any]:
    if response.get("isError"):
        from mcp.server.fastmcp.exceptions import ToolError

        raise ToolError(response["message"])
    return response


def register_tools(server: Any, workspace: Any) -> None:
    """Register the create, move, and get tools on the FastMCP server."""

    @server.tool()  # type: ignore[untyped-decorator]
    def create(
        type: Annotated[DocTypeArg, Field(description="Document type")],
        title: Annotated[str, Field(description="Title used for naming and frontmatter")],
        content: Annotated[str, Field(description="Markdown content body")] = "",
        state: Annotated[
            TaskStateArg, Field(description="Task state (only for type=task)")
        ] = "pending",
        priority: Annotated[
            float | None, Field(description="Task priority number (only for type=task)")
        ] = None,
        storyPoints: Annotated[  # noqa: N803
            float | None,
            Field(description="Story points (type=task required, other types optional)"),
        ] = None,
        fileName: Annotated[  # noqa: N803
            str | None, Field(description="Override file name (with or without .md)")
        ] = None,
    ) -> dict[str, Any]:
        """Create a new markdown file in the agelum structure. Returns the file path only."""
        return _raise_on_error(
            create_impl(
                workspace,
                type,
                title,
                content=content,
                state=state,
                priority=priority,
                story_points=storyPoints,
                file_name=fileName,
            )
        )

    @server.tool()  # type: ignore[untyped-decorator]
    def move(
        type: Annotated[Literal["task"], Field(description="Only task is supported")],
        fromState: Annotated[TaskStateArg, Field(description="Current state")],  # noqa: N803
        toState: Annotated[TaskStateArg, Field(description="Target state")],  # noqa: N803
        title: Annotated[str, Field(description="Task title")] = "",
        priority: Annotated[float | None, Field(description="Task priority number")] = None,
        storyPoints: Annotated[  # noqa: N803
            float | None, Field(description="Task story points")
        ] = None,
        fileName: Annotated[  # noqa: N803
            str | None, Field(description="Override file name")
        ] = None,
    ) -> dict[str, Any]:
        """Move a task between states. Returns from/to paths only."""
        return _raise_on_error(
            move_impl(
                workspace,
                fromState,
                toState,
                type=type,
                title=title,
                priority=priority,
                story_points=storyPoints,
                file_name=fileName,
            )
        )

    @server.tool()  # type: ignore[untyped-decorator]
    def get(
        type: Annotated[DocTypeArg, Field(description="Document type")],
        title: Annotated[
            str, Field(description="Title used to build the file name (if fileName omitted)")
        ] = "",
        state: Annotated[
            TaskStateArg | None, Field(description="Task state (optional)")
        ] = None,
        priority: Annotated[
            float | None, Field(description="Task priority number (only for type=task)")
        ] = None,
        storyPoints: Annotated[  # noqa: N803
            float | None,
            Field(description="Story points (type=task required, other types optional)"),
        ] = None,
        fileName: Annotated[  # noqa: N803
            str | None, Field(description="Override file name")
        ] = None,
    ) -> dict[str, Any]:
        """Resolve a file path in the agelum structure.

        Returns the path, whether it exists, and whether the filename was
        exact or guessed from the title alone.
        """
        return _raise_on_error(
            get_impl(
                workspace,
                type,
                title=title,
                state=state,
                priority=priority,
                story_points=storyPoints,
                file_name=fileName,
            )
        )
