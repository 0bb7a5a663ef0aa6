"""FastMCP server setup.

Optional extra, guarded behind try/except ImportError.
Transport: stdio default, SSE and streamable HTTP optional.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from agelum.config.settings import AgelumSettings

mcp_available = False
_FastMCP: Any = None

try:
    from mcp.server.fastmcp import FastMCP as _FastMCP  # type: ignore[no-redef,import-not-found]

    mcp_available = True
except ImportError:
    pass

__all__ = ["SERVER_NAME", "create_server", "mcp_available"]

SERVER_NAME = "agelum"


def create_server(
    settings: AgelumSettings | None = None,
    *,
    host: str = "127.0.0.1",
    port: int = 8000,
) -> Any:
    """Create and configure the MCP server.

    Builds a Workspace from *settings* (or env/defaults) and registers the
    create, move, and get tools. Returns the FastMCP instance.

    *host* and *port* configure the bind address for HTTP transports
    (sse, streamable-http). They are ignored when using stdio.

    Raises RuntimeError if the mcp extra is not installed.
    """
    if not mcp_available or _FastMCP is None:
        msg = "MCP extra not installed. Install with: pip install agelum[mcp]"
        raise RuntimeError(msg)

    from agelum.config.settings import AgelumSettings
    from agelum.infrastructure.workspace import Workspace
    from agelum.mcp.tools import register_tools

    workspace = Workspace(settings or AgelumSettings())

    server = _FastMCP(SERVER_NAME, host=host, port=port)
    register_tools(server, workspace)
    return server
