"""serve: start the MCP server (requires the agelum[mcp] extra)."""

from __future__ import annotations

import click

from agelum.commands._base import AgelumCommand


@click.command(
    cls=AgelumCommand,
    examples="""\
  # Start the MCP server (stdio transport, default)
  agelum serve

  # Streamable HTTP on a custom host/port
  agelum serve --transport streamable-http --host 0.0.0.0 --port 9000""",
)
@click.option(
    "--transport",
    default="stdio",
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    help="MCP transport protocol.",
)
@click.option("--host", default="127.0.0.1", help="Bind address (HTTP transports only).")
@click.option("--port", default=8000, type=int, help="Listen port (HTTP transports only).")
@click.pass_obj
def serve(app: object, transport: str, host: str, port: int) -> None:
    """Start the MCP server exposing the create, move, and get tools."""
    from agelum.mcp.server import create_server, mcp_available

    if not mcp_available:
        click.echo("MCP not installed. Install with: pip install agelum[mcp]", err=True)
        raise SystemExit(1)

    from agelum.commands._context import AppContext

    assert isinstance(app, AppContext)
    server = create_server(app.settings, host=host, port=port)
    server.run(transport=transport)
