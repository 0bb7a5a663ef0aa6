"""Tests for MCP server creation."""

from __future__ import annotations

from pathlib import Path

import pytest

from agelum.config.settings import AgelumSettings
from agelum.mcp import server as server_module


class TestCreateServer:
    def test_without_mcp_extra(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(server_module, "mcp_available", False)
        with pytest.raises(RuntimeError, match="MCP extra not installed"):
            server_module.create_server()

    def test_registers_tools(self, repo_root: Path) -> None:
        pytest.importorskip("mcp")
        import anyio

        server = server_module.create_server(AgelumSettings(start_dir=repo_root))
        tools = anyio.run(server.list_tools)
        assert sorted(t.name for t in tools) == ["create", "get", "move"]

    def test_tool_schema_uses_published_names(self, repo_root: Path) -> None:
        pytest.importorskip("mcp")
        import anyio

        server = server_module.create_server(AgelumSettings(start_dir=repo_root))
        tools = {t.name: t for t in anyio.run(server.list_tools)}
        create_props = tools["create"].inputSchema["properties"]
        assert {"type", "title", "content", "state", "priority", "storyPoints", "fileName"} <= set(
            create_props
        )
        assert set(tools["move"].inputSchema["required"]) == {"type", "fromState", "toState"}
