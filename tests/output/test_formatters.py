"""Tests for result formatting."""

from __future__ import annotations

import json

from agelum.output.formatters import OutputSettings, format_result, format_warning
from agelum.services.result import ServiceResult


def _get_result() -> ServiceResult:
    return ServiceResult(
        ok=True, op="get", data={"path": "/r/agelum/docs/a.md", "exists": True}
    )


class TestFormatResult:
    def test_human_success(self) -> None:
        out = format_result(_get_result())
        assert out.splitlines() == ["OK: get", "  path: /r/agelum/docs/a.md", "  exists: True"]

    def test_quiet(self) -> None:
        out = format_result(_get_result(), settings=OutputSettings(quiet=True))
        assert out == "/r/agelum/docs/a.md"

    def test_quiet_move_prints_target(self) -> None:
        result = ServiceResult(ok=True, op="move", data={"from": "/a", "to": "/b"})
        assert format_result(result, settings=OutputSettings(quiet=True)) == "/b"

    def test_json(self) -> None:
        out = format_result(_get_result(), settings=OutputSettings(json_output=True))
        assert json.loads(out)["data"]["exists"] is True

    def test_error(self) -> None:
        result = ServiceResult.failure("move", "TARGET_EXISTS", "Target file already exists: /b")
        assert format_result(result) == "ERROR: move: Target file already exists: /b"
        verbose = format_result(result, settings=OutputSettings(verbose=True))
        assert verbose == "ERROR: move [TARGET_EXISTS]: Target file already exists: /b"

    def test_items_table(self) -> None:
        result = ServiceResult(
            ok=True,
            op="list",
            data={
                "type": "task",
                "items": [
                    {"name": "03 Fix [bug] (5).md", "title": "Fix [bug]", "state": "doing"}
                ],
                "count": 1,
            },
        )
        out = format_result(result)
        assert "task (1)" in out
        assert "Fix [bug]" in out
        assert "doing" in out

    def test_list_data(self) -> None:
        result = ServiceResult(ok=True, op="repos", data={"repositories": ["a", "b"]})
        assert '  repositories: ["a","b"]' in format_result(result)

    def test_long_paths_are_not_wrapped(self) -> None:
        path = "/tmp/" + "nested/" * 30 + "03 Fix bug (5).md"
        result = ServiceResult(ok=True, op="create", data={"path": path})
        assert format_result(result).splitlines()[1] == f"  path: {path}"

    def test_markup_in_values_is_literal(self) -> None:
        result = ServiceResult.failure(
            "create", "ALREADY_EXISTS", "File already exists: /r/[bold]x:y:.md"
        )
        assert format_result(result) == "ERROR: create: File already exists: /r/[bold]x:y:.md"


def test_format_warning() -> None:
    assert format_warning("guessed [name]") == "WARNING: guessed [name]"
