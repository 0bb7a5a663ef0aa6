"""Shared pytest fixtures and test helpers for agelum tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from agelum.config.settings import AgelumSettings
from agelum.infrastructure.workspace import Workspace


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests away from the real ``~/.agelum/config.json`` and AGELUM_* env."""
    for var in ("AGELUM_ROOT_HINT", "AGELUM_START_DIR", "AGELUM_CONFIG_PATH", "AGELUM_MAX_DEPTH"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("AGELUM_CONFIG", str(tmp_path / "home" / ".agelum" / "config.json"))


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    """Temporary git repository (an empty ``.git`` directory is enough)."""
    root = tmp_path / "repo"
    (root / ".git").mkdir(parents=True)
    return root


@pytest.fixture
def agelum_dir(repo_root: Path) -> Path:
    """The ``agelum`` directory the store writes into."""
    return repo_root / "agelum"


@pytest.fixture
def workspace(repo_root: Path) -> Workspace:
    """Workspace whose root discovery starts inside the temp repository."""
    return Workspace(AgelumSettings(start_dir=repo_root))


@pytest.fixture
def _in_repo(repo_root: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Change CWD into the temp repository so the CLI discovers it.

    Use via ``@pytest.mark.usefixtures("_in_repo")``.
    """
    monkeypatch.chdir(repo_root)
    yield


@pytest.fixture
def make_task(workspace: Workspace) -> Callable[..., dict[str, Any]]:
    """Factory creating a task via DocumentService, asserting success."""
    from agelum.services.documents import DocumentService

    def _make(
        title: str,
        priority: float = 3,
        story_points: float = 5,
        **kwargs: Any,
    ) -> dict[str, Any]:
        result = DocumentService(workspace).create(
            "task", title, priority=priority, story_points=story_points, **kwargs
        )
        assert result.ok, result.error
        return result.data

    return _make
