"""Tests for taxonomy provisioning and file I/O."""

from __future__ import annotations

from pathlib import Path

import pytest

from agelum.domain.types import TAXONOMY
from agelum.infrastructure.filesystem import (
    ensure_structure,
    list_markdown_files,
    list_subdirectories,
    read_document,
    task_directory,
    type_directory,
    write_new_file,
)


class TestEnsureStructure:
    def test_creates_every_directory(self, tmp_path: Path) -> None:
        base = ensure_structure(tmp_path)
        assert base == tmp_path / "agelum"
        for rel in TAXONOMY:
            assert (base / rel).is_dir(), rel

    def test_idempotent(self, tmp_path: Path) -> None:
        base = ensure_structure(tmp_path)
        (base / "docs" / "keep.md").write_text("x")
        assert ensure_structure(tmp_path) == base
        assert (base / "docs" / "keep.md").read_text() == "x"


class TestTypeDirectory:
    def test_task_defaults_to_pending(self, tmp_path: Path) -> None:
        assert type_directory(tmp_path, "task") == tmp_path / "tasks" / "pending"

    def test_task_state(self, tmp_path: Path) -> None:
        assert type_directory(tmp_path, "task", "done") == tmp_path / "tasks" / "done"

    @pytest.mark.parametrize(
        ("doc_type", "rel"),
        [("epic", "epics"), ("plan", "plans"), ("doc", "docs"), ("context", "context")],
    )
    def test_fixed_directories(self, tmp_path: Path, doc_type: str, rel: str) -> None:
        assert type_directory(tmp_path, doc_type) == tmp_path / rel

    def test_unknown_type(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="Unknown document type"):
            type_directory(tmp_path, "memo")

    def test_unknown_state(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError):
            task_directory(tmp_path, "blocked")


class TestFileIO:
    def test_write_new_file(self, tmp_path: Path) -> None:
        path = tmp_path / "a.md"
        write_new_file(path, "hello")
        assert path.read_text(encoding="utf-8") == "hello"

    def test_write_new_file_never_overwrites(self, tmp_path: Path) -> None:
        path = tmp_path / "a.md"
        path.write_text("original")
        with pytest.raises(FileExistsError):
            write_new_file(path, "replacement")
        assert path.read_text() == "original"

    def test_read_document(self, tmp_path: Path) -> None:
        path = tmp_path / "a.md"
        path.write_text("---\ntitle: A\n---\n\n# A\n")
        fm, body = read_document(path)
        assert fm["title"] == "A"
        assert body == "# A\n"

    def test_list_markdown_files_sorted(self, tmp_path: Path) -> None:
        for name in ("10 b (1).md", "02 a (1).md", "notes.txt"):
            (tmp_path / name).write_text("")
        (tmp_path / "sub.md").mkdir()
        assert [p.name for p in list_markdown_files(tmp_path)] == ["02 a (1).md", "10 b (1).md"]

    def test_list_markdown_files_missing_dir(self, tmp_path: Path) -> None:
        assert list_markdown_files(tmp_path / "nope") == []

    def test_list_subdirectories(self, tmp_path: Path) -> None:
        (tmp_path / "beta").mkdir()
        (tmp_path / "alpha").mkdir()
        (tmp_path / ".hidden").mkdir()
        (tmp_path / "file.txt").write_text("")
        assert list_subdirectories(tmp_path) == ["alpha", "beta"]
