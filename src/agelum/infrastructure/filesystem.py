"""Filesystem operations for the agelum directory tree.

INVARIANT: Files are truth. Nothing is cached between operations; every
call re-derives state from disk.

Pure naming/rendering lives in :mod:`agelum.domain` (dependency direction:
infrastructure -> domain). This module handles directory provisioning,
path resolution, and the actual file I/O.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from agelum.domain.content import parse_frontmatter
from agelum.domain.types import (
    AGELUM_DIRNAME,
    TASKS_DIRNAME,
    TAXONOMY,
    TYPE_DIRS,
    DocumentType,
    TaskState,
)

# ---------------------------------------------------------------------------
# Taxonomy
# ---------------------------------------------------------------------------


def agelum_path(root: Path) -> Path:
    """The ``agelum`` directory inside a repository root."""
    return root / AGELUM_DIRNAME


def ensure_structure(root: Path) -> Path:
    """Create ``agelum/`` and every taxonomy directory under *root*.

    Idempotent; existing directories are left alone. Returns the
    ``agelum`` path.
    """
    base = agelum_path(root)
    base.mkdir(parents=True, exist_ok=True)
    for rel in TAXONOMY:
        (base / rel).mkdir(parents=True, exist_ok=True)
    return base


def type_directory(base: Path, doc_type: str, state: str | None = None) -> Path:
    """Directory holding documents of *doc_type*.

    - Tasks: ``agelum/tasks/{state}`` (state defaults to pending)
    - Everything else: the type's fixed taxonomy directory
    """
    if doc_type == DocumentType.TASK:
        return task_directory(base, state or TaskState.PENDING)

    rel = TYPE_DIRS.get(doc_type)
    if rel is None:
        msg = f"Unknown document type: {doc_type!r}"
        raise ValueError(msg)
    return base / rel


def task_directory(base: Path, state: str) -> Path:
    """``agelum/tasks/{state}``."""
    return base / TASKS_DIRNAME / TaskState(state)


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def write_new_file(path: Path, content: str) -> None:
    """Write *content* to *path*, refusing to overwrite.

    Uses exclusive-create mode so the existence check and the write are a
    single filesystem call. Raises FileExistsError if *path* exists.
    """
    with path.open("x", encoding="utf-8") as fh:
        fh.write(content)


def read_document(path: Path) -> tuple[dict[str, Any], str]:
    """Read a markdown file, returning ``(frontmatter, body)``."""
    return parse_frontmatter(path.read_text(encoding="utf-8"))


def list_markdown_files(directory: Path) -> list[Path]:
    """``*.md`` files directly inside *directory*, sorted by name."""
    if not directory.is_dir():
        return []
    return sorted(
        (p for p in directory.iterdir() if p.is_file() and p.suffix.lower() == ".md"),
        key=lambda p: p.name,
    )


def list_subdirectories(directory: Path) -> list[str]:
    """Names of non-hidden subdirectories of *directory*, sorted."""
    if not directory.is_dir():
        return []
    return sorted(
        entry.name
        for entry in directory.iterdir()
        if entry.is_dir() and not entry.name.startswith(".")
    )
