"""Workspace: the single dependency injected into every service.

A Workspace holds settings only. It resolves the repository root and
provisions the agelum taxonomy afresh on each call, because the store has
no process lifecycle to hang a one-time setup on: the same code serves a
one-shot CLI call and a long-lived MCP server whose root hint may change
underneath it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from agelum.config.discovery import load_config
from agelum.infrastructure.filesystem import ensure_structure
from agelum.infrastructure.repository import find_repo_root

if TYPE_CHECKING:
    from agelum.config.settings import AgelumSettings

logger = logging.getLogger(__name__)


class Workspace:
    """Settings-backed access to the agelum tree of the current repository."""

    def __init__(self, settings: AgelumSettings) -> None:
        self.settings = settings

    def root_hint(self) -> Path | None:
        """Fallback root: explicit setting first, then the config file.

        The config file is read on every call.
        """
        if self.settings.root_hint is not None:
            return self.settings.root_hint
        return load_config(self.settings.config_path).root_hint

    def resolve_root(self) -> Path | None:
        """Repository root for this operation, or None if undiscoverable."""
        return find_repo_root(
            self.settings.start_dir,
            fallback=self.root_hint(),
            max_depth=self.settings.max_depth,
        )

    def prepare(self) -> Path | None:
        """Resolve the root and ensure the taxonomy exists under it.

        Returns the ``agelum`` directory, or None when no root was found.
        """
        root = self.resolve_root()
        if root is None:
            return None
        base = ensure_structure(root)
        logger.debug("Using agelum directory %s", base)
        return base
