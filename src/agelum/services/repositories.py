"""RepositoryService: the root hint and the repositories beneath it.

The web dashboard stores ``rootGitDirectory`` in ``~/.agelum/config.json``
and treats each visible subdirectory of it as a repository. This service
reads and writes that setting and lists those repositories.
"""

from __future__ import annotations

import logging
from pathlib import Path

from agelum.config.discovery import default_config_path, load_config, save_config
from agelum.infrastructure.filesystem import list_subdirectories
from agelum.services.base import BaseService
from agelum.services.result import ServiceResult

logger = logging.getLogger(__name__)


class RepositoryService(BaseService):
    """Config-file backed repository discovery."""

    def _config_path(self) -> Path:
        return self._workspace.settings.config_path or default_config_path()

    def show_config(self) -> ServiceResult:
        """Report the config file location, the root hint, and the resolved root."""
        config_path = self._config_path()
        config = load_config(config_path)
        root = self._workspace.resolve_root()
        return ServiceResult(
            ok=True,
            op="config_show",
            data={
                "config_path": str(config_path),
                "rootGitDirectory": config.root_git_directory,
                "resolved_root": str(root) if root else None,
            },
        )

    def set_root(self, directory: Path) -> ServiceResult:
        """Persist *directory* as ``rootGitDirectory``, keeping other keys."""
        op = "config_set_root"
        resolved = directory.expanduser().resolve()
        if not resolved.is_dir():
            return ServiceResult.failure(
                op, "ROOT_NOT_FOUND", f"Not a directory: {resolved}", path=str(resolved)
            )

        config_path = self._config_path()
        current = load_config(config_path)
        updated = current.model_copy(update={"root_git_directory": str(resolved)})
        written = save_config(updated, config_path)
        logger.debug("Saved rootGitDirectory=%s to %s", resolved, written)
        return ServiceResult(
            ok=True,
            op=op,
            data={"config_path": str(written), "rootGitDirectory": str(resolved)},
        )

    def list_repositories(self) -> ServiceResult:
        """Visible subdirectories of the root hint."""
        op = "repos"
        base = self._workspace.root_hint()
        if base is None:
            return ServiceResult.failure(
                op,
                "ROOT_NOT_FOUND",
                "No rootGitDirectory configured (use 'agelum config set-root DIR')",
            )
        repositories = list_subdirectories(base)
        return ServiceResult(
            ok=True,
            op=op,
            data={"base_path": str(base), "repositories": repositories, "count": len(repositories)},
        )
