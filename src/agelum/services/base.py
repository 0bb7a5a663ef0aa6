"""BaseService: foundation for agelum services.

Every service receives a :class:`Workspace` at construction time. The
workspace resolves the repository root and provisions the directory
taxonomy; services call :meth:`BaseService._prepare` as the first step of
every operation.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from agelum.services.result import ServiceResult

if TYPE_CHECKING:
    from pathlib import Path

    from agelum.infrastructure.workspace import Workspace

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class DocumentService(BaseService):
            def create(self, ...) -> ServiceResult:
                base = self._prepare("create")
                if isinstance(base, ServiceResult):
                    return base
                ...
    """

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace

    def _prepare(self, op: str) -> Path | ServiceResult:
        """Return the provisioned ``agelum`` directory, or a ROOT_NOT_FOUND failure."""
        base = self._workspace.prepare()
        if base is None:
            logger.debug("%s: repository root not found", op)
            return ServiceResult.failure(
                op,
                "ROOT_NOT_FOUND",
                "Could not find repository root",
                start_dir=str(self._workspace.settings.start_dir),
            )
        return base
