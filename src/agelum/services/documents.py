"""DocumentService: create, move, get, and list agelum documents.

Every operation starts with the same prologue: resolve the repository
root, provision the taxonomy, then compute filenames with the naming
rules from :mod:`agelum.domain.naming`. Nothing is remembered between
calls; the filesystem is the only store.

Task states are unordered. Any state may move to any other distinct
state (``done -> pending`` included); ordering policy belongs to callers.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml.error import YAMLError

from agelum.domain.content import DocumentFrontmatter, created_timestamp, render_document
from agelum.domain.naming import DocumentIdentity, NamingError
from agelum.domain.types import TASK_STATE_ORDER, DocumentType, Resolution, TaskState
from agelum.infrastructure.filesystem import (
    list_markdown_files,
    read_document,
    task_directory,
    type_directory,
    write_new_file,
)
from agelum.services.base import BaseService
from agelum.services.result import ServiceResult

logger = logging.getLogger(__name__)


def _coerce_type(op: str, value: str) -> DocumentType | ServiceResult:
    try:
        return DocumentType(value)
    except ValueError:
        allowed = ", ".join(t.value for t in DocumentType)
        return ServiceResult.failure(
            op, "UNSUPPORTED_TYPE", f"Unknown document type: {value!r} (expected {allowed})"
        )


def _coerce_state(op: str, value: str) -> TaskState | ServiceResult:
    try:
        return TaskState(value)
    except ValueError:
        allowed = ", ".join(s.value for s in TaskState)
        return ServiceResult.failure(
            op, "INVALID_STATE", f"Unknown task state: {value!r} (expected {allowed})"
        )


# Identity field -> (error code, published argument name).
_FIELD_ERRORS: dict[str, tuple[str, str]] = {
    "title": ("INVALID_TITLE", "title"),
    "priority": ("INVALID_PRIORITY", "priority"),
    "story_points": ("INVALID_STORY_POINTS", "storyPoints"),
    "file_name": ("UNRESOLVABLE_FILE_NAME", "fileName"),
}


def _build_identity(op: str, **fields: Any) -> DocumentIdentity | ServiceResult:
    """Validate identity fields, reporting a wrongly typed argument as a failure."""
    try:
        return DocumentIdentity(**fields)
    except ValidationError as exc:
        error = exc.errors()[0]
        field = str(error["loc"][0]) if error["loc"] else ""
        code, name = _FIELD_ERRORS.get(field, ("INVALID_ARGUMENT", field))
        return ServiceResult.failure(op, code, f"{name}: {error['msg']}", field=name)


class DocumentService(BaseService):
    """Document-store operations over ``<root>/agelum``."""

    # ------------------------------------------------------------------
    # create
    # ------------------------------------------------------------------

    def create(
        self,
        doc_type: str,
        title: str,
        *,
        content: str = "",
        state: str = TaskState.PENDING,
        priority: float | None = None,
        story_points: float | None = None,
        file_name: str | None = None,
    ) -> ServiceResult:
        """Write a new document. Never overwrites an existing file.

        Tasks go to ``tasks/<state>``; other types to their fixed directory.
        """
        op = "create"
        kind = _coerce_type(op, doc_type)
        if isinstance(kind, ServiceResult):
            return kind
        task_state = _coerce_state(op, state)
        if isinstance(task_state, ServiceResult):
            return task_state

        base = self._prepare(op)
        if isinstance(base, ServiceResult):
            return base

        identity = _build_identity(
            op,
            type=kind,
            title=title,
            priority=priority,
            story_points=story_points,
            file_name=file_name,
        )
        if isinstance(identity, ServiceResult):
            return identity
        try:
            resolved_name = identity.resolve_file_name()
            frontmatter = DocumentFrontmatter(
                title=title,
                created=created_timestamp(),
                type=kind,
                state=task_state if kind == DocumentType.TASK else None,
                priority=priority,
                story_points=story_points,
            )
            text = render_document(frontmatter, content)
        except NamingError as exc:
            return ServiceResult.failure(op, exc.code, exc.message)

        path = type_directory(base, kind, task_state) / resolved_name
        try:
            write_new_file(path, text)
        except FileExistsError:
            return ServiceResult.failure(
                op, "ALREADY_EXISTS", f"File already exists: {path}", path=str(path)
            )

        logger.debug("Created %s document at %s", kind, path)
        return ServiceResult(ok=True, op=op, data={"path": str(path)})

    # ------------------------------------------------------------------
    # move
    # ------------------------------------------------------------------

    def move(
        self,
        from_state: str,
        to_state: str,
        *,
        title: str = "",
        priority: float | None = None,
        story_points: float | None = None,
        file_name: str | None = None,
        doc_type: str = DocumentType.TASK,
    ) -> ServiceResult:
        """Move a task between state directories by renaming it.

        The filename must be reproducible from the create-time identity
        (same priority and story points) unless *file_name* is given.
        """
        op = "move"
        if doc_type != DocumentType.TASK:
            return ServiceResult.failure(
                op, "UNSUPPORTED_TYPE", f"move only supports type 'task', got {doc_type!r}"
            )
        source_state = _coerce_state(op, from_state)
        if isinstance(source_state, ServiceResult):
            return source_state
        target_state = _coerce_state(op, to_state)
        if isinstance(target_state, ServiceResult):
            return target_state

        base = self._prepare(op)
        if isinstance(base, ServiceResult):
            return base

        if source_state == target_state:
            return ServiceResult.failure(
                op,
                "INVALID_TRANSITION",
                "fromState and toState must be different",
                state=str(source_state),
            )

        identity = _build_identity(
            op,
            type=DocumentType.TASK,
            title=title,
            priority=priority,
            story_points=story_points,
            file_name=file_name,
        )
        if isinstance(identity, ServiceResult):
            return identity
        try:
            resolved_name = identity.resolve_file_name()
        except NamingError as exc:
            return ServiceResult.failure(op, exc.code, exc.message)

        source = task_directory(base, source_state) / resolved_name
        if not source.exists():
            return ServiceResult.failure(
                op, "SOURCE_NOT_FOUND", f"Source file not found: {source}", path=str(source)
            )

        target = task_directory(base, target_state) / resolved_name
        if target.exists():
            return ServiceResult.failure(
                op, "TARGET_EXISTS", f"Target file already exists: {target}", path=str(target)
            )

        source.rename(target)
        logger.debug("Moved task %s: %s -> %s", resolved_name, source_state, target_state)
        return ServiceResult(ok=True, op=op, data={"from": str(source), "to": str(target)})

    # ------------------------------------------------------------------
    # get
    # ------------------------------------------------------------------

    def get(
        self,
        doc_type: str,
        *,
        title: str = "",
        state: str | None = None,
        priority: float | None = None,
        story_points: float | None = None,
        file_name: str | None = None,
    ) -> ServiceResult:
        """Resolve where a document lives (or would live).

        Pure resolution: returns the first existing candidate path, or the
        first candidate with ``exists: False``. ``resolution`` is
        ``title_only`` when a task lookup lacked priority or story points;
        that filename is a guess, since real task names embed both.
        """
        op = "get"
        kind = _coerce_type(op, doc_type)
        if isinstance(kind, ServiceResult):
            return kind
        task_state: TaskState | None = None
        if state is not None:
            coerced = _coerce_state(op, state)
            if isinstance(coerced, ServiceResult):
                return coerced
            task_state = coerced

        base = self._prepare(op)
        if isinstance(base, ServiceResult):
            return base

        identity = _build_identity(
            op,
            type=kind,
            title=title,
            priority=priority,
            story_points=story_points,
            file_name=file_name,
        )
        if isinstance(identity, ServiceResult):
            return identity
        full_identity = priority is not None and story_points is not None
        try:
            if file_name or kind != DocumentType.TASK or full_identity:
                resolved_name = identity.resolve_file_name()
                resolution = Resolution.EXACT
            else:
                resolved_name = identity.title_only_file_name()
                resolution = Resolution.TITLE_ONLY
        except NamingError as exc:
            return ServiceResult.failure(op, exc.code, exc.message)

        candidates = self._candidates(base, kind, task_state, resolved_name)
        found = next((p for p in candidates if p.exists()), None)

        warnings: list[str] = []
        if resolution == Resolution.TITLE_ONLY:
            warnings.append(
                "priority/storyPoints missing; filename guessed from title only"
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "path": str(found or candidates[0]),
                "exists": found is not None,
                "resolution": str(resolution),
            },
            warnings=warnings,
        )

    @staticmethod
    def _candidates(
        base: Path,
        kind: DocumentType,
        state: TaskState | None,
        file_name: str,
    ) -> list[Path]:
        if kind != DocumentType.TASK:
            return [type_directory(base, kind) / file_name]
        states = (state,) if state is not None else TASK_STATE_ORDER
        return [task_directory(base, s) / file_name for s in states]

    # ------------------------------------------------------------------
    # list
    # ------------------------------------------------------------------

    def list_documents(self, doc_type: str, *, state: str | None = None) -> ServiceResult:
        """List documents of a type, sorted by filename.

        Tasks are grouped by state in ``pending, doing, done`` order, and
        the priority prefix sorts each group by priority.
        """
        op = "list"
        kind = _coerce_type(op, doc_type)
        if isinstance(kind, ServiceResult):
            return kind
        states: tuple[TaskState, ...] = TASK_STATE_ORDER
        if state is not None:
            coerced = _coerce_state(op, state)
            if isinstance(coerced, ServiceResult):
                return coerced
            states = (coerced,)

        base = self._prepare(op)
        if isinstance(base, ServiceResult):
            return base

        warnings: list[str] = []
        items: list[dict[str, Any]] = []
        if kind == DocumentType.TASK:
            for s in states:
                for path in list_markdown_files(task_directory(base, s)):
                    item = self._describe(path, warnings)
                    item["state"] = str(s)
                    items.append(item)
        else:
            for path in list_markdown_files(type_directory(base, kind)):
                items.append(self._describe(path, warnings))

        return ServiceResult(
            ok=True,
            op=op,
            data={"type": str(kind), "items": items, "count": len(items)},
            warnings=warnings,
        )

    @staticmethod
    def _describe(path: Path, warnings: list[str]) -> dict[str, Any]:
        """Name, path, and frontmatter title of a stored document."""
        title = path.stem
        try:
            frontmatter, _body = read_document(path)
        except (OSError, UnicodeDecodeError, YAMLError) as exc:
            logger.debug("Unreadable frontmatter in %s", path, exc_info=True)
            warnings.append(f"Could not read frontmatter of {path.name}: {exc}")
        else:
            title = str(frontmatter.get("title") or title)
        return {"name": path.name, "title": title, "path": str(path)}
