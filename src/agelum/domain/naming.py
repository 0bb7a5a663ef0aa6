"""Filename rules for agelum documents.

A document's identity (type, title, priority, story points) encodes to
exactly one filename:

- tasks: ``"<priority> <title> (<storyPoints>).md"``. The zero-padded
  priority prefix makes directory listings sort by priority.
- other types with story points: ``"<title> (<storyPoints>).md"``.
- other types: ``"<title>.md"``.

Filenames are never decoded back into an identity; lookups probe the
filesystem for the encoded name instead.
"""

from __future__ import annotations

import math
import re

from pydantic import BaseModel

from agelum.domain.types import DocumentType

_SEPARATORS = re.compile(r"[/\\]")
_RESERVED = re.compile(r'[\0<>:"|?*]')
_WHITESPACE = re.compile(r"\s+")

MD_SUFFIX = ".md"


class NamingError(ValueError):
    """A document identity that cannot be encoded to a filename.

    ``code`` is the ServiceError code reported to callers.
    """

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


def sanitize_name(value: str) -> str:
    """Make *value* safe to use as (part of) a filename.

    Path separators become hyphens, null and filesystem-reserved
    characters are removed, and whitespace runs collapse to one space.

    Examples:
        >>> sanitize_name("  a/b   c?  ")
        'a-b c'
    """
    text = _SEPARATORS.sub("-", value)
    text = _RESERVED.sub("", text)
    text = _WHITESPACE.sub(" ", text)
    return text.strip()


def ensure_md_extension(file_name: str) -> str:
    """Append ``.md`` unless *file_name* already ends with it (any case)."""
    trimmed = file_name.strip()
    if trimmed.lower().endswith(MD_SUFFIX):
        return trimmed
    return f"{trimmed}{MD_SUFFIX}"


def normalize_file_name(file_name: str) -> str:
    """Sanitize an explicit filename and give it a ``.md`` suffix."""
    cleaned = sanitize_name(file_name)
    if not cleaned:
        raise NamingError("UNRESOLVABLE_FILE_NAME", "fileName is empty after sanitizing")
    return ensure_md_extension(cleaned)


def format_priority(value: float) -> str:
    """Zero-pad a task priority to at least two digits.

    Fractional priorities are truncated toward zero.

    Examples:
        >>> format_priority(3)
        '03'
        >>> format_priority(42.9)
        '42'
    """
    if not math.isfinite(value) or value < 0:
        raise NamingError("INVALID_PRIORITY", "priority must be a non-negative number")
    return str(math.trunc(value)).zfill(2)


def format_story_points(value: float) -> str:
    """Render story points as a canonical decimal string (``5.0`` -> ``"5"``)."""
    if not math.isfinite(value):
        raise NamingError("INVALID_STORY_POINTS", "storyPoints must be a finite number")
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_file_name(
    doc_type: str,
    title: str,
    *,
    priority: float | None = None,
    story_points: float | None = None,
) -> str:
    """Encode a document identity into its filename."""
    clean_title = sanitize_name(title)
    if not clean_title:
        raise NamingError("INVALID_TITLE", "title is required")

    if doc_type == DocumentType.TASK:
        if priority is None:
            raise NamingError("INVALID_PRIORITY", "priority is required for task")
        if story_points is None:
            raise NamingError("INVALID_STORY_POINTS", "storyPoints is required for task")
        return (
            f"{format_priority(priority)} {clean_title} "
            f"({format_story_points(story_points)}){MD_SUFFIX}"
        )

    if story_points is not None:
        return f"{clean_title} ({format_story_points(story_points)}){MD_SUFFIX}"

    return f"{clean_title}{MD_SUFFIX}"


class DocumentIdentity(BaseModel):
    """The fields that deterministically produce a document's filename.

    An explicit ``file_name`` always wins over the derived name.
    """

    model_config = {"frozen": True}

    type: DocumentType
    title: str = ""
    priority: float | None = None
    story_points: float | None = None
    file_name: str | None = None

    def resolve_file_name(self) -> str:
        """Return the filename this identity encodes to."""
        if self.file_name:
            return normalize_file_name(self.file_name)
        if not self.title:
            raise NamingError(
                "UNRESOLVABLE_FILE_NAME",
                "title is required if fileName is not provided",
            )
        return build_file_name(
            self.type,
            self.title,
            priority=self.priority,
            story_points=self.story_points,
        )

    def title_only_file_name(self) -> str:
        """Best-effort guess from the title alone (tasks lacking metadata).

        The real task filename embeds priority and story points, so this
        only matches files created with an explicit title-only name.
        """
        clean_title = sanitize_name(self.title)
        if not clean_title:
            raise NamingError(
                "UNRESOLVABLE_FILE_NAME",
                "Could not resolve filename from arguments",
            )
        return ensure_md_extension(clean_title)
