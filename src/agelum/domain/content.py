"""Frontmatter rendering and parsing for agelum markdown documents.

A stored document is a YAML frontmatter block, a blank line, a level-1
heading matching the title, and the caller's content::

    ---
    title: Fix bug
    created: '2026-01-05T09:30:00.000Z'
    type: task
    state: pending
    priority: 03
    storyPoints: 5
    ---

    # Fix bug

    <content>

Bodies are opaque: they are written once and never parsed or validated.
"""

from __future__ import annotations

from datetime import UTC, datetime
from io import StringIO
from typing import Any

from pydantic import BaseModel
from ruamel.yaml import YAML
from ruamel.yaml.scalarint import ScalarInt

from agelum.domain.naming import format_priority, format_story_points
from agelum.domain.types import DocumentType, TaskState

_FRONTMATTER_DELIMITER = "---"


def _new_yaml() -> YAML:
    """Create a fresh round-trip YAML parser.

    A new instance per call keeps a failed dump from leaving shared
    emitter state behind (ruamel.yaml's YAML object is stateful).
    """
    y = YAML()
    y.preserve_quotes = True
    y.default_flow_style = False
    return y


def created_timestamp() -> str:
    """Current UTC time as ISO 8601 with millisecond precision and ``Z``."""
    now = datetime.now(UTC)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def _story_points_value(value: float) -> int | float:
    """Story points as the number whose YAML form matches the filename."""
    format_story_points(value)
    return int(value) if float(value).is_integer() else value


class DocumentFrontmatter(BaseModel):
    """Metadata written at the top of every agelum document.

    ``state`` and ``priority`` are only emitted for tasks; ``story_points``
    is emitted whenever it was supplied.
    """

    model_config = {"frozen": True}

    title: str
    created: str
    type: DocumentType
    state: TaskState | None = None
    priority: float | None = None
    story_points: float | None = None

    def to_dict(self) -> dict[str, Any]:
        """Frontmatter mapping in on-disk key order."""
        fm: dict[str, Any] = {
            "title": self.title,
            "created": self.created,
            "type": str(self.type),
        }
        if self.type == DocumentType.TASK:
            if self.state is not None:
                fm["state"] = str(self.state)
            if self.priority is not None:
                padded = format_priority(self.priority)
                # Keep the zero padding visible: ``priority: 03``.
                fm["priority"] = ScalarInt(int(padded), width=len(padded))
        if self.story_points is not None:
            fm["storyPoints"] = _story_points_value(self.story_points)
        return fm


def render_frontmatter(frontmatter: dict[str, Any], body: str) -> str:
    """Render a frontmatter dict and body text into markdown.

    Keys are emitted in insertion order.
    """
    buf = StringIO()
    _new_yaml().dump(frontmatter, buf)
    yaml_text = buf.getvalue()

    parts = [_FRONTMATTER_DELIMITER, "\n", yaml_text, _FRONTMATTER_DELIMITER, "\n"]
    if body:
        parts.append(body)
    return "".join(parts)


def parse_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """Parse YAML frontmatter and body from markdown content.

    Expects the file to start with ``---`` on the first line. The second
    ``---`` closes the YAML block. Everything after is the body.

    Returns:
        A ``(frontmatter_dict, body_text)`` tuple. If no valid
        frontmatter delimiters are found, returns ``({}, content)``.
    """
    normalized = content.replace("\r\n", "\n")
    lines = normalized.split("\n")
    if not lines or lines[0].strip() != _FRONTMATTER_DELIMITER:
        return {}, content

    end_idx: int | None = None
    for i, line in enumerate(lines[1:], start=1):
        if line.strip() == _FRONTMATTER_DELIMITER:
            end_idx = i
            break

    if end_idx is None:
        return {}, content

    yaml_block = "\n".join(lines[1:end_idx])
    body = "\n".join(lines[end_idx + 1 :])

    if body.startswith("\n"):
        body = body[1:]

    fm: dict[str, Any] = _new_yaml().load(yaml_block) or {}
    return fm, body


def render_body(title: str, content: str) -> str:
    """Heading plus content, separated from the frontmatter by a blank line."""
    return f"\n# {title}\n\n{content}\n"


def render_document(frontmatter: DocumentFrontmatter, content: str) -> str:
    """Full on-disk text for a new document."""
    return render_frontmatter(frontmatter.to_dict(), render_body(frontmatter.title, content))
