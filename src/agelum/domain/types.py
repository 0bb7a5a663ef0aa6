"""Document types, task states, and the agelum directory taxonomy.

Every document type maps onto exactly one directory under ``agelum/``.
Tasks are the exception: they live in ``tasks/<state>`` and move between
the three state directories.
"""

from __future__ import annotations

from enum import StrEnum


class DocumentType(StrEnum):
    """Document types stored under the agelum directory."""

    TASK = "task"
    EPIC = "epic"
    PLAN = "plan"
    DOC = "doc"
    COMMAND = "command"
    SKILL = "skill"
    AGENT = "agent"
    CONTEXT = "context"


class TaskState(StrEnum):
    """Task states. Each maps 1:1 to a directory under ``tasks/``.

    States are unordered: any state may move to any other distinct state.
    """

    PENDING = "pending"
    DOING = "doing"
    DONE = "done"


class Resolution(StrEnum):
    """How confidently ``get`` derived a filename."""

    EXACT = "exact"
    TITLE_ONLY = "title_only"


AGELUM_DIRNAME = "agelum"
TASKS_DIRNAME = "tasks"

# Fixed subdirectories under agelum/, created on every operation.
TAXONOMY: tuple[str, ...] = (
    "docs",
    "plans",
    "tasks/pending",
    "tasks/doing",
    "tasks/done",
    "commands",
    "skills",
    "agents",
    "context",
    "epics",
)

# Non-task document type -> directory under agelum/.
TYPE_DIRS: dict[str, str] = {
    "epic": "epics",
    "plan": "plans",
    "doc": "docs",
    "command": "commands",
    "skill": "skills",
    "agent": "agents",
    "context": "context",
}

# Probe order when a task lookup has no state.
TASK_STATE_ORDER: tuple[TaskState, ...] = (
    TaskState.PENDING,
    TaskState.DOING,
    TaskState.DONE,
)
