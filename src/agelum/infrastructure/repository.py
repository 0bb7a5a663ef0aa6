"""Repository root discovery.

Walk-up finder locates the directory holding ``.git``, the same way git
itself does, but bounded to a fixed number of levels so a process started
somewhere odd (a container's ``/``, a deep temp dir) never wanders far.
When the walk finds nothing, an explicit fallback directory is used.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

GIT_MARKER = ".git"
MAX_DEPTH = 10


def find_repo_root(
    start: Path | None = None,
    *,
    fallback: Path | None = None,
    max_depth: int = MAX_DEPTH,
) -> Path | None:
    """Return the repository root for *start* (default: cwd).

    Tests for a ``.git`` entry (directory or worktree file) at *start* and
    at most ``max_depth - 1`` ancestors. If none is found, returns
    *fallback* when it exists on disk; a fallback needs no ``.git``.
    Returns None when neither succeeds.
    """
    current = (start or Path.cwd()).resolve()
    logger.debug("Searching for %s starting from %s", GIT_MARKER, current)

    for _ in range(max_depth):
        if (current / GIT_MARKER).exists():
            logger.debug("Found %s at %s", GIT_MARKER, current)
            return current
        parent = current.parent
        if parent == current:
            break
        current = parent

    logger.debug("No %s found via working-directory traversal", GIT_MARKER)

    if fallback is not None:
        logger.debug("Falling back to configured root: %s", fallback)
        if fallback.exists():
            return fallback.resolve()
        logger.warning("Configured root does not exist: %s", fallback)

    return None
