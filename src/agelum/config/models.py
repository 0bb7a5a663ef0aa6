"""Pydantic model for the user-level agelum config file.

The file is shared with the agelum web dashboard, so keys keep its
camelCase spelling and unknown keys survive a load/save round trip.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class AgelumConfig(BaseModel):
    """Contents of ``~/.agelum/config.json``."""

    model_config = {"frozen": True, "populate_by_name": True, "extra": "allow"}

    root_git_directory: str | None = Field(default=None, alias="rootGitDirectory")

    @property
    def root_hint(self) -> Path | None:
        """The configured fallback root as a path, if any."""
        if not self.root_git_directory:
            return None
        return Path(self.root_git_directory).expanduser()
