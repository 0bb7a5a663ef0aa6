"""Unified settings: CLI flags, env vars, and code defaults in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``AGELUM_*`` prefix
  3. Code defaults

The root hint from ``~/.agelum/config.json`` is *not* a
settings source: the dashboard may rewrite that file while a server is
running, so the workspace re-reads it on every operation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings

from agelum.infrastructure.repository import MAX_DEPTH


class AgelumSettings(BaseSettings):
    """Settings for the agelum CLI and MCP server.

    Attributes:
        start_dir: Where repository-root discovery starts (default: CWD).
        root_hint: Fallback root overriding the config file's
            ``rootGitDirectory``.
        config_path: Explicit config file, or None for the default location.
        max_depth: Number of directory levels tested for ``.git``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "AGELUM_",
    }

    start_dir: Path = Field(default_factory=Path.cwd)
    root_hint: Path | None = None
    config_path: Path | None = None
    max_depth: int = Field(default=MAX_DEPTH, ge=1)

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        root_hint: str | None = None,
        start_dir: Path | None = None,
        **cli_flags: Any,
    ) -> AgelumSettings:
        """Construct settings from a CLI invocation.

        Path options are forwarded only when given, so unset ones fall
        through to ``AGELUM_*`` env vars and defaults.
        """
        overrides: dict[str, Any] = dict(cli_flags)
        if config_path:
            overrides["config_path"] = Path(config_path).expanduser()
        if root_hint:
            overrides["root_hint"] = Path(root_hint).expanduser()
        if start_dir is not None:
            overrides["start_dir"] = start_dir
        return cls(**overrides)
