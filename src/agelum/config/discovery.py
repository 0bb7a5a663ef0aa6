"""Config file location, loading, and saving.

The config lives in the user's home directory (``~/.agelum/config.json``).
Supports the AGELUM_CONFIG env var and the --config CLI flag as overrides.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from agelum.config.models import AgelumConfig

logger = logging.getLogger(__name__)

CONFIG_DIRNAME = ".agelum"
CONFIG_FILENAME = "config.json"
CONFIG_ENV_VAR = "AGELUM_CONFIG"


def default_config_path() -> Path:
    """``~/.agelum/config.json``, unless AGELUM_CONFIG points elsewhere."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / CONFIG_DIRNAME / CONFIG_FILENAME


def load_config(path: Path | None = None) -> AgelumConfig:
    """Load the config file.

    Returns a default AgelumConfig when the file is missing. An unreadable
    or malformed file is logged and also treated as empty, so a broken
    dashboard config never blocks document operations.
    """
    path = path or default_config_path()
    if not path.is_file():
        return AgelumConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return AgelumConfig.model_validate(data)
    except (OSError, ValueError, ValidationError) as exc:
        logger.warning("Error reading agelum config %s: %s", path, exc)
        return AgelumConfig()


def save_config(config: AgelumConfig, path: Path | None = None) -> Path:
    """Write *config* as indented JSON, creating the directory if needed."""
    path = path or default_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        config.model_dump_json(by_alias=True, exclude_none=True, indent=2),
        encoding="utf-8",
    )
    return path
