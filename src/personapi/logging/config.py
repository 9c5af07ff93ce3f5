"""Persisted logging settings.

``personapi logging set-level`` writes the chosen level to a JSON document so
new processes pick it up; see :func:`personapi.logging.get_logger`.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any


def config_path(config_file: str | os.PathLike[str] | None = None) -> Path:
    """Where settings live.

    ``config_file`` wins, then ``PERSONAPI_LOG_CONFIG``, then ``logging.json``
    under ``PERSONAPI_CONFIG_DIR`` (default ``~/.personapi``).
    """
    if config_file is not None:
        return Path(config_file)
    if os.environ.get("PERSONAPI_LOG_CONFIG", "").strip():
        return Path(os.environ["PERSONAPI_LOG_CONFIG"]).expanduser()
    base = os.environ.get("PERSONAPI_CONFIG_DIR", "").strip() or Path.home() / ".personapi"
    return Path(base).expanduser() / "logging.json"


def load_config(config_file=None) -> dict[str, Any]:
    """Read the settings; anything unreadable counts as no settings."""
    try:
        data = json.loads(config_path(config_file).read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(config: dict[str, Any], config_file=None) -> Path:
    path = config_path(config_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    return path


def level_number(level: str | int) -> int | None:
    """Numeric value of a level name or number, ``None`` if logging does not know it."""
    if isinstance(level, int):
        name = logging.getLevelName(level)
        return level if not name.startswith("Level ") else None
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else None


def load_log_level(config_file=None) -> int | None:
    stored = load_config(config_file).get("log_level")
    return None if stored is None else level_number(stored)


def save_log_level(level: str | int, config_file=None) -> Path:
    """Persist ``level`` by name.

    Raises
    ------
    ValueError
        If ``level`` is not a known logging level.
    """
    number = level_number(level)
    if number is None:
        raise ValueError(f"Unknown logging level: {level!r}")
    config = load_config(config_file)
    config["log_level"] = logging.getLevelName(number)
    return save_config(config, config_file)
