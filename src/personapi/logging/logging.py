# personapi/logging/logging.py
"""Configure-once loggers writing to ``personapi.log`` and, optionally, stderr.

Handlers are attached the first time a name is requested; later calls return
the same logger untouched until :func:`reset_logger` forgets it.
"""

import logging
import os
import sys
from pathlib import Path

from personapi.logging.config import load_log_level

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured: set[str] = set()


def _resolve_log_dir(log_dir=None) -> Path:
    if log_dir is None:
        log_dir = os.environ.get("PERSONAPI_LOG_DIR", Path.home() / ".personapi" / "logs")
    return Path(log_dir)


def _resolve_log_file(log_file=None, log_dir=None) -> Path:
    if log_file is not None:
        return Path(log_file)
    return _resolve_log_dir(log_dir) / "personapi.log"


def _handlers(log_path: Path, console: bool, filemode: str) -> list[logging.Handler]:
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handlers: list[logging.Handler] = [
        logging.FileHandler(log_path, mode=filemode, encoding="utf-8")
    ]
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))
    return handlers


def get_logger(
    name="personapi",
    level=None,
    log_file=None,
    log_dir=None,
    console=True,
    filemode="a",
    propagate=False,
):
    """Return the logger called ``name``, configuring it on first use.

    ``level`` falls back to the level saved by ``personapi logging
    set-level`` and then to INFO. ``log_file`` overrides
    ``<log_dir>/personapi.log``.
    """
    logger = logging.getLogger(name)
    if name in _configured:
        return logger

    if level is None:
        level = load_log_level() or logging.INFO
    logger.setLevel(level)
    logger.propagate = propagate

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    for handler in _handlers(_resolve_log_file(log_file, log_dir), console, filemode):
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    _configured.add(name)
    return logger


def reset_logger(name=None):
    """Detach and close handlers so the next :func:`get_logger` call reconfigures.

    Without ``name`` every logger configured here is reset.
    """
    names = [name] if name is not None else sorted(_configured)
    for n in names:
        logger = logging.getLogger(n)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        _configured.discard(n)


def get_configured_level(name="personapi"):
    return logging.getLevelName(logging.getLogger(name).getEffectiveLevel())
