"""Logging setup for auto-tag.

Library modules ask for ``get_logger("git")`` and friends; only the CLI calls
``configure_logging``. Log lines always go to stderr because stdout carries the
tag reports that CI scripts read.
"""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import Any, Dict

_ROOT = "autotag"

_FORMATS = {
    # Verbose runs name the component (git, orchestrator, manifests.cargo).
    "console": "[auto-tag] %(levelname)s %(message)s",
    "console_verbose": "[auto-tag] %(levelname)s %(component)s: %(message)s",
    "file": "%(asctime)s %(levelname)s %(name)s: %(message)s",
}


class _ComponentFilter(logging.Filter):
    """Expose the logger name without the ``autotag.`` prefix as ``component``."""

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        record.component = name[len(_ROOT) + 1 :] if name.startswith(_ROOT + ".") else name
        return True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``autotag`` or a child logger such as ``autotag.git``."""
    return logging.getLogger(f"{_ROOT}.{name}" if name else _ROOT)


def build_logging_config(
    *, verbose: bool = False, log_file: Path | None = None
) -> Dict[str, Any]:
    """Return the dictConfig schema used by :func:`configure_logging`."""
    level = "DEBUG" if verbose else "INFO"
    handlers: Dict[str, Dict[str, Any]] = {
        "stderr": {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
            "level": level,
            "formatter": "console_verbose" if verbose else "console",
            "filters": ["component"],
        }
    }
    if log_file is not None:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "filename": str(log_file),
            "encoding": "utf-8",
            "level": level,
            "formatter": "file",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {"component": {"()": _ComponentFilter}},
        "formatters": {key: {"format": fmt} for key, fmt in _FORMATS.items()},
        "handlers": handlers,
        "loggers": {
            _ROOT: {"level": level, "handlers": list(handlers), "propagate": False},
        },
    }


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Install stderr (and optional file) handlers on the ``autotag`` logger.

    Calling it again replaces the previous handlers.
    """
    logging.config.dictConfig(build_logging_config(verbose=verbose, log_file=log_file))
    return get_logger()


__all__ = ["build_logging_config", "configure_logging", "get_logger"]
