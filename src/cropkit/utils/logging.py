"""Logger lookup for cropkit modules.

The library never installs handlers of its own; applications decide where the
records end up.
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "cropkit"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or the child logger for *name*."""

    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


__all__ = ["ROOT_LOGGER_NAME", "get_logger"]
