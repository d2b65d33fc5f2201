"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain namespaced loggers.
    - Allow an optional verbose/debug mode for the CLI.

Notes/Edge cases:
    - Configuration is idempotent; repeated calls never stack handlers.
    - Library code only ever logs at DEBUG level.
"""

from __future__ import annotations

import logging

__all__ = ["ROOT_LOGGER_NAME", "get_logger", "configure"]

ROOT_LOGGER_NAME = "fixturegen"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())

_HANDLER_NAME = "fixturegen.stderr"


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package namespace for module ``name``."""

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    The handler is rebuilt on every call so it writes to the current
    ``sys.stderr``.
    """

    root = logging.getLogger(ROOT_LOGGER_NAME)
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return root
