"""Logging setup shared by the zoomkit modules and CLI."""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LOGGING_CONFIGURED = False


def _resolve_level(level: int | str | None) -> int:
    """Resolves an explicit level, then ``LOG_LEVEL``, then INFO."""
    if level is None:
        level = os.getenv("LOG_LEVEL", "").strip() or logging.INFO
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        return logging.INFO
    return resolved


def configure_logging(level: int | str | None = None) -> int:
    """Configures the root logger and returns the applied level.

    Args:
        level: Explicit log level name or number. When omitted the
            ``LOG_LEVEL`` environment variable is used, falling back to INFO.

    Handlers are left at NOTSET so that reconfiguring, e.g. from the CLI
    after the import-time setup, changes what reaches them.

    Returns:
        The numeric level applied to the root logger.
    """
    global _LOGGING_CONFIGURED

    resolved = _resolve_level(level)
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root_logger.setLevel(resolved)
    _LOGGING_CONFIGURED = True
    return resolved


def get_logger(name: str) -> logging.Logger:
    """Returns a named logger, configuring logging once from the environment."""
    if not _LOGGING_CONFIGURED:
        configure_logging()
    return logging.getLogger(name)
