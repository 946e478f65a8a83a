"""Logging configuration for modelgen.

All modules obtain their logger through :func:`get_logger` so that output
is routed through a single ``modelgen`` logger hierarchy. Console output
uses rich for readable, colored log lines.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "modelgen"
DEFAULT_LOG_LEVEL = "WARNING"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger in the modelgen hierarchy.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger instance (not configured until :func:`setup_logging` runs).
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(
    level: str | int = DEFAULT_LOG_LEVEL,
    rich_output: bool = True,
    console: Console | None = None,
) -> logging.Logger:
    """Configure the modelgen root logger once.

    Args:
        level: Logging level name or constant.
        rich_output: Use a RichHandler instead of a plain stream handler.
        console: Optional rich console to log to (defaults to stderr).

    Returns:
        The configured root logger.
    """
    global _configured

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    logger.setLevel(level)

    if _configured:
        return logger

    if rich_output:
        handler: logging.Handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    logger.addHandler(handler)
    logger.propagate = False
    _configured = True
    return logger
