"""Logging setup shared by every schemaforge module.

Modules call ``get_logger(__name__)`` at import time; nothing is emitted
until ``configure_logging`` attaches a handler to the package logger.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "schemaforge"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace.

    Args:
        name: Usually the caller's ``__name__``.

    Returns:
        The configured ``logging.Logger``.
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(level: int | str = logging.WARNING, console: Console | None = None) -> None:
    """Attach a rich handler to the package logger.

    Repeated calls only update the level.

    Args:
        level: Logging level name or number.
        console: Console to log to; defaults to stderr.
    """
    global _configured

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if not _configured:
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(name)s - %(message)s"))
        logger.addHandler(handler)
        _configured = True


# Silent unless configured
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())
