"""Logging setup shared by the library and the CLI.

Library modules only ask for a logger; handlers are installed by the CLI
through :func:`configure_logging`.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "json_classgen"


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package namespace.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger instance.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str = "WARNING", console: Console | None = None) -> None:
    """Install a rich handler on the package logger.

    Args:
        level: Level name such as ``"DEBUG"`` or ``"info"``.
        console: Console to log to (defaults to stderr).
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.getLevelName(level.upper()))

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.propagate = False


logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())
