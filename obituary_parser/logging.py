"""Logging setup for the command-line interface.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers are installed here, once, by the CLI.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str | int = "WARNING", console: Console | None = None) -> None:
    """Route log records through a rich handler.

    Args:
        level: Log level name or number for the ``obituary_parser`` logger
        console: Console to write to (default: stderr)
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s %(message)s"))

    logger = logging.getLogger("obituary_parser")
    logger.handlers = [handler]
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    logger.propagate = False
