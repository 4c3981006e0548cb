"""
Logging configuration for Bundlescope.

Log records go to stderr through rich, so stdout stays clean for payloads
and JSON piped out of ``extract`` and ``tree --json``.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

VERBOSITY_LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def setup_logging(verbosity: str = "normal") -> logging.Logger:
    """
    Route the ``bundlescope`` loggers through a rich handler on stderr.

    Args:
        verbosity: One of ``quiet``, ``normal`` or ``verbose`` (the
            ``ReportConfig.verbosity`` values)

    Returns:
        The package logger
    """
    level = VERBOSITY_LEVELS[verbosity]
    verbose = level == logging.DEBUG

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_path=verbose,
    )
    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=[handler])

    logger = logging.getLogger("bundlescope")
    logger.setLevel(level)
    return logger
