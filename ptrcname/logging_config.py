"""
Logging setup for the ptrcname command line
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def init_logging(level: str = "warning", log_file: Optional[str] = None,
                 console: Optional[Console] = None) -> logging.Logger:
    """
    Configure the "ptrcname" logger.

    Records go to stderr through rich, and to log_file when given.

    Args:
        level: debug, info, warn/warning or error
        log_file: Optional path of a plain-text log file
        console: Console for the rich handler (defaults to stderr)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger("ptrcname")
    logger.setLevel(_LEVELS.get(level.lower(), logging.WARNING))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(rich_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger
