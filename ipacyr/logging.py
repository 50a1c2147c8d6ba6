"""Logging setup for the ipacyr command line.

Library modules only create module loggers under the ``ipacyr`` namespace;
handlers are attached here, by the CLI, never at import time.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from ipacyr.config import LoggingConfig

Level = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# stdout carries transcriptions only
console = Console(stderr=True)


def _console_handler(rich_tracebacks: bool) -> logging.Handler:
    handler = RichHandler(
        console=console,
        show_path=False,
        show_time=False,
        rich_tracebacks=rich_tracebacks,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def _file_handler(log_file: Path) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATE_FORMAT))
    return handler


def setup_logger(
    name: str = "ipacyr",
    level: Level = "WARNING",
    log_file: str | Path | None = None,
    rich_tracebacks: bool = True,
) -> logging.Logger:
    """Attach a Rich stderr handler, and optionally a file handler, to a logger.

    Calling it again replaces the handlers installed by the previous call, so
    the CLI can reconfigure logging after reading a config file.

    Args:
        name: Logger name, normally the package namespace.
        level: Logging level applied to the logger and its handlers.
        log_file: Optional file that also receives every record.
        rich_tracebacks: Render exception tracebacks with Rich.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers = [_console_handler(rich_tracebacks)]
    if log_file is not None:
        handlers.append(_file_handler(Path(log_file)))

    logger.setLevel(level)
    for handler in handlers:
        handler.setLevel(level)
        logger.addHandler(handler)
    logger.debug("Logging to %d handler(s) at %s", len(handlers), level)
    return logger


def setup_logger_from_config(config: LoggingConfig, name: str = "ipacyr") -> logging.Logger:
    """Set up the package logger from a :class:`LoggingConfig`."""
    return setup_logger(name, level=config.level, log_file=config.log_file)
