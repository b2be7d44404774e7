"""Logging configuration for h5kit."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime
from pathlib import Path

from rich.logging import RichHandler

from h5kit.ui.console import VERSION, console

LOGGER_NAME = "h5kit"


class JSONFormatter(logging.Formatter):
    """JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_record)


def setup_logging(
    log_file: Path | None = None,
    verbose: bool = False,
    level: int = logging.INFO,
) -> logging.Logger:
    """Configure the ``h5kit`` logger.

    Library modules log through child loggers (``h5kit.io.rng`` ...), so
    handlers attached here receive their records.

    Args:
        log_file: Optional log file; a ``.json`` suffix selects JSON lines.
        verbose: Also log to the console through Rich.
        level: Logging level for all handlers.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    close_logging()

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setLevel(level)
        if log_file.suffix == ".json":
            file_handler.setFormatter(JSONFormatter())
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s | %(levelname)-5s | %(name)s | %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        logger.addHandler(file_handler)

    if verbose:
        console_handler = RichHandler(
            console=console,
            show_time=False,
            show_path=False,
            markup=False,
        )
        console_handler.setLevel(level)
        logger.addHandler(console_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    logger.debug("h5kit v%s | Command: %s", VERSION, " ".join(sys.argv))
    logger.debug("Python: %s | Platform: %s", sys.version.split()[0], sys.platform)
    return logger


def close_logging() -> None:
    """Detach and close all handlers of the ``h5kit`` logger."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)


__all__ = ["LOGGER_NAME", "JSONFormatter", "close_logging", "setup_logging"]
