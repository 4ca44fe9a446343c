"""Logging setup for crawl runs.

The CLI configures the ``langcrawl`` logger once per command. Every module
logs through ``logging.getLogger(__name__)``, so fetches, rate-limit waits and
per-page verdicts land on stderr and in a rotating log file.

Examples:
    >>> from langcrawl.core.logger import get_logger
    >>> logger = get_logger("langcrawl", log_level="DEBUG")
    >>> logger.info("Starting URL discovery")
    2026-01-14 23:45:00,123 | INFO | langcrawl | Starting URL discovery
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

DEFAULT_LOG_FILE = Path(".cache/langcrawl.log")

MAX_LOG_SIZE_BYTES = 100 * 1024 * 1024
BACKUP_COUNT = 5


def get_logger(
    name: str,
    log_level: str = "INFO",
    log_file: Path | None = None,
) -> logging.Logger:
    """Attach a stderr handler and a rotating file handler to a logger.

    The console shows INFO and above so a crawl prints one line per fetch and
    per analyzed page; the file also keeps DEBUG records such as rate-limit
    waits. Calling this again replaces the previous handlers.

    Args:
        name: Logger name, usually "langcrawl"
        log_level: Level name for the logger itself
        log_file: Log file path, defaults to .cache/langcrawl.log

    Raises:
        ValueError: If log_level is not a logging level name
        OSError: If the log directory cannot be created
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {log_level}")

    logger = logging.getLogger(name)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_file = log_file or DEFAULT_LOG_FILE
    log_file.parent.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=MAX_LOG_SIZE_BYTES,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    return logger
