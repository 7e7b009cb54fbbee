"""Logging configuration.

Every record carries a ``session`` extra: formation sessions bind their own
id, anything logged outside a session shows ``-``.
"""

import sys
from pathlib import Path

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL, LOG_TO_FILE

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | "
    "<cyan>{extra[session]: <8}</cyan> | <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {extra[session]: <8} | {name}:{function}:{line} | {message}"


def setup_logging(level: str = LOG_LEVEL, to_file: bool = LOG_TO_FILE, log_dir: Path = LOG_DIR):
    """Replace all sinks with a console sink and, optionally, a daily log file."""
    handlers = [{"sink": sys.stderr, "format": CONSOLE_FORMAT, "level": level, "colorize": True}]

    if to_file:
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            {
                "sink": log_dir / "formation_{time:YYYY-MM-DD}.log",
                "format": FILE_FORMAT,
                "level": "DEBUG",
                "rotation": "00:00",
                "retention": "7 days",
                "compression": "gz",
            }
        )

    logger.configure(handlers=handlers, extra={"session": "-"})
    if to_file:
        logger.info("Logging to {}", log_dir)

    return logger
