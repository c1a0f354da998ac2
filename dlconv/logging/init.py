from __future__ import annotations

import logging
import sys

"""Logging initialization with labeled prefixes.

Every line written by the converter starts with a label
(DEBUG|INFO|WARN|ERROR|SUMMARY) followed by the message, on stdout. Uses the
standard logging module; module loggers are children of the "dlconv" logger.
"""

__all__ = [
    "setup_logging",
    "get_logger",
    "log_summary",
    "reset_logging",
    "LOGGER_NAME",
    "SUMMARY_LEVEL",
]

LOGGER_NAME = "dlconv"

# Custom SUMMARY level (between INFO=20 and WARNING=30)
SUMMARY_LEVEL = 25

# Global logger instance
_logger: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    """Formatter that prefixes each message with its level label.

    WARNING is shortened to WARN; the custom level 25 is labeled SUMMARY.
    """

    LEVEL_LABELS = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
        SUMMARY_LEVEL: "SUMMARY",
    }

    def format(self, record: logging.LogRecord) -> str:
        level_label = self.LEVEL_LABELS.get(record.levelno, record.levelname)
        return f"{level_label} {record.getMessage()}"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure the application logger (idempotent).

    Args:
        level: initial level for the logger and its stdout handler

    Returns:
        Configured "dlconv" logger
    """
    global _logger

    if _logger is not None:
        return _logger

    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Clear any existing handlers to avoid duplication
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)

    # Prevent propagation to root logger to avoid duplicate output
    logger.propagate = False

    _logger = logger
    return logger


def set_debug(logger: logging.Logger) -> None:
    """Switch ``logger`` and all of its handlers to DEBUG."""
    for h in logger.handlers:
        h.setLevel(logging.DEBUG)
    logger.setLevel(logging.DEBUG)


def get_logger() -> logging.Logger:
    """Return the application logger, configuring it on first use."""
    if _logger is None:
        return setup_logging()
    return _logger


def log_summary(message: str) -> None:
    """Log ``message`` at SUMMARY level."""
    get_logger().log(SUMMARY_LEVEL, message)


def reset_logging() -> None:
    """Reset the global logger state. Mainly for testing purposes."""
    global _logger
    _logger = None
