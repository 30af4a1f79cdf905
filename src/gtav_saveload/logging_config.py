"""Logging configuration for GTA V SaveLoad Helper.

Provides centralized logging setup with file and console handlers.
Log files are stored in the application's config directory.
"""

import logging
import sys
from pathlib import Path

LOGGER_NAME = "gtav_saveload"
LOG_FILENAME = "gtav_saveload.log"


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure application-wide logging.

    The file handler is attached separately by enable_file_logging() once
    the configuration directory is known.

    Args:
        debug: If True, also log to console at DEBUG level

    Returns:
        The root logger for the application
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    # Clear any existing handlers
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    # Console handler - only in debug mode
    if debug:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)
        console_formatter = logging.Formatter(
            "%(levelname)s - %(name)s - %(message)s"
        )
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)
    else:
        logger.addHandler(logging.NullHandler())

    return logger


def enable_file_logging(log_dir: Path) -> Path:
    """Attach a file handler writing to log_dir/gtav_saveload.log.

    Args:
        log_dir: Directory for the log file, created if missing

    Returns:
        Path to the log file
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILENAME

    # File handler - always logs DEBUG and above
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    file_handler.setFormatter(file_formatter)
    logging.getLogger(LOGGER_NAME).addHandler(file_handler)

    return log_file


def get_logger(name: str) -> logging.Logger:
    """Get a child logger for a specific module.

    Args:
        name: Module name (e.g., 'transfer', 'dispatcher')

    Returns:
        A logger instance for the module
    """
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
