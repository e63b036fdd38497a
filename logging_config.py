"""
Logging Configuration
Sets up the project logger used by the CLI, the demo and the experiment.
"""
import logging
import sys
from typing import Optional

from config import LOGGER_NAME


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'graham_hull' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Reconfiguring (tests, repeated main() calls) must not duplicate output
    if logger.hasHandlers():
        logger.handlers.clear()

    # Console goes to stderr so stdout stays clean for the hull result
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger


def get_logger(name: str) -> logging.Logger:
    """Child logger under the project namespace, e.g. 'graham_hull.point_set'."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
