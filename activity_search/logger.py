"""
Logging configuration for activity-search.
Provides centralized logging setup.
"""

import logging
import sys
from .config import LOG_DIR, LOG_LEVEL, LOG_FORMAT

# Log file path
LOG_DIR.mkdir(parents=True, exist_ok=True)
LOG_FILE = LOG_DIR / "activity_search.log"


def setup_logger(name: str) -> logging.Logger:
    """
    Set up a logger with both file and console handlers.

    Args:
        name: Name of the logger (typically __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    # File handler - detailed logs
    file_handler = logging.FileHandler(LOG_FILE, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)

    # Console handler - INFO and above
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)

    return logger


def log_search_stats(logger: logging.Logger, query: str, eligible: int, matched: int, returned: int):
    """Log a one-line summary of a search call."""
    logger.info(
        f"Search '{query or '*'}': {eligible} eligible, "
        f"{matched} matched, "
        f"{returned} returned"
    )
