"""Shared utility functions."""
import logging

from .constants import DEFAULT_LOG_FILE


# Configure logging
def setup_logging(log_file: str | None = DEFAULT_LOG_FILE, level: int = logging.INFO) -> None:
    """Configure logging to console and, unless log_file is None, to a file."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        handlers.insert(0, logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )
