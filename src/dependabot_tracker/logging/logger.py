"""Logging configuration. Outputs to a file since curses owns the terminal."""

import logging
from pathlib import Path


def setup_logger(
    name: str = "dependabot_tracker",
    level: str = "INFO",
    log_file: str | Path = "logs/dependabot-tracker.log",
) -> logging.Logger:
    """Create a logger that appends to ``log_file``."""
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(
        logging.Formatter("%(asctime)s [%(name)s] %(levelname)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
    return logger
