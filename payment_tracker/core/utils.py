"""Shared utility functions for the Telegram Payment Tracker project."""

import logging
from datetime import UTC, datetime
from pathlib import Path

import colorlog
from colorlog.escape_codes import escape_codes

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a logger with a colorized format for the project."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = colorlog.ColoredFormatter(
            f"%(log_color)s{LOG_FORMAT}",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def add_file_handler(logger: logging.Logger, log_dir: str | Path, filename: str = "bot.log") -> None:
    """Attach a plain (not colorized) file handler to a logger once."""
    ensure_dir(log_dir)
    if not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        file_handler = logging.FileHandler(Path(log_dir) / filename)
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)


def get_color(color: str) -> str:
    """Return the terminal escape code for a colorlog color name, or an empty string."""
    return escape_codes.get(color, "")


def ensure_dir(path: str | Path) -> None:
    """Ensure a directory exists (like mkdir -p)."""
    Path(path).mkdir(parents=True, exist_ok=True)


def utcnow() -> datetime:
    """Get the current UTC time as an aware datetime."""
    return datetime.now(UTC)


def truncate(text: str, limit: int) -> str:
    """Shorten text for log lines."""
    if len(text) > limit:
        return text[: limit - 3] + "..."
    return text
