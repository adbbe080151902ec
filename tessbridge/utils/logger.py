import logging
from rich.console import Console
from rich.logging import RichHandler
from pathlib import Path
from typing import Optional

from tessbridge.config.settings import settings

def setup_logger(name: str = "tessbridge", log_file: Optional[Path] = None, level: Optional[int] = None) -> logging.Logger:
    """
    Sets up a logger with RichHandler for console and FileHandler for file logs.

    The console handler writes to stderr; stdout is reserved for recognized text.
    """
    if level is None:
        level = logging.DEBUG if settings.DEBUG else logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    logger.handlers = []

    # Console Handler (Rich)
    console_handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True, markup=False)
    console_handler.setLevel(level)
    formatter = logging.Formatter("%(message)s", datefmt="[%X]")
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File Handler (if path provided)
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger

def sync_debug_level(logger: logging.Logger) -> None:
    """Drops the logger and its handlers to DEBUG if settings.DEBUG was switched on after setup."""
    if settings.DEBUG:
        logger.setLevel(logging.DEBUG)
        for handler in logger.handlers:
            handler.setLevel(logging.DEBUG)

# Default logger instance
logger = setup_logger(log_file=settings.LOG_FILE)
