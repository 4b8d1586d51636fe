"""Logging configuration for the application."""

import logging
from rich.logging import RichHandler
from .config import settings


def setup_logging() -> None:
    """Set up application logging with rich formatting."""
    
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=None,  # Use default console
                show_path=False,
                markup=True,
                rich_tracebacks=True,
            )
        ],
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name."""
    return logging.getLogger(name)
