"""Common utilities for the link redirector."""

from .logging_config import setup_logging, get_logger

__all__ = [
    "setup_logging",
    "get_logger",
]
