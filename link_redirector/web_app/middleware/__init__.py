"""Middleware for the link redirector web app."""

from .logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
