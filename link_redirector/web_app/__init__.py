"""Web application for the link redirector."""

from .app_factory import create_app

__all__ = ["create_app"]
