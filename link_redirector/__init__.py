"""Minimal URL-shortening service."""

from .keygen import IdentifierGenerator
from .service import LinkRedirectorService

__version__ = "1.0.0"

__all__ = ["IdentifierGenerator", "LinkRedirectorService"]
