"""Errors raised by the link redirector service.

Each error carries the HTTP status code the web layer answers with.
"""


class LinkRedirectorError(Exception):
    """Base error for link operations."""

    status_code = 500

    def __init__(self, message: str = ""):
        super().__init__(message or self.__class__.__doc__)


class MissingLinkError(LinkRedirectorError):
    """The link parameter is missing."""

    status_code = 400


class MissingSecretError(LinkRedirectorError):
    """The secret parameter is missing."""

    status_code = 401


class InvalidSecretError(LinkRedirectorError):
    """The secret does not match the configured secret."""

    status_code = 403


class IdentifierCollisionError(LinkRedirectorError):
    """The generated identifier is already in use."""

    status_code = 500


class CorruptRecordError(LinkRedirectorError):
    """The stored value is not a valid link record."""

    status_code = 500
