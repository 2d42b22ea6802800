"""Shared-secret verification."""

import hmac
from typing import Optional


def verify_secret(provided: str, actual: Optional[str]) -> bool:
    """Compare a caller-supplied secret against the configured one.

    Lengths are checked first since length is not secret. Once lengths
    match, the UTF-8 bytes are compared in constant time.

    Args:
        provided: Secret supplied by the caller
        actual: Configured secret, None when unset

    Returns:
        True only for a byte-exact match
    """
    if actual is None:
        return False

    if len(provided) != len(actual):
        return False

    provided_bytes = provided.encode("utf-8")
    actual_bytes = actual.encode("utf-8")

    if len(provided_bytes) != len(actual_bytes):
        return False

    return hmac.compare_digest(provided_bytes, actual_bytes)
