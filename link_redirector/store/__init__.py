"""Key-value store layer for the link redirector."""

import logging
from typing import Optional
from urllib.parse import urlparse

from .base import LinkStoreBase
from .memory_store import MemoryLinkStore
from .redis_store import RedisLinkStore
from .questdb_store import QuestDBLinkStore

REDIS_SCHEMES = {"redis", "rediss", "unix"}


def create_store(
    store_url: str,
    key_prefix: str = "links:",
    create_tables: bool = False,
    logger: Optional[logging.Logger] = None,
) -> LinkStoreBase:
    """Build the store backend selected by the URL scheme.

    Args:
        store_url: memory://, redis://..., rediss://..., unix://... or questdb://...
        key_prefix: Redis key namespace
        create_tables: Create the QuestDB table on first connection
        logger: Optional logger instance

    Returns:
        Store instance

    Raises:
        ValueError: If the scheme is not supported
    """
    scheme = urlparse(store_url).scheme.lower()

    if scheme == "memory":
        return MemoryLinkStore(store_url)
    if scheme in REDIS_SCHEMES:
        return RedisLinkStore(store_url, key_prefix=key_prefix, logger=logger)
    if scheme == "questdb":
        return QuestDBLinkStore(store_url, create_tables=create_tables, logger=logger)

    raise ValueError(f"Unsupported store URL scheme: '{scheme}'")


__all__ = [
    "LinkStoreBase",
    "MemoryLinkStore",
    "RedisLinkStore",
    "QuestDBLinkStore",
    "create_store",
]
