"""Redis implementation of the link store."""

import logging
from typing import Optional

import redis.asyncio as redis

from .base import LinkStoreBase


class RedisLinkStore(LinkStoreBase):
    """Link store backed by Redis string keys."""

    def __init__(
        self,
        store_config: str,
        key_prefix: str = "links:",
        client: Optional[redis.Redis] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize Redis store.

        Args:
            store_config: Redis connection URL (e.g., redis://localhost:6379/0)
            key_prefix: Namespace prepended to every identifier
            client: Optional pre-built client (tests inject a fake here)
            logger: Optional logger instance
        """
        super().__init__(store_config)
        self.key_prefix = key_prefix
        self.logger = logger or logging.getLogger(__name__)
        if client is None:
            client = redis.from_url(
                store_config,
                encoding="utf-8",
                decode_responses=True,
            )
        self.client = client
        self.logger.info(f"Redis link store configured with key prefix '{key_prefix}'")

    def get_store_key(self, key: str) -> str:
        """Full Redis key for an identifier."""
        return f"{self.key_prefix}{key}"

    async def get(self, key: str) -> Optional[str]:
        return await self.client.get(self.get_store_key(key))

    async def put(self, key: str, value: str) -> None:
        await self.client.set(self.get_store_key(key), value)

    async def health_check(self) -> bool:
        try:
            await self.client.ping()
            return True
        except Exception as e:
            self.logger.error(f"Redis health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.client.aclose()
        self.logger.info("Redis connection closed")
