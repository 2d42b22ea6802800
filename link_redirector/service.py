"""Business logic service for the link redirector."""

import logging
from typing import Optional, Dict

from .auth import verify_secret
from .errors import (
    MissingLinkError,
    MissingSecretError,
    InvalidSecretError,
    IdentifierCollisionError,
    CorruptRecordError,
)
from .keygen import IdentifierGenerator
from .models import LinkRecord
from .store.base import LinkStoreBase


class LinkRedirectorService:
    """Create and resolve short links against a key-value store."""

    def __init__(
        self,
        store: LinkStoreBase,
        secret: Optional[str] = None,
        generator: Optional[IdentifierGenerator] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize link redirector service.

        Args:
            store: Key-value store instance
            secret: Shared secret authorizing creation; None refuses every request
            generator: Optional identifier generator
            logger: Optional logger
        """
        self.store = store
        self.secret = secret
        self.generator = generator or IdentifierGenerator()
        self.logger = logger or logging.getLogger(__name__)

        if not secret:
            self.logger.warning("No shared secret configured - link creation is disabled")

    async def create_link(self, link: Optional[str], secret: Optional[str]) -> str:
        """Create a new short link.

        Args:
            link: Destination URL
            secret: Caller-supplied shared secret

        Returns:
            The new identifier

        Raises:
            MissingLinkError: If link is missing or empty
            MissingSecretError: If secret is missing or empty
            InvalidSecretError: If secret does not verify
            IdentifierCollisionError: If the generated identifier is taken
        """
        if not link:
            raise MissingLinkError()

        if not secret:
            raise MissingSecretError()

        if not verify_secret(secret, self.secret):
            self.logger.warning("Rejected link creation: invalid secret")
            raise InvalidSecretError()

        identifier = self.generator.generate()

        # Single best-effort check; the get/put pair is not atomic
        if await self.store.get(identifier):
            self.logger.error(f"Identifier collision: {identifier}")
            raise IdentifierCollisionError(f"Identifier '{identifier}' already exists")

        await self.store.put(identifier, LinkRecord(destination=link).to_json())

        self.logger.info(f"Created link: {identifier} -> {link}")
        return identifier

    async def resolve_link(self, identifier: str) -> Optional[str]:
        """Get the destination for an identifier.

        Args:
            identifier: The identifier to look up

        Returns:
            Destination URL or None if not found

        Raises:
            CorruptRecordError: If the stored value cannot be decoded
        """
        value = await self.store.get(identifier)

        if not value:
            self.logger.debug(f"Identifier not found: {identifier}")
            return None

        try:
            record = LinkRecord.from_json(value)
        except CorruptRecordError as e:
            self.logger.error(f"Corrupt record for {identifier}: {e}")
            raise

        self.logger.debug(f"Resolved link: {identifier} -> {record.destination}")
        return record.destination

    async def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        Returns:
            Dictionary with health status
        """
        store_healthy = await self.store.health_check()
        return {
            "store": store_healthy,
            "overall": store_healthy,
        }

    async def close(self) -> None:
        """Close store connections."""
        await self.store.close()
