"""Abstract base class for link store implementations."""

from abc import ABC, abstractmethod
from typing import Optional


class LinkStoreBase(ABC):
    """Key-value store holding serialized link records.

    Values are opaque strings to the store. There are no transactional
    guarantees across a get and a subsequent put.
    """

    def __init__(self, store_config: str):
        """Initialize store.

        Args:
            store_config: Store connection string
        """
        self.store_config = store_config

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Get the value stored under a key.

        Args:
            key: The identifier to look up

        Returns:
            The stored value, or None if absent
        """
        pass

    @abstractmethod
    async def put(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value.

        Args:
            key: The identifier
            value: Serialized link record
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is reachable.

        Returns:
            True if healthy, False otherwise
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close store connections."""
        pass
