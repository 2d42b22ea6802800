"""In-process store, for local runs and tests."""

from typing import Dict, Optional

from .base import LinkStoreBase


class MemoryLinkStore(LinkStoreBase):
    """Dictionary-backed link store. Contents are lost on restart."""

    def __init__(self, store_config: str = "memory://"):
        super().__init__(store_config)
        self._data: Dict[str, str] = {}

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def put(self, key: str, value: str) -> None:
        self._data[key] = value

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        pass

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: str) -> bool:
        return key in self._data
