"""Abstract key-value store interface (port): the catalog's persistence contract."""

from abc import ABC, abstractmethod
from typing import Any


class KeyValueStore(ABC):
    """Port for durable, key-ordered record storage: implemented in the infrastructure layer.

    Values are opaque JSON-compatible dicts. Each method completes its write
    before returning, so anything stored survives a process restart.
    """

    @abstractmethod
    async def get(self, key: str) -> dict[str, Any] | None:
        """Retrieve the value stored under ``key``."""
        ...

    @abstractmethod
    async def insert(self, key: str, value: dict[str, Any]) -> dict[str, Any] | None:
        """Insert or overwrite ``key``. Returns the previous value, if any."""
        ...

    @abstractmethod
    async def remove(self, key: str) -> dict[str, Any] | None:
        """Delete ``key``. Returns the removed value, or None if absent."""
        ...

    @abstractmethod
    async def values(self) -> list[dict[str, Any]]:
        """Return every stored value in ascending key order."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored keys."""
        ...
