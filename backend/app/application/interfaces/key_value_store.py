"""Abstract key/value store interface (port) — the persistence primitive.

Every collection is stored as one JSON text value under a fixed key, the way
a browser ``localStorage`` holds it. Adapters decide where the text lives.
"""

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Port for raw text persistence keyed by collection name."""

    @abstractmethod
    async def get_item(self, key: str) -> str | None:
        """Return the stored text for ``key`` or None when absent."""
        ...

    @abstractmethod
    async def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...
