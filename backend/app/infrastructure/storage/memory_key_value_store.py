"""Process-lifetime key/value store — nothing survives a restart."""

from app.application.interfaces import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    """Infrastructure adapter that keeps every collection in a dict."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._items: dict[str, str] = dict(initial or {})

    async def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def snapshot(self) -> dict[str, str]:
        """Copy of the raw stored text, keyed by collection."""
        return dict(self._items)
