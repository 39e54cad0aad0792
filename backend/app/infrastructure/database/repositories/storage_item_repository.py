"""Concrete key/value store backed by SQLAlchemy."""

from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import KeyValueStore
from app.infrastructure.database.models import StorageItemModel


class SQLAlchemyKeyValueStore(KeyValueStore):
    """Implements the KeyValueStore port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_item(self, key: str) -> str | None:
        model = await self._session.get(StorageItemModel, key)
        return model.value if model else None

    async def set_item(self, key: str, value: str) -> None:
        model = await self._session.get(StorageItemModel, key)
        if model is None:
            self._session.add(StorageItemModel(key=key, value=value))
        else:
            model.value = value
            model.updated_at = datetime.now(timezone.utc)
        await self._session.flush()

