"""Card repository backed by the ``hawk_cards`` collection."""

from app.application.interfaces import CardRepository
from app.application.schemas.records import DigitalCardRecord
from app.domain.entities import DigitalCard
from app.infrastructure.storage.repositories.collection_repository import (
    JsonCollectionRepository,
)
from app.infrastructure.storage.storage_keys import StorageKey


class StoredCardRepository(JsonCollectionRepository[DigitalCard], CardRepository):
    key = StorageKey.CARDS
    record_type = DigitalCardRecord

    async def get_all(self) -> list[DigitalCard]:
        return await self._load()

    async def get_by_owner(self, user_id: str) -> list[DigitalCard]:
        return [c for c in await self._load() if c.user_id == user_id]

    async def get_by_id(self, card_id: str) -> DigitalCard | None:
        return await self._find(card_id)

    async def save(self, card: DigitalCard) -> DigitalCard:
        if not await self._replace(card):
            await self._append(card)
        return card

    async def delete(self, card_id: str) -> bool:
        return await self._remove(card_id)
