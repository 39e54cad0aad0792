"""Segment repository backed by the ``hawk_segments`` collection."""

from app.application.interfaces import SegmentRepository
from app.application.schemas.records import ContactSegmentRecord
from app.domain.entities import ContactSegment
from app.infrastructure.storage.repositories.collection_repository import (
    JsonCollectionRepository,
)
from app.infrastructure.storage.storage_keys import StorageKey


class StoredSegmentRepository(JsonCollectionRepository[ContactSegment], SegmentRepository):
    key = StorageKey.SEGMENTS
    record_type = ContactSegmentRecord

    async def get_by_owner(self, owner_id: str) -> list[ContactSegment]:
        return [s for s in await self._load() if s.owner_id == owner_id]

    async def get_by_id(self, segment_id: str) -> ContactSegment | None:
        return await self._find(segment_id)

    async def add(self, segment: ContactSegment) -> ContactSegment:
        return await self._append(segment)

    async def delete(self, segment_id: str) -> bool:
        return await self._remove(segment_id)
