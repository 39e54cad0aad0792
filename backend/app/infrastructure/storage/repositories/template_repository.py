"""Template repository backed by the ``hawk_templates`` collection."""

from app.application.interfaces import TemplateRepository
from app.application.schemas.records import MessageTemplateRecord
from app.domain.entities import MessageTemplate
from app.infrastructure.storage.repositories.collection_repository import (
    JsonCollectionRepository,
)
from app.infrastructure.storage.storage_keys import StorageKey


class StoredTemplateRepository(JsonCollectionRepository[MessageTemplate], TemplateRepository):
    key = StorageKey.TEMPLATES
    record_type = MessageTemplateRecord

    async def get_by_owner(self, owner_id: str) -> list[MessageTemplate]:
        return [t for t in await self._load() if t.owner_id == owner_id]

    async def add(self, template: MessageTemplate) -> MessageTemplate:
        return await self._append(template)

    async def delete(self, template_id: str) -> bool:
        return await self._remove(template_id)
