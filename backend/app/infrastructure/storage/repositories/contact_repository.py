"""Contact repository backed by the ``hawk_contacts`` collection."""

from app.application.interfaces import ContactRepository
from app.application.schemas.records import ContactRecord
from app.domain.entities import Contact
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.storage.repositories.collection_repository import (
    JsonCollectionRepository,
)
from app.infrastructure.storage.storage_keys import StorageKey


class StoredContactRepository(JsonCollectionRepository[Contact], ContactRepository):
    key = StorageKey.CONTACTS
    record_type = ContactRecord

    async def get_by_owner(self, owner_id: str) -> list[Contact]:
        return [c for c in await self._load() if c.owner_id == owner_id]

    async def get_by_id(self, contact_id: str) -> Contact | None:
        return await self._find(contact_id)

    async def add(self, contact: Contact) -> Contact:
        return await self._prepend(contact)

    async def update(self, contact: Contact) -> Contact:
        if not await self._replace(contact):
            raise EntityNotFoundError("Contact", contact.id)
        return contact

    async def delete(self, contact_id: str) -> bool:
        return await self._remove(contact_id)
