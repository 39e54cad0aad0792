"""Abstract repository interface (port) for Contact persistence."""

from abc import ABC, abstractmethod

from app.domain.entities import Contact


class ContactRepository(ABC):
    """Port for contact persistence — newest contacts first."""

    @abstractmethod
    async def get_by_owner(self, owner_id: str) -> list[Contact]:
        ...

    @abstractmethod
    async def get_by_id(self, contact_id: str) -> Contact | None:
        ...

    @abstractmethod
    async def add(self, contact: Contact) -> Contact:
        """Insert a new contact at the head of the collection."""
        ...

    @abstractmethod
    async def update(self, contact: Contact) -> Contact:
        """Replace the stored contact with the same id."""
        ...

    @abstractmethod
    async def delete(self, contact_id: str) -> bool:
        """Delete a contact. Returns True if deleted, False if not found."""
        ...
