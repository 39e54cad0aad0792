"""Abstract repository interface (port) for DigitalCard persistence."""

from abc import ABC, abstractmethod

from app.domain.entities import DigitalCard


class CardRepository(ABC):
    """Port for card persistence — new cards are appended."""

    @abstractmethod
    async def get_all(self) -> list[DigitalCard]:
        ...

    @abstractmethod
    async def get_by_owner(self, user_id: str) -> list[DigitalCard]:
        """Return cards whose ``user_id`` matches, in stored order."""
        ...

    @abstractmethod
    async def get_by_id(self, card_id: str) -> DigitalCard | None:
        ...

    @abstractmethod
    async def save(self, card: DigitalCard) -> DigitalCard:
        """Replace the card with the same id, or append it. Last writer wins."""
        ...

    @abstractmethod
    async def delete(self, card_id: str) -> bool:
        """Delete a card. Returns True if deleted, False if not found."""
        ...
