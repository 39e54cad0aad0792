"""Abstract repository interface (port) for ContactSegment persistence."""

from abc import ABC, abstractmethod

from app.domain.entities import ContactSegment


class SegmentRepository(ABC):

    @abstractmethod
    async def get_by_owner(self, owner_id: str) -> list[ContactSegment]:
        ...

    @abstractmethod
    async def get_by_id(self, segment_id: str) -> ContactSegment | None:
        ...

    @abstractmethod
    async def add(self, segment: ContactSegment) -> ContactSegment:
        """Append a new segment."""
        ...

    @abstractmethod
    async def delete(self, segment_id: str) -> bool:
        ...
