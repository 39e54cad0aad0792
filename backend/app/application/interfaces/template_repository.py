"""Abstract repository interface (port) for MessageTemplate persistence."""

from abc import ABC, abstractmethod

from app.domain.entities import MessageTemplate


class TemplateRepository(ABC):

    @abstractmethod
    async def get_by_owner(self, owner_id: str) -> list[MessageTemplate]:
        ...

    @abstractmethod
    async def add(self, template: MessageTemplate) -> MessageTemplate:
        """Append a new template."""
        ...

    @abstractmethod
    async def delete(self, template_id: str) -> bool:
        ...
