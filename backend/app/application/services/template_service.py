"""Application service (use case) for message templates."""

from app.application.interfaces import TemplateRepository
from app.application.schemas.template import TemplateCreate
from app.application.services.id_generator import TimestampIdGenerator
from app.domain.entities import MessageTemplate
from app.domain.exceptions import EntityNotFoundError


class TemplateService:

    def __init__(self, repository: TemplateRepository, ids: TimestampIdGenerator | None = None):
        self._repository = repository
        self._ids = ids or TimestampIdGenerator()

    async def list_templates(self, owner_id: str) -> list[MessageTemplate]:
        return await self._repository.get_by_owner(owner_id)

    async def create_template(self, data: TemplateCreate) -> MessageTemplate:
        template = MessageTemplate(**data.model_dump(), id=self._ids.new_id("tm"))
        return await self._repository.add(template)

    async def delete_template(self, template_id: str) -> bool:
        if not await self._repository.delete(template_id):
            raise EntityNotFoundError("MessageTemplate", template_id)
        return True
