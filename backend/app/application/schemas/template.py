"""Pydantic DTOs for message templates."""

from pydantic import BaseModel, Field

from app.domain.entities import TemplateCategory


class TemplateCreate(BaseModel):
    owner_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    category: TemplateCategory = TemplateCategory.CUSTOM


class TemplateResponse(BaseModel):
    id: str
    owner_id: str
    title: str
    content: str
    category: TemplateCategory

    model_config = {"from_attributes": True}
