"""Pydantic DTOs for contacts and contact segments."""

from datetime import datetime

from pydantic import BaseModel, Field


class ContactCreate(BaseModel):
    owner_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=255)
    email: str = ""
    phone: str = ""
    last_meeting: datetime | None = None
    notes: str | None = None
    avatar_url: str | None = None
    linkedin: str | None = None
    twitter: str | None = None
    tag: str | None = Field(None, examples=["VIP"])


class ContactUpdate(BaseModel):
    """Schema for editing a contact — all fields optional."""

    name: str | None = Field(None, min_length=1, max_length=255)
    email: str | None = None
    phone: str | None = None
    last_meeting: datetime | None = None
    notes: str | None = None
    avatar_url: str | None = None
    linkedin: str | None = None
    twitter: str | None = None
    tag: str | None = None


class ContactResponse(BaseModel):
    id: str
    owner_id: str
    name: str
    email: str
    phone: str
    added_at: datetime
    last_meeting: datetime | None
    notes: str | None
    avatar_url: str | None
    linkedin: str | None
    twitter: str | None
    tag: str | None

    model_config = {"from_attributes": True}


class SegmentCreate(BaseModel):
    owner_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=100, examples=["VIP"])
    color: str = Field("#8b5cf6", max_length=32)
    description: str | None = None


class SegmentResponse(BaseModel):
    id: str
    owner_id: str
    name: str
    color: str
    description: str | None

    model_config = {"from_attributes": True}
