"""Pydantic DTOs for the DigitalCard feature."""

from pydantic import BaseModel, Field

from app.domain.entities import CardSource, CardTheme, SocialFieldType


class SocialFieldSchema(BaseModel):
    """A single contact method. ``id`` is generated when omitted."""

    id: str | None = None
    type: SocialFieldType
    label: str | None = None
    value: str = ""

    model_config = {"from_attributes": True}


class CardCreate(BaseModel):
    """Schema for creating a new card — counters always start at zero."""

    user_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=100, examples=["Work"])
    theme: CardTheme = CardTheme.CLASSIC
    color: str = Field("#3b82f6", max_length=32)
    prefix: str | None = None
    first_name: str = Field(..., min_length=1, max_length=100)
    middle_name: str | None = None
    last_name: str = Field("", max_length=100)
    suffix: str | None = None
    preferred_name: str | None = None
    maiden_name: str | None = None
    pronouns: str | None = None
    job_title: str = ""
    department: str | None = None
    company: str = ""
    headline: str | None = None
    fields: list[SocialFieldSchema] = []
    avatar_url: str | None = None
    cover_image_url: str | None = None


class CardUpdate(BaseModel):
    """Schema for editing a card — all fields optional, counters not editable."""

    title: str | None = Field(None, min_length=1, max_length=100)
    theme: CardTheme | None = None
    color: str | None = Field(None, max_length=32)
    prefix: str | None = None
    first_name: str | None = Field(None, min_length=1, max_length=100)
    middle_name: str | None = None
    last_name: str | None = None
    suffix: str | None = None
    preferred_name: str | None = None
    maiden_name: str | None = None
    pronouns: str | None = None
    job_title: str | None = None
    department: str | None = None
    company: str | None = None
    headline: str | None = None
    fields: list[SocialFieldSchema] | None = None
    avatar_url: str | None = None
    cover_image_url: str | None = None


class CardResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    user_id: str
    title: str
    theme: CardTheme
    color: str
    prefix: str | None
    first_name: str
    middle_name: str | None
    last_name: str
    suffix: str | None
    preferred_name: str | None
    maiden_name: str | None
    pronouns: str | None
    job_title: str
    department: str | None
    company: str
    headline: str | None
    fields: list[SocialFieldSchema]
    avatar_url: str | None
    cover_image_url: str | None
    views: int
    unique_views: int
    saves: int

    model_config = {"from_attributes": True}


class PublicCardResponse(BaseModel):
    """A resolved public card and which path produced it."""

    card: CardResponse
    source: CardSource


class ShareLinkResponse(BaseModel):
    """Short and portable share URLs for a card, plus a QR code of the latter."""

    card_id: str
    short_url: str
    portable_url: str
    qr_code: str | None = None
