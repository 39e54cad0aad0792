"""Pydantic models for the persisted record layout.

Collections are stored as JSON arrays of camelCase objects (``userId``,
``uniqueViews``, ``cardStatus``...), the same shape the web client wrote to
``localStorage``. The portable share payload uses the DigitalCard shape too.
"""

from dataclasses import asdict
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.domain.entities import (
    CardStatus,
    CardTheme,
    Contact,
    ContactSegment,
    DigitalCard,
    LogEntry,
    MessageTemplate,
    SocialField,
    SocialFieldType,
    TemplateCategory,
    User,
    UserRole,
)


class _Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_json_dict(self) -> dict[str, Any]:
        """Dump using camelCase keys, ISO timestamps, and no null fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class UserRecord(_Record):
    id: str
    name: str
    email: str
    role: UserRole = UserRole.USER
    position: str = ""
    department: str = ""
    phone: str = ""
    card_status: CardStatus = CardStatus.NOT_ISSUED
    avatar_url: str | None = None
    issued_at: datetime | None = None

    @classmethod
    def from_entity(cls, user: User) -> "UserRecord":
        return cls.model_validate(asdict(user))

    def to_entity(self) -> User:
        return User(**self.model_dump())


class SocialFieldRecord(_Record):
    id: str
    type: SocialFieldType = SocialFieldType.CUSTOM
    label: str | None = None
    value: str = ""


class DigitalCardRecord(_Record):
    id: str
    user_id: str
    title: str = ""
    theme: CardTheme = CardTheme.CLASSIC
    color: str = "#3b82f6"
    prefix: str | None = None
    first_name: str
    middle_name: str | None = None
    last_name: str = ""
    suffix: str | None = None
    preferred_name: str | None = None
    maiden_name: str | None = None
    pronouns: str | None = None
    job_title: str = ""
    department: str | None = None
    company: str = ""
    headline: str | None = None
    fields: list[SocialFieldRecord] = []
    avatar_url: str | None = None
    cover_image_url: str | None = None
    views: int = 0
    unique_views: int = 0
    saves: int = 0

    @classmethod
    def from_entity(cls, card: DigitalCard) -> "DigitalCardRecord":
        return cls.model_validate(asdict(card))

    def to_entity(self) -> DigitalCard:
        data = self.model_dump(exclude={"fields"})
        return DigitalCard(
            **data,
            fields=[SocialField(**f.model_dump()) for f in self.fields],
        )


class ContactRecord(_Record):
    id: str
    owner_id: str
    name: str
    email: str = ""
    phone: str = ""
    added_at: datetime
    last_meeting: datetime | None = None
    notes: str | None = None
    avatar_url: str | None = None
    linkedin: str | None = None
    twitter: str | None = None
    tag: str | None = None

    @classmethod
    def from_entity(cls, contact: Contact) -> "ContactRecord":
        return cls.model_validate(asdict(contact))

    def to_entity(self) -> Contact:
        return Contact(**self.model_dump())


class ContactSegmentRecord(_Record):
    id: str
    owner_id: str
    name: str
    description: str | None = None
    color: str

    @classmethod
    def from_entity(cls, segment: ContactSegment) -> "ContactSegmentRecord":
        return cls.model_validate(asdict(segment))

    def to_entity(self) -> ContactSegment:
        return ContactSegment(**self.model_dump())


class MessageTemplateRecord(_Record):
    id: str
    owner_id: str
    title: str
    content: str
    category: TemplateCategory = TemplateCategory.CUSTOM

    @classmethod
    def from_entity(cls, template: MessageTemplate) -> "MessageTemplateRecord":
        return cls.model_validate(asdict(template))

    def to_entity(self) -> MessageTemplate:
        return MessageTemplate(**self.model_dump())


class LogEntryRecord(_Record):
    id: str
    action: str
    details: str
    timestamp: datetime
    admin_id: str | None = None

    @classmethod
    def from_entity(cls, entry: LogEntry) -> "LogEntryRecord":
        return cls.model_validate(asdict(entry))

    def to_entity(self) -> LogEntry:
        return LogEntry(**self.model_dump())
