"""Domain entity for reusable outreach messages."""

from dataclasses import dataclass
from enum import Enum


class TemplateCategory(str, Enum):
    GREETING = "greeting"
    FOLLOW_UP = "follow-up"
    HOLIDAY = "holiday"
    CUSTOM = "custom"


@dataclass
class MessageTemplate:
    """A message body a card owner can send to contacts."""

    id: str
    owner_id: str
    title: str
    content: str
    category: TemplateCategory = TemplateCategory.CUSTOM
