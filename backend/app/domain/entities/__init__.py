from .user import User, UserRole, CardStatus
from .digital_card import DigitalCard, SocialField, SocialFieldType, CardTheme
from .contact import Contact, ContactSegment
from .message_template import MessageTemplate, TemplateCategory
from .log_entry import LogEntry
from .card_resolution import CardResolution, CardSource

__all__ = [
    "User",
    "UserRole",
    "CardStatus",
    "DigitalCard",
    "SocialField",
    "SocialFieldType",
    "CardTheme",
    "Contact",
    "ContactSegment",
    "MessageTemplate",
    "TemplateCategory",
    "LogEntry",
    "CardResolution",
    "CardSource",
]
