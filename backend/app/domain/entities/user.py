"""Domain entity for users — identity records that own cards and contacts."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class UserRole(str, Enum):
    """Role stored on the user; decides which view a login lands on."""

    ADMIN = "ADMIN"
    USER = "USER"


class CardStatus(str, Enum):
    """Issuance lifecycle of a user's access card: NOT_ISSUED → ACTIVE ⇄ REVOKED."""

    NOT_ISSUED = "NOT_ISSUED"
    ACTIVE = "ACTIVE"
    REVOKED = "REVOKED"


@dataclass
class User:
    """A person known to the system.

    ``email`` is unique case-insensitively, but that is only checked at signup.
    ``issued_at`` is stamped each time the card status moves to ACTIVE and is
    left untouched by every other transition.
    """

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

    def set_card_status(self, status: CardStatus, now: datetime) -> None:
        """Apply a card status transition."""
        self.card_status = status
        if status == CardStatus.ACTIVE:
            self.issued_at = now

    def matches_email(self, email: str) -> bool:
        return self.email.lower() == email.strip().lower()
