"""Domain entities for collected contacts and their segments."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Contact:
    """A person collected by a card owner.

    ``tag`` is free text; it doubles as the name of the segment the contact
    belongs to.
    """

    id: str
    owner_id: str
    name: str
    email: str
    phone: str
    added_at: datetime
    last_meeting: datetime | None = None
    notes: str | None = None
    avatar_url: str | None = None
    linkedin: str | None = None
    twitter: str | None = None
    tag: str | None = None


@dataclass
class ContactSegment:
    """A named, colored grouping of contacts.

    Membership is not stored: a contact is a member when its ``tag`` equals
    ``name`` exactly. Renaming a segment therefore drops all its members.
    """

    id: str
    owner_id: str
    name: str
    color: str
    description: str | None = None

    def includes(self, contact: Contact) -> bool:
        return contact.owner_id == self.owner_id and contact.tag == self.name
