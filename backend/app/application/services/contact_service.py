"""Application service (use case) for contacts and contact segments."""

import logging

from app.application.interfaces import ContactRepository, SegmentRepository
from app.application.schemas.contact import ContactCreate, ContactUpdate, SegmentCreate
from app.application.services.id_generator import Clock, TimestampIdGenerator, utc_now
from app.domain.entities import Contact, ContactSegment
from app.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class ContactService:
    """Orchestrates contact CRUD and tag-based segment membership.

    Segments hold no member list. Members are the owner's contacts whose
    ``tag`` equals the segment name exactly (case-sensitive, no partial
    match), so renaming or deleting a segment leaves the tags dangling.
    """

    def __init__(
        self,
        contacts: ContactRepository,
        segments: SegmentRepository,
        clock: Clock = utc_now,
        ids: TimestampIdGenerator | None = None,
    ):
        self._contacts = contacts
        self._segments = segments
        self._clock = clock
        self._ids = ids or TimestampIdGenerator(clock)

    # ── Contacts ────────────────────────────────────────────────────

    async def list_contacts(self, owner_id: str, tag: str | None = None) -> list[Contact]:
        contacts = await self._contacts.get_by_owner(owner_id)
        if tag is None:
            return contacts
        return [c for c in contacts if c.tag == tag]

    async def get_contact(self, contact_id: str) -> Contact:
        contact = await self._contacts.get_by_id(contact_id)
        if contact is None:
            raise EntityNotFoundError("Contact", contact_id)
        return contact

    async def add_contact(self, data: ContactCreate) -> Contact:
        contact = Contact(
            **data.model_dump(),
            id=self._ids.new_id("c"),
            added_at=self._clock(),
        )
        await self._contacts.add(contact)
        logger.info("Added contact %s for owner %s", contact.id, contact.owner_id)
        return contact

    async def update_contact(self, contact_id: str, data: ContactUpdate) -> Contact:
        contact = await self.get_contact(contact_id)
        for name, value in data.model_dump(exclude_unset=True).items():
            if value is None and name in ("name", "email", "phone"):
                continue
            setattr(contact, name, value)
        return await self._contacts.update(contact)

    async def delete_contact(self, contact_id: str) -> bool:
        if not await self._contacts.delete(contact_id):
            raise EntityNotFoundError("Contact", contact_id)
        return True

    # ── Segments ────────────────────────────────────────────────────

    async def list_segments(self, owner_id: str) -> list[ContactSegment]:
        return await self._segments.get_by_owner(owner_id)

    async def get_segment(self, segment_id: str) -> ContactSegment:
        segment = await self._segments.get_by_id(segment_id)
        if segment is None:
            raise EntityNotFoundError("ContactSegment", segment_id)
        return segment

    async def create_segment(self, data: SegmentCreate) -> ContactSegment:
        segment = ContactSegment(**data.model_dump(), id=self._ids.new_id("seg"))
        return await self._segments.add(segment)

    async def delete_segment(self, segment_id: str) -> bool:
        if not await self._segments.delete(segment_id):
            raise EntityNotFoundError("ContactSegment", segment_id)
        return True

    async def segment_members(self, segment_id: str) -> list[Contact]:
        segment = await self.get_segment(segment_id)
        contacts = await self._contacts.get_by_owner(segment.owner_id)
        return [c for c in contacts if segment.includes(c)]
