"""Application service (use case) for cards: editing, sharing and public resolution."""

import logging
from collections.abc import Callable

from app.application.interfaces import CardRepository
from app.application.schemas.card import CardCreate, CardUpdate, SocialFieldSchema
from app.application.services.card_sharing import (
    ShareLinks,
    build_portable_url,
    build_short_url,
    decode_portable_card,
)
from app.application.services.id_generator import Clock, TimestampIdGenerator, utc_now
from app.domain.entities import CardResolution, CardSource, DigitalCard, SocialField
from app.domain.exceptions import CardNotFoundError, EntityNotFoundError

logger = logging.getLogger(__name__)

QrRenderer = Callable[[str], str | None]

# Attributes an update may not clear
_REQUIRED_ATTRS = frozenset(
    {"title", "theme", "color", "first_name", "last_name", "job_title", "company"}
)


class CardService:
    """Orchestrates card CRUD and the two-path public resolution.

    Resolution tries the local store first and falls back to the portable
    payload. The two paths are never mixed: a portable card is returned as
    decoded and nothing is written.
    """

    def __init__(
        self,
        repository: CardRepository,
        share_base_url: str,
        clock: Clock = utc_now,
        ids: TimestampIdGenerator | None = None,
        qr_renderer: QrRenderer | None = None,
    ):
        self._repository = repository
        self._share_base_url = share_base_url
        self._ids = ids or TimestampIdGenerator(clock)
        self._qr_renderer = qr_renderer

    # ── CRUD ────────────────────────────────────────────────────────

    async def list_cards(self, user_id: str) -> list[DigitalCard]:
        return await self._repository.get_by_owner(user_id)

    async def list_all_cards(self) -> list[DigitalCard]:
        return await self._repository.get_all()

    async def get_card(self, card_id: str) -> DigitalCard:
        card = await self._repository.get_by_id(card_id)
        if card is None:
            raise EntityNotFoundError("DigitalCard", card_id)
        return card

    async def create_card(self, data: CardCreate) -> DigitalCard:
        """Create a card with a fresh id and all counters at zero."""
        values = data.model_dump(exclude={"fields"})
        card = DigitalCard(
            **values,
            id=self._ids.new_id("card"),
            fields=self._to_fields(data.fields),
            views=0,
            unique_views=0,
            saves=0,
        )
        await self.save_card(card)
        logger.info("Created card %s (%s) for user %s", card.id, card.display_name, card.user_id)
        return card

    async def update_card(self, card_id: str, data: CardUpdate) -> DigitalCard:
        card = await self.get_card(card_id)
        changes = data.model_dump(exclude_unset=True, exclude={"fields"})
        for name, value in changes.items():
            if value is None and name in _REQUIRED_ATTRS:
                continue
            setattr(card, name, value)
        if data.fields is not None:
            card.fields = self._to_fields(data.fields)
        return await self.save_card(card)

    async def save_card(self, card: DigitalCard) -> DigitalCard:
        """Persist the whole card, replacing the stored copy with the same id."""
        return await self._repository.save(card)

    async def delete_card(self, card_id: str) -> bool:
        if not await self._repository.delete(card_id):
            raise EntityNotFoundError("DigitalCard", card_id)
        return True

    def _to_fields(self, fields: list[SocialFieldSchema]) -> list[SocialField]:
        return [
            SocialField(
                id=f.id or self._ids.new_id("f"),
                type=f.type,
                label=f.label,
                value=f.value,
            )
            for f in fields
        ]

    # ── Counters ────────────────────────────────────────────────────

    async def increment_card_views(self, card_id: str) -> DigitalCard | None:
        """Count a view on a stored card. Unknown ids are ignored."""
        card = await self._repository.get_by_id(card_id)
        if card is None:
            return None
        card.record_view()
        return await self.save_card(card)

    async def increment_card_saves(self, card_id: str) -> DigitalCard | None:
        """Count a save on a stored card. Unknown ids are ignored."""
        card = await self._repository.get_by_id(card_id)
        if card is None:
            return None
        card.record_save()
        return await self.save_card(card)

    # ── Public resolution ───────────────────────────────────────────

    async def resolve_public_card(
        self, card_id: str, portable_payload: str | None = None
    ) -> CardResolution:
        """Resolve ``/c/{card_id}`` and count the view when the card is stored.

        Raises:
            CardNotFoundError: if the id is unknown and there is no usable payload.
        """
        card = await self.increment_card_views(card_id)
        if card is not None:
            return CardResolution(card=card, source=CardSource.LOCAL)
        return self._resolve_portable(card_id, portable_payload)

    async def register_save(
        self, card_id: str, portable_payload: str | None = None
    ) -> CardResolution:
        """Resolve a card for download, counting the save when it is stored."""
        card = await self.increment_card_saves(card_id)
        if card is not None:
            return CardResolution(card=card, source=CardSource.LOCAL)
        return self._resolve_portable(card_id, portable_payload)

    def _resolve_portable(
        self, card_id: str, portable_payload: str | None
    ) -> CardResolution:
        if not portable_payload:
            raise CardNotFoundError(card_id)
        card = decode_portable_card(portable_payload, card_id)
        return CardResolution(card=card, source=CardSource.PORTABLE)

    # ── Sharing ─────────────────────────────────────────────────────

    async def share_card(self, card_id: str) -> ShareLinks:
        """Build both links. The QR code encodes the portable link, or the
        short link when the portable one is too long to encode."""
        card = await self.get_card(card_id)
        short_url = build_short_url(self._share_base_url, card.id)
        portable_url = build_portable_url(self._share_base_url, card)

        qr_code = None
        if self._qr_renderer is not None:
            qr_code = self._qr_renderer(portable_url) or self._qr_renderer(short_url)
        return ShareLinks(
            card_id=card.id,
            short_url=short_url,
            portable_url=portable_url,
            qr_code=qr_code,
        )
