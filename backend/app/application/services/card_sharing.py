"""Share links for cards and decoding of the portable payload.

A card can be shared two ways:

* short link ``{base}/c/{id}`` — resolves only where the card is stored;
* portable link ``{base}/c/{id}?d=<base64(JSON(card))>`` — carries the whole
  card, resolves anywhere, but is a frozen copy that never updates counters.
"""

import base64
import json
import logging
from dataclasses import dataclass
from urllib.parse import quote, urlencode

from app.application.schemas.records import DigitalCardRecord
from app.domain.entities import DigitalCard
from app.domain.exceptions import CardNotFoundError

logger = logging.getLogger(__name__)

PORTABLE_PARAM = "d"


@dataclass
class ShareLinks:
    card_id: str
    short_url: str
    portable_url: str
    qr_code: str | None = None


def encode_portable_card(card: DigitalCard) -> str:
    """Serialize the full card to base64 of its camelCase JSON."""
    record = DigitalCardRecord.from_entity(card).to_json_dict()
    raw = json.dumps(record, separators=(",", ":"), ensure_ascii=False)
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


def decode_portable_card(payload: str, card_id: str) -> DigitalCard:
    """Decode a ``d`` payload back into a card.

    Raises:
        CardNotFoundError: if the payload is not base64, not JSON, or not a
            card object.
    """
    # Query parsing turns '+' into ' '; url-safe alphabets are accepted too.
    normalized = (
        payload.strip().replace(" ", "+").replace("-", "+").replace("_", "/")
    )
    normalized += "=" * (-len(normalized) % 4)
    try:
        raw = base64.b64decode(normalized, validate=True)
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError:
            # btoa() output: one Latin-1 byte per character up to U+00FF
            text = raw.decode("latin-1")
        data = json.loads(text)
        card = DigitalCardRecord.model_validate(data).to_entity()
    except ValueError as exc:
        logger.info("Portable payload for card %s could not be decoded: %s", card_id, exc)
        raise CardNotFoundError(card_id, "Card data could not be decoded") from exc

    if card.id != card_id:
        logger.debug("Portable payload id %s differs from link id %s", card.id, card_id)
    return card


def build_short_url(base_url: str, card_id: str) -> str:
    return f"{base_url.rstrip('/')}/c/{quote(card_id, safe='')}"


def build_portable_url(base_url: str, card: DigitalCard) -> str:
    query = urlencode({PORTABLE_PARAM: encode_portable_card(card)})
    return f"{build_short_url(base_url, card.id)}?{query}"
