"""Unit tests for portable payload decoding and share URL building."""

import base64
import json

import pytest

from app.application.services.card_sharing import (
    build_portable_url,
    build_short_url,
    decode_portable_card,
    encode_portable_card,
)
from app.domain.entities import DigitalCard, SocialField, SocialFieldType
from app.domain.exceptions import CardNotFoundError


def _card(**overrides) -> DigitalCard:
    values = dict(
        id="card-9",
        user_id="user-9",
        title="Work",
        first_name="Zoë",
        last_name="Ångström",
        fields=[SocialField(id="f1", type=SocialFieldType.GITHUB, value="zoe")],
    )
    values.update(overrides)
    return DigitalCard(**values)


def _b64(data) -> str:
    return base64.b64encode(json.dumps(data).encode("utf-8")).decode("ascii")


def test_decode_restores_non_ascii_card():
    card = decode_portable_card(encode_portable_card(_card()), "card-9")

    assert card.first_name == "Zoë"
    assert card.last_name == "Ångström"
    assert card.fields[0].type == SocialFieldType.GITHUB


def test_decode_accepts_space_for_plus_and_missing_padding():
    payload = encode_portable_card(_card(headline="??>>??>>"))
    mangled = payload.replace("+", " ").rstrip("=")

    card = decode_portable_card(mangled, "card-9")

    assert card.headline == "??>>??>>"


def test_decode_accepts_url_safe_alphabet():
    payload = encode_portable_card(_card(headline="??>>??>>"))
    url_safe = payload.replace("+", "-").replace("/", "_")

    assert decode_portable_card(url_safe, "card-9").headline == "??>>??>>"


def test_decode_accepts_latin1_payload_from_browser_btoa():
    record = {"id": "card-x", "userId": "u-1", "firstName": "José", "lastName": "Müller"}
    payload = base64.b64encode(json.dumps(record, ensure_ascii=False).encode("latin-1")).decode()

    card = decode_portable_card(payload, "card-x")

    assert card.first_name == "José"
    assert card.last_name == "Müller"


def test_decode_keeps_payload_id_when_link_id_differs():
    card = decode_portable_card(encode_portable_card(_card()), "card-other")

    assert card.id == "card-9"


def test_decode_minimal_record_fills_defaults():
    card = decode_portable_card(_b64({"id": "card-1", "userId": "u", "firstName": "Min"}), "card-1")

    assert card.views == 0
    assert card.fields == []


@pytest.mark.parametrize(
    "payload",
    [
        "not base64 at all!",
        base64.b64encode(b"\xff\xfe\xfd").decode(),
        base64.b64encode(b"{broken json").decode(),
        _b64(["a", "list"]),
        _b64({"id": "card-1"}),
    ],
)
def test_undecodable_payload_raises_card_not_found(payload):
    with pytest.raises(CardNotFoundError):
        decode_portable_card(payload, "card-1")


def test_short_url_strips_trailing_slash():
    assert build_short_url("https://hawk.example/", "card-1") == "https://hawk.example/c/card-1"


def test_portable_url_is_url_encoded():
    url = build_portable_url("https://hawk.example", _card())

    query = url.split("?d=", 1)[1]
    assert "+" not in query
    assert "/" not in query
    assert "=" not in query
