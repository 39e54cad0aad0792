"""API tests for card sharing and public card links."""

import pytest

from app.application.services.card_sharing import encode_portable_card
from app.domain.entities import DigitalCard


@pytest.mark.asyncio
async def test_public_link_counts_one_view(client_factory):
    async with client_factory() as client:
        response = await client.get("/api/v1/c/card-1")
        owner_view = await client.get("/api/v1/cards/card-1")

    assert response.status_code == 200
    data = response.json()
    assert data["source"] == "local"
    assert data["card"]["views"] == 121
    assert data["card"]["unique_views"] == 86
    assert owner_view.json()["views"] == 121


@pytest.mark.asyncio
async def test_portable_link_serves_embedded_card(client_factory, store):
    card = DigitalCard(
        id="card-remote",
        user_id="user-9",
        title="Travel",
        first_name="Grace",
        last_name="Hopper",
        views=7,
    )

    async with client_factory() as client:
        response = await client.get(
            "/api/v1/c/card-remote", params={"d": encode_portable_card(card)}
        )

    assert response.status_code == 200
    data = response.json()
    assert data["source"] == "portable"
    assert data["card"]["first_name"] == "Grace"
    assert data["card"]["views"] == 7
    assert "hawk_cards" not in store.snapshot()


@pytest.mark.asyncio
async def test_unknown_card_is_404(client_factory):
    async with client_factory() as client:
        missing = await client.get("/api/v1/c/card-404")
        garbage = await client.get("/api/v1/c/card-404", params={"d": "not-a-card"})

    assert missing.status_code == 404
    assert missing.json()["detail"] == "Card not found"
    assert garbage.status_code == 404


@pytest.mark.asyncio
async def test_share_then_open_portable_link(client_factory):
    async with client_factory() as client:
        share = await client.post("/api/v1/cards/card-1/share")
        assert share.status_code == 200
        links = share.json()
        portable_path = links["portable_url"].split("/c/", 1)[1]
        opened = await client.get(f"/api/v1/c/{portable_path.replace('card-1', 'card-gone', 1)}")

    assert links["short_url"].endswith("/c/card-1")
    assert links["qr_code"].startswith("data:image/png;base64,")
    assert opened.status_code == 200
    assert opened.json()["source"] == "portable"
    assert opened.json()["card"]["id"] == "card-1"


@pytest.mark.asyncio
async def test_vcard_download_counts_save(client_factory):
    async with client_factory() as client:
        response = await client.get("/api/v1/c/card-1/vcard")
        card = await client.get("/api/v1/cards/card-1")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/vcard")
    assert 'filename="John_Anderson.vcf"' in response.headers["content-disposition"]
    assert response.text.startswith("BEGIN:VCARD\nVERSION:3.0\nFN:John Anderson")
    assert card.json()["saves"] == 13
    assert card.json()["views"] == 120


@pytest.mark.asyncio
async def test_card_crud(client_factory):
    async with client_factory() as client:
        created = await client.post(
            "/api/v1/cards",
            json={
                "user_id": "user-1",
                "title": "Side project",
                "first_name": "John",
                "last_name": "Anderson",
                "fields": [{"type": "github", "value": "janderson"}],
            },
        )
        assert created.status_code == 201
        card_id = created.json()["id"]

        updated = await client.put(f"/api/v1/cards/{card_id}", json={"theme": "flat"})
        listed = await client.get("/api/v1/cards", params={"user_id": "user-1"})
        deleted = await client.delete(f"/api/v1/cards/{card_id}")
        gone = await client.get(f"/api/v1/cards/{card_id}")

    assert created.json()["views"] == 0
    assert updated.json()["theme"] == "flat"
    assert [c["id"] for c in listed.json()] == ["card-1", card_id]
    assert deleted.status_code == 204
    assert gone.status_code == 404
