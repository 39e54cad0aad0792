"""Public card links: ``/c/{card_id}`` and its vCard download.

A stored card is served and counted. An unknown id falls back to the card
embedded in the ``d`` query parameter, which is served as-is.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from app.application.schemas.card import CardResponse, PublicCardResponse
from app.application.services import CardService
from app.application.services.card_sharing import PORTABLE_PARAM
from app.application.services.vcard_builder import (
    VCARD_MEDIA_TYPE,
    build_card_vcard,
    card_vcard_filename,
)
from app.domain.exceptions import CardNotFoundError
from app.infrastructure.dependencies import get_card_service

router = APIRouter(prefix="/c", tags=["Public Cards"])


@router.get("/{card_id}", response_model=PublicCardResponse)
async def resolve_card(
    card_id: str,
    payload: str | None = Query(None, alias=PORTABLE_PARAM, description="Portable card payload"),
    service: CardService = Depends(get_card_service),
) -> PublicCardResponse:
    try:
        resolution = await service.resolve_public_card(card_id, payload)
    except CardNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.reason)
    return PublicCardResponse(
        card=CardResponse.model_validate(resolution.card, from_attributes=True),
        source=resolution.source,
    )


@router.get("/{card_id}/vcard")
async def download_card_vcard(
    card_id: str,
    payload: str | None = Query(None, alias=PORTABLE_PARAM, description="Portable card payload"),
    service: CardService = Depends(get_card_service),
) -> Response:
    """Save the card to contacts. Counts a save for stored cards only."""
    try:
        resolution = await service.register_save(card_id, payload)
    except CardNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.reason)
    return Response(
        content=build_card_vcard(resolution.card),
        media_type=VCARD_MEDIA_TYPE,
        headers={
            "Content-Disposition": (
                f'attachment; filename="{card_vcard_filename(resolution.card)}"'
            )
        },
    )
