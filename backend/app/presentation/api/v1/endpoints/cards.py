"""Digital card CRUD and share-link endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.application.schemas.card import (
    CardCreate,
    CardResponse,
    CardUpdate,
    ShareLinkResponse,
)
from app.application.services import CardService
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.dependencies import get_card_service

router = APIRouter(prefix="/cards", tags=["Cards"])


@router.get("", response_model=list[CardResponse])
async def list_cards(
    user_id: str | None = Query(None, description="Only cards owned by this user"),
    service: CardService = Depends(get_card_service),
) -> list[CardResponse]:
    if user_id is None:
        cards = await service.list_all_cards()
    else:
        cards = await service.list_cards(user_id)
    return [CardResponse.model_validate(c, from_attributes=True) for c in cards]


@router.post("", response_model=CardResponse, status_code=status.HTTP_201_CREATED)
async def create_card(
    data: CardCreate,
    service: CardService = Depends(get_card_service),
) -> CardResponse:
    card = await service.create_card(data)
    return CardResponse.model_validate(card, from_attributes=True)


@router.get("/{card_id}", response_model=CardResponse)
async def get_card(
    card_id: str,
    service: CardService = Depends(get_card_service),
) -> CardResponse:
    """Owner view of a card. Does not count as a view."""
    try:
        card = await service.get_card(card_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return CardResponse.model_validate(card, from_attributes=True)


@router.put("/{card_id}", response_model=CardResponse)
async def update_card(
    card_id: str,
    data: CardUpdate,
    service: CardService = Depends(get_card_service),
) -> CardResponse:
    try:
        card = await service.update_card(card_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return CardResponse.model_validate(card, from_attributes=True)


@router.delete("/{card_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_card(
    card_id: str,
    service: CardService = Depends(get_card_service),
) -> None:
    try:
        await service.delete_card(card_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/{card_id}/share", response_model=ShareLinkResponse)
async def share_card(
    card_id: str,
    service: CardService = Depends(get_card_service),
) -> ShareLinkResponse:
    """Short and portable links for the card, with a QR code."""
    try:
        links = await service.share_card(card_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ShareLinkResponse.model_validate(links, from_attributes=True)
