"""Contact CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from app.application.schemas.contact import ContactCreate, ContactResponse, ContactUpdate
from app.application.services import ContactService
from app.application.services.vcard_builder import (
    VCARD_MEDIA_TYPE,
    build_contact_vcard,
    contact_vcard_filename,
)
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.dependencies import get_contact_service

router = APIRouter(prefix="/contacts", tags=["Contacts"])


@router.get("", response_model=list[ContactResponse])
async def list_contacts(
    owner_id: str = Query(..., description="Owner of the address book"),
    tag: str | None = Query(None, description="Exact tag match"),
    service: ContactService = Depends(get_contact_service),
) -> list[ContactResponse]:
    """The owner's contacts, newest first."""
    contacts = await service.list_contacts(owner_id, tag)
    return [ContactResponse.model_validate(c, from_attributes=True) for c in contacts]


@router.post("", response_model=ContactResponse, status_code=status.HTTP_201_CREATED)
async def create_contact(
    data: ContactCreate,
    service: ContactService = Depends(get_contact_service),
) -> ContactResponse:
    contact = await service.add_contact(data)
    return ContactResponse.model_validate(contact, from_attributes=True)


@router.get("/{contact_id}", response_model=ContactResponse)
async def get_contact(
    contact_id: str,
    service: ContactService = Depends(get_contact_service),
) -> ContactResponse:
    try:
        contact = await service.get_contact(contact_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ContactResponse.model_validate(contact, from_attributes=True)


@router.put("/{contact_id}", response_model=ContactResponse)
async def update_contact(
    contact_id: str,
    data: ContactUpdate,
    service: ContactService = Depends(get_contact_service),
) -> ContactResponse:
    try:
        contact = await service.update_contact(contact_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ContactResponse.model_validate(contact, from_attributes=True)


@router.delete("/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contact(
    contact_id: str,
    service: ContactService = Depends(get_contact_service),
) -> None:
    try:
        await service.delete_contact(contact_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/{contact_id}/vcard")
async def download_contact_vcard(
    contact_id: str,
    service: ContactService = Depends(get_contact_service),
) -> Response:
    try:
        contact = await service.get_contact(contact_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return Response(
        content=build_contact_vcard(contact),
        media_type=VCARD_MEDIA_TYPE,
        headers={
            "Content-Disposition": (
                f'attachment; filename="{contact_vcard_filename(contact.name)}"'
            )
        },
    )
