"""Contact segment endpoints. Membership is derived from contact tags."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.application.schemas.contact import ContactResponse, SegmentCreate, SegmentResponse
from app.application.services import ContactService
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.dependencies import get_contact_service

router = APIRouter(prefix="/segments", tags=["Segments"])


@router.get("", response_model=list[SegmentResponse])
async def list_segments(
    owner_id: str = Query(...),
    service: ContactService = Depends(get_contact_service),
) -> list[SegmentResponse]:
    segments = await service.list_segments(owner_id)
    return [SegmentResponse.model_validate(s, from_attributes=True) for s in segments]


@router.post("", response_model=SegmentResponse, status_code=status.HTTP_201_CREATED)
async def create_segment(
    data: SegmentCreate,
    service: ContactService = Depends(get_contact_service),
) -> SegmentResponse:
    segment = await service.create_segment(data)
    return SegmentResponse.model_validate(segment, from_attributes=True)


@router.delete("/{segment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_segment(
    segment_id: str,
    service: ContactService = Depends(get_contact_service),
) -> None:
    """Delete a segment. Contacts keep their tag."""
    try:
        await service.delete_segment(segment_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/{segment_id}/members", response_model=list[ContactResponse])
async def segment_members(
    segment_id: str,
    service: ContactService = Depends(get_contact_service),
) -> list[ContactResponse]:
    """Contacts of the segment owner whose tag equals the segment name."""
    try:
        members = await service.segment_members(segment_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return [ContactResponse.model_validate(c, from_attributes=True) for c in members]
