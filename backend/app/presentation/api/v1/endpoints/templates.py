"""Message template endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.application.schemas.template import TemplateCreate, TemplateResponse
from app.application.services import TemplateService
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.dependencies import get_template_service

router = APIRouter(prefix="/templates", tags=["Templates"])


@router.get("", response_model=list[TemplateResponse])
async def list_templates(
    owner_id: str = Query(...),
    service: TemplateService = Depends(get_template_service),
) -> list[TemplateResponse]:
    templates = await service.list_templates(owner_id)
    return [TemplateResponse.model_validate(t, from_attributes=True) for t in templates]


@router.post("", response_model=TemplateResponse, status_code=status.HTTP_201_CREATED)
async def create_template(
    data: TemplateCreate,
    service: TemplateService = Depends(get_template_service),
) -> TemplateResponse:
    template = await service.create_template(data)
    return TemplateResponse.model_validate(template, from_attributes=True)


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_template(
    template_id: str,
    service: TemplateService = Depends(get_template_service),
) -> None:
    try:
        await service.delete_template(template_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
