"""User administration endpoints: profiles, card issuance and per-user exports."""

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from app.config import get_settings
from app.application.schemas.audit_log import LogEntryResponse
from app.application.schemas.user import (
    CardStatusCounts,
    UserCreate,
    UserResponse,
    UserSave,
    UserSortField,
)
from app.application.services import AuditLogService, UserService
from app.application.services.vcard_builder import VCARD_MEDIA_TYPE, build_user_vcard
from app.domain.entities import User
from app.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from app.infrastructure.dependencies import get_audit_log_service, get_user_service

router = APIRouter(prefix="/users", tags=["Users"])


async def _get_user_or_404(service: UserService, user_id: str) -> User:
    try:
        return await service.get_user(user_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("", response_model=list[UserResponse])
async def list_users(
    search: str | None = Query(None, description="Case-insensitive match on name or email"),
    sort: UserSortField | None = Query(None, description="Order by this column"),
    order: Literal["asc", "desc"] = Query("asc"),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    """Retrieve a filtered, sorted, paginated list of users."""
    users = await service.list_users(
        search=search,
        sort_by=sort,
        descending=order == "desc",
        skip=skip,
        limit=limit,
    )
    return [UserResponse.model_validate(u, from_attributes=True) for u in users]


@router.put("", response_model=list[UserResponse])
async def save_users(
    data: list[UserSave],
    service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    """Replace the whole user list in one write."""
    try:
        users = await service.save_users(data)
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return [UserResponse.model_validate(u, from_attributes=True) for u in users]


@router.get("/stats", response_model=CardStatusCounts)
async def user_stats(
    service: UserService = Depends(get_user_service),
) -> CardStatusCounts:
    """Number of users per card status."""
    return await service.status_counts()


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    data: UserCreate,
    admin_id: str | None = Query(None, description="Admin performing the action"),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Create a user profile with no card issued yet."""
    user = await service.add_user(data, admin_id)
    return UserResponse.model_validate(user, from_attributes=True)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = await _get_user_or_404(service, user_id)
    return UserResponse.model_validate(user, from_attributes=True)


@router.post("/{user_id}/issue", response_model=UserResponse)
async def issue_card(
    user_id: str,
    admin_id: str | None = Query(None),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Activate the user's card and stamp the issue time."""
    try:
        user = await service.issue_card(user_id, admin_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return UserResponse.model_validate(user, from_attributes=True)


@router.post("/{user_id}/revoke", response_model=UserResponse)
async def revoke_card(
    user_id: str,
    admin_id: str | None = Query(None),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    try:
        user = await service.revoke_card(user_id, admin_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return UserResponse.model_validate(user, from_attributes=True)


@router.get("/{user_id}/vcard")
async def download_user_vcard(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> Response:
    """Export the user's profile as a vCard."""
    user = await _get_user_or_404(service, user_id)
    content = build_user_vcard(user, get_settings().organization_name)
    filename = user.name.replace(" ", "_") + ".vcf"
    return Response(
        content=content,
        media_type=VCARD_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/{user_id}/logs", response_model=list[LogEntryResponse])
async def user_logs(
    user_id: str,
    service: UserService = Depends(get_user_service),
    audit_log: AuditLogService = Depends(get_audit_log_service),
) -> list[LogEntryResponse]:
    """Audit entries that mention this user by name."""
    user = await _get_user_or_404(service, user_id)
    entries = await audit_log.logs_for_user(user)
    return [LogEntryResponse.model_validate(e, from_attributes=True) for e in entries]
