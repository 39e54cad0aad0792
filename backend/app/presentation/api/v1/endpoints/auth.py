"""Login, signup and logout endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from app.application.schemas.auth import (
    LoginRequest,
    LogoutRequest,
    SessionResponse,
    SignupRequest,
)
from app.application.schemas.user import UserResponse
from app.application.services import AuthService, AuthSession
from app.domain.exceptions import (
    AuthenticationError,
    DuplicateEntityError,
    EntityNotFoundError,
)
from app.infrastructure.dependencies import get_auth_service

router = APIRouter(prefix="/auth", tags=["Auth"])


def _session_to_response(session: AuthSession) -> SessionResponse:
    return SessionResponse(
        user=UserResponse.model_validate(session.user, from_attributes=True),
        view=session.view,
    )


@router.post("/login", response_model=SessionResponse)
async def login(
    data: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> SessionResponse:
    """Start a session for the user with this email."""
    try:
        session = await service.login(data)
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.reason)
    return _session_to_response(session)


@router.post("/signup", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    data: SignupRequest,
    service: AuthService = Depends(get_auth_service),
) -> SessionResponse:
    """Register a new USER account and start a session for it."""
    try:
        session = await service.signup(data)
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return _session_to_response(session)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    data: LogoutRequest,
    service: AuthService = Depends(get_auth_service),
) -> None:
    try:
        await service.logout(data.user_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
