"""Pydantic DTOs for login, signup and logout."""

from enum import Enum

from pydantic import BaseModel, EmailStr, Field

from app.application.schemas.user import UserResponse
from app.domain.entities import UserRole


class SessionView(str, Enum):
    """Screen a session lands on after login."""

    ADMIN_DASHBOARD = "ADMIN_DASHBOARD"
    USER_PORTAL = "USER_PORTAL"


class LoginRequest(BaseModel):
    """Email lookup; ``role`` is only checked against the stored role."""

    email: str = Field(..., min_length=1, examples=["admin@hawkforce.ai"])
    role: UserRole | None = None


class SignupRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr


class LogoutRequest(BaseModel):
    user_id: str = Field(..., min_length=1)


class SessionResponse(BaseModel):
    user: UserResponse
    view: SessionView
