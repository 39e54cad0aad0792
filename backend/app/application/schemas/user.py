"""Pydantic DTOs for the User feature."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, EmailStr, Field

from app.domain.entities import CardStatus, UserRole


class UserCreate(BaseModel):
    """Schema for an admin creating a user profile."""

    name: str = Field(..., min_length=1, max_length=255, examples=["John Anderson"])
    email: EmailStr = Field(..., examples=["john.anderson@hawkforce.ai"])
    role: UserRole = UserRole.USER
    position: str = Field("", max_length=255, examples=["Software Engineer"])
    department: str = Field("", max_length=255, examples=["Engineering"])
    phone: str = Field("", max_length=64)


class UserResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    name: str
    email: str
    role: UserRole
    position: str
    department: str
    phone: str
    card_status: CardStatus
    avatar_url: str | None
    issued_at: datetime | None

    model_config = {"from_attributes": True}


class CardStatusCounts(BaseModel):
    """Number of users per card status, for the admin overview."""

    active: int = 0
    not_issued: int = 0
    revoked: int = 0
    total: int = 0


class UserSave(BaseModel):
    """Full user record, for replacing the user list in one write."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    role: UserRole = UserRole.USER
    position: str = ""
    department: str = ""
    phone: str = ""
    card_status: CardStatus = CardStatus.NOT_ISSUED
    avatar_url: str | None = None
    issued_at: datetime | None = None


class UserSortField(str, Enum):
    """Columns the admin user list can be ordered by."""

    NAME = "name"
    EMAIL = "email"
    CARD_STATUS = "card_status"
