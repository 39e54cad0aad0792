from .records import (
    UserRecord,
    DigitalCardRecord,
    SocialFieldRecord,
    ContactRecord,
    ContactSegmentRecord,
    MessageTemplateRecord,
    LogEntryRecord,
)
from .user import UserCreate, UserResponse, UserSave, UserSortField, CardStatusCounts
from .auth import LoginRequest, SignupRequest, LogoutRequest, SessionResponse, SessionView
from .card import (
    SocialFieldSchema,
    CardCreate,
    CardUpdate,
    CardResponse,
    PublicCardResponse,
    ShareLinkResponse,
)
from .contact import (
    ContactCreate,
    ContactUpdate,
    ContactResponse,
    SegmentCreate,
    SegmentResponse,
)
from .template import TemplateCreate, TemplateResponse
from .audit_log import LogEntryResponse, LogAnalysisResponse

__all__ = [
    "UserRecord",
    "DigitalCardRecord",
    "SocialFieldRecord",
    "ContactRecord",
    "ContactSegmentRecord",
    "MessageTemplateRecord",
    "LogEntryRecord",
    "UserCreate",
    "UserResponse",
    "UserSave",
    "UserSortField",
    "CardStatusCounts",
    "LoginRequest",
    "SignupRequest",
    "LogoutRequest",
    "SessionResponse",
    "SessionView",
    "SocialFieldSchema",
    "CardCreate",
    "CardUpdate",
    "CardResponse",
    "PublicCardResponse",
    "ShareLinkResponse",
    "ContactCreate",
    "ContactUpdate",
    "ContactResponse",
    "SegmentCreate",
    "SegmentResponse",
    "TemplateCreate",
    "TemplateResponse",
    "LogEntryResponse",
    "LogAnalysisResponse",
]
