from .user_repository import StoredUserRepository
from .card_repository import StoredCardRepository
from .contact_repository import StoredContactRepository
from .segment_repository import StoredSegmentRepository
from .template_repository import StoredTemplateRepository
from .audit_log_repository import StoredAuditLogRepository

__all__ = [
    "StoredUserRepository",
    "StoredCardRepository",
    "StoredContactRepository",
    "StoredSegmentRepository",
    "StoredTemplateRepository",
    "StoredAuditLogRepository",
]
