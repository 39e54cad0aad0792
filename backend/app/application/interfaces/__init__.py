from .key_value_store import KeyValueStore
from .user_repository import UserRepository
from .card_repository import CardRepository
from .contact_repository import ContactRepository
from .segment_repository import SegmentRepository
from .template_repository import TemplateRepository
from .audit_log_repository import AuditLogRepository
from .generative_model_client import GenerativeModelClient

__all__ = [
    "KeyValueStore",
    "UserRepository",
    "CardRepository",
    "ContactRepository",
    "SegmentRepository",
    "TemplateRepository",
    "AuditLogRepository",
    "GenerativeModelClient",
]
