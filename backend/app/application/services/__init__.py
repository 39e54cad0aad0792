from .id_generator import TimestampIdGenerator, utc_now
from .audit_log_service import AuditLogService
from .user_service import UserService
from .auth_service import AuthService, AuthSession
from .card_service import CardService
from .contact_service import ContactService
from .template_service import TemplateService
from .log_analysis_service import LogAnalysisService, LogAnalysis

__all__ = [
    "TimestampIdGenerator",
    "utc_now",
    "AuditLogService",
    "UserService",
    "AuthService",
    "AuthSession",
    "CardService",
    "ContactService",
    "TemplateService",
    "LogAnalysisService",
    "LogAnalysis",
]
