"""FastAPI dependency injection — wires infrastructure to application layer."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from functools import lru_cache

from fastapi import Depends

from app.config import get_settings
from app.application.interfaces import GenerativeModelClient, KeyValueStore
from app.application.services import (
    AuditLogService,
    AuthService,
    CardService,
    ContactService,
    LogAnalysisService,
    TemplateService,
    TimestampIdGenerator,
    UserService,
    utc_now,
)
from app.infrastructure.database.repositories import SQLAlchemyKeyValueStore
from app.infrastructure.database.session import get_db_session
from app.infrastructure.gemini import GeminiClient
from app.infrastructure.qr import generate_qr_code_data_url
from app.infrastructure.storage.memory_key_value_store import InMemoryKeyValueStore
from app.infrastructure.storage.repositories import (
    StoredAuditLogRepository,
    StoredCardRepository,
    StoredContactRepository,
    StoredSegmentRepository,
    StoredTemplateRepository,
    StoredUserRepository,
)

logger = logging.getLogger(__name__)


@lru_cache
def get_id_generator() -> TimestampIdGenerator:
    """Process-wide id generator so ids stay unique across requests."""
    return TimestampIdGenerator(utc_now)


@lru_cache
def get_memory_store() -> InMemoryKeyValueStore:
    """Process-wide store used when ``storage_backend`` is ``memory``."""
    return InMemoryKeyValueStore()


async def get_key_value_store() -> AsyncGenerator[KeyValueStore, None]:
    """Provides the configured key/value store; one DB session per request."""
    settings = get_settings()
    if settings.storage_backend == "memory":
        yield get_memory_store()
        return

    async with asynccontextmanager(get_db_session)() as session:
        yield SQLAlchemyKeyValueStore(session)


async def get_audit_log_service(
    store: KeyValueStore = Depends(get_key_value_store),
) -> AsyncGenerator[AuditLogService, None]:
    yield AuditLogService(
        StoredAuditLogRepository(store, utc_now),
        clock=utc_now,
        ids=get_id_generator(),
    )


async def get_user_service(
    store: KeyValueStore = Depends(get_key_value_store),
    audit_log: AuditLogService = Depends(get_audit_log_service),
) -> AsyncGenerator[UserService, None]:
    """Provides a UserService with its repository and audit log wired up."""
    yield UserService(
        StoredUserRepository(store, utc_now),
        audit_log,
        clock=utc_now,
        ids=get_id_generator(),
    )


async def get_auth_service(
    user_service: UserService = Depends(get_user_service),
    audit_log: AuditLogService = Depends(get_audit_log_service),
) -> AsyncGenerator[AuthService, None]:
    yield AuthService(user_service, audit_log)


async def get_card_service(
    store: KeyValueStore = Depends(get_key_value_store),
) -> AsyncGenerator[CardService, None]:
    """Provides a CardService that builds share links against the public URL."""
    settings = get_settings()
    yield CardService(
        StoredCardRepository(store, utc_now),
        share_base_url=settings.public_base_url,
        clock=utc_now,
        ids=get_id_generator(),
        qr_renderer=generate_qr_code_data_url,
    )


async def get_contact_service(
    store: KeyValueStore = Depends(get_key_value_store),
) -> AsyncGenerator[ContactService, None]:
    yield ContactService(
        StoredContactRepository(store, utc_now),
        StoredSegmentRepository(store, utc_now),
        clock=utc_now,
        ids=get_id_generator(),
    )


async def get_template_service(
    store: KeyValueStore = Depends(get_key_value_store),
) -> AsyncGenerator[TemplateService, None]:
    yield TemplateService(StoredTemplateRepository(store, utc_now), ids=get_id_generator())


async def get_log_analysis_service(
    store: KeyValueStore = Depends(get_key_value_store),
) -> AsyncGenerator[LogAnalysisService, None]:
    """Provides log analysis; the Gemini client is left out when no key is configured."""
    settings = get_settings()

    client: GenerativeModelClient | None = None
    if settings.gemini_api_key.strip():
        client = GeminiClient(
            api_key=settings.gemini_api_key,
            base_url=settings.gemini_base_url,
            timeout=settings.gemini_timeout_seconds,
        )
    else:
        logger.debug("No Gemini API key; log analysis returns the missing-key message")

    yield LogAnalysisService(
        StoredAuditLogRepository(store, utc_now),
        client=client,
        model=settings.gemini_model,
        organization=settings.organization_name,
        limit=settings.log_analysis_limit,
    )
