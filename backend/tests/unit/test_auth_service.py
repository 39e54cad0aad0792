"""Unit tests for login, signup and logout."""

from datetime import datetime, timezone

import pytest

from app.application.schemas import LoginRequest, SessionView, SignupRequest
from app.application.services import (
    AuditLogService,
    AuthService,
    TimestampIdGenerator,
    UserService,
)
from app.domain.entities import CardStatus, UserRole
from app.domain.exceptions import AuthenticationError, DuplicateEntityError
from app.infrastructure.storage.memory_key_value_store import InMemoryKeyValueStore
from app.infrastructure.storage.repositories import (
    StoredAuditLogRepository,
    StoredUserRepository,
)

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def _clock() -> datetime:
    return NOW


@pytest.fixture
def audit_log() -> AuditLogService:
    store = InMemoryKeyValueStore()
    return AuditLogService(StoredAuditLogRepository(store, _clock), _clock, TimestampIdGenerator(_clock))


@pytest.fixture
def service(audit_log) -> AuthService:
    store = InMemoryKeyValueStore()
    users = UserService(StoredUserRepository(store, _clock), audit_log, _clock, TimestampIdGenerator(_clock))
    return AuthService(users, audit_log)


@pytest.mark.asyncio
async def test_admin_login_lands_on_dashboard(service, audit_log):
    session = await service.login(LoginRequest(email="admin@hawkforce.ai"))

    assert session.user.id == "admin-1"
    assert session.view == SessionView.ADMIN_DASHBOARD

    latest = (await audit_log.list_logs())[0]
    assert latest.action == "LOGIN"
    assert latest.details == "User admin@hawkforce.ai logged in"


@pytest.mark.asyncio
async def test_login_email_is_case_insensitive(service):
    session = await service.login(LoginRequest(email="  John.Anderson@HAWKFORCE.ai "))

    assert session.user.id == "user-1"
    assert session.view == SessionView.USER_PORTAL


@pytest.mark.asyncio
async def test_login_with_matching_role_succeeds(service):
    session = await service.login(LoginRequest(email="admin@hawkforce.ai", role=UserRole.ADMIN))

    assert session.view == SessionView.ADMIN_DASHBOARD


@pytest.mark.asyncio
async def test_login_with_mismatched_role_is_refused(service):
    with pytest.raises(AuthenticationError):
        await service.login(LoginRequest(email="john.anderson@hawkforce.ai", role=UserRole.ADMIN))


@pytest.mark.asyncio
async def test_login_with_unknown_email_is_refused(service, audit_log):
    with pytest.raises(AuthenticationError):
        await service.login(LoginRequest(email="ghost@hawkforce.ai"))

    assert all(e.action != "LOGIN" for e in await audit_log.list_logs())


@pytest.mark.asyncio
async def test_signup_creates_user_with_defaults(service):
    session = await service.signup(SignupRequest(name="Ada Lovelace", email="ada@hawkforce.ai"))

    assert session.view == SessionView.USER_PORTAL
    assert session.user.role == UserRole.USER
    assert session.user.position == "New Member"
    assert session.user.department == "General"
    assert session.user.phone == ""
    assert session.user.card_status == CardStatus.NOT_ISSUED


@pytest.mark.asyncio
async def test_signup_rejects_existing_email_case_insensitively(service):
    with pytest.raises(DuplicateEntityError):
        await service.signup(SignupRequest(name="Impostor", email="ADMIN@hawkforce.ai"))


@pytest.mark.asyncio
async def test_logout_is_logged(service, audit_log):
    await service.logout("user-1")

    latest = (await audit_log.list_logs())[0]
    assert latest.action == "LOGOUT"
    assert "john.anderson@hawkforce.ai" in latest.details
