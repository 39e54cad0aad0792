"""Unit tests for the UserService."""

from datetime import datetime, timedelta, timezone

import pytest

from app.application.schemas import UserCreate, UserSave, UserSortField
from app.application.services import AuditLogService, TimestampIdGenerator, UserService
from app.domain.entities import CardStatus, UserRole
from app.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from app.infrastructure.storage.memory_key_value_store import InMemoryKeyValueStore
from app.infrastructure.storage.repositories import (
    StoredAuditLogRepository,
    StoredUserRepository,
)


class FakeClock:
    """Deterministic clock that can be moved forward."""

    def __init__(self):
        self.now = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def audit_log(clock) -> AuditLogService:
    store = InMemoryKeyValueStore()
    return AuditLogService(StoredAuditLogRepository(store, clock), clock, TimestampIdGenerator(clock))


@pytest.fixture
def service(clock, audit_log) -> UserService:
    store = InMemoryKeyValueStore()
    return UserService(StoredUserRepository(store, clock), audit_log, clock, TimestampIdGenerator(clock))


@pytest.mark.asyncio
async def test_add_user_starts_not_issued_with_generated_avatar(service, audit_log):
    user = await service.add_user(
        UserCreate(name="Ada Lovelace", email="ada@hawkforce.ai", position="Analyst"),
        admin_id="admin-1",
    )

    assert user.id.startswith("user-")
    assert user.card_status == CardStatus.NOT_ISSUED
    assert user.issued_at is None
    assert user.avatar_url.startswith("https://ui-avatars.com/api/?name=Ada%20Lovelace")

    users = await service.list_users()
    assert users[0].id == user.id

    logs = await audit_log.list_logs()
    assert logs[0].action == "USER_CREATE"
    assert logs[0].details == "Admin created user profile for Ada Lovelace"
    assert logs[0].admin_id == "admin-1"


@pytest.mark.asyncio
async def test_issue_card_stamps_issued_at(service, clock, audit_log):
    user = await service.add_user(UserCreate(name="Ada Lovelace", email="ada@hawkforce.ai"))
    clock.advance(hours=1)

    issued = await service.issue_card(user.id)

    assert issued.card_status == CardStatus.ACTIVE
    assert issued.issued_at == clock.now
    assert (await audit_log.list_logs())[0].action == "CARD_ISSUE"


@pytest.mark.asyncio
async def test_revoke_keeps_previous_issued_at(service, clock):
    user = await service.add_user(UserCreate(name="Ada Lovelace", email="ada@hawkforce.ai"))
    issued = await service.issue_card(user.id)
    issued_at = issued.issued_at
    clock.advance(days=2)

    revoked = await service.revoke_card(user.id)

    assert revoked.card_status == CardStatus.REVOKED
    assert revoked.issued_at == issued_at


@pytest.mark.asyncio
async def test_reissue_restamps_issued_at(service, clock):
    user = await service.add_user(UserCreate(name="Ada Lovelace", email="ada@hawkforce.ai"))
    await service.issue_card(user.id)
    await service.revoke_card(user.id)
    clock.advance(days=3)

    reissued = await service.issue_card(user.id)

    assert reissued.issued_at == clock.now


@pytest.mark.asyncio
async def test_status_change_is_persisted(service):
    await service.revoke_card("user-1")

    stored = await service.get_user("user-1")

    assert stored.card_status == CardStatus.REVOKED


@pytest.mark.asyncio
async def test_status_change_for_unknown_user_raises(service):
    with pytest.raises(EntityNotFoundError):
        await service.issue_card("user-404")


@pytest.mark.asyncio
async def test_list_users_search_matches_name_or_email_case_insensitively(service):
    assert [u.id for u in await service.list_users("sarah")] == ["admin-1"]
    assert [u.id for u in await service.list_users("JOHN.ANDERSON")] == ["user-1"]
    assert await service.list_users("nobody") == []


@pytest.mark.asyncio
async def test_status_counts(service):
    await service.add_user(UserCreate(name="Ada Lovelace", email="ada@hawkforce.ai"))
    await service.revoke_card("user-1")

    counts = await service.status_counts()

    assert counts.total == 3
    assert counts.active == 1
    assert counts.revoked == 1
    assert counts.not_issued == 1


@pytest.mark.asyncio
async def test_add_user_keeps_requested_role(service):
    user = await service.add_user(
        UserCreate(name="Root Admin", email="root@hawkforce.ai", role=UserRole.ADMIN)
    )

    assert user.role == UserRole.ADMIN


async def _add_three(service: UserService) -> None:
    await service.add_user(UserCreate(name="Carol King", email="carol@hawkforce.ai"))
    await service.add_user(UserCreate(name="Alan Turing", email="zed@hawkforce.ai"))
    await service.add_user(UserCreate(name="Bea Arthur", email="bea@hawkforce.ai"))


@pytest.mark.asyncio
async def test_list_users_sorts_by_name_in_both_directions(service):
    await _add_three(service)

    ascending = await service.list_users(sort_by=UserSortField.NAME)
    descending = await service.list_users(sort_by=UserSortField.NAME, descending=True)

    names = [u.name for u in ascending]
    assert names[:3] == ["Alan Turing", "Bea Arthur", "Carol King"]
    assert [u.name for u in descending] == list(reversed(names))


@pytest.mark.asyncio
async def test_list_users_sorts_by_email_and_card_status(service):
    await _add_three(service)
    newest = (await service.list_users())[0]
    await service.issue_card(newest.id)

    by_email = await service.list_users(sort_by=UserSortField.EMAIL)
    by_status = await service.list_users(sort_by=UserSortField.CARD_STATUS)

    emails = [u.email for u in by_email]
    assert emails == sorted(emails)
    statuses = [u.card_status.value for u in by_status]
    assert statuses == sorted(statuses)


@pytest.mark.asyncio
async def test_list_users_pages_after_sorting(service):
    await _add_three(service)
    everyone = await service.list_users(sort_by=UserSortField.NAME)

    first_page = await service.list_users(sort_by=UserSortField.NAME, skip=0, limit=2)
    second_page = await service.list_users(sort_by=UserSortField.NAME, skip=2, limit=2)
    past_end = await service.list_users(skip=len(everyone), limit=5)

    assert first_page == everyone[:2]
    assert second_page == everyone[2:4]
    assert past_end == []


@pytest.mark.asyncio
async def test_save_users_replaces_list_in_given_order(service):
    saved = await service.save_users([
        UserSave(id="u-b", name="Bea Arthur", email="bea@hawkforce.ai"),
        UserSave(id="u-a", name="Alan Turing", email="alan@hawkforce.ai", card_status="ACTIVE"),
    ])

    users = await service.list_users()
    assert [u.id for u in users] == ["u-b", "u-a"]
    assert [u.id for u in saved] == ["u-b", "u-a"]
    assert users[1].card_status == CardStatus.ACTIVE
    assert (await service.get_user("u-b")).name == "Bea Arthur"


@pytest.mark.asyncio
async def test_save_users_rejects_duplicate_ids(service):
    before = await service.list_users()

    with pytest.raises(DuplicateEntityError):
        await service.save_users([
            UserSave(id="u-a", name="Alan Turing", email="alan@hawkforce.ai"),
            UserSave(id="u-a", name="Bea Arthur", email="bea@hawkforce.ai"),
        ])

    assert await service.list_users() == before
