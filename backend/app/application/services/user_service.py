"""Application service (use case) for user administration and card issuance."""

import logging
from urllib.parse import quote

from app.application.interfaces import UserRepository
from app.application.schemas.user import (
    CardStatusCounts,
    UserCreate,
    UserSave,
    UserSortField,
)
from app.application.services.audit_log_service import AuditLogService
from app.application.services.id_generator import Clock, TimestampIdGenerator, utc_now
from app.domain.entities import CardStatus, User
from app.domain.exceptions import DuplicateEntityError, EntityNotFoundError

logger = logging.getLogger(__name__)

_STATUS_ACTIONS = {
    CardStatus.ACTIVE: ("CARD_ISSUE", "Card issued for {name}"),
    CardStatus.REVOKED: ("CARD_REVOKE", "Card revoked for {name}"),
    CardStatus.NOT_ISSUED: ("CARD_RESET", "Card reset to not issued for {name}"),
}


def _sort_value(value: object) -> str:
    return value.value if isinstance(value, CardStatus) else str(value)


def generated_avatar_url(name: str) -> str:
    return f"https://ui-avatars.com/api/?name={quote(name)}&background=random&color=fff"


class UserService:
    """Orchestrates user CRUD and the NOT_ISSUED → ACTIVE ⇄ REVOKED lifecycle."""

    def __init__(
        self,
        repository: UserRepository,
        audit_log: AuditLogService,
        clock: Clock = utc_now,
        ids: TimestampIdGenerator | None = None,
    ):
        self._repository = repository
        self._audit_log = audit_log
        self._clock = clock
        self._ids = ids or TimestampIdGenerator(clock)

    async def get_user(self, user_id: str) -> User:
        user = await self._repository.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        return user

    async def find_by_email(self, email: str) -> User | None:
        return await self._repository.get_by_email(email)

    async def list_users(
        self,
        search: str | None = None,
        sort_by: UserSortField | None = None,
        descending: bool = False,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[User]:
        """Users filtered by a case-insensitive name/email substring.

        Without ``sort_by`` the stored order (newest first) is kept. Sorting
        is stable and compares the raw values, so it is case-sensitive.
        """
        users = await self._repository.get_all()
        if search:
            term = search.lower()
            users = [u for u in users if term in u.name.lower() or term in u.email.lower()]
        if sort_by is not None:
            users = sorted(
                users,
                key=lambda u: _sort_value(getattr(u, sort_by.value)),
                reverse=descending,
            )
        end = None if limit is None else skip + limit
        return users[skip:end]

    async def save_users(self, users: list[UserSave]) -> list[User]:
        """Replace the whole user list with ``users``, keeping their order."""
        seen: set[str] = set()
        for item in users:
            if item.id in seen:
                raise DuplicateEntityError("User", "id", item.id)
            seen.add(item.id)

        entities = [User(**item.model_dump()) for item in users]
        await self._repository.save_all(entities)
        logger.info("Saved %d users", len(entities))
        return entities

    async def add_user(self, data: UserCreate, admin_id: str | None = None) -> User:
        """Create a user with no card issued yet and record it in the audit log."""
        user = User(
            id=self._ids.new_id("user"),
            name=data.name,
            email=data.email,
            role=data.role,
            position=data.position,
            department=data.department,
            phone=data.phone,
            card_status=CardStatus.NOT_ISSUED,
            avatar_url=generated_avatar_url(data.name),
        )
        await self._repository.add(user)
        await self._audit_log.add_log(
            "USER_CREATE", f"Admin created user profile for {user.name}", admin_id
        )
        return user

    async def update_user_status(
        self, user_id: str, status: CardStatus, admin_id: str | None = None
    ) -> User:
        """Move a user's card to ``status``.

        ``issued_at`` is stamped with the current time only when the new
        status is ACTIVE.
        """
        user = await self.get_user(user_id)
        previous = user.card_status
        user.set_card_status(status, self._clock())
        await self._repository.update(user)

        action, template = _STATUS_ACTIONS[status]
        await self._audit_log.add_log(action, template.format(name=user.name), admin_id)
        logger.info("Card status for %s: %s -> %s", user.id, previous.value, status.value)
        return user

    async def issue_card(self, user_id: str, admin_id: str | None = None) -> User:
        return await self.update_user_status(user_id, CardStatus.ACTIVE, admin_id)

    async def revoke_card(self, user_id: str, admin_id: str | None = None) -> User:
        return await self.update_user_status(user_id, CardStatus.REVOKED, admin_id)

    async def status_counts(self) -> CardStatusCounts:
        users = await self._repository.get_all()
        counts = CardStatusCounts(total=len(users))
        for user in users:
            if user.card_status == CardStatus.ACTIVE:
                counts.active += 1
            elif user.card_status == CardStatus.REVOKED:
                counts.revoked += 1
            else:
                counts.not_issued += 1
        return counts
