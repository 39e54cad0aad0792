"""User repository backed by the ``hawk_users`` collection."""

from app.application.interfaces import UserRepository
from app.application.schemas.records import UserRecord
from app.domain.entities import User
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.storage.repositories.collection_repository import (
    JsonCollectionRepository,
)
from app.infrastructure.storage.storage_keys import StorageKey


class StoredUserRepository(JsonCollectionRepository[User], UserRepository):
    key = StorageKey.USERS
    record_type = UserRecord
    persist_seed = True

    async def get_all(self) -> list[User]:
        return await self._load()

    async def get_by_id(self, user_id: str) -> User | None:
        return await self._find(user_id)

    async def get_by_email(self, email: str) -> User | None:
        for user in await self._load():
            if user.matches_email(email):
                return user
        return None

    async def add(self, user: User) -> User:
        return await self._prepend(user)

    async def update(self, user: User) -> User:
        if not await self._replace(user):
            raise EntityNotFoundError("User", user.id)
        return user

    async def save_all(self, users: list[User]) -> None:
        await self._save(users)
