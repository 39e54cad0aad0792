"""Abstract repository interface (port) for User persistence."""

from abc import ABC, abstractmethod

from app.domain.entities import User


class UserRepository(ABC):
    """Port for user persistence — newest users first."""

    @abstractmethod
    async def get_all(self) -> list[User]:
        """Return every user in stored order."""
        ...

    @abstractmethod
    async def get_by_id(self, user_id: str) -> User | None:
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        """Case-insensitive exact match on email."""
        ...

    @abstractmethod
    async def add(self, user: User) -> User:
        """Insert a new user at the head of the collection."""
        ...

    @abstractmethod
    async def update(self, user: User) -> User:
        """Replace the stored user with the same id."""
        ...

    @abstractmethod
    async def save_all(self, users: list[User]) -> None:
        """Overwrite the whole collection."""
        ...
