"""Abstract repository interface (port) for the audit log."""

from abc import ABC, abstractmethod

from app.domain.entities import LogEntry


class AuditLogRepository(ABC):
    """Port for audit log persistence — newest entries first."""

    @abstractmethod
    async def get_all(self) -> list[LogEntry]:
        ...

    @abstractmethod
    async def add(self, entry: LogEntry) -> LogEntry:
        """Insert an entry at the head of the log."""
        ...
