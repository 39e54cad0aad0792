"""Audit log repository backed by the ``hawk_logs`` collection."""

from app.application.interfaces import AuditLogRepository
from app.application.schemas.records import LogEntryRecord
from app.domain.entities import LogEntry
from app.infrastructure.storage.repositories.collection_repository import (
    JsonCollectionRepository,
)
from app.infrastructure.storage.storage_keys import StorageKey


class StoredAuditLogRepository(JsonCollectionRepository[LogEntry], AuditLogRepository):
    key = StorageKey.LOGS
    record_type = LogEntryRecord
    persist_seed = True

    async def get_all(self) -> list[LogEntry]:
        return await self._load()

    async def add(self, entry: LogEntry) -> LogEntry:
        return await self._prepend(entry)
