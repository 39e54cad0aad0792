"""Application service for the audit log."""

import logging

from app.application.interfaces import AuditLogRepository
from app.application.services.id_generator import Clock, TimestampIdGenerator, utc_now
from app.domain.entities import LogEntry, User

logger = logging.getLogger(__name__)


class AuditLogService:
    """Appends and queries audit entries. Newest entries come first."""

    def __init__(
        self,
        repository: AuditLogRepository,
        clock: Clock = utc_now,
        ids: TimestampIdGenerator | None = None,
    ):
        self._repository = repository
        self._clock = clock
        self._ids = ids or TimestampIdGenerator(clock)

    async def add_log(
        self, action: str, details: str, admin_id: str | None = None
    ) -> LogEntry:
        entry = LogEntry(
            id=self._ids.new_id("log"),
            action=action,
            details=details,
            timestamp=self._clock(),
            admin_id=admin_id,
        )
        logger.info("Audit %s: %s", action, details)
        return await self._repository.add(entry)

    async def list_logs(self, search: str | None = None) -> list[LogEntry]:
        """All entries, optionally narrowed to those whose details contain ``search``."""
        entries = await self._repository.get_all()
        if not search:
            return entries
        return [e for e in entries if search in e.details]

    async def logs_for_user(self, user: User) -> list[LogEntry]:
        """Entries that mention the user by name."""
        return await self.list_logs(search=user.name)
