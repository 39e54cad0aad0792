"""Domain entity for audit log entries."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class LogEntry:
    """An audit trail line. ``details`` is free text used for substring search."""

    id: str
    action: str
    details: str
    timestamp: datetime
    admin_id: str | None = None

    def format_line(self) -> str:
        """Render as ``[timestamp] ACTION: details``."""
        return f"[{self.timestamp.isoformat()}] {self.action}: {self.details}"
