"""Pydantic DTOs for the audit log."""

from datetime import datetime

from pydantic import BaseModel


class LogEntryResponse(BaseModel):
    id: str
    action: str
    details: str
    timestamp: datetime
    admin_id: str | None

    model_config = {"from_attributes": True}


class LogAnalysisResponse(BaseModel):
    """Free-text summary of recent activity, or a fixed fallback message."""

    analysis: str
    entries_analyzed: int
