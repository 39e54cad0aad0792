"""Audit log endpoints: listing and AI analysis."""

from fastapi import APIRouter, Depends, Query

from app.application.schemas.audit_log import LogAnalysisResponse, LogEntryResponse
from app.application.services import AuditLogService, LogAnalysisService
from app.infrastructure.dependencies import (
    get_audit_log_service,
    get_log_analysis_service,
)

router = APIRouter(prefix="/logs", tags=["Audit Logs"])


@router.get("", response_model=list[LogEntryResponse])
async def list_logs(
    search: str | None = Query(None, description="Substring of the entry details"),
    service: AuditLogService = Depends(get_audit_log_service),
) -> list[LogEntryResponse]:
    """Audit entries, newest first."""
    entries = await service.list_logs(search)
    return [LogEntryResponse.model_validate(e, from_attributes=True) for e in entries]


@router.post("/analyze", response_model=LogAnalysisResponse)
async def analyze_logs(
    service: LogAnalysisService = Depends(get_log_analysis_service),
) -> LogAnalysisResponse:
    """Summarize recent activity. Always 200; failures come back as a fixed message."""
    result = await service.analyze()
    return LogAnalysisResponse(analysis=result.text, entries_analyzed=result.entries_analyzed)
