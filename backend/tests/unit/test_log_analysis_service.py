"""Unit tests for the audit log analysis."""

from datetime import datetime, timedelta, timezone

import httpx
import pytest

from app.application.interfaces import AuditLogRepository, GenerativeModelClient
from app.application.services.log_analysis_service import (
    EMPTY_RESPONSE_MESSAGE,
    FAILURE_MESSAGE,
    MISSING_KEY_MESSAGE,
    LogAnalysisService,
)
from app.domain.entities import LogEntry
from app.domain.exceptions import LLMProviderError
from app.infrastructure.gemini.gemini_client import GeminiClient

START = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


class FakeLogRepository(AuditLogRepository):
    """Holds entries newest first, as the stored log does."""

    def __init__(self, count: int):
        self._entries = [
            LogEntry(
                id=f"log-{i}",
                action="LOGIN",
                details=f"entry {i}",
                timestamp=START - timedelta(minutes=i),
            )
            for i in range(count)
        ]

    async def get_all(self) -> list[LogEntry]:
        return list(self._entries)

    async def add(self, entry: LogEntry) -> LogEntry:
        self._entries.insert(0, entry)
        return entry


class FakeModelClient(GenerativeModelClient):
    def __init__(self, reply: str = "", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    @property
    def provider_name(self) -> str:
        return "fake"

    async def generate_content(self, prompt: str, model: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.mark.asyncio
async def test_missing_client_returns_fixed_message():
    service = LogAnalysisService(FakeLogRepository(3), client=None, model="m")

    result = await service.analyze()

    assert result.text == MISSING_KEY_MESSAGE
    assert result.text == "API Key is missing. Cannot perform AI analysis."


@pytest.mark.asyncio
async def test_prompt_contains_newest_twenty_entries():
    client = FakeModelClient(reply="All quiet.")
    service = LogAnalysisService(FakeLogRepository(25), client=client, model="m")

    result = await service.analyze()

    assert result.text == "All quiet."
    assert result.entries_analyzed == 20
    prompt = client.prompts[0]
    assert "Hawkforce AI" in prompt
    assert f"[{START.isoformat()}] LOGIN: entry 0" in prompt
    assert "entry 19" in prompt
    assert "entry 20" not in prompt


@pytest.mark.asyncio
async def test_blank_response_returns_fixed_message():
    service = LogAnalysisService(FakeLogRepository(1), client=FakeModelClient(reply="  "), model="m")

    result = await service.analyze()

    assert result.text == EMPTY_RESPONSE_MESSAGE


@pytest.mark.asyncio
async def test_provider_failure_returns_fixed_message(caplog):
    client = FakeModelClient(error=LLMProviderError("fake", 500, "boom"))
    service = LogAnalysisService(FakeLogRepository(2), client=client, model="m")

    result = await service.analyze()

    assert result.text == FAILURE_MESSAGE
    assert len(client.prompts) == 1
    assert "boom" in caplog.text


@pytest.mark.asyncio
async def test_malformed_gemini_body_returns_failure_message():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>oops</html>")

    client = GeminiClient(
        api_key="test-key",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    service = LogAnalysisService(FakeLogRepository(2), client=client, model="m")

    result = await service.analyze()

    assert result.text == FAILURE_MESSAGE
