"""AI summary of recent audit activity.

One prompt, one call, no retry. Every outcome is a string: the model's text
or one of the fixed fallback messages below.
"""

import logging
from dataclasses import dataclass

from app.application.interfaces import AuditLogRepository, GenerativeModelClient
from app.domain.entities import LogEntry
from app.domain.exceptions import LLMProviderError

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "API Key is missing. Cannot perform AI analysis."
EMPTY_RESPONSE_MESSAGE = "No analysis generated."
FAILURE_MESSAGE = "Failed to analyze logs via Gemini. Please try again later."

_PROMPT_TEMPLATE = """\
You are a Chief Security Officer's AI assistant for {organization}.
Analyze the following system audit logs for any patterns, anomalies, or summary of activity.
Keep the response professional, concise, and focused on security and operational efficiency.

Logs:
{logs}
"""


@dataclass
class LogAnalysis:
    text: str
    entries_analyzed: int


def build_prompt(entries: list[LogEntry], organization: str) -> str:
    logs = "\n".join(entry.format_line() for entry in entries)
    return _PROMPT_TEMPLATE.format(organization=organization, logs=logs)


class LogAnalysisService:
    """Summarizes the newest audit entries with a generative model.

    ``client`` is None when no API key is configured.
    """

    def __init__(
        self,
        log_repository: AuditLogRepository,
        client: GenerativeModelClient | None,
        model: str,
        organization: str = "Hawkforce AI",
        limit: int = 20,
    ):
        self._log_repository = log_repository
        self._client = client
        self._model = model
        self._organization = organization
        self._limit = limit

    async def analyze(self) -> LogAnalysis:
        entries = (await self._log_repository.get_all())[: self._limit]

        if self._client is None:
            return LogAnalysis(text=MISSING_KEY_MESSAGE, entries_analyzed=0)

        prompt = build_prompt(entries, self._organization)
        try:
            text = await self._client.generate_content(prompt, self._model)
        except LLMProviderError:
            logger.exception("Log analysis via %s failed", self._client.provider_name)
            return LogAnalysis(text=FAILURE_MESSAGE, entries_analyzed=len(entries))

        return LogAnalysis(
            text=text.strip() or EMPTY_RESPONSE_MESSAGE,
            entries_analyzed=len(entries),
        )
