"""Gemini API client — implements the GenerativeModelClient interface.

Talks to the Generative Language REST API
(``{base_url}/models/{model}:generateContent``) with httpx. Only the
single-shot, non-streaming text call is used.
"""

import logging

import httpx

from app.application.interfaces.generative_model_client import GenerativeModelClient
from app.domain.exceptions import LLMProviderError

logger = logging.getLogger(__name__)


class GeminiClient(GenerativeModelClient):
    """Infrastructure adapter — connects to the Gemini API.

    An ``httpx.AsyncClient`` can be injected (tests pass one backed by
    ``httpx.MockTransport``); otherwise a client is opened per call.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout: float = 60.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        if not api_key.strip():
            raise ValueError("Gemini API key is required")
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client

    @property
    def provider_name(self) -> str:
        return "gemini"

    def _get_headers(self) -> dict[str, str]:
        return {
            "x-goog-api-key": self._api_key,
            "Content-Type": "application/json",
        }

    @staticmethod
    def _build_payload(prompt: str) -> dict:
        return {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def generate_content(self, prompt: str, model: str) -> str:
        """Send one ``generateContent`` request and return the response text."""
        url = f"{self._base_url}/models/{model}:generateContent"
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.post(
                url, headers=self._get_headers(), json=self._build_payload(prompt)
            )
        except httpx.HTTPError as exc:
            raise LLMProviderError(
                provider=self.provider_name,
                status_code=503,
                message=f"{type(exc).__name__}: {exc}",
            ) from exc
        finally:
            if should_close:
                await client.aclose()

        if response.status_code != 200:
            self._raise_provider_error(response)

        try:
            return self._parse_text(response.json())
        except (ValueError, AttributeError, TypeError) as exc:
            raise LLMProviderError(
                provider=self.provider_name,
                status_code=502,
                message=f"Malformed response body: {type(exc).__name__}: {exc}",
            ) from exc

    def _parse_text(self, data: dict) -> str:
        """Concatenate the text parts of the first candidate."""
        if "error" in data:
            error = data["error"]
            raise LLMProviderError(
                provider=self.provider_name,
                status_code=error.get("code", 500),
                message=error.get("message", "Unknown error"),
            )

        candidates = data.get("candidates") or []
        if not candidates:
            logger.info("Gemini returned no candidates")
            return ""

        parts = candidates[0].get("content", {}).get("parts") or []
        return "".join(part.get("text", "") for part in parts)

    def _raise_provider_error(self, response: httpx.Response) -> None:
        """Raise LLMProviderError from a non-200 httpx Response."""
        try:
            data = response.json()
            error = data.get("error", {})
            message = error.get("message", response.text)
        except (ValueError, AttributeError):
            message = response.text

        raise LLMProviderError(
            provider=self.provider_name,
            status_code=response.status_code,
            message=message,
        )
