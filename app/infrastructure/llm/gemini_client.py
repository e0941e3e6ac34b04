from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx
from pydantic import BaseModel, Field, ValidationError

from app.application.exceptions import TransportError
from app.application.ports.grading import GradingPort


@dataclass(frozen=True)
class GeminiConfig:
    api_key: str
    model: str = "gemini-3-flash-preview"
    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    temperature: float = 0.2
    top_k: int = 40
    top_p: float = 0.95
    max_output_tokens: int = 2048
    timeout_seconds: float = 30.0

    @property
    def endpoint(self) -> str:
        return f"{self.base_url.rstrip('/')}/models/{self.model}:generateContent"


class _Part(BaseModel):
    text: str | None = None


class _Content(BaseModel):
    parts: list[_Part] = Field(default_factory=list)


class _Candidate(BaseModel):
    content: _Content | None = None


class GenerateContentResponse(BaseModel):
    candidates: list[_Candidate] = Field(default_factory=list)

    def first_text(self) -> str | None:
        """Text of candidates[0].content.parts[0], or None when any link is absent."""
        if not self.candidates:
            return None
        content = self.candidates[0].content
        if content is None or not content.parts:
            return None
        return content.parts[0].text


class GeminiGradingClient(GradingPort):
    """
    Gemini generateContent adapter implementing GradingPort.

    Contract guarantees:
    - one POST per grade() call, no retries
    - system and task prompts are sent as a single text part
    - returns "" when the response carries no candidate text
    - one httpx.AsyncClient per adapter instance, reused across calls
    - Raises:
        TransportError: network errors, timeouts, non-2xx status, malformed envelope
    """

    def __init__(self, config: GeminiConfig, http_client: httpx.AsyncClient | None = None) -> None:
        if not config.api_key:
            raise ValueError("GEMINI_API_KEY is required for the Gemini grading client")
        self._config = config
        if http_client is None:
            http_client = httpx.AsyncClient(timeout=config.timeout_seconds)
        self._client = http_client
        self._logger = logging.getLogger(__name__)

    def build_payload(self, system_prompt: str, task_prompt: str) -> dict:
        return {
            "contents": [
                {"parts": [{"text": f"{system_prompt}\n\n{task_prompt}"}]},
            ],
            "generationConfig": {
                "temperature": self._config.temperature,
                "topK": self._config.top_k,
                "topP": self._config.top_p,
                "maxOutputTokens": self._config.max_output_tokens,
            },
        }

    async def grade(self, system_prompt: str, task_prompt: str) -> str:
        payload = self.build_payload(system_prompt, task_prompt)
        resp = await self._post(payload)

        if not resp.is_success:
            body = resp.text
            self._logger.error(
                "Gemini request failed",
                extra={"status": resp.status_code, "provider": "gemini", "error": body[:200]},
            )
            raise TransportError(
                f"Gemini API error: {resp.status_code} - {body}",
                status_code=resp.status_code,
                body=body,
            )

        try:
            envelope = GenerateContentResponse.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise TransportError(
                f"Gemini API returned a malformed envelope: {e}",
                status_code=resp.status_code,
                body=resp.text,
            ) from e

        return envelope.first_text() or ""

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _post(self, payload: dict) -> httpx.Response:
        try:
            return await self._client.post(
                self._config.endpoint,
                params={"key": self._config.api_key},
                json=payload,
                timeout=self._config.timeout_seconds,
            )
        except httpx.TimeoutException as e:
            self._logger.error("Gemini request timed out", extra={"provider": "gemini", "error": str(e)})
            raise TransportError(f"Gemini API timeout after {self._config.timeout_seconds}s") from e
        except httpx.HTTPError as e:
            self._logger.error("Gemini request failed", extra={"provider": "gemini", "error": str(e)})
            raise TransportError(f"Gemini API network error: {e}") from e
