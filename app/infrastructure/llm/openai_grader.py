from __future__ import annotations

import logging

from openai import APIStatusError, AsyncOpenAI

from app.application.exceptions import TransportError
from app.application.ports.grading import GradingPort


class OpenAIGradingClient(GradingPort):
    """
    OpenAI chat-completions adapter implementing GradingPort.

    JSON mode is requested so the answer is a bare object, but the output still
    goes through the same tolerant parser as every other provider.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        temperature: float = 0.3,
        timeout_seconds: float = 30.0,
        client: AsyncOpenAI | None = None,
    ) -> None:
        if not api_key and client is None:
            raise ValueError("OPENAI_API_KEY is required for the OpenAI grading client")
        self.client = client or AsyncOpenAI(api_key=api_key, timeout=timeout_seconds, max_retries=0)
        self._model = model
        self._temperature = temperature
        self._logger = logging.getLogger(__name__)

    async def grade(self, system_prompt: str, task_prompt: str) -> str:
        try:
            resp = await self.client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": task_prompt},
                ],
                temperature=self._temperature,
                response_format={"type": "json_object"},
            )
        except APIStatusError as e:
            self._logger.error("OpenAI request failed", extra={"status": e.status_code, "provider": "openai"})
            raise TransportError(
                f"OpenAI API error: {e.status_code} - {e.message}",
                status_code=e.status_code,
                body=str(e.body or ""),
            ) from e
        except Exception as e:
            self._logger.error("OpenAI request failed", extra={"provider": "openai", "error": str(e)})
            raise TransportError(f"OpenAI API error: {e}") from e

        if not resp.choices:
            return ""
        return resp.choices[0].message.content or ""
