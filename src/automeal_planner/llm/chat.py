"""Chat-completions provider shared by OpenAI-compatible SDKs."""

import logging
from abc import abstractmethod
from typing import Any

import httpx

from automeal_planner.llm.base import UNAVAILABLE, PlanTextProvider, Unavailable

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You output strict minified JSON only."
CONNECT_TIMEOUT_SECONDS = 10.0


class ChatCompletionProvider(PlanTextProvider):
    """Provider backed by a `client.chat.completions.create` style SDK."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        temperature: float = 0.4,
        max_tokens: int = 2048,
        timeout_seconds: float = 60.0,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._timeout = httpx.Timeout(timeout_seconds, connect=min(CONNECT_TIMEOUT_SECONDS, timeout_seconds))

    @property
    def model(self) -> str:
        return self._model

    @abstractmethod
    def _create_client(self) -> Any:
        """Build the async SDK client."""
        ...

    async def invoke(self, prompt: str) -> str | Unavailable:
        """Call chat completion. No key means no network call."""
        if not self._api_key:
            logger.debug("%s: no API key configured, skipping", self.name)
            return UNAVAILABLE

        async with self._create_client() as client:
            response = await client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=self._temperature,
                max_tokens=self._max_tokens,
            )
        if not response.choices:
            return ""
        content = response.choices[0].message.content
        return (content or "").strip()
