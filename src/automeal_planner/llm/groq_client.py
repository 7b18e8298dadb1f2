"""Groq provider implementation."""

from typing import Any

from automeal_planner.llm.chat import ChatCompletionProvider


class GroqProvider(ChatCompletionProvider):
    """Groq API provider (Llama models)."""

    name = "groq"

    def _create_client(self) -> Any:
        try:
            from groq import AsyncGroq
        except ImportError:
            raise ImportError("groq package required. pip install groq")

        return AsyncGroq(api_key=self._api_key, timeout=self._timeout)
