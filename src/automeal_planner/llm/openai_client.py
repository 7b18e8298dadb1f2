"""OpenAI-compatible provider implementation."""

from typing import Any

from automeal_planner.llm.chat import ChatCompletionProvider


class OpenAIProvider(ChatCompletionProvider):
    """OpenAI API provider - works with OpenAI or compatible endpoints (e.g. LiteLLM)."""

    name = "openai"

    def __init__(self, *, base_url: str | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._base_url = base_url

    def _create_client(self) -> Any:
        try:
            from openai import AsyncOpenAI
        except ImportError:
            raise ImportError("openai package required. pip install openai")

        client_kwargs: dict[str, Any] = {"api_key": self._api_key, "timeout": self._timeout}
        if self._base_url:
            client_kwargs["base_url"] = self._base_url
        return AsyncOpenAI(**client_kwargs)
