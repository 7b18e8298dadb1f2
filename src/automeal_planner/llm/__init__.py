"""LLM providers - ordered plan-text backends."""

from automeal_planner.llm.base import UNAVAILABLE, PlanTextProvider, Unavailable
from automeal_planner.llm.chat import SYSTEM_PROMPT, ChatCompletionProvider
from automeal_planner.llm.factory import create_providers
from automeal_planner.llm.groq_client import GroqProvider
from automeal_planner.llm.openai_client import OpenAIProvider

__all__ = [
    "SYSTEM_PROMPT",
    "UNAVAILABLE",
    "ChatCompletionProvider",
    "GroqProvider",
    "OpenAIProvider",
    "PlanTextProvider",
    "Unavailable",
    "create_providers",
]
