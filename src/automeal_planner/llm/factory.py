"""Provider factory - builds the ordered provider list from config."""

import logging
from typing import Callable

from automeal_planner.config import Settings, get_settings
from automeal_planner.llm.base import PlanTextProvider
from automeal_planner.llm.groq_client import GroqProvider
from automeal_planner.llm.openai_client import OpenAIProvider

logger = logging.getLogger(__name__)


def _groq(settings: Settings) -> PlanTextProvider:
    return GroqProvider(
        api_key=settings.groq_api_key,
        model=settings.groq_model,
        temperature=settings.llm_temperature,
        max_tokens=settings.llm_max_tokens,
        timeout_seconds=settings.provider_timeout_seconds,
    )


def _openai(settings: Settings) -> PlanTextProvider:
    return OpenAIProvider(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        model=settings.openai_model,
        temperature=settings.llm_temperature,
        max_tokens=settings.llm_max_tokens,
        timeout_seconds=settings.provider_timeout_seconds,
    )


PROVIDER_FACTORIES: dict[str, Callable[[Settings], PlanTextProvider]] = {
    "groq": _groq,
    "openai": _openai,
}


def create_providers(settings: Settings | None = None) -> list[PlanTextProvider]:
    """
    Providers in configured fallback order.
    Unknown names are skipped; a provider without a key is still listed and reports unavailable.
    """
    settings = settings or get_settings()
    providers: list[PlanTextProvider] = []
    for name in settings.provider_order:
        factory = PROVIDER_FACTORIES.get(name.strip().lower())
        if factory is None:
            logger.warning("Unknown provider in PROVIDER_ORDER: %s", name)
            continue
        providers.append(factory(settings))
    return providers
