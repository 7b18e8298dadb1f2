"""Plan generation pipeline - prompt, providers, parse, mock fallback."""

import asyncio
import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from automeal_planner.config import Settings, get_meal_catalog, get_settings
from automeal_planner.llm import UNAVAILABLE, PlanTextProvider, create_providers
from automeal_planner.models import MealCatalog, MealPlan, PlanHistoryEntry, PlanRequest
from automeal_planner.services.history import extract_used_meal_titles
from automeal_planner.services.mock_plan import MockPlanSynthesizer
from automeal_planner.services.prompt_builder import build_prompt
from automeal_planner.services.response_parser import ParseFailure, parse_meal_plan

logger = logging.getLogger(__name__)

History = Iterable[PlanHistoryEntry | Mapping[str, Any]]


class PlanSource(str, Enum):
    PROVIDER = "provider"
    MOCK = "mock"


class AttemptStatus(str, Enum):
    OK = "ok"
    EMPTY = "empty"
    UNAVAILABLE = "unavailable"
    FAILED = "failed"
    TIMEOUT = "timeout"


class FallbackReason(str, Enum):
    NO_PROVIDER_OUTPUT = "no_provider_output"
    PARSE_FAILURE = "parse_failure"
    UNEXPECTED_ERROR = "unexpected_error"


@dataclass(frozen=True)
class ProviderAttempt:
    """Outcome of one provider call."""

    provider: str
    status: AttemptStatus
    detail: str | None = None


@dataclass(frozen=True)
class PlanGeneration:
    """Plan plus the branch the pipeline took to produce it."""

    plan: MealPlan
    source: PlanSource
    provider: str | None = None
    attempts: tuple[ProviderAttempt, ...] = ()
    fallback_reason: FallbackReason | None = None
    parse_failure: ParseFailure | None = None


class PlanGenerator:
    """
    Runs one request through: build prompt -> try providers in order -> parse.
    Any provider or parse problem falls back to the mock plan; only
    InvalidRequest reaches the caller.
    """

    def __init__(
        self,
        providers: Sequence[PlanTextProvider],
        synthesizer: MockPlanSynthesizer,
        *,
        timeout_seconds: float | None = 60.0,
    ) -> None:
        self._providers = tuple(providers)
        self._synthesizer = synthesizer
        self._timeout = timeout_seconds

    async def _call(self, provider: PlanTextProvider, prompt: str) -> tuple[str | None, ProviderAttempt]:
        try:
            result = await asyncio.wait_for(provider.invoke(prompt), timeout=self._timeout)
        except asyncio.TimeoutError:
            logger.warning("Provider %s timed out after %ss", provider.name, self._timeout)
            return None, ProviderAttempt(provider.name, AttemptStatus.TIMEOUT, f"timed out after {self._timeout}s")
        except Exception as e:
            logger.warning("Provider %s call failed: %s", provider.name, e)
            return None, ProviderAttempt(provider.name, AttemptStatus.FAILED, f"{type(e).__name__}: {e}")

        if result is UNAVAILABLE:
            logger.info("Provider %s unavailable, trying next", provider.name)
            return None, ProviderAttempt(provider.name, AttemptStatus.UNAVAILABLE)
        if not result or not result.strip():
            logger.info("Provider %s returned an empty reply", provider.name)
            return None, ProviderAttempt(provider.name, AttemptStatus.EMPTY)
        return result, ProviderAttempt(provider.name, AttemptStatus.OK)

    async def _first_reply(self, prompt: str, attempts: list[ProviderAttempt]) -> tuple[str, str] | None:
        """(provider name, raw text) from the first provider with a non-empty reply."""
        for provider in self._providers:
            raw, attempt = await self._call(provider, prompt)
            attempts.append(attempt)
            if raw is not None:
                return provider.name, raw
        return None

    async def generate(
        self,
        request: PlanRequest | Mapping[str, Any],
        history: History | None = (),
    ) -> PlanGeneration:
        """Always returns a structurally valid plan. Raises InvalidRequest for bad input."""
        if not isinstance(request, PlanRequest):
            request = PlanRequest.from_input(request)

        meal_types = request.selected_meal_types
        used_titles = extract_used_meal_titles(history)
        prompt = build_prompt(request, used_titles)

        attempts: list[ProviderAttempt] = []
        parse_failure: ParseFailure | None = None
        try:
            reply = await self._first_reply(prompt, attempts)
            if reply is None:
                reason = FallbackReason.NO_PROVIDER_OUTPUT
            else:
                provider_name, raw = reply
                result = parse_meal_plan(raw, meal_types=meal_types)
                if isinstance(result, MealPlan):
                    logger.info("Plan generated by %s", provider_name)
                    return PlanGeneration(
                        plan=result,
                        source=PlanSource.PROVIDER,
                        provider=provider_name,
                        attempts=tuple(attempts),
                    )
                logger.warning("Could not parse plan from %s: %s. Raw: %s", provider_name, result.reason, raw[:200])
                parse_failure = result
                reason = FallbackReason.PARSE_FAILURE
        except Exception as e:
            logger.exception("Plan generation failed, using offline plan: %s", e)
            reason = FallbackReason.UNEXPECTED_ERROR

        logger.info("Using offline plan (%s)", reason.value)
        return PlanGeneration(
            plan=self._synthesizer.synthesize(meal_types, used_titles),
            source=PlanSource.MOCK,
            attempts=tuple(attempts),
            fallback_reason=reason,
            parse_failure=parse_failure,
        )


def create_plan_generator(
    settings: Settings | None = None,
    *,
    providers: Sequence[PlanTextProvider] | None = None,
    catalog: MealCatalog | None = None,
) -> PlanGenerator:
    """Generator wired from settings: configured providers and the catalog YAML."""
    settings = settings or get_settings()
    if providers is None:
        providers = create_providers(settings)
    if catalog is None:
        catalog = get_meal_catalog(str(settings.catalog_path or ""))
    return PlanGenerator(
        providers,
        MockPlanSynthesizer(catalog),
        timeout_seconds=settings.provider_timeout_seconds,
    )


async def generate_plan(
    request: PlanRequest | Mapping[str, Any],
    history: History | None = (),
    *,
    providers: Sequence[PlanTextProvider] | None = None,
    catalog: MealCatalog | None = None,
    settings: Settings | None = None,
) -> MealPlan:
    """Generate a weekly plan for request, avoiding meals used in history."""
    generator = create_plan_generator(settings, providers=providers, catalog=catalog)
    generation = await generator.generate(request, history)
    return generation.plan
