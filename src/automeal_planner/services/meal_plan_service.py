"""Meal plan service - business logic layer."""

import logging
import uuid
from datetime import datetime, timezone

from automeal_planner.models import KitchenProfile, PlanHistoryEntry
from automeal_planner.persistence import PlanStore, ProfileStore
from automeal_planner.services.plan_generator import PlanGeneration, PlanGenerator

logger = logging.getLogger(__name__)


class MealPlanService:
    """Orchestrates plan generation and history. Separates transport from business logic."""

    def __init__(
        self,
        generator: PlanGenerator,
        plan_store: PlanStore,
        profile_store: ProfileStore,
    ) -> None:
        self._generator = generator
        self._plans = plan_store
        self._profiles = profile_store

    def get_profile(self) -> KitchenProfile:
        return self._profiles.get()

    def save_profile(self, profile: KitchenProfile) -> None:
        self._profiles.save(profile)

    async def generate_from_profile(self) -> tuple[PlanHistoryEntry, PlanGeneration]:
        """
        Generate a plan from the saved profile and store it.
        Raises InvalidRequest when the profile is incomplete.
        """
        request = self._profiles.get().to_plan_request()
        generation = await self._generator.generate(request, self._plans.raw_entries())
        now = datetime.now(timezone.utc)
        entry = PlanHistoryEntry(
            id=f"{int(now.timestamp() * 1000)}-{uuid.uuid4().hex[:8]}",
            created_at=now,
            input=request,
            plan=generation.plan,
        )
        self._plans.add(entry)
        logger.info("Saved plan %s (source=%s)", entry.id, generation.source.value)
        return entry, generation

    def list_plans(self) -> list[PlanHistoryEntry]:
        return self._plans.entries()

    def get_plan(self, plan_id: str) -> PlanHistoryEntry | None:
        return self._plans.get(plan_id)

    def delete_plan(self, plan_id: str) -> bool:
        return self._plans.delete(plan_id)
