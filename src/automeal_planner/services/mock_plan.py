"""Mock plan synthesizer - deterministic offline fallback."""

import logging
from collections.abc import Collection, Sequence

from automeal_planner.models import DAYS_PER_PLAN, DayPlan, Meal, MealCatalog, MealPlan, MealType

logger = logging.getLogger(__name__)

PLACEHOLDER_CATEGORY = "Placeholder"


def day_label(day_index: int) -> str:
    return f"Day {day_index + 1}"


def placeholder_meal(meal_type: MealType, day_index: int) -> Meal:
    """Stand-in when every template for a meal type has been used before."""
    return Meal(
        title=f"{meal_type.value.capitalize()} placeholder (day {day_index + 1})",
        category=PLACEHOLDER_CATEGORY,
        instructions=f"All saved {meal_type.value} ideas were used recently. Pick a favorite {meal_type.value} this day.",
    )


class MockPlanSynthesizer:
    """Builds a complete 7-day plan from a fixed catalog. No external calls."""

    def __init__(self, catalog: MealCatalog) -> None:
        self._catalog = catalog

    def _available(self, meal_type: MealType, used: set[str]) -> list[Meal]:
        return [m for m in self._catalog.templates_for(meal_type) if m.title.strip().lower() not in used]

    def synthesize(
        self,
        meal_types: Sequence[MealType],
        used_titles: Collection[str] = (),
    ) -> MealPlan:
        """Same inputs always give the same plan."""
        used = {t.strip().lower() for t in used_titles}
        available = {t: self._available(t, used) for t in meal_types}
        for meal_type, templates in available.items():
            if not templates:
                logger.info("No unused %s templates left; using placeholders", meal_type.value)

        days: list[DayPlan] = []
        for d in range(DAYS_PER_PLAN):
            meals = []
            for meal_type in meal_types:
                templates = available[meal_type]
                if templates:
                    meals.append(templates[d % len(templates)].model_copy())
                else:
                    meals.append(placeholder_meal(meal_type, d))
            days.append(DayPlan(day=day_label(d), meals=meals))

        return MealPlan(
            grocery_list=[item.model_copy() for item in self._catalog.basket],
            weekly_plan=days,
            total_estimated_cost=self._catalog.basket_total(),
        )
