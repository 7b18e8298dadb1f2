"""History reader - meal titles already used in earlier plans."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from automeal_planner.models import DEFAULT_MEAL_TYPES, PlanHistoryEntry

logger = logging.getLogger(__name__)


def _normalize_title(title: Any) -> str:
    return title.strip().lower() if isinstance(title, str) else ""


def _field(obj: Any, *names: str) -> Any:
    """Read a field from a model or a raw dict, trying each name (camel then snake)."""
    for name in names:
        if isinstance(obj, Mapping):
            if name in obj:
                return obj[name]
        elif hasattr(obj, name):
            return getattr(obj, name)
    return None


def _day_meals(day: Any) -> list[Any]:
    meals = _field(day, "meals")
    if meals is not None:
        return list(meals)
    # Older slot-keyed days
    if isinstance(day, Mapping):
        return [day[t.value] for t in DEFAULT_MEAL_TYPES if t.value in day]
    return []


def _entry_titles(entry: PlanHistoryEntry | Mapping[str, Any]) -> Iterable[str]:
    plan = _field(entry, "plan")
    if plan is None:
        return
    days = _field(plan, "weeklyPlan", "weekly_plan") or []
    for day in days:
        for meal in _day_meals(day):
            title = _normalize_title(_field(meal, "title"))
            if title:
                yield title


def extract_used_meal_titles(
    history: Iterable[PlanHistoryEntry | Mapping[str, Any]] | None,
) -> set[str]:
    """
    Lower-cased, trimmed titles of every meal in history.
    Best effort: malformed history yields an empty set, never an error.
    """
    if not history:
        return set()
    try:
        return {title for entry in history for title in _entry_titles(entry)}
    except Exception as e:
        logger.warning("Could not read meal titles from plan history: %s", e)
        return set()
