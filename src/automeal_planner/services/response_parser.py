"""Response parser - raw provider text to a structured meal plan."""

import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from automeal_planner.models import MealPlan, MealType

logger = logging.getLogger(__name__)

_decoder = json.JSONDecoder()


@dataclass(frozen=True)
class ParseFailure:
    """Provider text could not be turned into a plan. Recoverable."""

    reason: str


def _last_json_object(text: str) -> dict[str, Any] | None:
    """Last top-level {...} object embedded in text, skipping objects nested in it."""
    found: dict[str, Any] | None = None
    pos = text.find("{")
    while pos != -1:
        try:
            obj, end = _decoder.raw_decode(text, pos)
        except json.JSONDecodeError:
            pos = text.find("{", pos + 1)
            continue
        if isinstance(obj, dict):
            found = obj
        pos = text.find("{", end)
    return found


def _decode(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass
    # Model sometimes wraps the JSON in commentary or markdown fences
    return _last_json_object(text)


def parse_meal_plan(
    raw: str | None,
    *,
    meal_types: Sequence[MealType] | None = None,
) -> MealPlan | ParseFailure:
    """
    Decode provider output. Validates structural shape only:
    groceryList present, weeklyPlan with 7 days, every meal titled.
    With meal_types, slot-keyed days are ordered by them and every day
    must hold exactly one meal per type.
    """
    text = (raw or "").strip()
    if not text:
        return ParseFailure("empty response")

    data = _decode(text)
    if data is None:
        return ParseFailure("no JSON object found")
    if not isinstance(data, dict):
        return ParseFailure(f"expected a JSON object, got {type(data).__name__}")

    context = {"meal_types": tuple(meal_types)} if meal_types else None
    try:
        plan = MealPlan.model_validate(data, context=context)
    except ValidationError as e:
        return ParseFailure(f"invalid plan structure: {e.error_count()} error(s), first: {e.errors()[0]['msg']}")

    if meal_types:
        expected = len(meal_types)
        for day in plan.weekly_plan:
            if len(day.meals) != expected:
                return ParseFailure(f"{day.day} has {len(day.meals)} meal(s), expected {expected}")
    return plan
