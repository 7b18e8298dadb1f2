"""Meal plan data model."""

from typing import Any

from pydantic import Field, ValidationInfo, field_validator, model_validator

from automeal_planner.models.base import CamelModel
from automeal_planner.models.plan_request import DEFAULT_MEAL_TYPES, MealType

DAYS_PER_PLAN = 7


class GroceryItem(CamelModel):
    """Single grocery list line."""

    item: str = Field(..., min_length=1, description="Item name")
    quantity: str = Field(default="", description="Quantity, e.g. 2 lb")
    estimated_cost: float = Field(default=0.0, ge=0, description="Estimated cost in USD")

    @field_validator("quantity", mode="before")
    @classmethod
    def _quantity_as_text(cls, v: Any) -> Any:
        if v is None:
            return ""
        if isinstance(v, (int, float)):
            return str(v)
        return v


class Meal(CamelModel):
    """Single meal in a plan."""

    title: str = Field(..., min_length=1, description="Recipe title")
    category: str = Field(default="", description="Cuisine tag, e.g. Italian")
    instructions: str = Field(default="", description="Brief cooking instructions")
    recipe_link: str | None = Field(default=None, description="Verified recipe URL, absent if none")

    @field_validator("recipe_link", mode="before")
    @classmethod
    def _blank_link_is_absent(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class DayPlan(CamelModel):
    """One day of meals, ordered like the requested meal types."""

    day: str = Field(..., description="Day label, e.g. Day 1")
    meals: list[Meal] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _collapse_meal_slots(cls, data: Any, info: ValidationInfo) -> Any:
        # Older plans keyed meals by slot: {"day": .., "breakfast": {..}, "dinner": {..}}
        if isinstance(data, dict) and "meals" not in data:
            requested = (info.context or {}).get("meal_types") or DEFAULT_MEAL_TYPES
            order = [MealType(t).value for t in requested]
            # Unrequested slots go last so the meal count check still sees them
            order += [t.value for t in DEFAULT_MEAL_TYPES if t.value not in order]
            slots = [data[key] for key in order if isinstance(data.get(key), dict)]
            if slots:
                return {"day": data.get("day"), "meals": slots}
        return data

    @field_validator("day", mode="before")
    @classmethod
    def _day_as_text(cls, v: Any) -> Any:
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return f"Day {v:g}"
        return v


class MealPlan(CamelModel):
    """Weekly plan: grocery list plus exactly seven days."""

    grocery_list: list[GroceryItem] = Field(...)
    weekly_plan: list[DayPlan] = Field(..., min_length=DAYS_PER_PLAN, max_length=DAYS_PER_PLAN)
    total_estimated_cost: float = Field(default=0.0, ge=0)

    @model_validator(mode="before")
    @classmethod
    def _label_unnamed_days(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        key = "weeklyPlan" if "weeklyPlan" in data else "weekly_plan"
        days = data.get(key)
        if not isinstance(days, list):
            return data
        labeled = []
        for i, day in enumerate(days):
            if isinstance(day, dict):
                label = day.get("day")
                if label is None or (isinstance(label, str) and not label.strip()):
                    day = {**day, "day": f"Day {i + 1}"}
            labeled.append(day)
        return {**data, key: labeled}

    def meal_titles(self) -> list[str]:
        """All meal titles in plan order."""
        return [m.title for d in self.weekly_plan for m in d.meals]
