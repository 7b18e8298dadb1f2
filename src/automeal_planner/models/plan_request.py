"""Plan request data model."""

from enum import Enum
from typing import Any, Mapping

from pydantic import ConfigDict, Field, ValidationError, field_validator

from automeal_planner.errors import InvalidRequest
from automeal_planner.models.base import CamelModel


class MealType(str, Enum):
    """Meal slot within a day."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"


DEFAULT_MEAL_TYPES: tuple[MealType, ...] = (MealType.BREAKFAST, MealType.LUNCH, MealType.DINNER)
DEFAULT_COMPLEXITY = 3


class PlanRequest(CamelModel):
    """Normalized input for one plan generation. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    location: str = Field(..., min_length=1)
    grocery_store: str = Field(..., min_length=1)
    weekly_budget_usd: float = Field(..., gt=0)
    meals_requested: str = Field(default="")
    kitchen_tools: str = Field(default="")
    kitchen_appliances: str = Field(default="")
    cooking_notes: str = Field(default="")
    favorite_categories: str = Field(default="")
    complexity: int = Field(default=DEFAULT_COMPLEXITY, ge=1, le=5)
    selected_meal_types: tuple[MealType, ...] = Field(default=DEFAULT_MEAL_TYPES, min_length=1)

    @field_validator(
        "meals_requested",
        "kitchen_tools",
        "kitchen_appliances",
        "cooking_notes",
        "favorite_categories",
        mode="before",
    )
    @classmethod
    def _none_is_blank(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("complexity", mode="before")
    @classmethod
    def _default_complexity(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_COMPLEXITY
        return v

    @field_validator("selected_meal_types", mode="before")
    @classmethod
    def _normalize_meal_types(cls, v: Any) -> Any:
        """Empty means all; a bare string is one type; duplicates keep first position."""
        if v is None or v == "":
            return DEFAULT_MEAL_TYPES
        if isinstance(v, str):
            v = [v]
        if not isinstance(v, (list, tuple)):
            return v
        seen: list[Any] = []
        for t in v:
            key = t.strip().lower() if isinstance(t, str) else t
            if key == "":
                continue
            if key not in seen:
                seen.append(key)
        return tuple(seen) or DEFAULT_MEAL_TYPES

    @classmethod
    def from_input(cls, data: Mapping[str, Any]) -> "PlanRequest":
        """Validate caller input. Raises InvalidRequest."""
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise InvalidRequest(f"Invalid plan request: {e}") from e
