"""Kitchen profile data model."""

from typing import Any

from pydantic import Field, field_validator

from automeal_planner.errors import InvalidRequest
from automeal_planner.models.base import CamelModel
from automeal_planner.models.plan_request import DEFAULT_COMPLEXITY, DEFAULT_MEAL_TYPES, MealType, PlanRequest

INCOMPLETE_PROFILE_MESSAGE = (
    "Please complete your profile first with location, grocery store, and budget."
)


class KitchenProfile(CamelModel):
    """Saved profile. Every field optional until a plan is requested."""

    location: str = Field(default="")
    grocery_store: str = Field(default="")
    weekly_budget_usd: float = Field(default=0.0, ge=0)
    meals_requested: str = Field(default="")
    kitchen_tools: str = Field(default="")
    kitchen_appliances: str = Field(default="")
    cooking_notes: str = Field(default="")
    favorite_categories: str = Field(default="")
    complexity: int = Field(default=DEFAULT_COMPLEXITY, ge=1, le=5)
    selected_meal_types: list[MealType] = Field(default_factory=lambda: list(DEFAULT_MEAL_TYPES))

    @field_validator("complexity", mode="before")
    @classmethod
    def _complexity(cls, v: Any) -> Any:
        if v is None or v == "":
            return DEFAULT_COMPLEXITY
        return v

    @field_validator("selected_meal_types", mode="before")
    @classmethod
    def _meal_types(cls, v: Any) -> Any:
        if v is None or v == "" or v == []:
            return list(DEFAULT_MEAL_TYPES)
        if isinstance(v, str):
            return [v]
        return v

    def is_complete(self) -> bool:
        return bool(self.location and self.grocery_store and self.weekly_budget_usd > 0)

    def to_plan_request(self) -> PlanRequest:
        """Build the request for the pipeline. Raises InvalidRequest if incomplete."""
        if not self.is_complete():
            raise InvalidRequest(INCOMPLETE_PROFILE_MESSAGE)
        return PlanRequest.from_input(self.model_dump())
