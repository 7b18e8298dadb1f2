"""Offline meal catalog - templates for the mock plan."""

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import ConfigDict, Field, field_validator

from automeal_planner.models.base import CamelModel
from automeal_planner.models.meal_plan import GroceryItem, Meal
from automeal_planner.models.plan_request import MealType


class MealCatalog(CamelModel):
    """
    Meal templates keyed by meal type and a representative grocery basket.
    Read-only: hand out copies, never the stored templates.
    """

    model_config = ConfigDict(frozen=True)

    templates: Mapping[MealType, tuple[Meal, ...]] = Field(...)
    basket: tuple[GroceryItem, ...] = Field(...)
    total_estimated_cost: float | None = Field(default=None, ge=0)

    @field_validator("templates", mode="after")
    @classmethod
    def _read_only_templates(cls, v: Mapping[MealType, tuple[Meal, ...]]) -> Mapping[MealType, tuple[Meal, ...]]:
        return MappingProxyType(dict(v))

    def templates_for(self, meal_type: MealType) -> tuple[Meal, ...]:
        return self.templates.get(meal_type, ())

    def basket_total(self) -> float:
        """Configured total, or the sum of the basket."""
        if self.total_estimated_cost is not None:
            return self.total_estimated_cost
        return round(sum(i.estimated_cost for i in self.basket), 2)
