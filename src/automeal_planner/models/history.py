"""Plan history data model."""

from datetime import datetime

from pydantic import Field

from automeal_planner.models.base import CamelModel
from automeal_planner.models.meal_plan import MealPlan
from automeal_planner.models.plan_request import PlanRequest


class PlanHistoryEntry(CamelModel):
    """A generated plan together with the request that produced it."""

    id: str = Field(..., description="Entry id, millisecond timestamp plus a random suffix")
    created_at: datetime = Field(...)
    input: PlanRequest = Field(...)
    plan: MealPlan = Field(...)
