"""Data models."""

from automeal_planner.models.catalog import MealCatalog
from automeal_planner.models.history import PlanHistoryEntry
from automeal_planner.models.meal_plan import DAYS_PER_PLAN, DayPlan, GroceryItem, Meal, MealPlan
from automeal_planner.models.plan_request import DEFAULT_MEAL_TYPES, MealType, PlanRequest
from automeal_planner.models.profile import KitchenProfile

__all__ = [
    "DAYS_PER_PLAN",
    "DEFAULT_MEAL_TYPES",
    "DayPlan",
    "GroceryItem",
    "KitchenProfile",
    "Meal",
    "MealCatalog",
    "MealPlan",
    "MealType",
    "PlanHistoryEntry",
    "PlanRequest",
]
