"""Business logic services."""

from automeal_planner.services.history import extract_used_meal_titles
from automeal_planner.services.meal_plan_service import MealPlanService
from automeal_planner.services.mock_plan import MockPlanSynthesizer
from automeal_planner.services.plan_generator import (
    AttemptStatus,
    FallbackReason,
    PlanGeneration,
    PlanGenerator,
    PlanSource,
    ProviderAttempt,
    create_plan_generator,
    generate_plan,
)
from automeal_planner.services.prompt_builder import build_prompt
from automeal_planner.services.response_parser import ParseFailure, parse_meal_plan

__all__ = [
    "AttemptStatus",
    "FallbackReason",
    "MealPlanService",
    "MockPlanSynthesizer",
    "ParseFailure",
    "PlanGeneration",
    "PlanGenerator",
    "PlanSource",
    "ProviderAttempt",
    "build_prompt",
    "create_plan_generator",
    "extract_used_meal_titles",
    "generate_plan",
    "parse_meal_plan",
]
