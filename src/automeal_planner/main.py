"""FastAPI application - profile and plan endpoints."""

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Response

from automeal_planner.errors import InvalidRequest
from automeal_planner.models import KitchenProfile, PlanHistoryEntry
from automeal_planner.persistence import create_stores
from automeal_planner.services import MealPlanService, create_plan_generator

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Dependency injection - created at startup
_service: MealPlanService | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize and cleanup."""
    global _service
    plan_store, profile_store = create_stores()
    _service = MealPlanService(create_plan_generator(), plan_store, profile_store)
    yield
    _service = None


app = FastAPI(
    title="AutoMeal Planner",
    description="Weekly meal plans from LLM providers with an offline fallback",
    version="0.1.0",
    lifespan=lifespan,
)


def get_service() -> MealPlanService:
    if _service is None:
        raise HTTPException(status_code=503, detail="Service not initialized")
    return _service


def _entry_json(entry: PlanHistoryEntry) -> dict[str, Any]:
    return entry.model_dump(mode="json", by_alias=True)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check for load balancers."""
    return {"status": "ok"}


@app.get("/profile")
async def get_profile(service: MealPlanService = Depends(get_service)) -> dict[str, Any]:
    return service.get_profile().model_dump(mode="json", by_alias=True)


@app.put("/profile")
async def save_profile(
    profile: KitchenProfile,
    service: MealPlanService = Depends(get_service),
) -> dict[str, Any]:
    service.save_profile(profile)
    return profile.model_dump(mode="json", by_alias=True)


@app.post("/plans", status_code=201)
async def create_plan(service: MealPlanService = Depends(get_service)) -> dict[str, Any]:
    """Generate a plan from the saved profile. Falls back to the offline plan on provider trouble."""
    try:
        entry, generation = await service.generate_from_profile()
    except InvalidRequest as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    body = _entry_json(entry)
    body["source"] = generation.source.value
    body["provider"] = generation.provider
    return body


@app.get("/plans")
async def list_plans(service: MealPlanService = Depends(get_service)) -> list[dict[str, Any]]:
    return [_entry_json(e) for e in service.list_plans()]


@app.get("/plans/{plan_id}")
async def get_plan(plan_id: str, service: MealPlanService = Depends(get_service)) -> dict[str, Any]:
    entry = service.get_plan(plan_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="Plan not found")
    return _entry_json(entry)


@app.delete("/plans/{plan_id}", status_code=204)
async def delete_plan(plan_id: str, service: MealPlanService = Depends(get_service)) -> Response:
    if not service.delete_plan(plan_id):
        raise HTTPException(status_code=404, detail="Plan not found")
    logger.info("Deleted plan %s", plan_id)
    return Response(status_code=204)
