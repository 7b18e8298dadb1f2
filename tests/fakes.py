"""Test doubles and builders shared across tests."""

import asyncio
import json
from typing import Any

from automeal_planner.llm import PlanTextProvider, Unavailable
from automeal_planner.models import PlanRequest


class FakeProvider(PlanTextProvider):
    """Provider returning a canned reply, raising, or stalling."""

    def __init__(
        self,
        name: str,
        reply: str | Unavailable | None = None,
        *,
        error: Exception | None = None,
        delay: float = 0.0,
    ) -> None:
        self.name = name
        self._reply = reply
        self._error = error
        self._delay = delay
        self.prompts: list[str] = []

    async def invoke(self, prompt: str) -> str | Unavailable:
        self.prompts.append(prompt)
        if self._delay:
            await asyncio.sleep(self._delay)
        if self._error is not None:
            raise self._error
        return self._reply


def make_request(**overrides: Any) -> PlanRequest:
    data: dict[str, Any] = {
        "location": "Austin, TX",
        "groceryStore": "H-E-B",
        "weeklyBudgetUsd": 120,
    }
    data.update(overrides)
    return PlanRequest.from_input(data)


def plan_dict(meals_per_day: int = 3, days: int = 7, title_prefix: str = "Meal") -> dict[str, Any]:
    return {
        "groceryList": [
            {"item": "Rice", "quantity": "2 lb", "estimatedCost": 3.5},
            {"item": "Eggs", "quantity": "12", "estimatedCost": 4.25},
        ],
        "weeklyPlan": [
            {
                "day": f"Day {d + 1}",
                "meals": [
                    {
                        "title": f"{title_prefix} {d + 1}-{m + 1}",
                        "category": "Italian",
                        "instructions": "Cook it.",
                    }
                    for m in range(meals_per_day)
                ],
            }
            for d in range(days)
        ],
        "totalEstimatedCost": 7.75,
    }


def plan_json(**kwargs: Any) -> str:
    return json.dumps(plan_dict(**kwargs))
