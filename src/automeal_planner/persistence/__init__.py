"""Persistence layer."""

from automeal_planner.persistence.factory import create_stores
from automeal_planner.persistence.plan_store import PlanStore
from automeal_planner.persistence.profile_store import ProfileStore

__all__ = [
    "PlanStore",
    "ProfileStore",
    "create_stores",
]
