"""Store factory - creates file stores from config."""

from pathlib import Path

from automeal_planner.config import get_settings
from automeal_planner.persistence.plan_store import PlanStore
from automeal_planner.persistence.profile_store import ProfileStore


def create_stores(data_dir: Path | None = None) -> tuple[PlanStore, ProfileStore]:
    """
    Create plan and profile stores under DATA_DIR.
    Returns (plan_store, profile_store).
    """
    path = Path(data_dir or get_settings().data_dir)
    path.mkdir(parents=True, exist_ok=True)
    return PlanStore(path), ProfileStore(path)
