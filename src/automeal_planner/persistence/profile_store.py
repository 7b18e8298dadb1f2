"""Kitchen profile persistence - JSON file storage."""

import logging
from pathlib import Path

from pydantic import ValidationError

from automeal_planner.models import KitchenProfile
from automeal_planner.persistence._files import read_json, write_json

logger = logging.getLogger(__name__)


class ProfileStore:
    """File-based store for the single kitchen profile."""

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._path = self._data_dir / "profile.json"

    def get(self) -> KitchenProfile:
        """Saved profile, or an empty one."""
        data = read_json(self._path, {})
        if not isinstance(data, dict):
            logger.warning("Ignoring malformed profile in %s", self._path)
            return KitchenProfile()
        try:
            return KitchenProfile.model_validate(data)
        except ValidationError as e:
            logger.warning("Could not load profile %s: %s", self._path, e)
            return KitchenProfile()

    def save(self, profile: KitchenProfile) -> None:
        write_json(self._path, profile.model_dump(mode="json", by_alias=True))
