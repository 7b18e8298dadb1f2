"""Plan history persistence - JSON file storage, newest first."""

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from automeal_planner.models import PlanHistoryEntry
from automeal_planner.persistence._files import read_json, write_json

logger = logging.getLogger(__name__)


class PlanStore:
    """File-based plan history. Keyed by entry id."""

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._path = self._data_dir / "plans.json"

    def raw_entries(self) -> list[Any]:
        """Entries as stored, unvalidated. May contain malformed items."""
        data = read_json(self._path, [])
        if not isinstance(data, list):
            logger.warning("Ignoring malformed plan history in %s", self._path)
            return []
        return data

    def entries(self) -> list[PlanHistoryEntry]:
        """Valid entries, newest first. Malformed entries are skipped."""
        entries: list[PlanHistoryEntry] = []
        for raw in self.raw_entries():
            try:
                entries.append(PlanHistoryEntry.model_validate(raw))
            except ValidationError as e:
                logger.warning("Skipping malformed plan entry: %s", e)
        return entries

    def get(self, entry_id: str) -> PlanHistoryEntry | None:
        for entry in self.entries():
            if entry.id == entry_id:
                return entry
        return None

    def add(self, entry: PlanHistoryEntry) -> None:
        """Prepend entry."""
        data = self.raw_entries()
        data.insert(0, entry.model_dump(mode="json", by_alias=True))
        write_json(self._path, data)

    def delete(self, entry_id: str) -> bool:
        """Remove entry. False if no entry had this id."""
        data = self.raw_entries()
        kept = [e for e in data if not (isinstance(e, dict) and e.get("id") == entry_id)]
        if len(kept) == len(data):
            return False
        write_json(self._path, kept)
        return True
