"""Storage for the DailyEdge daily snapshot."""
from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Callable, List

from .clock import current_day_key
from .config import DATA_DIR
from .models import DailyState, Task

STATE_PATH = DATA_DIR / "state.json"
STORAGE_KEY = "dailyedge:v1"

logger = logging.getLogger(__name__)


class StateStore:
    """Owns the durable copy of the :class:`DailyState` snapshot.

    The file holds a JSON object; the snapshot lives under ``STORAGE_KEY``.
    Loading never raises: anything unreadable falls back to a fresh state
    for today, and a record from an earlier day is rolled over.
    """

    def __init__(self, path: Path = STATE_PATH, today: Callable[[], str] = current_day_key) -> None:
        self.path = Path(path)
        self.today = today

    def default_state(self) -> DailyState:
        return DailyState(date=self.today())

    def load(self) -> DailyState:
        """Read the stored snapshot, backfilling and rolling over as needed."""
        record = self._read_all().get(STORAGE_KEY)
        if not isinstance(record, dict):
            if record is not None:
                logger.warning("Stored snapshot is not an object; starting fresh")
            return self.default_state()

        state = _state_from_dict(record, self.default_state())
        today = self.today()
        if state.date != today:
            logger.info("Rolling over daily counters from %s to %s", state.date, today)
            state.date = today
            state.study_seconds = 0
            state.sessions = 0
        return state

    def save(self, state: DailyState) -> None:
        """Persist the snapshot; failures are logged and otherwise ignored."""
        data = self._read_all()
        data[STORAGE_KEY] = state.to_dict()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            payload = json.dumps(data, indent=2, ensure_ascii=False)
            self.path.write_text(payload, encoding="utf-8")
        except (OSError, TypeError, ValueError) as exc:
            logger.warning("Could not save state to %s: %s", self.path, exc)

    def clear(self) -> None:
        """Drop the stored snapshot, keeping any other keys in the file."""
        data = self._read_all()
        if data.pop(STORAGE_KEY, None) is None:
            return
        try:
            self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not clear state in %s: %s", self.path, exc)

    def _read_all(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable state file %s: %s", self.path, exc)
            return {}
        if not isinstance(raw, dict):
            logger.warning("Ignoring state file %s: top level is not an object", self.path)
            return {}
        return raw


def _state_from_dict(raw: dict, defaults: DailyState) -> DailyState:
    """Merge a stored record over the defaults, field by field."""
    date = raw.get("date")
    return DailyState(
        date=date if isinstance(date, str) and date else defaults.date,
        study_seconds=_count(raw.get("studySeconds"), defaults.study_seconds),
        sessions=_count(raw.get("sessions"), defaults.sessions),
        tasks=_tasks(raw.get("tasks")),
        completed=_count(raw.get("completed"), defaults.completed),
    )


def _count(value: object, fallback: int) -> int:
    """Non-negative integer or the fallback."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return fallback
    if not math.isfinite(value) or value < 0:
        return fallback
    return int(value)


def _tasks(raw: object) -> List[Task]:
    if not isinstance(raw, list):
        return []
    tasks: List[Task] = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        try:
            tasks.append(Task.from_dict(item))
        except ValueError:
            # tolerate rows written by older or hand-edited files
            logger.debug("Skipping malformed task entry: %r", item)
    return tasks
