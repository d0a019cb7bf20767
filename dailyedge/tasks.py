"""Planner task list operations over the shared daily state."""
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from .models import DailyState, Task
from .storage import StateStore

logger = logging.getLogger(__name__)


class TaskListEngine:
    """Add, toggle and delete tasks; newest tasks come first.

    Every mutation rewrites ``state.completed`` from the task list, saves the
    snapshot and then calls ``on_change``. Unknown ids are ignored.
    """

    def __init__(
        self,
        state: DailyState,
        store: StateStore,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        self.state = state
        self.store = store
        self.on_change = on_change

    @property
    def tasks(self) -> List[Task]:
        return self.state.tasks

    @property
    def active_count(self) -> int:
        return sum(1 for t in self.state.tasks if not t.done)

    @property
    def completed_count(self) -> int:
        return sum(1 for t in self.state.tasks if t.done)

    def find(self, task_id: str) -> Optional[Task]:
        return next((t for t in self.state.tasks if t.id == task_id), None)

    def add(self, text: str) -> Optional[Task]:
        """Prepend a new task; blank text is rejected and returns None."""
        text = (text or "").strip()
        if not text:
            return None
        task = Task(text=text)
        self.state.tasks.insert(0, task)
        logger.debug("Added task %s", task.id)
        self._commit()
        return task

    def toggle(self, task_id: str) -> Optional[Task]:
        task = self.find(task_id)
        if task is None:
            return None
        task.done = not task.done
        self._commit()
        return task

    def delete(self, task_id: str) -> Optional[Task]:
        task = self.find(task_id)
        if task is None:
            return None
        self.state.tasks.remove(task)
        logger.debug("Deleted task %s", task_id)
        self._commit()
        return task

    def recompute(self) -> int:
        self.state.completed = self.completed_count
        return self.state.completed

    def _commit(self) -> None:
        self.recompute()
        self.store.save(self.state)
        if self.on_change:
            self.on_change()
