"""Wires the store, timer, planner and home stats around one daily state."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from .clock import current_day_key, monotonic
from .config import AppConfig
from .models import DailyState, HomeStats
from .stats import project_stats
from .storage import StateStore
from .tasks import TaskListEngine
from .timer import Cancel, Schedule, TimerEngine

logger = logging.getLogger(__name__)


class DailyEdge:
    """
    Owns the loaded :class:`DailyState` and the engines that mutate it.

    Views call engine methods, then read ``stats``, ``state.tasks`` and the
    timer's display properties. Each mutation ends by saving and refreshing
    ``stats``; nothing is pushed to the view.
    """

    def __init__(
        self,
        store: StateStore,
        state: DailyState,
        schedule: Schedule,
        cancel: Cancel,
        clock: Callable[[], float] = monotonic,
        tick_ms: int = 200,
    ) -> None:
        self.store = store
        self.state = state
        self.tasks = TaskListEngine(state, store, on_change=self.refresh)
        self.timer = TimerEngine(
            state, store, schedule, cancel, clock=clock, tick_ms=tick_ms, on_change=self.refresh
        )
        self.stats: HomeStats = project_stats(state)

    @classmethod
    def open(
        cls,
        schedule: Schedule,
        cancel: Cancel,
        config: Optional[AppConfig] = None,
        path: Optional[Path] = None,
        today: Callable[[], str] = current_day_key,
        clock: Callable[[], float] = monotonic,
    ) -> "DailyEdge":
        """Load today's state and bring the completed counter in line."""
        config = config or AppConfig.default()
        store = StateStore(path or config.state_path, today=today)
        state = store.load()
        edge = cls(
            store,
            state,
            schedule,
            cancel,
            clock=clock,
            tick_ms=config.tick_interval_ms,
        )
        if edge.tasks.recompute() != edge.stats.completed_tasks:
            store.save(state)
        edge.refresh()
        logger.info("Loaded state for %s with %d task(s)", state.date, len(state.tasks))
        return edge

    def refresh(self) -> HomeStats:
        self.stats = project_stats(self.state)
        return self.stats
