"""Study timer engine with wall-clock delta accumulation and optional target."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .clock import format_hms, monotonic
from .models import DailyState
from .storage import StateStore

logger = logging.getLogger(__name__)

MAX_TARGET_SECONDS = 24 * 3600
DEFAULT_TARGET_MINUTES = 25
MAX_TARGET_MINUTES = 600
DEFAULT_TICK_MS = 200

Schedule = Callable[[int, Callable[[], None]], Any]
Cancel = Callable[[Any], None]


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


class TimerState:
    """States of the study timer. Stopping folds time in and returns to IDLE."""
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


@dataclass
class StopResult:
    seconds_added: int
    finished: bool


class TimerEngine:
    """
    Tracks one study session and commits it into the daily state on stop.

    Elapsed time is the sum of monotonic-clock deltas measured on each tick,
    so a late or skipped tick neither loses nor double-counts time. Ticks are
    driven by an injected scheduler (``schedule(delay_ms, callback)`` and
    ``cancel(handle)``), e.g. a Tk widget's ``after``/``after_cancel``.
    """

    def __init__(
        self,
        state: DailyState,
        store: StateStore,
        schedule: Schedule,
        cancel: Cancel,
        clock: Callable[[], float] = monotonic,
        tick_ms: int = DEFAULT_TICK_MS,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        self.state = state
        self.store = store
        self._schedule = schedule
        self._cancel = cancel
        self.clock = clock
        self.tick_ms = max(int(tick_ms), 1)
        self.on_change = on_change

        self.status: str = TimerState.IDLE
        self.elapsed_seconds: float = 0.0
        self.target_seconds: int = 0
        self.last_tick: float = 0.0
        self._handle: Any = None

    # ── Target ──────────────────────────────────────────────────────────────

    def set_target(self, seconds: Any) -> int:
        """Clamp and apply a target in seconds; 0 means count up."""
        try:
            value = int(float(seconds))
        except (TypeError, ValueError, OverflowError):
            value = 0
        self.target_seconds = int(_clamp(value, 0, MAX_TARGET_SECONDS))
        logger.debug("Timer target set to %d s", self.target_seconds)
        return self.target_seconds

    def set_target_minutes(self, minutes: Any) -> int:
        """Apply a target typed in minutes (blank or zero means the default 25)."""
        try:
            mins = int(float(str(minutes).strip()))
        except (TypeError, ValueError, OverflowError):
            mins = 0
        mins = int(_clamp(mins or DEFAULT_TARGET_MINUTES, 1, MAX_TARGET_MINUTES))
        return self.set_target(mins * 60)

    # ── Transitions ─────────────────────────────────────────────────────────

    @property
    def running(self) -> bool:
        return self.status == TimerState.RUNNING

    def start(self) -> None:
        if self.running:
            return
        self.status = TimerState.RUNNING
        self.last_tick = self.clock()
        self._handle = self._schedule(self.tick_ms, self.tick)
        logger.info("Timer started (target %d s)", self.target_seconds)

    def tick(self) -> None:
        """Accumulate the time since the previous tick and check the target."""
        self._handle = None
        if not self.running:
            return
        now = self.clock()
        self.elapsed_seconds += max(now - self.last_tick, 0.0)
        self.last_tick = now
        if self.target_seconds and self.elapsed_seconds >= self.target_seconds:
            self.stop(finished=True)
            return
        self._handle = self._schedule(self.tick_ms, self.tick)

    def pause(self) -> None:
        self._halt()
        if self.status == TimerState.RUNNING:
            self.status = TimerState.PAUSED
            logger.info("Timer paused at %.1f s", self.elapsed_seconds)

    def reset(self) -> None:
        """Discard the current session without committing it."""
        self._halt()
        self.status = TimerState.IDLE
        self.elapsed_seconds = 0.0

    def stop(self, finished: Optional[bool] = None) -> StopResult:
        """Fold the session into the daily state and return to idle."""
        self._halt()
        if finished is None:
            finished = bool(self.target_seconds) and self.elapsed_seconds >= self.target_seconds
        added = int(round(self.elapsed_seconds))
        self.state.study_seconds += added
        if finished:
            self.state.sessions += 1
        self.store.save(self.state)
        if self.on_change:
            self.on_change()
        logger.info("Timer stopped: +%d s, finished=%s", added, finished)
        self.elapsed_seconds = 0.0
        self.status = TimerState.IDLE
        return StopResult(seconds_added=added, finished=finished)

    def _halt(self) -> None:
        if self.status == TimerState.RUNNING:
            # fold in time since the last tick so a pause never loses it
            now = self.clock()
            self.elapsed_seconds += max(now - self.last_tick, 0.0)
            self.last_tick = now
        if self._handle is not None:
            self._cancel(self._handle)
            self._handle = None

    # ── Display ─────────────────────────────────────────────────────────────

    @property
    def remaining(self) -> float:
        if self.target_seconds:
            return max(self.target_seconds - self.elapsed_seconds, 0.0)
        return self.elapsed_seconds

    @property
    def progress_percent(self) -> float:
        if not self.target_seconds:
            return 0.0
        return _clamp(self.elapsed_seconds / self.target_seconds * 100, 0.0, 100.0)

    @property
    def display(self) -> str:
        return format_hms(self.remaining)

    @property
    def target_info(self) -> str:
        if not self.target_seconds:
            return "No target set"
        return f"Target set: {round(self.target_seconds / 60)} min"
