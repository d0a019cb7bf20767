"""Shared fixtures: a temp-dir store, a fake clock and a manual scheduler."""

import pytest

from dailyedge.models import DailyState
from dailyedge.storage import StateStore

TODAY = "2026-10-19"


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class ManualScheduler:
    """Collects scheduled callbacks; tests fire them explicitly."""

    def __init__(self) -> None:
        self.pending = {}
        self._next = 0

    def schedule(self, delay_ms, callback):
        self._next += 1
        self.pending[self._next] = callback
        return self._next

    def cancel(self, handle) -> None:
        self.pending.pop(handle, None)

    def run_pending(self) -> int:
        ready = list(self.pending.items())
        self.pending.clear()
        for _, callback in ready:
            callback()
        return len(ready)


@pytest.fixture
def store(tmp_path):
    return StateStore(tmp_path / "state.json", today=lambda: TODAY)


@pytest.fixture
def state():
    return DailyState(date=TODAY)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler():
    return ManualScheduler()
