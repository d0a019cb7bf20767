"""Home screen summary derived from the daily state."""
from __future__ import annotations

from .models import DailyState, HomeStats


def project_stats(state: DailyState) -> HomeStats:
    return HomeStats(
        study_minutes=state.study_seconds // 60,
        sessions=state.sessions,
        active_tasks=sum(1 for t in state.tasks if not t.done),
        completed_tasks=state.completed,
    )


def study_label(stats: HomeStats) -> str:
    return f"{stats.study_minutes}m"


def sessions_label(stats: HomeStats) -> str:
    suffix = "" if stats.sessions == 1 else "s"
    return f"{stats.sessions} session{suffix}"


def completed_label(stats: HomeStats) -> str:
    return f"{stats.completed_tasks} completed"
