"""Data models for DailyEdge."""
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import List, Optional
import math
import uuid


def new_task_id() -> str:
    return str(uuid.uuid4())


@dataclass
class Task:
    """Represents one planner entry."""

    text: str
    done: bool = False
    id: str = field(default_factory=new_task_id)

    def to_dict(self) -> dict:
        """Serialize task to a dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        """Create a Task from stored data; raises ValueError on malformed rows."""
        task_id = data.get("id")
        text = data.get("text")
        if not isinstance(task_id, str) or not task_id:
            raise ValueError("task id must be a non-empty string")
        if not isinstance(text, str) or not text.strip():
            raise ValueError("task text must be a non-empty string")
        done = data.get("done")
        return cls(id=task_id, text=text.strip(), done=done if isinstance(done, bool) else False)


@dataclass
class DailyState:
    """The single per-day snapshot shared by the timer and the planner.

    ``completed`` mirrors the number of done tasks for display; the task list
    stays the source of truth and the planner rewrites the counter after
    every mutation.
    """

    date: str
    study_seconds: int = 0
    sessions: int = 0
    tasks: List[Task] = field(default_factory=list)
    completed: int = 0

    def to_dict(self) -> dict:
        """Serialize using the stored (camelCase) field names."""
        return {
            "date": self.date,
            "studySeconds": self.study_seconds,
            "sessions": self.sessions,
            "tasks": [t.to_dict() for t in self.tasks],
            "completed": self.completed,
        }


@dataclass
class GradeCategory:
    """One row of the weighted calculator; blank numbers are NaN."""

    name: str
    earned: float
    possible: float
    weight: Optional[float] = None

    def is_valid(self) -> bool:
        return (
            math.isfinite(self.earned) and math.isfinite(self.possible)
            and self.earned >= 0 and self.possible > 0
        )

    def has_weight(self) -> bool:
        return self.weight is not None and math.isfinite(self.weight) and self.weight > 0


@dataclass
class CategoryBreakdown:
    """How a single category contributed to the final grade."""

    name: str
    percent: float
    weight_percent: float
    contribution: float

    def describe(self) -> str:
        return (
            f"{self.name}: {self.percent:.2f}% × {self.weight_percent:.1f}% "
            f"= {self.contribution:.2f}%"
        )


@dataclass
class GradeResult:
    """Outcome of a calculation; ``ok`` is False for validation failures."""

    ok: bool
    value: Optional[float] = None
    message: str = ""
    breakdown: List[CategoryBreakdown] = field(default_factory=list)
    label: str = "Score"

    @property
    def percentage(self) -> Optional[float]:
        if self.value is None:
            return None
        return round(self.value, 2)

    def summary(self) -> str:
        if not self.ok or self.value is None:
            return self.message
        return f"{self.label}: {self.value:.2f}%"


@dataclass
class HomeStats:
    """Summary fields shown on the home screen."""

    study_minutes: int
    sessions: int
    active_tasks: int
    completed_tasks: int
