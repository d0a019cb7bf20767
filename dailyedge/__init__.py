"""DailyEdge package initialization."""

__all__ = [
    "clock",
    "config",
    "models",
    "storage",
    "timer",
    "tasks",
    "grades",
    "stats",
    "engine",
    "gui_main",
    "gui_home",
    "gui_timer",
    "gui_tasks",
    "gui_grades",
]
