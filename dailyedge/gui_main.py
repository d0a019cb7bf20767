"""CustomTkinter main window: Home, Timer, Planner and Calculator tabs."""
from __future__ import annotations

import logging

import customtkinter as ctk

from .config import load_config, setup_logging
from .engine import DailyEdge
from .gui_grades import GradeFrame
from .gui_home import HomeFrame
from .gui_tasks import TasksFrame
from .gui_timer import TimerFrame

logger = logging.getLogger(__name__)


def launch_app() -> None:
    """Start the DailyEdge main window."""
    config = load_config()
    setup_logging(config)
    logger.info("Starting DailyEdge...")

    ctk.set_appearance_mode("dark")
    ctk.set_default_color_theme("blue")

    app = ctk.CTk()
    app.title("DailyEdge")
    app.geometry("900x650")

    edge = DailyEdge.open(schedule=app.after, cancel=app.after_cancel, config=config)

    tabview = ctk.CTkTabview(app)
    tabview.pack(fill="both", expand=True, padx=12, pady=12)
    home_tab = tabview.add("Home")
    timer_tab = tabview.add("Timer")
    planner_tab = tabview.add("Planner")
    calc_tab = tabview.add("Calculator")

    navigator = {
        "timer": lambda: tabview.set("Timer"),
        "planner": lambda: tabview.set("Planner"),
    }
    home = HomeFrame(home_tab, edge, navigator=navigator)
    home.pack(fill="both", expand=True, padx=10, pady=10)
    timer = TimerFrame(timer_tab, edge, default_minutes=config.default_target_minutes)
    timer.pack(fill="both", expand=True, padx=10, pady=10)
    TasksFrame(planner_tab, edge, on_tasks_updated=home.refresh).pack(fill="both", expand=True, padx=10, pady=10)
    GradeFrame(calc_tab).pack(fill="both", expand=True, padx=10, pady=10)

    # views pull from the engine; nothing is pushed to them
    def poll() -> None:
        timer.refresh()
        home.refresh()
        app.after(config.tick_interval_ms, poll)

    poll()
    app.mainloop()


if __name__ == "__main__":
    launch_app()
