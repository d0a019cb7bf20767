"""CustomTkinter study timer with an optional target in minutes."""
from __future__ import annotations

import customtkinter as ctk

from .engine import DailyEdge
from .timer import TimerState
from .ui_style import CLOCK_FONT, LABEL_BOLD, TEXT_MUTED, card_kwargs


class TimerFrame(ctk.CTkFrame):
    """Display, progress bar and start/pause/stop/reset controls."""

    def __init__(self, master: ctk.CTkBaseClass, edge: DailyEdge, default_minutes: int = 25) -> None:
        super().__init__(master)
        self.edge = edge
        self.timer = edge.timer
        self._build_ui(default_minutes)
        self.refresh()

    def _build_ui(self, default_minutes: int) -> None:
        self.grid_columnconfigure(0, weight=1)

        config_row = ctk.CTkFrame(self, **card_kwargs())
        config_row.grid(row=0, column=0, pady=(12, 6), padx=10, sticky="ew")
        ctk.CTkLabel(config_row, text="Set study time (minutes)", font=LABEL_BOLD).grid(row=0, column=0, padx=8, pady=8)
        self.target_entry = ctk.CTkEntry(config_row, width=80)
        self.target_entry.insert(0, str(default_minutes))
        self.target_entry.grid(row=0, column=1, padx=4)
        ctk.CTkButton(config_row, text="Apply", command=self._apply_target, width=80).grid(row=0, column=2, padx=6)
        self.target_info = ctk.CTkLabel(config_row, text="", text_color=TEXT_MUTED)
        self.target_info.grid(row=0, column=3, padx=8, sticky="w")

        self.timer_label = ctk.CTkLabel(self, text="00:00:00", font=CLOCK_FONT)
        self.timer_label.grid(row=1, column=0, pady=6)

        self.progress = ctk.CTkProgressBar(self, width=520)
        self.progress.set(0)
        self.progress.grid(row=2, column=0, pady=4, padx=20)

        control_row = ctk.CTkFrame(self, fg_color="transparent")
        control_row.grid(row=3, column=0, pady=8)
        ctk.CTkButton(control_row, text="Start", command=self.timer.start, width=100).grid(row=0, column=0, padx=6)
        ctk.CTkButton(control_row, text="Pause", command=self.timer.pause, width=100).grid(row=0, column=1, padx=6)
        ctk.CTkButton(control_row, text="Stop", command=self.timer.stop, width=100).grid(row=0, column=2, padx=6)
        ctk.CTkButton(control_row, text="Reset", command=self.timer.reset, width=100).grid(row=0, column=3, padx=6)

        self.state_label = ctk.CTkLabel(self, text="", text_color=TEXT_MUTED)
        self.state_label.grid(row=4, column=0, pady=(4, 10))

    def _apply_target(self) -> None:
        self.timer.set_target_minutes(self.target_entry.get())
        self.refresh()

    def refresh(self) -> None:
        self.timer_label.configure(text=self.timer.display)
        self.progress.set(self.timer.progress_percent / 100)
        self.target_info.configure(text=self.timer.target_info)
        status = {
            TimerState.IDLE: "Ready",
            TimerState.RUNNING: "Studying…",
            TimerState.PAUSED: "Paused",
        }.get(self.timer.status, "")
        self.state_label.configure(text=status)
