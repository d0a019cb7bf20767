"""Planner tab (CustomTkinter dark theme)."""
from __future__ import annotations

from typing import Callable, Optional

import customtkinter as ctk

from .engine import DailyEdge
from .models import Task
from .ui_style import DANGER, DANGER_HOVER, HEADER_FONT, TEXT_MUTED, TEXT_PRIMARY, card_kwargs


class TasksFrame(ctk.CTkFrame):
    """Add form plus the task list, newest first."""

    def __init__(
        self,
        master: ctk.CTkBaseClass,
        edge: DailyEdge,
        on_tasks_updated: Optional[Callable[[], None]] = None,
    ) -> None:
        super().__init__(master, fg_color="transparent")
        self.edge = edge
        self.on_tasks_updated = on_tasks_updated
        self._build_ui()
        self.refresh_tasks()

    def _build_ui(self) -> None:
        self.columnconfigure(0, weight=1)
        self.rowconfigure(1, weight=1)

        form_card = ctk.CTkFrame(self, **card_kwargs())
        form_card.grid(row=0, column=0, sticky="ew", pady=(0, 10))
        form_card.columnconfigure(0, weight=1)
        ctk.CTkLabel(form_card, text="Planner", font=HEADER_FONT).grid(row=0, column=0, columnspan=2, sticky="w", padx=15, pady=(15, 10))
        self.task_entry = ctk.CTkEntry(form_card, placeholder_text="Add a task…")
        self.task_entry.grid(row=1, column=0, sticky="ew", padx=(15, 5), pady=(0, 15))
        self.task_entry.bind("<Return>", lambda _e: self._add_task())
        ctk.CTkButton(form_card, text="Add", width=80, command=self._add_task).grid(row=1, column=1, padx=(5, 15), pady=(0, 15))

        self.list_frame = ctk.CTkScrollableFrame(self, **card_kwargs())
        self.list_frame.grid(row=1, column=0, sticky="nsew")
        self.list_frame.columnconfigure(0, weight=1)

    def refresh_tasks(self) -> None:
        for child in self.list_frame.winfo_children():
            child.destroy()
        tasks = self.edge.tasks.tasks
        if not tasks:
            ctk.CTkLabel(self.list_frame, text="(no tasks)", text_color=TEXT_MUTED).grid(row=0, column=0, pady=10)
        for idx, task in enumerate(tasks):
            self._task_row(idx, task)

    def _task_row(self, idx: int, task: Task) -> None:
        row = ctk.CTkFrame(self.list_frame, fg_color="transparent")
        row.grid(row=idx, column=0, sticky="ew", padx=6, pady=2)
        row.columnconfigure(0, weight=1)
        ctk.CTkLabel(
            row,
            text=task.text,
            anchor="w",
            text_color=TEXT_MUTED if task.done else TEXT_PRIMARY,
            font=("Helvetica", 13, "overstrike") if task.done else ("Helvetica", 13),
        ).grid(row=0, column=0, sticky="ew")
        ctk.CTkButton(
            row, text="Undo" if task.done else "Done", width=70, command=lambda: self._toggle(task.id)
        ).grid(row=0, column=1, padx=4)
        ctk.CTkButton(
            row, text="Delete", width=70, fg_color=DANGER, hover_color=DANGER_HOVER, command=lambda: self._delete(task.id)
        ).grid(row=0, column=2, padx=4)

    def _add_task(self) -> None:
        if self.edge.tasks.add(self.task_entry.get()) is None:
            return
        self.task_entry.delete(0, "end")
        self.task_entry.focus_set()
        self._updated()

    def _toggle(self, task_id: str) -> None:
        self.edge.tasks.toggle(task_id)
        self._updated()

    def _delete(self, task_id: str) -> None:
        self.edge.tasks.delete(task_id)
        self._updated()

    def _updated(self) -> None:
        self.refresh_tasks()
        if self.on_tasks_updated:
            self.on_tasks_updated()
