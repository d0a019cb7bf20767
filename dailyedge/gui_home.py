"""Home tab: today's study time and task counters."""
from __future__ import annotations

from typing import Callable, Dict, Optional

import customtkinter as ctk

from .engine import DailyEdge
from .stats import completed_label, sessions_label, study_label
from .ui_style import LABEL_FONT, TEXT_MUTED, TEXT_PRIMARY, VALUE_FONT, card_kwargs


class HomeFrame(ctk.CTkFrame):
    """Two stat cards; clicking a card jumps to its tab."""

    def __init__(
        self,
        master: ctk.CTkBaseClass,
        edge: DailyEdge,
        navigator: Optional[Dict[str, Callable[[], None]]] = None,
    ) -> None:
        super().__init__(master, fg_color="transparent")
        self.edge = edge
        self.navigator = navigator or {}

        self.grid_columnconfigure((0, 1), weight=1)
        self.study_value, self.study_muted = self._create_card("Study time today", 0, "timer")
        self.tasks_value, self.tasks_muted = self._create_card("Active tasks", 1, "planner")
        self.refresh()

    def _create_card(self, title: str, col: int, nav_key: str):
        card = ctk.CTkFrame(self, **card_kwargs())
        card.grid(row=0, column=col, sticky="ew", padx=(0 if col == 0 else 5, 5 if col == 0 else 0))
        ctk.CTkLabel(card, text=title, font=LABEL_FONT, text_color=TEXT_MUTED).pack(pady=(10, 0))
        value = ctk.CTkLabel(card, text="0", font=VALUE_FONT, text_color=TEXT_PRIMARY)
        value.pack()
        muted = ctk.CTkLabel(card, text="", font=LABEL_FONT, text_color=TEXT_MUTED)
        muted.pack(pady=(0, 10))
        target = self.navigator.get(nav_key)
        if target:
            for widget in (card, value, muted):
                widget.bind("<Button-1>", lambda _e: target())
        return value, muted

    def refresh(self) -> None:
        stats = self.edge.stats
        self.study_value.configure(text=study_label(stats))
        self.study_muted.configure(text=sessions_label(stats))
        self.tasks_value.configure(text=str(stats.active_tasks))
        self.tasks_muted.configure(text=completed_label(stats))
