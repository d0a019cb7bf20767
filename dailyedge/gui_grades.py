"""Grade calculator tab: points mode and weighted categories."""
from __future__ import annotations

import math
from typing import Dict, List

import customtkinter as ctk

from .grades import category_from_inputs, default_categories, simple_percentage, weighted_grade
from .models import GradeCategory
from .ui_style import DANGER, DANGER_HOVER, LABEL_BOLD, TEXT_ERROR, TEXT_MUTED, TEXT_PRIMARY


def _field_text(value) -> str:
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return ""
    return f"{value:g}"


class GradeFrame(ctk.CTkFrame):
    """Switches between a points form and an editable weighted table."""

    def __init__(self, master: ctk.CTkBaseClass) -> None:
        super().__init__(master)
        self.row_widgets: List[Dict[str, ctk.CTkBaseClass]] = []
        self._build_ui()
        for category in default_categories():
            self._add_row(category)
        self._switch_mode("Points")

    def _build_ui(self) -> None:
        self.grid_columnconfigure(0, weight=1)
        self.mode = ctk.CTkSegmentedButton(self, values=["Points", "Weighted"], command=self._switch_mode)
        self.mode.grid(row=0, column=0, pady=10)

        # Points mode
        self.simple_frame = ctk.CTkFrame(self, fg_color="transparent")
        self.earned_entry = ctk.CTkEntry(self.simple_frame, placeholder_text="Points earned", width=140)
        self.earned_entry.grid(row=0, column=0, padx=4, pady=4)
        self.possible_entry = ctk.CTkEntry(self.simple_frame, placeholder_text="Points possible", width=140)
        self.possible_entry.grid(row=0, column=1, padx=4, pady=4)
        ctk.CTkButton(self.simple_frame, text="Calculate", command=self._calculate_simple).grid(row=0, column=2, padx=6)
        self.simple_out = ctk.CTkLabel(self.simple_frame, text="", font=LABEL_BOLD)
        self.simple_out.grid(row=1, column=0, columnspan=3, pady=8)

        # Weighted mode
        self.weighted_frame = ctk.CTkFrame(self, fg_color="transparent")
        self.weighted_frame.grid_columnconfigure(0, weight=1)
        self.table = ctk.CTkScrollableFrame(self.weighted_frame, height=220)
        self.table.grid(row=0, column=0, padx=10, pady=6, sticky="nsew")
        self.table.grid_columnconfigure((0, 1, 2, 3), weight=1)
        for col, text in enumerate(["Category", "Earned", "Possible", "Weight %"]):
            ctk.CTkLabel(self.table, text=text).grid(row=0, column=col, padx=4, pady=2)

        btn_row = ctk.CTkFrame(self.weighted_frame, fg_color="transparent")
        btn_row.grid(row=1, column=0, pady=6)
        ctk.CTkButton(btn_row, text="Add category", command=self._add_row).grid(row=0, column=0, padx=6)
        ctk.CTkButton(btn_row, text="Calculate Final", command=self._calculate_weighted).grid(row=0, column=1, padx=6)
        ctk.CTkLabel(
            self.weighted_frame,
            text="Weights should total 100%. If not, they are normalized automatically.",
            text_color=TEXT_MUTED,
        ).grid(row=2, column=0)
        self.weighted_out = ctk.CTkLabel(self.weighted_frame, text="", font=LABEL_BOLD)
        self.weighted_out.grid(row=3, column=0, pady=(8, 2))
        self.breakdown_out = ctk.CTkLabel(self.weighted_frame, text="", text_color=TEXT_MUTED, justify="left")
        self.breakdown_out.grid(row=4, column=0, pady=(0, 10))

    def _switch_mode(self, which: str) -> None:
        self.mode.set(which)
        if which == "Points":
            self.weighted_frame.grid_remove()
            self.simple_frame.grid(row=1, column=0, sticky="nsew")
        else:
            self.simple_frame.grid_remove()
            self.weighted_frame.grid(row=1, column=0, sticky="nsew")

    def _add_row(self, category: GradeCategory | None = None) -> None:
        widgets: Dict[str, ctk.CTkBaseClass] = {
            "name": ctk.CTkEntry(self.table, placeholder_text="Category (e.g., Exams)"),
            "earned": ctk.CTkEntry(self.table, width=80, placeholder_text="Earned"),
            "possible": ctk.CTkEntry(self.table, width=80, placeholder_text="Possible"),
            "weight": ctk.CTkEntry(self.table, width=80, placeholder_text="Weight %"),
        }
        if category:
            widgets["name"].insert(0, category.name)
            for key in ("earned", "possible", "weight"):
                text = _field_text(getattr(category, key))
                if text:
                    widgets[key].insert(0, text)
        remove = ctk.CTkButton(
            self.table, text="✕", width=32, fg_color=DANGER, hover_color=DANGER_HOVER,
            command=lambda: self._remove_row(widgets),
        )
        widgets["remove"] = remove
        self.row_widgets.append(widgets)
        self._grid_row(len(self.row_widgets), widgets)

    def _grid_row(self, idx: int, widgets: Dict[str, ctk.CTkBaseClass]) -> None:
        for col, key in enumerate(("name", "earned", "possible", "weight", "remove")):
            widgets[key].grid(row=idx, column=col, padx=4, pady=2, sticky="ew")

    def _remove_row(self, widgets: Dict[str, ctk.CTkBaseClass]) -> None:
        for w in widgets.values():
            w.destroy()
        self.row_widgets = [r for r in self.row_widgets if r is not widgets]
        # row 0 holds the headers
        for idx, row in enumerate(self.row_widgets, start=1):
            self._grid_row(idx, row)

    def _calculate_simple(self) -> None:
        result = simple_percentage(self.earned_entry.get(), self.possible_entry.get())
        self.simple_out.configure(text=result.summary(), text_color=TEXT_PRIMARY if result.ok else TEXT_ERROR)

    def _calculate_weighted(self) -> None:
        categories = [
            category_from_inputs(
                w["name"].get(), w["earned"].get(), w["possible"].get(), w["weight"].get()
            )
            for w in self.row_widgets
        ]
        result = weighted_grade(categories)
        self.weighted_out.configure(text=result.summary(), text_color=TEXT_PRIMARY if result.ok else TEXT_ERROR)
        self.breakdown_out.configure(text="\n".join(b.describe() for b in result.breakdown))
