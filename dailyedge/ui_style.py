"""Centralized UI style constants for the CustomTkinter dark theme."""
from __future__ import annotations

# Color palette (dark + red danger buttons)
BG_CARD = "#151a21"
BORDER = "#1f2633"
TEXT_PRIMARY = "#e5e9f0"
TEXT_MUTED = "#9aa7b8"
TEXT_ERROR = "#ef5350"
DANGER = "#b33636"
DANGER_HOVER = "#8f2a2a"

CARD_RADIUS = 16
CARD_BORDER_WIDTH = 1

HEADER_FONT = ("Helvetica", 24, "bold")
LABEL_FONT = ("Helvetica", 13)
LABEL_BOLD = ("Helvetica", 13, "bold")
VALUE_FONT = ("Helvetica", 20, "bold")
CLOCK_FONT = ("Menlo", 52, "bold")


def card_kwargs() -> dict:
    """Default kwargs for a dashboard-style card."""
    return {
        "corner_radius": CARD_RADIUS,
        "border_width": CARD_BORDER_WIDTH,
        "border_color": BORDER,
        "fg_color": BG_CARD,
    }
