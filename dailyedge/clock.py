"""Day boundary and clock helpers for DailyEdge."""
from __future__ import annotations

import time
from datetime import datetime
from typing import Optional

monotonic = time.monotonic


def current_day_key(now: Optional[datetime] = None) -> str:
    """Return the local calendar day as YYYY-MM-DD."""
    return (now or datetime.now()).date().isoformat()


def format_hms(seconds: float) -> str:
    """Format seconds as HH:MM:SS, dropping the fractional part."""
    total = max(int(seconds), 0)
    hours, rem = divmod(total, 3600)
    mins, secs = divmod(rem, 60)
    return f"{hours:02d}:{mins:02d}:{secs:02d}"
