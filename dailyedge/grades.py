"""Grade calculator: plain points percentage and weighted categories."""
from __future__ import annotations

import math
from typing import Any, Iterable, List

from .models import CategoryBreakdown, GradeCategory, GradeResult

SIMPLE_INVALID = "Enter valid numbers (possible must be > 0)."
NO_VALID_CATEGORY = "Add at least one valid category."

DEFAULT_CATEGORIES = [
    ("Exams", 40.0),
    ("Quizzes", 20.0),
    ("Homework", 40.0),
]


def parse_number(raw: Any) -> float:
    """Parse user input the lenient way a number field does.

    Blank, unparsable and non-finite input ("inf", "nan", "1e999") is NaN.
    """
    if raw is None or isinstance(raw, bool):
        return math.nan
    try:
        value = float(raw) if isinstance(raw, (int, float)) else float(str(raw).strip())
    except (ValueError, OverflowError):
        return math.nan
    return value if math.isfinite(value) else math.nan


def category_from_inputs(name: Any, earned: Any, possible: Any, weight: Any) -> GradeCategory:
    """Build a category from raw form values."""
    label = str(name or "").strip() or "Category"
    weight_value = parse_number(weight)
    return GradeCategory(
        name=label,
        earned=parse_number(earned),
        possible=parse_number(possible),
        weight=None if math.isnan(weight_value) else weight_value,
    )


def default_categories() -> List[GradeCategory]:
    """Empty rows the weighted form starts with."""
    return [GradeCategory(name=n, earned=math.nan, possible=math.nan, weight=w) for n, w in DEFAULT_CATEGORIES]


def simple_percentage(earned: Any, possible: Any) -> GradeResult:
    """Return ``earned / possible * 100`` or a validation failure."""
    earned_v = parse_number(earned)
    possible_v = parse_number(possible)
    if not (earned_v >= 0) or not (possible_v > 0):
        return GradeResult(ok=False, message=SIMPLE_INVALID)
    return GradeResult(ok=True, value=earned_v / possible_v * 100, label="Score")


def weighted_grade(categories: Iterable[GradeCategory]) -> GradeResult:
    """Blend category percentages by normalized weight.

    Invalid rows (negative earned, non-positive possible, blanks) are dropped
    before weights are looked at. When any surviving row has a positive
    weight, only positive weights count and the others weigh 0; when none
    does, every row gets an equal share.
    """
    rows = [c for c in categories if c.is_valid()]
    if not rows:
        return GradeResult(ok=False, message=NO_VALID_CATEGORY)

    has_any_weight = any(c.has_weight() for c in rows)
    # positive weights only, so the total is positive whenever any exists
    total_weight = sum(c.weight for c in rows if c.has_weight())

    final = 0.0
    breakdown: List[CategoryBreakdown] = []
    for c in rows:
        pct = c.earned / c.possible * 100
        if has_any_weight:
            w = c.weight / total_weight if c.has_weight() else 0.0
        else:
            w = 1 / len(rows)
        final += pct * w
        breakdown.append(
            CategoryBreakdown(name=c.name, percent=pct, weight_percent=w * 100, contribution=pct * w)
        )
    return GradeResult(ok=True, value=final, breakdown=breakdown, label="Final Grade")
