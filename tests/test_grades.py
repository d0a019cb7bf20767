"""Unit tests for the grade calculator."""

import math

import pytest

from dailyedge.grades import (
    NO_VALID_CATEGORY,
    SIMPLE_INVALID,
    category_from_inputs,
    default_categories,
    parse_number,
    simple_percentage,
    weighted_grade,
)
from dailyedge.models import GradeCategory


def cat(name, earned, possible, weight=None):
    return GradeCategory(name=name, earned=earned, possible=possible, weight=weight)


class TestSimple:
    @pytest.mark.parametrize("earned, possible, expected", [
        (45, 50, 90.0), (0, 10, 0.0), (2, 3, 66.67), (110, 100, 110.0),
    ])
    def test_percentage(self, earned, possible, expected):
        result = simple_percentage(earned, possible)
        assert result.ok
        assert result.percentage == expected

    def test_accepts_text_inputs(self):
        result = simple_percentage(" 17 ", "20")
        assert result.percentage == 85.0
        assert result.summary() == "Score: 85.00%"

    @pytest.mark.parametrize("earned, possible", [
        (-1, 10), (5, 0), (5, -2), ("", 10), (5, ""), ("abc", 10), (None, None),
        ("inf", "100"), ("50", "infinity"), ("nan", "100"), ("1e999", "100"), (10**400, 100),
    ])
    def test_invalid_inputs(self, earned, possible):
        result = simple_percentage(earned, possible)
        assert not result.ok
        assert result.value is None
        assert result.summary() == SIMPLE_INVALID


class TestWeighted:
    def test_explicit_weights(self):
        result = weighted_grade([
            cat("Exams", 80, 100, 40),
            cat("Quizzes", 90, 100, 20),
            cat("Homework", 70, 100, 40),
        ])
        assert result.ok
        assert result.percentage == 78.00
        assert result.summary() == "Final Grade: 78.00%"

    def test_weights_need_not_total_100(self):
        result = weighted_grade([cat("A", 80, 100, 2), cat("B", 90, 100, 1), cat("C", 70, 100, 2)])
        assert result.percentage == 78.00

    def test_blank_or_zero_weights_are_equal(self):
        result = weighted_grade([cat("A", 80, 100, 0), cat("B", 60, 100, None)])
        assert result.percentage == 70.00
        assert [b.weight_percent for b in result.breakdown] == [50.0, 50.0]

    def test_negative_weight_contributes_nothing(self):
        result = weighted_grade([cat("A", 80, 100, 50), cat("B", 0, 100, -30), cat("C", 60, 100, 50)])
        assert result.percentage == 70.00
        b = result.breakdown[1]
        assert b.name == "B"
        assert b.weight_percent == 0
        assert b.contribution == 0

    def test_zero_weight_with_other_positive_weights(self):
        result = weighted_grade([cat("A", 100, 100, 0), cat("B", 50, 100, 10)])
        assert result.percentage == 50.00
        assert len(result.breakdown) == 2

    def test_invalid_rows_are_dropped_before_weighting(self):
        result = weighted_grade([
            cat("A", 90, 100, 50),
            cat("Blank", math.nan, math.nan, 50),
            cat("Zero possible", 5, 0, 50),
        ])
        assert result.percentage == 90.00
        assert [b.name for b in result.breakdown] == ["A"]
        assert result.breakdown[0].weight_percent == 100.0

    def test_no_valid_category(self):
        result = weighted_grade([cat("A", -1, 100, 40), cat("B", 5, 0, 60)])
        assert not result.ok
        assert result.message == NO_VALID_CATEGORY

    def test_empty_input(self):
        assert weighted_grade([]).message == NO_VALID_CATEGORY

    def test_breakdown_lines(self):
        result = weighted_grade([cat("Exams", 80, 100, 40), cat("Quizzes", 90, 100, 60)])
        assert result.breakdown[0].describe() == "Exams: 80.00% × 40.0% = 32.00%"
        assert result.breakdown[1].describe() == "Quizzes: 90.00% × 60.0% = 54.00%"
        assert result.percentage == 86.00

    def test_negative_weights_only_fall_back_to_equal_share(self):
        result = weighted_grade([cat("A", 80, 100, -10), cat("B", 60, 100, -5)])
        assert result.ok
        assert result.percentage == 70.00
        assert [b.weight_percent for b in result.breakdown] == [50.0, 50.0]

    def test_non_finite_values_are_rejected(self):
        result = weighted_grade([
            category_from_inputs("A", "80", "100", "1e999"),
            category_from_inputs("B", "inf", "100", "50"),
            category_from_inputs("C", "60", "100", "50"),
        ])
        assert result.summary() == "Final Grade: 60.00%"
        assert [b.name for b in result.breakdown] == ["A", "C"]
        assert result.breakdown[0].weight_percent == 0

    def test_directly_built_non_finite_category_is_invalid(self):
        result = weighted_grade([cat("A", math.inf, 100, 50), cat("B", 50, math.inf, 50)])
        assert result.message == NO_VALID_CATEGORY


class TestInputs:
    @pytest.mark.parametrize("raw, expected", [("12.5", 12.5), (" 3 ", 3.0), (7, 7.0)])
    def test_parse_number(self, raw, expected):
        assert parse_number(raw) == expected

    @pytest.mark.parametrize("raw", ["", "  ", "x", None, True, "inf", "-Infinity", "NaN", "1e999", math.inf])
    def test_parse_number_blank_is_nan(self, raw):
        assert math.isnan(parse_number(raw))

    def test_category_from_inputs(self):
        c = category_from_inputs("", "8", "10", "")
        assert c.name == "Category"
        assert c.earned == 8.0
        assert c.weight is None
        assert c.is_valid()

    def test_default_categories(self):
        rows = default_categories()
        assert [(r.name, r.weight) for r in rows] == [("Exams", 40.0), ("Quizzes", 20.0), ("Homework", 40.0)]
        assert not any(r.is_valid() for r in rows)
        assert weighted_grade(rows).message == NO_VALID_CATEGORY
