"""Unit tests for grid cells and header predicates."""
import math
from datetime import date

import pytest
from daily_workout_api.parsers.grid import (
    ABSENT,
    Cell,
    CellKind,
    Grid,
    is_colon_header,
    is_labelled_header,
    strip_header_colon,
)


class TestCell:
    """Test cases for Cell normalisation."""

    def test_none_is_absent(self):
        assert Cell.from_raw(None).is_absent

    def test_blank_text_is_absent(self):
        assert Cell.from_raw("").is_absent
        assert Cell.from_raw("   ").is_absent

    def test_nan_is_absent(self):
        assert Cell.from_raw(math.nan).is_absent

    def test_numbers(self):
        cell = Cell.from_raw(40)
        assert cell.kind == CellKind.NUMBER
        assert cell.number == 40.0
        assert cell.as_text() == "40"
        assert Cell.from_raw(12.5).as_text() == "12.5"

    def test_text(self):
        cell = Cell.from_raw("Back Squat")
        assert cell.kind == CellKind.TEXT
        assert cell.as_text() == "Back Squat"

    def test_bool_and_dates_become_text(self):
        assert Cell.from_raw(True).kind == CellKind.TEXT
        assert Cell.from_raw(date(2024, 1, 1)).as_text() == "2024-01-01"


class TestGrid:
    """Test cases for Grid access."""

    def test_jagged_rows_read_absent(self):
        grid = Grid.from_rows([["a", "b", "c"], ["d"], None])

        assert len(grid) == 3
        assert grid.cell(1, 2) is ABSENT
        assert grid.cell(2, 0) is ABSENT
        assert grid.cell(10, 0) is ABSENT
        assert grid.cell(0, -1) is ABSENT
        assert grid.cell(0, 1).as_text() == "b"


class TestHeaderPredicates:
    """Test cases for the two header detection rules."""

    def test_strip_header_colon(self):
        assert strip_header_colon("Squats:") == "Squats"
        assert strip_header_colon("  Upper Pull :  ") == "Upper Pull"

    @pytest.mark.parametrize("text", ["Squats:", "Core Work:", "  Press: "])
    def test_colon_headers(self, text):
        assert is_colon_header(text) is True

    @pytest.mark.parametrize("text", ["Ratio:", "ratio:", "Help Column:", "HELP COLUMN:", ":", "Squats", ""])
    def test_not_colon_headers(self, text):
        assert is_colon_header(text) is False

    def test_labelled_header(self):
        assert is_labelled_header("Press", Cell.from_raw("Ratio"), Cell.from_raw("Help Column")) is True
        assert is_labelled_header("Press", Cell.from_raw("ratio %"), Cell.from_raw("helper")) is True

    def test_labelled_header_needs_both_labels(self):
        assert is_labelled_header("Press", Cell.from_raw("Ratio"), ABSENT) is False
        assert is_labelled_header("Press", ABSENT, Cell.from_raw("Help Column")) is False
        assert is_labelled_header("Press", Cell.from_raw(40), Cell.from_raw(40)) is False

    def test_labelled_header_rejects_short_and_reserved_names(self):
        ratio, help_ = Cell.from_raw("Ratio"), Cell.from_raw("Help Column")
        assert is_labelled_header("Ab", ratio, help_) is False
        assert is_labelled_header("Ratio", ratio, help_) is False
        assert is_labelled_header("Help Column", ratio, help_) is False

    def test_labelled_header_ignores_colon_text(self):
        assert is_labelled_header("Press:", Cell.from_raw("Ratio"), Cell.from_raw("Help")) is False
