#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/utils/test_spreadsheet.py
"""Unit tests for cell coercion and worksheet helpers."""

from __future__ import annotations

import pytest

from csv2xlsx.utils.spreadsheet import (
    fit_column_width,
    infer_cell_value,
    render_cell_text,
    sanitize_sheet_name,
    trim_header_piece,
)


@pytest.mark.unit
class TestInferCellValue:
    """Tests for the type coercion policy."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("25", 25),
            ("0", 0),
            ("-12", -12),
            ("+7", 7),
            ("1.5", 1.5),
            ("0.5", 0.5),
            ("-0.25", -0.25),
            ("1e3", 1000.0),
            ("2.5E-2", 0.025),
        ],
    )
    def test_numbers(self, text, expected):
        """Test that unambiguous numeric literals are converted."""
        value = infer_cell_value(text)
        assert value == expected
        assert type(value) is type(expected)

    @pytest.mark.parametrize("text,expected", [("true", True), ("FALSE", False), ("True", True)])
    def test_booleans(self, text, expected):
        """Test case-insensitive boolean literals."""
        assert infer_cell_value(text) is expected

    @pytest.mark.parametrize(
        "text",
        ["", "007", "00.5", "1.", ".5", "1,000", "nan", "inf", "-inf", "12abc", "1_000", "yes", "0x1F", "١٢"],
    )
    def test_ambiguous_values_stay_strings(self, text):
        """Test that anything not clearly numeric or boolean is kept verbatim."""
        assert infer_cell_value(text) == text


@pytest.mark.unit
class TestTrimHeaderPiece:
    """Tests for header piece trimming."""

    def test_strips_whitespace_and_quotes(self):
        """Test removing one enclosing pair of quotes."""
        assert trim_header_piece('  "user.name"  ') == "user.name"

    def test_unbalanced_quote_is_kept(self):
        """Test that a lone quote character is not removed."""
        assert trim_header_piece('"last') == '"last'

    def test_only_one_pair_removed(self):
        """Test that inner quotes survive."""
        assert trim_header_piece('""a""') == '"a"'


@pytest.mark.unit
class TestFitColumnWidth:
    """Tests for auto-fit column width computation."""

    def test_minimum_width(self):
        """Test that short columns get the minimum width."""
        assert fit_column_width(["a", "bb"]) == 10

    def test_padding(self):
        """Test that the longest value is padded by two."""
        assert fit_column_width(["x" * 20]) == 22

    def test_maximum_width(self):
        """Test that long columns are capped."""
        assert fit_column_width(["x" * 80]) == 50

    def test_rendered_text_is_measured(self):
        """Test that None, booleans and numbers are measured as displayed."""
        assert fit_column_width([None, False, 123456789012], min_width=1) == 14

    def test_multiline_uses_longest_line(self):
        """Test that embedded line breaks are measured per line."""
        assert fit_column_width(["short\n" + "y" * 15], min_width=1) == 17

    def test_custom_bounds(self):
        """Test custom minimum and maximum."""
        assert fit_column_width(["abc"], min_width=3, max_width=4) == 4


@pytest.mark.unit
class TestRenderCellText:
    """Tests for display text."""

    def test_values(self):
        """Test display text of each cell type."""
        assert render_cell_text(None) == ""
        assert render_cell_text(True) == "TRUE"
        assert render_cell_text(1.5) == "1.5"
        assert render_cell_text("abc") == "abc"


@pytest.mark.unit
class TestSanitizeSheetName:
    """Tests for worksheet title sanitization."""

    def test_forbidden_characters_replaced(self):
        """Test replacing characters Excel rejects."""
        assert sanitize_sheet_name("Q1/Q2 [draft]") == "Q1_Q2 _draft_"

    def test_truncated_to_limit(self):
        """Test Excel's 31 character limit."""
        assert sanitize_sheet_name("x" * 40) == "x" * 31

    def test_apostrophes_at_edges_removed(self):
        """Test that leading and trailing apostrophes are stripped."""
        assert sanitize_sheet_name("'Data'") == "Data"

    def test_empty_after_cleaning_uses_default(self):
        """Test the default title fallback."""
        assert sanitize_sheet_name("''") == "Sheet1"
