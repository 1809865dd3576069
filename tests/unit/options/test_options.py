#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for ingestion and spreadsheet options."""

from dataclasses import FrozenInstanceError

import pytest

from csv2xlsx.options import ParseOptions, XlsxOptions


class TestParseOptions:
    """Tests for ParseOptions validation and cloning."""

    def test_defaults(self):
        """Test default values trigger detection and inference."""
        options = ParseOptions()

        assert options.delimiter is None
        assert options.encoding is None
        assert options.infer_types is True
        assert options.encoding_confidence_threshold == 0.1

    @pytest.mark.parametrize("delimiter", [",", ";", "\t", "|", ":"])
    def test_valid_delimiters(self, delimiter):
        """Test that single usable characters are accepted."""
        assert ParseOptions(delimiter=delimiter).delimiter == delimiter

    @pytest.mark.parametrize("delimiter", ["", ",,", '"', "\n", "\r"])
    def test_invalid_delimiters(self, delimiter):
        """Test that empty, multi-character, quote and line-break delimiters are rejected."""
        with pytest.raises(ValueError):
            ParseOptions(delimiter=delimiter)

    def test_unknown_encoding(self):
        """Test that an unknown codec name is rejected."""
        with pytest.raises(ValueError, match="Unknown encoding"):
            ParseOptions(encoding="not-a-codec")

    def test_blank_encoding(self):
        """Test that a blank codec name is rejected."""
        with pytest.raises(ValueError):
            ParseOptions(encoding="  ")

    @pytest.mark.parametrize("threshold", [-0.1, 1.5])
    def test_threshold_range(self, threshold):
        """Test that the confidence threshold must lie in [0, 1]."""
        with pytest.raises(ValueError):
            ParseOptions(encoding_confidence_threshold=threshold)

    def test_frozen(self):
        """Test that options are immutable."""
        options = ParseOptions()
        with pytest.raises(FrozenInstanceError):
            options.delimiter = ";"  # type: ignore[misc]

    def test_create_updated(self):
        """Test deriving a modified copy."""
        options = ParseOptions(delimiter=";")
        updated = options.create_updated(infer_types=False)

        assert updated.delimiter == ";"
        assert updated.infer_types is False
        assert options.infer_types is True

    def test_create_updated_validates(self):
        """Test that copies are validated too."""
        with pytest.raises(ValueError):
            ParseOptions().create_updated(delimiter="ab")

    def test_from_mapping_ignores_unknown_keys(self):
        """Test building options from a configuration section."""
        options = ParseOptions.from_mapping({"delimiter": "|", "sheet_name": "Data"})

        assert options.delimiter == "|"


class TestXlsxOptions:
    """Tests for XlsxOptions validation."""

    def test_defaults(self):
        """Test default spreadsheet settings."""
        options = XlsxOptions()

        assert options.output_path is None
        assert options.sheet_name == "Sheet1"
        assert options.header_style is True
        assert options.auto_fit_columns is True
        assert (options.min_column_width, options.max_column_width) == (10, 50)

    def test_empty_sheet_name(self):
        """Test that a blank sheet name is rejected."""
        with pytest.raises(ValueError):
            XlsxOptions(sheet_name=" ")

    def test_width_bounds(self):
        """Test that width bounds must be positive and ordered."""
        with pytest.raises(ValueError):
            XlsxOptions(min_column_width=0)
        with pytest.raises(ValueError):
            XlsxOptions(min_column_width=20, max_column_width=10)

    def test_from_mapping(self):
        """Test building options from a configuration section."""
        options = XlsxOptions.from_mapping({"sheet_name": "Report", "header_style": False, "encoding": "utf-8"})

        assert options.sheet_name == "Report"
        assert options.header_style is False
