#  Copyright (c) 2025 Tom Villani, Ph.D.

# csv2xlsx/options/xlsx.py
"""Configuration options for XLSX rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from csv2xlsx.constants import (
    DEFAULT_AUTO_FIT_COLUMNS,
    DEFAULT_HEADER_STYLE,
    DEFAULT_SHEET_NAME,
    MAX_COLUMN_WIDTH,
    MIN_COLUMN_WIDTH,
)
from csv2xlsx.options.base import BaseRendererOptions


@dataclass(frozen=True)
class XlsxOptions(BaseRendererOptions):
    """Configuration options for writing a parsed CSV to an XLSX workbook.

    Parameters
    ----------
    output_path : str | Path | None, default None
        Explicit output file. When None, the source path with its suffix
        replaced by ``.xlsx`` is used.
    sheet_name : str, default "Sheet1"
        Worksheet title. Names longer than Excel's 31 character limit are
        truncated and forbidden characters are replaced.
    header_style : bool, default True
        Render the header row bold on a light grey fill.
    auto_fit_columns : bool, default True
        Size each column to its widest rendered cell.
    min_column_width : int, default 10
        Lower bound applied when auto-fitting.
    max_column_width : int, default 50
        Upper bound applied when auto-fitting.

    """

    output_path: str | Path | None = field(
        default=None,
        metadata={"help": "Output XLSX path (defaults to the source path with .xlsx)", "importance": "core"},
    )
    sheet_name: str = field(
        default=DEFAULT_SHEET_NAME,
        metadata={"help": "Worksheet name", "importance": "core"},
    )
    header_style: bool = field(
        default=DEFAULT_HEADER_STYLE,
        metadata={"help": "Bold, shaded header row", "cli_name": "no-header-style", "importance": "core"},
    )
    auto_fit_columns: bool = field(
        default=DEFAULT_AUTO_FIT_COLUMNS,
        metadata={"help": "Auto-size columns to their content", "cli_name": "no-auto-fit", "importance": "core"},
    )
    min_column_width: int = field(
        default=MIN_COLUMN_WIDTH,
        metadata={"help": "Minimum auto-fit column width", "type": int, "importance": "advanced"},
    )
    max_column_width: int = field(
        default=MAX_COLUMN_WIDTH,
        metadata={"help": "Maximum auto-fit column width", "type": int, "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges and the sheet name.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if not self.sheet_name or not self.sheet_name.strip():
            raise ValueError("sheet_name must be a non-empty string")
        if self.min_column_width <= 0:
            raise ValueError(f"min_column_width must be positive, got {self.min_column_width}")
        if self.max_column_width < self.min_column_width:
            raise ValueError(
                f"max_column_width ({self.max_column_width}) must be >= min_column_width ({self.min_column_width})"
            )
