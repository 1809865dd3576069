#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/csv2xlsx/renderers/xlsx.py
"""XLSX rendering of parsed CSV content.

This module provides the XlsxRenderer class which writes a
:class:`~csv2xlsx.models.ParseResult` to a single-sheet Excel workbook using
openpyxl. The header row is optionally styled and columns are optionally
sized to their content.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Union

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from csv2xlsx.constants import HEADER_FILL_COLOR
from csv2xlsx.exceptions import OutputWriteError, RenderingError
from csv2xlsx.models import ParseResult
from csv2xlsx.options.xlsx import XlsxOptions
from csv2xlsx.renderers.base import BaseRenderer
from csv2xlsx.utils.inputs import derive_output_path
from csv2xlsx.utils.spreadsheet import fit_column_width, sanitize_sheet_name

logger = logging.getLogger(__name__)


class XlsxRenderer(BaseRenderer):
    """Render a parsed CSV to an XLSX workbook.

    Parameters
    ----------
    options : XlsxOptions or None, default = None
        Sheet name, styling, sizing and output path settings

    Examples
    --------
    >>> from csv2xlsx.models import ParseResult
    >>> result = ParseResult(headers=("Name",), rows=({"Name": "Alice"},), encoding="utf-8", delimiter=",")
    >>> XlsxRenderer().render(result, "people.csv")
    PosixPath('people.xlsx')

    """

    def __init__(self, options: Optional[XlsxOptions] = None):
        """Initialize the XLSX renderer with options."""
        BaseRenderer._validate_options_type(options, XlsxOptions, "xlsx")
        options = options or XlsxOptions()
        super().__init__(options)
        self.options: XlsxOptions = options

    def render(self, result: ParseResult, source_path: Union[str, Path]) -> Path:
        """Write ``result`` to an XLSX file.

        Parameters
        ----------
        result : ParseResult
            Parsed CSV content
        source_path : str or Path
            Source CSV path. Unless ``options.output_path`` is set, the output
            is written beside it with an ``.xlsx`` suffix.

        Returns
        -------
        Path
            Path of the written workbook

        Raises
        ------
        RenderingError
            If ``result`` is malformed or the workbook cannot be built
        OutputWriteError
            If the workbook cannot be saved

        """
        result = self._validate_result(result)
        output_path = self._resolve_output_path(source_path)

        try:
            workbook = self._build_workbook(result)
        except RenderingError:
            raise
        except Exception as e:
            raise RenderingError(f"Failed to render XLSX: {e!r}", rendering_stage="rendering", original_error=e) from e

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            workbook.save(str(output_path))
        except OSError as e:
            raise OutputWriteError(str(output_path), original_error=e) from e

        logger.info(f"Wrote {result.row_count} rows x {result.column_count} columns to {output_path}")
        return output_path

    def _resolve_output_path(self, source_path: Union[str, Path]) -> Path:
        if self.options.output_path is not None:
            return Path(self.options.output_path)
        return derive_output_path(source_path)

    def _build_workbook(self, result: ParseResult) -> Workbook:
        workbook = Workbook()
        worksheet = workbook.active
        worksheet.title = sanitize_sheet_name(self.options.sheet_name)

        headers = list(result.headers)
        self._append_literal_row(worksheet, 1, headers)
        if self.options.header_style and headers:
            self._style_header_row(worksheet, len(headers))

        for row_index, values in enumerate(result.iter_values(), start=2):
            self._append_literal_row(worksheet, row_index, list(values))

        if self.options.auto_fit_columns:
            self._auto_fit_columns(worksheet, result)

        return workbook

    @staticmethod
    def _append_literal_row(worksheet: Worksheet, row_index: int, values: list[Any]) -> None:
        """Append ``values`` as row ``row_index``, keeping ``=``-prefixed text as plain strings.

        openpyxl otherwise stores any string starting with ``=`` as a formula.
        """
        worksheet.append(values)
        for column_index, value in enumerate(values, start=1):
            if isinstance(value, str) and value.startswith("="):
                cell = worksheet.cell(row=row_index, column=column_index)
                if cell.data_type == "f":
                    cell.data_type = "s"

    @staticmethod
    def _style_header_row(worksheet: Worksheet, column_count: int) -> None:
        font = Font(bold=True)
        fill = PatternFill("solid", fgColor=HEADER_FILL_COLOR)
        for cell in worksheet[1][:column_count]:
            cell.font = font
            cell.fill = fill

    def _auto_fit_columns(self, worksheet: Worksheet, result: ParseResult) -> None:
        for index, header in enumerate(result.headers, start=1):
            column: list[Any] = [header]
            column.extend(values[index - 1] for values in result.iter_values())
            width = fit_column_width(column, self.options.min_column_width, self.options.max_column_width)
            worksheet.column_dimensions[get_column_letter(index)].width = width
