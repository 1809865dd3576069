#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/csv2xlsx/utils/spreadsheet.py
"""Shared cell and worksheet helpers for the CSV parser and XLSX renderer.

Type inference policy
---------------------
Cells are coerced only when the literal is unambiguous:

- ``""`` stays ``""``
- ``true`` / ``false`` (any case) become ``bool``
- integers without leading zeros become ``int`` (``"007"`` stays ``"007"``)
- decimal or exponent literals, same leading-zero rule, become ``float``
- everything else, including ``nan`` and ``inf``, stays a string
"""

from __future__ import annotations

import re
from typing import Any

from csv2xlsx.constants import (
    BOOLEAN_LITERALS,
    COLUMN_WIDTH_PADDING,
    DEFAULT_SHEET_NAME,
    FORBIDDEN_SHEET_NAME_CHARS,
    MAX_COLUMN_WIDTH,
    MAX_SHEET_NAME_LENGTH,
    MIN_COLUMN_WIDTH,
)
from csv2xlsx.models import CellValue

# Integer part is either "0" or starts with a non-zero digit
_INT_RE = re.compile(r"[+-]?(?:0|[1-9]\d*)", re.ASCII)
_FLOAT_RE = re.compile(r"[+-]?(?:0|[1-9]\d*)(?:\.\d+(?:[eE][+-]?\d+)?|[eE][+-]?\d+)", re.ASCII)


def infer_cell_value(text: str) -> CellValue:
    """Coerce a trimmed cell string into a primitive value where unambiguous.

    Parameters
    ----------
    text : str
        Whitespace-trimmed cell text

    Returns
    -------
    CellValue
        ``bool``, ``int``, ``float`` or the original string

    Examples
    --------
    >>> infer_cell_value("25")
    25
    >>> infer_cell_value("007")
    '007'
    >>> infer_cell_value("TRUE")
    True

    """
    if not text:
        return text

    lowered = text.lower()
    if lowered in BOOLEAN_LITERALS:
        return BOOLEAN_LITERALS[lowered]

    if _INT_RE.fullmatch(text):
        return int(text)

    if _FLOAT_RE.fullmatch(text):
        return float(text)

    return text


def trim_header_piece(piece: str, quote_char: str = '"') -> str:
    """Trim whitespace and one enclosing pair of quote characters from a header piece.

    Examples
    --------
    >>> trim_header_piece(' "user.name" ')
    'user.name'

    """
    piece = piece.strip()
    if len(piece) >= 2 and piece[0] == quote_char and piece[-1] == quote_char:
        piece = piece[1:-1].strip()
    return piece


def render_cell_text(value: Any) -> str:
    """Return the text a spreadsheet cell displays for ``value``."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    return str(value)


def fit_column_width(
    values: list[Any],
    min_width: int = MIN_COLUMN_WIDTH,
    max_width: int = MAX_COLUMN_WIDTH,
) -> int:
    """Compute a column width from its widest rendered cell.

    The width is the longest rendered value plus padding, clamped to
    ``[min_width, max_width]``. Multi-line cells are measured by their
    longest line.
    """
    longest = 0
    for value in values:
        for line in render_cell_text(value).splitlines() or [""]:
            longest = max(longest, len(line))
    return min(max(longest + COLUMN_WIDTH_PADDING, min_width), max_width)


def sanitize_sheet_name(name: str) -> str:
    """Make ``name`` a valid Excel worksheet title.

    Forbidden characters are replaced by ``_`` and the result is truncated to
    Excel's 31 character limit.

    Examples
    --------
    >>> sanitize_sheet_name("Q1/Q2 [draft]")
    'Q1_Q2 _draft_'

    """
    cleaned = "".join("_" if ch in FORBIDDEN_SHEET_NAME_CHARS else ch for ch in name.strip())
    # Excel also rejects titles that begin or end with an apostrophe
    cleaned = cleaned.strip("'") or DEFAULT_SHEET_NAME
    return cleaned[:MAX_SHEET_NAME_LENGTH]
