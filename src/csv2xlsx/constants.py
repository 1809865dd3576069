#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for csv2xlsx.

This module centralizes the hardcoded values and default configuration
constants used across the library. Constants are organized by category:

1. Ingestion - encoding and delimiter detection
2. Type inference - literals recognized during cell coercion
3. Spreadsheet output - worksheet and column sizing defaults
4. CLI - configuration discovery
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Ingestion
# =============================================================================

# Charset used when chardet yields no confident result
DEFAULT_ENCODING = "utf-8"

# chardet confidence below this value is treated as "no signal"
DEFAULT_ENCODING_CONFIDENCE_THRESHOLD = 0.1

# Delimiter candidates in tie-break order (first declared wins ties)
DELIMITER_CANDIDATES: tuple[str, ...] = (",", ";", "\t", "|")
DEFAULT_DELIMITER = ","

DELIMITER_NAMES = {
    ",": "comma",
    ";": "semicolon",
    "\t": "tab",
    "|": "pipe",
}

# Characters that can never act as a field delimiter
FORBIDDEN_DELIMITERS = frozenset({'"', "\r", "\n"})

CSV_EXTENSION = ".csv"
CSV_QUOTE_CHAR = '"'

DEFAULT_INFER_TYPES = True

# Warning texts surfaced through the diagnostic channel
NO_DELIMITER_WARNING = "No delimiter detected, using comma as default"
NO_DATA_ROWS_WARNING = "CSV file contains headers but no data rows"

# =============================================================================
# Type inference
# =============================================================================

BOOLEAN_LITERALS = {"true": True, "false": False}

# =============================================================================
# Spreadsheet output
# =============================================================================

XLSX_EXTENSION = ".xlsx"
DEFAULT_SHEET_NAME = "Sheet1"
MAX_SHEET_NAME_LENGTH = 31
FORBIDDEN_SHEET_NAME_CHARS = frozenset("[]:*?/\\")

DEFAULT_HEADER_STYLE = True
DEFAULT_AUTO_FIT_COLUMNS = True
HEADER_FILL_COLOR = "FFE0E0E0"

# Column width = longest rendered cell + padding, clamped to [min, max]
COLUMN_WIDTH_PADDING = 2
MIN_COLUMN_WIDTH = 10
MAX_COLUMN_WIDTH = 50

# =============================================================================
# CLI
# =============================================================================

CONFIG_ENV_VAR = "CSV2XLSX_CONFIG"
CONFIG_FILENAMES = [".csv2xlsx.toml", ".csv2xlsx.yaml", ".csv2xlsx.yml", ".csv2xlsx.json"]
PYPROJECT_TOOL_SECTION = "csv2xlsx"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
DEFAULT_LOG_LEVEL: LogLevel = "WARNING"
