#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/csv2xlsx/cli/builder.py
"""Argument parser construction and exit code mapping for the csv2xlsx CLI."""

from __future__ import annotations

import argparse

from csv2xlsx.constants import DEFAULT_LOG_LEVEL, DELIMITER_NAMES
from csv2xlsx.exceptions import FileError, IngestionError, RenderingError, ValidationError

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

# Names accepted in place of a literal delimiter character
_DELIMITER_ALIASES = {
    "\\t": "\t",
    "tab": "\t",
    "comma": ",",
    "semicolon": ";",
    "pipe": "|",
}


def parse_delimiter_arg(value: str) -> str:
    r"""Convert a ``--delimiter`` value into a single delimiter character.

    Accepts the character itself or one of the aliases ``\t``, ``tab``,
    ``comma``, ``semicolon`` and ``pipe``.

    Raises
    ------
    argparse.ArgumentTypeError
        If the value is neither a single character nor a known alias

    Examples
    --------
    >>> parse_delimiter_arg("tab")
    '\t'
    >>> parse_delimiter_arg(";")
    ';'

    """
    if len(value) == 1:
        return value
    alias = _DELIMITER_ALIASES.get(value.lower())
    if alias is None:
        known = ", ".join(sorted(_DELIMITER_ALIASES))
        raise argparse.ArgumentTypeError(
            f"Invalid delimiter {value!r}: use a single character or one of {known}"
        )
    return alias


def describe_delimiter(delimiter: str) -> str:
    """Return a display name for ``delimiter`` (e.g. "tab" for ``\\t``)."""
    return DELIMITER_NAMES.get(delimiter, repr(delimiter))


def get_version() -> str:
    """Get the installed version of the csv2xlsx package."""
    try:
        from importlib.metadata import version

        return version("csv2xlsx")
    except Exception:
        return "unknown"


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="csv2xlsx",
        description="Convert CSV files to Excel (XLSX) workbooks with automatic encoding and delimiter detection.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert one file (writes data.xlsx beside data.csv)
  csv2xlsx data.csv

  # Choose the output file and worksheet name
  csv2xlsx data.csv --out report.xlsx --sheet-name Report

  # Semicolon-separated Windows export
  csv2xlsx export.csv --delimiter ";" --encoding cp1252

  # Convert a batch into another directory
  csv2xlsx *.csv --output-dir converted --rich
        """,
    )

    parser.add_argument("input", nargs="*", help="CSV file(s) to convert")
    parser.add_argument("--out", "-o", help="Output XLSX path (single input only; default: <input>.xlsx)")
    parser.add_argument(
        "--output-dir",
        type=str,
        help="Directory to save converted workbooks (default: beside each input)",
    )

    parse_group = parser.add_argument_group("CSV ingestion options")
    parse_group.add_argument(
        "--delimiter",
        type=parse_delimiter_arg,
        metavar="CHAR",
        help="Override the field delimiter instead of detecting it (e.g. ',', ';', tab, '|')",
    )
    parse_group.add_argument(
        "--encoding",
        type=str,
        metavar="NAME",
        help="Override the file encoding instead of detecting it (e.g. utf-8, cp1252)",
    )
    parse_group.add_argument(
        "--no-infer-types",
        action="store_true",
        help="Keep every cell as text instead of converting numbers and booleans",
    )

    xlsx_group = parser.add_argument_group("Spreadsheet options")
    xlsx_group.add_argument("--sheet-name", type=str, metavar="NAME", help="Worksheet name (default: Sheet1)")
    xlsx_group.add_argument(
        "--no-header-style",
        action="store_true",
        help="Do not render the header row bold on a shaded background",
    )
    xlsx_group.add_argument(
        "--no-auto-fit",
        action="store_true",
        help="Do not size columns to their content",
    )

    # Configuration file
    parser.add_argument(
        "--config",
        help="Path to configuration file (TOML, YAML or JSON). "
        "If not specified, searches for .csv2xlsx.toml/.yaml/.yml/.json or [tool.csv2xlsx] in pyproject.toml "
        "from the current directory upward, then in the home directory.",
    )
    parser.add_argument(
        "--no-config",
        action="store_true",
        dest="no_config",
        help="Disable loading of configuration files. Ignores auto-discovered configs, "
        "the CSV2XLSX_CONFIG environment variable, and any --config flag.",
    )

    # Output display options
    parser.add_argument(
        "--rich",
        action="store_true",
        help="Enable rich terminal output with progress bars and tables (automatically disabled when piped)",
    )
    parser.add_argument(
        "--force-rich",
        action="store_true",
        help="Force rich output even when stdout is piped or redirected",
    )
    parser.add_argument(
        "--no-summary", action="store_true", help="Disable summary output after converting multiple files"
    )

    # Logging and verbosity options
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output with detailed logging (equivalent to --log-level DEBUG)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=DEFAULT_LOG_LEVEL,
        help=f"Set logging level (default: {DEFAULT_LOG_LEVEL}). Overrides --verbose if both are specified.",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        help="Write log messages to specified file in addition to console output",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace mode with timestamps, logger names and third-party debug output",
    )

    parser.add_argument("--version", "-V", action="version", version=f"csv2xlsx {get_version()}")

    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    # Every ingestion failure, including a missing file, surfaces through IngestionError
    if isinstance(exception, IngestionError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    # All other errors (unexpected errors)
    return EXIT_ERROR
