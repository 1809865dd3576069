"""csv2xlsx - Convert CSV files into styled Excel workbooks.

csv2xlsx ingests CSV files of unknown provenance and writes them as XLSX
spreadsheets. The ingestion pipeline detects the character encoding (chardet)
and the field delimiter, parses the text into a normalized header/record
model, and coerces unambiguous cell literals into numbers and booleans.

Key Features
------------
- Encoding detection with a UTF-8 fallback
- Delimiter detection among comma, semicolon, tab and pipe
- Quoted fields with embedded delimiters and line breaks
- Header names preserved verbatim, including dotted names
- Bold, shaded header row and auto-sized columns
- Sequential batch conversion with per-file failure isolation

Requirements
------------
- Python 3.10+
- chardet, openpyxl

Examples
--------
Convert a single file:

    >>> from csv2xlsx import convert_file
    >>> convert_file("people.csv")
    PosixPath('people.xlsx')

Inspect the parsed content:

    >>> from csv2xlsx import parse_csv
    >>> result = parse_csv("people.csv")
    >>> result.delimiter, result.encoding
    (',', 'utf-8')

Convert a batch:

    >>> from csv2xlsx import convert_files
    >>> batch = convert_files(["a.csv", "b.csv"], output_dir="out")
    >>> batch.summary_message()
    'Batch conversion completed: 2 successful, 0 failed'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise RuntimeError(
        f"csv2xlsx requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from csv2xlsx.api import BatchFailure, BatchResult, convert_file, convert_files, parse_csv
from csv2xlsx.exceptions import (
    Csv2XlsxError,
    DecodeError,
    EmptyInputError,
    IngestionError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from csv2xlsx.models import DetectionResult, ParseResult
from csv2xlsx.options import ParseOptions, XlsxOptions
from csv2xlsx.parsers.csv import CsvParser, detect_delimiter
from csv2xlsx.progress import ProgressCallback, ProgressEvent
from csv2xlsx.renderers.xlsx import XlsxRenderer
from csv2xlsx.utils.encoding import detect_encoding
from csv2xlsx.utils.inputs import is_csv_file

__all__ = [
    "__version__",
    # API
    "parse_csv",
    "convert_file",
    "convert_files",
    "BatchResult",
    "BatchFailure",
    # Pipeline components
    "CsvParser",
    "XlsxRenderer",
    "detect_delimiter",
    "detect_encoding",
    "is_csv_file",
    # Models and options
    "ParseResult",
    "DetectionResult",
    "ParseOptions",
    "XlsxOptions",
    # Progress
    "ProgressCallback",
    "ProgressEvent",
    # Exceptions
    "Csv2XlsxError",
    "ValidationError",
    "IngestionError",
    "EmptyInputError",
    "DecodeError",
    "ParsingError",
    "RenderingError",
]
