#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/csv2xlsx/parsers/csv.py
"""CSV ingestion pipeline.

This module turns a CSV file into a :class:`~csv2xlsx.models.ParseResult`:
the raw bytes are read in full, the encoding is resolved (override or chardet),
the text is decoded, the delimiter is resolved (override or first-line
heuristic), and the text is split into records with the standard ``csv``
module.

Every failure inside :meth:`CsvParser.parse` is translated into a single
:class:`~csv2xlsx.exceptions.IngestionError` naming the source file.

"""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import Any, Optional, Union

from csv2xlsx.constants import (
    CSV_QUOTE_CHAR,
    DEFAULT_DELIMITER,
    DELIMITER_CANDIDATES,
    DELIMITER_NAMES,
    NO_DATA_ROWS_WARNING,
    NO_DELIMITER_WARNING,
)
from csv2xlsx.exceptions import EmptyInputError, FileError, FileNotFoundError, IngestionError, ParsingError
from csv2xlsx.models import CellValue, DetectionResult, ParseResult, Record, build_record
from csv2xlsx.options.csv import ParseOptions
from csv2xlsx.parsers.base import BaseParser
from csv2xlsx.progress import ProgressCallback
from csv2xlsx.utils.encoding import decode_bytes, detect_encoding_with_fallback
from csv2xlsx.utils.spreadsheet import infer_cell_value, trim_header_piece

logger = logging.getLogger(__name__)


def _first_line(content: str) -> str:
    """Return the text before the first line feed."""
    return content.split("\n", 1)[0]


def detect_delimiter(content: str) -> DetectionResult[str]:
    r"""Infer the field delimiter from the first line of ``content``.

    Each candidate in ``(',', ';', '\t', '|')`` is counted in the first line and
    the strictly highest count wins; ties go to the earlier candidate.

    Parameters
    ----------
    content : str
        Decoded file content

    Returns
    -------
    DetectionResult[str]
        The delimiter. ``warnings`` is non-empty when no candidate occurred
        and the comma default was used.

    Examples
    --------
    >>> detect_delimiter("a;b;c\n1;2;3").value
    ';'
    >>> detect_delimiter("a,b;c|d").value
    ','

    """
    first_line = _first_line(content)

    # Nothing to infer from
    if not first_line.strip():
        return DetectionResult(DEFAULT_DELIMITER)

    max_count = 0
    best = DEFAULT_DELIMITER
    for candidate in DELIMITER_CANDIDATES:
        count = first_line.count(candidate)
        if count > max_count:
            max_count = count
            best = candidate

    if max_count == 0:
        logger.warning(f"Warning: {NO_DELIMITER_WARNING}")
        return DetectionResult(DEFAULT_DELIMITER, (NO_DELIMITER_WARNING,))

    logger.debug(f"Detected delimiter {DELIMITER_NAMES.get(best, repr(best))} ({max_count} occurrences in first line)")
    return DetectionResult(best)


def _make_csv_dialect(delimiter: str) -> type[csv.Dialect]:
    """Create a strict excel-based dialect class for ``delimiter``.

    Strict mode makes malformed quoting raise ``csv.Error`` instead of being
    silently absorbed into a field.
    """
    return type("IngestDialect", (csv.excel,), {"delimiter": delimiter, "quotechar": CSV_QUOTE_CHAR, "strict": True})


def _is_blank_record(fields: list[str]) -> bool:
    return all(not field for field in fields)


def split_records(content: str, delimiter: str) -> list[list[str]]:
    """Split decoded text into trimmed records, skipping blank lines.

    Quoted fields may contain the delimiter and line breaks. Each field has
    surrounding whitespace removed.

    Parameters
    ----------
    content : str
        Decoded file content
    delimiter : str
        Field delimiter

    Returns
    -------
    list[list[str]]
        Non-blank records in file order

    Raises
    ------
    ParsingError
        If the content has malformed quoting

    """
    reader = csv.reader(io.StringIO(content, newline=""), dialect=_make_csv_dialect(delimiter))
    records: list[list[str]] = []
    try:
        for raw in reader:
            fields = [field.strip() for field in raw]
            if _is_blank_record(fields):
                continue
            records.append(fields)
    except csv.Error as e:
        raise ParsingError(
            f"Malformed CSV near line {reader.line_num}: {e}", parsing_stage="record_split", original_error=e
        ) from e
    return records


def derive_raw_headers(content: str, delimiter: str) -> list[str]:
    """Split the literal first line by ``delimiter`` into trimmed header names.

    Returns an empty list when the first line is blank or holds only empty
    fields. Such a line is skipped as a record, so the header record comes
    from a later line and must not be matched against it.

    Examples
    --------
    >>> derive_raw_headers("user.name, age\\nAlice,30", ",")
    ['user.name', 'age']
    >>> derive_raw_headers(",,\\na,b,c", ",")
    []

    """
    first_line = _first_line(content).strip()
    if not first_line:
        return []
    pieces = [trim_header_piece(piece, CSV_QUOTE_CHAR) for piece in first_line.split(delimiter)]
    if _is_blank_record(pieces):
        return []
    return pieces


def reconcile_headers(raw_headers: list[str], parsed_headers: list[str]) -> list[str]:
    """Choose between the literal first-line headers and the parsed header record.

    The raw split is preferred whenever it has the same number of columns as
    the parsed header, since it keeps header text exactly as written.
    Otherwise (quoted delimiters inside header names, a blank first line)
    the parsed header wins.
    """
    if len(raw_headers) == len(parsed_headers):
        return raw_headers
    return parsed_headers


class CsvParser(BaseParser):
    """Ingest CSV files into normalized header/record results.

    Parameters
    ----------
    options : ParseOptions or None
        Delimiter/encoding overrides and type inference settings
    progress_callback : ProgressCallback or None
        Optional receiver for "started", "detected" and "finished" events

    Examples
    --------
    >>> parser = CsvParser(ParseOptions(delimiter=";"))
    >>> result = parser.parse("people.csv")
    >>> result.headers
    ('Name', 'Age')

    """

    def __init__(self, options: Any = None, progress_callback: Optional[ProgressCallback] = None):
        """Initialize the CSV parser with options and progress callback."""
        BaseParser._validate_options_type(options, ParseOptions, "csv")
        options = options or ParseOptions()
        super().__init__(options, progress_callback)
        self.options: ParseOptions = options

    def parse(self, input_path: Union[str, Path]) -> ParseResult:
        """Parse the CSV file at ``input_path``.

        Parameters
        ----------
        input_path : str or Path
            Path of the CSV file

        Returns
        -------
        ParseResult
            Headers, records, and the encoding and delimiter actually used

        Raises
        ------
        IngestionError
            If the file is missing, empty, undecodable or malformed. The
            internal error is available as ``original_error``.

        """
        file_path = str(input_path)
        self._emit_progress("started", f"Parsing {file_path}", file=file_path)

        try:
            result = self._parse_file(Path(input_path))
        except Exception as e:
            error = IngestionError(file_path, e)
            logger.debug(f"Ingestion of {file_path} failed: {error.reason}", exc_info=True)
            self._emit_progress("error", error.message, file=file_path, error=error.reason, stage=error.kind)
            raise error from e

        self._emit_progress(
            "finished",
            f"Parsed {result.row_count} rows from {file_path}",
            file=file_path,
            row_count=result.row_count,
            column_count=result.column_count,
        )
        return result

    def _parse_file(self, path: Path) -> ParseResult:
        if not path.is_file():
            raise FileNotFoundError(str(path))

        data = self._read_bytes(path)

        if self.options.encoding:
            encoding = self.options.encoding
        else:
            encoding = detect_encoding_with_fallback(
                data, confidence_threshold=self.options.encoding_confidence_threshold
            ).value
        self._emit_progress("detected", f"Encoding: {encoding}", detected_type="encoding", value=encoding)

        content = decode_bytes(data, encoding)

        if not content.strip():
            raise EmptyInputError()

        warnings: list[str] = []
        if self.options.delimiter:
            delimiter = self.options.delimiter
        else:
            detection = detect_delimiter(content)
            delimiter = detection.value
            warnings.extend(detection.warnings)
        self._emit_progress("detected", f"Delimiter: {delimiter!r}", detected_type="delimiter", value=delimiter)

        logger.info(f"CSV: encoding={encoding}, delimiter={delimiter!r}")

        records = split_records(content, delimiter)
        # Content made only of empty fields (",,") yields no records at all
        parsed_headers = records[0] if records else []
        body = records[1:]

        headers = tuple(reconcile_headers(derive_raw_headers(content, delimiter), parsed_headers))
        rows = tuple(self._build_rows(headers, body))

        if not rows:
            logger.warning(f"Warning: {NO_DATA_ROWS_WARNING}")
            warnings.append(NO_DATA_ROWS_WARNING)

        return ParseResult(
            headers=headers,
            rows=rows,
            encoding=encoding,
            delimiter=delimiter,
            warnings=tuple(warnings),
        )

    @staticmethod
    def _read_bytes(path: Path) -> bytes:
        try:
            return path.read_bytes()
        except OSError as e:
            raise FileError(f"Cannot read file: {path} ({e})", file_path=str(path), original_error=e) from e

    def _build_rows(self, headers: tuple[str, ...], body: list[list[str]]) -> list[Record]:
        rows: list[Record] = []
        for line_index, fields in enumerate(body, start=2):
            if len(fields) > len(headers):
                logger.debug(
                    f"Record {line_index} has {len(fields)} fields, {len(headers)} headers; "
                    f"dropping {len(fields) - len(headers)} surplus fields"
                )
            values: list[CellValue] = (
                [infer_cell_value(field) for field in fields] if self.options.infer_types else list(fields)
            )
            rows.append(build_record(headers, values))
        return rows


def parse_csv(
    input_path: Union[str, Path],
    options: Optional[ParseOptions] = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> ParseResult:
    """Parse a CSV file with a one-off :class:`CsvParser`.

    See :meth:`CsvParser.parse` for details.
    """
    return CsvParser(options, progress_callback).parse(input_path)
