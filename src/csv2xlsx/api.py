"""The major exported API functions for CSV to XLSX conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/csv2xlsx/api.py
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Union

from csv2xlsx.exceptions import Csv2XlsxError, ValidationError
from csv2xlsx.models import ParseResult
from csv2xlsx.options.csv import ParseOptions
from csv2xlsx.options.xlsx import XlsxOptions
from csv2xlsx.parsers.csv import CsvParser
from csv2xlsx.progress import ProgressCallback, emit_progress
from csv2xlsx.renderers.xlsx import XlsxRenderer
from csv2xlsx.utils.inputs import derive_output_path, filter_csv_files, is_csv_file

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

NO_VALID_FILES_MESSAGE = "No valid CSV files selected."
INVALID_FILE_MESSAGE = "Please select a valid CSV file."


@dataclass(frozen=True)
class BatchFailure:
    """A source file that could not be converted.

    Parameters
    ----------
    path : Path
        Source CSV path
    error : Exception
        The error raised while converting it

    """

    path: Path
    error: Exception

    @property
    def message(self) -> str:
        """Human-readable failure reason."""
        if isinstance(self.error, Csv2XlsxError):
            return self.error.message
        return str(self.error)


@dataclass
class BatchResult:
    """Outcome of a sequential batch conversion.

    Parameters
    ----------
    successful : list[Path]
        Output paths of the files that converted, in input order
    failed : list[BatchFailure]
        Files that failed, with their errors
    skipped : list[Path]
        Inputs rejected before conversion because they are not existing CSV files

    """

    successful: list[Path] = field(default_factory=list)
    failed: list[BatchFailure] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return len(self.successful)

    @property
    def failure_count(self) -> int:
        return len(self.failed)

    @property
    def total(self) -> int:
        """Number of files that were attempted (skipped inputs excluded)."""
        return self.success_count + self.failure_count

    def summary_message(self) -> str:
        """Return the one-line completion message for the batch."""
        return f"Batch conversion completed: {self.success_count} successful, {self.failure_count} failed"


def parse_csv(
    source: PathLike,
    options: Optional[ParseOptions] = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> ParseResult:
    """Ingest a CSV file into headers and records.

    Parameters
    ----------
    source : str or Path
        Path of the CSV file
    options : ParseOptions, optional
        Delimiter/encoding overrides and type inference setting
    progress_callback : ProgressCallback, optional
        Receiver for ingestion progress events

    Returns
    -------
    ParseResult
        Normalized headers, records, and the encoding and delimiter used

    Raises
    ------
    IngestionError
        If the file cannot be ingested

    Examples
    --------
    >>> result = parse_csv("people.csv")
    >>> result.headers
    ('Name', 'Age')
    >>> result.rows[0]
    {'Name': 'Alice', 'Age': 30}

    """
    return CsvParser(options, progress_callback).parse(source)


def convert_file(
    source: PathLike,
    parse_options: Optional[ParseOptions] = None,
    xlsx_options: Optional[XlsxOptions] = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> Path:
    """Convert one CSV file to an XLSX workbook.

    Parameters
    ----------
    source : str or Path
        Path of the CSV file
    parse_options : ParseOptions, optional
        Ingestion options
    xlsx_options : XlsxOptions, optional
        Rendering options; ``output_path`` selects the destination
    progress_callback : ProgressCallback, optional
        Receiver for ingestion progress events

    Returns
    -------
    Path
        Path of the written workbook

    Raises
    ------
    ValidationError
        If ``source`` is not an existing ``.csv`` file
    IngestionError
        If the file cannot be ingested
    RenderingError
        If the workbook cannot be built or written

    """
    if not is_csv_file(source):
        raise ValidationError(INVALID_FILE_MESSAGE, parameter_name="source", parameter_value=source)

    result = parse_csv(source, parse_options, progress_callback)
    output_path = XlsxRenderer(xlsx_options).render(result, source)
    logger.info(f"Converted {source} -> {output_path}")
    return output_path


def convert_files(
    sources: Iterable[PathLike],
    parse_options: Optional[ParseOptions] = None,
    xlsx_options: Optional[XlsxOptions] = None,
    output_dir: Optional[PathLike] = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> BatchResult:
    """Convert several CSV files sequentially, isolating per-file failures.

    Inputs that are not existing ``.csv`` files are skipped up front. Each
    remaining file is fully converted before the next starts; a failure is
    recorded in the result and the batch continues.

    Parameters
    ----------
    sources : iterable of str or Path
        Candidate CSV paths
    parse_options : ParseOptions, optional
        Ingestion options applied to every file
    xlsx_options : XlsxOptions, optional
        Rendering options applied to every file. ``output_path`` is ignored,
        since each file gets its own output.
    output_dir : str or Path, optional
        Directory for the workbooks. Defaults to beside each source file.
    progress_callback : ProgressCallback, optional
        Receives "started", "item_done", "error" and "finished" events

    Returns
    -------
    BatchResult
        Output paths, failures and skipped inputs

    Raises
    ------
    ValidationError
        If none of ``sources`` is an existing CSV file

    Examples
    --------
    >>> result = convert_files(["a.csv", "b.csv", "broken.csv"])
    >>> result.summary_message()
    'Batch conversion completed: 2 successful, 1 failed'

    """
    accepted, rejected = filter_csv_files(sources)
    for path in rejected:
        logger.warning(f"Skipping {path}: not an existing CSV file")

    if not accepted:
        raise ValidationError(NO_VALID_FILES_MESSAGE, parameter_name="sources")

    base_options = xlsx_options or XlsxOptions()
    result = BatchResult(skipped=rejected)
    total = len(accepted)
    emit_progress(progress_callback, "started", f"Converting {total} CSV files", total=total)

    for index, source in enumerate(accepted, start=1):
        item_options = base_options.create_updated(output_path=derive_output_path(source, output_dir))
        try:
            output_path = convert_file(source, parse_options, item_options)
        except Exception as e:
            failure = BatchFailure(source, e)
            result.failed.append(failure)
            logger.info(f"Failed to convert {source}: {failure.message}")
            emit_progress(
                progress_callback,
                "error",
                failure.message,
                current=index,
                total=total,
                file=str(source),
                error=failure.message,
            )
            continue

        result.successful.append(output_path)
        emit_progress(
            progress_callback,
            "item_done",
            f"Converted {source.name}",
            current=index,
            total=total,
            item_type="file",
            file=str(source),
            output_path=str(output_path),
        )

    logger.info(result.summary_message())
    emit_progress(
        progress_callback,
        "finished",
        result.summary_message(),
        current=total,
        total=total,
        successful=result.success_count,
        failed=result.failure_count,
    )
    return result
