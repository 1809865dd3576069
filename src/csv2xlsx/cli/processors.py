#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/csv2xlsx/cli/processors.py
"""Conversion processors for the csv2xlsx CLI.

This module turns parsed arguments plus loaded configuration into option
objects, and runs single-file or batch conversions with console reporting.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from csv2xlsx.api import INVALID_FILE_MESSAGE, NO_VALID_FILES_MESSAGE, BatchResult, convert_file, convert_files
from csv2xlsx.cli.builder import (
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    get_exit_code_for_exception,
    parse_delimiter_arg,
)
from csv2xlsx.cli.output import print_converted, print_error, should_use_rich_output
from csv2xlsx.cli.progress import BatchReporter
from csv2xlsx.exceptions import Csv2XlsxError
from csv2xlsx.options.csv import ParseOptions
from csv2xlsx.options.xlsx import XlsxOptions
from csv2xlsx.utils.inputs import derive_output_path, filter_csv_files, is_csv_file

logger = logging.getLogger(__name__)


def setup_and_validate_options(
    args: argparse.Namespace, config: Optional[Dict[str, Any]] = None
) -> Tuple[ParseOptions, XlsxOptions, Optional[Path]]:
    """Build option objects from configuration values and CLI arguments.

    Configuration values provide the defaults; any CLI flag that was given
    overrides them.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command-line arguments
    config : dict, optional
        Validated configuration loaded from a config file

    Returns
    -------
    tuple[ParseOptions, XlsxOptions, Path or None]
        Ingestion options, spreadsheet options and the output directory

    Raises
    ------
    argparse.ArgumentTypeError
        If a configured or given value is invalid

    """
    config = dict(config or {})

    if isinstance(config.get("delimiter"), str):
        config["delimiter"] = parse_delimiter_arg(config["delimiter"])

    parse_values = {key: config[key] for key in ("delimiter", "encoding", "infer_types") if key in config}
    xlsx_values = {key: config[key] for key in ("sheet_name", "header_style", "auto_fit_columns") if key in config}

    if args.delimiter is not None:
        parse_values["delimiter"] = args.delimiter
    if args.encoding is not None:
        parse_values["encoding"] = args.encoding
    if args.no_infer_types:
        parse_values["infer_types"] = False

    if args.sheet_name is not None:
        xlsx_values["sheet_name"] = args.sheet_name
    if args.no_header_style:
        xlsx_values["header_style"] = False
    if args.no_auto_fit:
        xlsx_values["auto_fit_columns"] = False

    try:
        parse_options = ParseOptions.from_mapping(parse_values)
        xlsx_options = XlsxOptions.from_mapping(xlsx_values)
    except (TypeError, ValueError) as e:
        raise argparse.ArgumentTypeError(f"Invalid option: {e}") from e

    output_dir_value = args.output_dir if args.output_dir is not None else config.get("output_dir")
    output_dir = Path(output_dir_value) if output_dir_value else None

    logger.debug(f"Parse options: {parse_options}")
    logger.debug(f"Spreadsheet options: {xlsx_options}")
    return parse_options, xlsx_options, output_dir


def process_single_file(
    source: str,
    args: argparse.Namespace,
    parse_options: ParseOptions,
    xlsx_options: XlsxOptions,
    output_dir: Optional[Path] = None,
) -> int:
    """Convert one CSV file and report the output path.

    Returns
    -------
    int
        Exit code

    """
    if not is_csv_file(source):
        print_error(f"{INVALID_FILE_MESSAGE} ({source})")
        return EXIT_VALIDATION_ERROR

    output_path = Path(args.out) if args.out else derive_output_path(source, output_dir)

    try:
        written = convert_file(source, parse_options, xlsx_options.create_updated(output_path=output_path))
    except Csv2XlsxError as e:
        print_error(e.message)
        logger.debug("Conversion failed", exc_info=True)
        return get_exit_code_for_exception(e)

    print_converted(source, written, should_use_rich_output(args))
    return EXIT_SUCCESS


def _exit_code_for_batch(result: BatchResult) -> int:
    """Return the highest exit code among the batch failures."""
    return max((get_exit_code_for_exception(failure.error) for failure in result.failed), default=EXIT_SUCCESS)


def process_batch(
    sources: List[str],
    args: argparse.Namespace,
    parse_options: ParseOptions,
    xlsx_options: XlsxOptions,
    output_dir: Optional[Path] = None,
) -> int:
    """Convert several CSV files sequentially with progress and a summary.

    Returns
    -------
    int
        ``EXIT_SUCCESS`` when every file converted, otherwise the highest
        exit code among the failures

    """
    if args.out:
        print_error("--out can only be used with a single input; use --output-dir instead")
        return EXIT_VALIDATION_ERROR

    accepted, _ = filter_csv_files(sources)
    if not accepted:
        print_error(NO_VALID_FILES_MESSAGE)
        return EXIT_VALIDATION_ERROR

    with BatchReporter(should_use_rich_output(args), total=len(accepted)) as reporter:
        try:
            result = convert_files(
                sources,
                parse_options=parse_options,
                xlsx_options=xlsx_options,
                output_dir=output_dir,
                progress_callback=reporter,
            )
        except Csv2XlsxError as e:
            print_error(e.message)
            return get_exit_code_for_exception(e)

    reporter.report(result, show_summary=not args.no_summary)
    print(result.summary_message())

    return _exit_code_for_batch(result)
