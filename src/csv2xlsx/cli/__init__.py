"""Command-line interface for the csv2xlsx conversion library.

This module provides a CLI tool for converting CSV files into Excel
workbooks. Encoding and delimiter are detected automatically unless
overridden.

Configuration File Support
--------------------------
Defaults for ingestion and spreadsheet options can be stored in
``.csv2xlsx.toml``, ``.csv2xlsx.yaml``, ``.csv2xlsx.json`` or the
``[tool.csv2xlsx]`` table of ``pyproject.toml``. The ``CSV2XLSX_CONFIG``
environment variable names a config file explicitly. CLI arguments always
override configuration values.

Examples
--------
Basic conversion::

    $ csv2xlsx data.csv

Specify output file::

    $ csv2xlsx data.csv --out report.xlsx

Convert multiple files::

    $ csv2xlsx *.csv --output-dir ./converted

Use rich formatting::

    $ csv2xlsx *.csv --rich

"""

import argparse
import logging
import os
import sys

from csv2xlsx.cli.builder import EXIT_VALIDATION_ERROR, create_parser
from csv2xlsx.cli.config import load_config_with_priority
from csv2xlsx.cli.output import print_error
from csv2xlsx.cli.processors import process_batch, process_single_file, setup_and_validate_options
from csv2xlsx.constants import CONFIG_ENV_VAR
from csv2xlsx.logging_utils import configure_logging

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser"]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments."""
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def main(args: list[str] | None = None) -> int:
    """Execute main CLI entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.input:
        print_error("Input file is required")
        return EXIT_VALIDATION_ERROR

    _setup_logging_level(parsed_args)

    config = {}
    if not parsed_args.no_config:
        try:
            config = load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))
        except argparse.ArgumentTypeError as e:
            print_error(str(e))
            return EXIT_VALIDATION_ERROR

    try:
        parse_options, xlsx_options, output_dir = setup_and_validate_options(parsed_args, config)
    except argparse.ArgumentTypeError as e:
        print_error(str(e))
        return EXIT_VALIDATION_ERROR

    if len(parsed_args.input) == 1:
        return process_single_file(parsed_args.input[0], parsed_args, parse_options, xlsx_options, output_dir)

    return process_batch(parsed_args.input, parsed_args, parse_options, xlsx_options, output_dir)


if __name__ == "__main__":
    sys.exit(main())
