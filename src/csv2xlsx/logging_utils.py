#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Logging setup for the csv2xlsx command-line entry point.

Library modules only create module-level loggers; handlers are attached here
when the CLI starts so that detection diagnostics ("no delimiter detected",
"headers but no data rows") reach the operator's console.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

# chardet emits per-prober debug records for every byte buffer it inspects
NOISY_LOGGERS = ("chardet", "chardet.charsetprober", "openpyxl")


def resolve_log_level(log_level: int | str) -> int:
    """Convert a level name or number into a numeric logging level.

    Unknown names resolve to ``logging.INFO``.
    """
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Configure root logging handlers for a conversion run.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Optional path to a log file for teeing log output.
    trace_mode : bool, default False
        When true, emit timestamps and logger names for debugging traces.

    Returns
    -------
    logging.Logger
        The configured root logger instance.

    """
    level = resolve_log_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if trace_mode:
        formatter = logging.Formatter("[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s", datefmt="%H:%M:%S")
    else:
        formatter = logging.Formatter("%(levelname)s: %(message)s")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Third-party debug chatter is only useful in trace mode
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(level if trace_mode else max(level, logging.INFO))

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            root_logger.info("Logging to file: %s", log_file)

    return root_logger
