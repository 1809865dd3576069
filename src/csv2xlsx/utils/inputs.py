"""Utilities for validating conversion inputs.

Functions
---------
- is_path_like: Check if input is path-like (string or Path object)
- is_csv_file: Pre-filter predicate used before invoking the ingestion pipeline
- filter_csv_files: Split a list of candidate paths into CSV files and rejects
- derive_output_path: Default spreadsheet path for a source file
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/csv2xlsx/utils/inputs.py
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from csv2xlsx.constants import CSV_EXTENSION, XLSX_EXTENSION

PathLike = Union[str, Path]


def is_path_like(obj: Any) -> bool:
    """Check if an object is path-like (string or pathlib.Path).

    Examples
    --------
    >>> is_path_like("data.csv")
    True
    >>> is_path_like(b"data.csv")
    False

    """
    return isinstance(obj, (str, Path))


def is_csv_file(file_path: Any) -> bool:
    """Return True iff ``file_path`` exists and has a ``.csv`` extension.

    The extension check is case-insensitive. Anything that is not path-like,
    or cannot be inspected, yields False rather than an exception.

    Parameters
    ----------
    file_path : Any
        Candidate path

    Returns
    -------
    bool
        Whether the path is an existing CSV file

    Examples
    --------
    >>> is_csv_file("missing.csv")
    False

    """
    if not is_path_like(file_path) or file_path == "":
        return False

    path = Path(file_path)
    try:
        if not path.exists():
            return False
    except OSError:
        return False

    return path.suffix.lower() == CSV_EXTENSION


def filter_csv_files(paths: Iterable[PathLike]) -> tuple[list[Path], list[Path]]:
    """Partition ``paths`` into accepted CSV files and rejected paths.

    Input order is preserved in both lists.
    """
    accepted: list[Path] = []
    rejected: list[Path] = []
    for candidate in paths:
        (accepted if is_csv_file(candidate) else rejected).append(Path(candidate))
    return accepted, rejected


def derive_output_path(source_path: PathLike, output_dir: Optional[PathLike] = None) -> Path:
    """Return the spreadsheet path for ``source_path``.

    The file extension is replaced by ``.xlsx``; with ``output_dir`` the file
    name is placed in that directory instead of beside the source.

    Examples
    --------
    >>> derive_output_path("reports/q1.csv")
    PosixPath('reports/q1.xlsx')

    """
    source = Path(source_path)
    output_name = source.stem + XLSX_EXTENSION
    if output_dir is not None:
        return Path(output_dir) / output_name
    return source.parent / output_name
