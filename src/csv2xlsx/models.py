#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/csv2xlsx/models.py
"""Result types produced by the ingestion pipeline.

``ParseResult`` is the pipeline's sole output and the sink's sole input.
``DetectionResult`` is returned by the encoding and delimiter detectors, which
report their "no confident answer" cases as warnings instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterator, Mapping, TypeVar, Union

CellValue = Union[str, int, float, bool, None]
Record = dict[str, CellValue]

T = TypeVar("T")


@dataclass(frozen=True)
class DetectionResult(Generic[T]):
    """Outcome of a detection heuristic.

    Parameters
    ----------
    value : T
        The detected (or fallback) value
    warnings : tuple[str, ...]
        Non-fatal diagnostics, e.g. that a fallback value was used

    """

    value: T
    warnings: tuple[str, ...] = ()

    @property
    def used_fallback(self) -> bool:
        """Return True when the detector reported a fallback warning."""
        return bool(self.warnings)


@dataclass(frozen=True)
class ParseResult:
    """Normalized tabular content of one CSV file.

    Parameters
    ----------
    headers : tuple[str, ...]
        Ordered column names. Duplicates are kept verbatim.
    rows : tuple[Record, ...]
        One mapping per data record, keyed by header name. Every record has
        exactly the keys in ``headers``; missing trailing fields map to None.
    encoding : str
        Charset actually used to decode the file
    delimiter : str
        Character actually used to split fields
    warnings : tuple[str, ...]
        Non-fatal diagnostics collected while parsing

    """

    headers: tuple[str, ...]
    rows: tuple[Record, ...]
    encoding: str
    delimiter: str
    warnings: tuple[str, ...] = field(default=())

    @property
    def row_count(self) -> int:
        """Number of data records (header excluded)."""
        return len(self.rows)

    @property
    def column_count(self) -> int:
        """Number of header columns."""
        return len(self.headers)

    def iter_values(self) -> Iterator[list[CellValue]]:
        """Yield each record as a list of values in header order."""
        for row in self.rows:
            yield [row.get(header) for header in self.headers]


def build_record(headers: tuple[str, ...], values: list[CellValue]) -> Record:
    """Key ``values`` positionally by ``headers``.

    Missing trailing values map to None and surplus values are dropped. With
    duplicate header names the last occurrence wins, matching plain dict
    assignment.
    """
    record: Record = {}
    for index, header in enumerate(headers):
        record[header] = values[index] if index < len(values) else None
    return record


def is_record(value: object) -> bool:
    """Return True if ``value`` can be used as a record mapping."""
    return isinstance(value, Mapping)
