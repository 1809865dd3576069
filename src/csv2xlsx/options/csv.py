#  Copyright (c) 2025 Tom Villani, Ph.D.

# csv2xlsx/options/csv.py
"""Configuration options for CSV ingestion.

This module defines the optional overrides accepted by the ingestion pipeline.
Any override left as ``None`` triggers automatic detection.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field

from csv2xlsx.constants import (
    DEFAULT_ENCODING_CONFIDENCE_THRESHOLD,
    DEFAULT_INFER_TYPES,
    FORBIDDEN_DELIMITERS,
)
from csv2xlsx.options.base import BaseParserOptions


@dataclass(frozen=True)
class ParseOptions(BaseParserOptions):
    r"""Configuration options for CSV ingestion.

    Parameters
    ----------
    delimiter : str | None, default None
        Override the field delimiter (e.g., ',', '\\t', ';', '|').
        When None, the delimiter is detected from the first line.
    encoding : str | None, default None
        Override the charset used to decode the file (e.g., 'utf-8', 'cp1252').
        When None, the encoding is detected with chardet.
    infer_types : bool, default True
        Convert unambiguous numeric and boolean cells to ``int``, ``float``
        or ``bool``. When False, every cell stays a string.
    encoding_confidence_threshold : float, default 0.1
        Minimum chardet confidence (0.0-1.0) required to trust a detected
        encoding. Lower confidence falls back to UTF-8.

    """

    delimiter: str | None = field(
        default=None,
        metadata={"help": "Override CSV delimiter (e.g., ',', '\\t', ';', '|')", "importance": "core"},
    )
    encoding: str | None = field(
        default=None,
        metadata={"help": "Override source file encoding (e.g., 'utf-8', 'cp1252')", "importance": "core"},
    )
    infer_types: bool = field(
        default=DEFAULT_INFER_TYPES,
        metadata={
            "help": "Convert numeric and boolean cells to typed values",
            "cli_name": "no-infer-types",
            "importance": "core",
        },
    )
    encoding_confidence_threshold: float = field(
        default=DEFAULT_ENCODING_CONFIDENCE_THRESHOLD,
        metadata={"help": "Minimum chardet confidence to accept a detected encoding", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If the delimiter is not a single usable character, the encoding is
            unknown, or the confidence threshold is outside [0, 1].

        """
        if self.delimiter is not None:
            if len(self.delimiter) != 1:
                raise ValueError(f"delimiter must be a single character, got {self.delimiter!r}")
            if self.delimiter in FORBIDDEN_DELIMITERS:
                raise ValueError(f"delimiter cannot be a quote or line break character, got {self.delimiter!r}")

        if self.encoding is not None:
            if not self.encoding.strip():
                raise ValueError("encoding must be a non-empty charset name")
            try:
                codecs.lookup(self.encoding)
            except LookupError as e:
                raise ValueError(f"Unknown encoding: {self.encoding!r}") from e

        if not 0.0 <= self.encoding_confidence_threshold <= 1.0:
            raise ValueError(
                f"encoding_confidence_threshold must be between 0 and 1, got {self.encoding_confidence_threshold}"
            )
