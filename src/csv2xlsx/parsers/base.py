#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/csv2xlsx/parsers/base.py
"""Base class for tabular parsers.

This module defines the abstract base class parsers inherit from. A parser
turns a source file into a :class:`~csv2xlsx.models.ParseResult`.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional, Union

from csv2xlsx.exceptions import InvalidOptionsError
from csv2xlsx.models import ParseResult
from csv2xlsx.options.base import BaseParserOptions
from csv2xlsx.progress import EventType, ProgressCallback, emit_progress


class BaseParser(ABC):
    """Abstract base class for tabular parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options
    progress_callback : ProgressCallback or None, default = None
        Optional callback for progress updates during parsing

    Examples
    --------
    Creating a custom parser:

        >>> from csv2xlsx.models import ParseResult
        >>> from csv2xlsx.parsers.base import BaseParser
        >>>
        >>> class FixedParser(BaseParser):
        ...     def parse(self, input_path):
        ...         return ParseResult(headers=("a",), rows=({"a": 1},), encoding="utf-8", delimiter=",")

    """

    def __init__(self, options: BaseParserOptions | None = None, progress_callback: Optional[ProgressCallback] = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options
        self.progress_callback: Optional[ProgressCallback] = progress_callback

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_path: Union[str, Path]) -> ParseResult:
        """Parse the file at ``input_path`` into a :class:`ParseResult`.

        Parameters
        ----------
        input_path : str or Path
            Path of the source file

        Returns
        -------
        ParseResult
            Normalized headers and records

        Raises
        ------
        IngestionError
            If the file cannot be ingested for any reason

        """
        raise NotImplementedError

    def _emit_progress(
        self, event_type: EventType, message: str, current: int = 0, total: int = 0, **metadata: Any
    ) -> None:
        """Emit a progress event to the registered callback, if any.

        Examples
        --------
        >>> self._emit_progress("detected", "Delimiter: ';'", detected_type="delimiter", value=";")

        """
        emit_progress(self.progress_callback, event_type, message, current=current, total=total, **metadata)
