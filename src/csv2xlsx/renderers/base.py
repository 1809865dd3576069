#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/csv2xlsx/renderers/base.py
"""Base classes for tabular sinks.

This module defines the abstract base class that all renderers inherit from.
A renderer serializes an already-normalized :class:`~csv2xlsx.models.ParseResult`
to a file and returns the path it wrote.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Union

from csv2xlsx.exceptions import InvalidOptionsError, RenderingError
from csv2xlsx.models import ParseResult, is_record
from csv2xlsx.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for tabular renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> from csv2xlsx.renderers.base import BaseRenderer
        >>>
        >>> class TsvRenderer(BaseRenderer):
        ...     def render(self, result, source_path):
        ...         output = Path(source_path).with_suffix(".tsv")
        ...         output.write_text("\\t".join(result.headers))
        ...         return output

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render(self, result: ParseResult, source_path: Union[str, Path]) -> Path:
        """Write ``result`` to disk and return the output path.

        Parameters
        ----------
        result : ParseResult
            Normalized headers and records
        source_path : str or Path
            Path of the file ``result`` was parsed from, used to derive the
            default output location

        Returns
        -------
        Path
            Path of the written file

        Raises
        ------
        RenderingError
            If the result is malformed or rendering fails
        OutputWriteError
            If the output cannot be written

        """
        pass

    @staticmethod
    def _validate_result(result: Any) -> ParseResult:
        """Check that ``result`` is shaped like a :class:`ParseResult`.

        Raises
        ------
        RenderingError
            If ``result`` is None, lacks headers or rows, or holds a record
            that is not a mapping

        """
        if result is None:
            raise RenderingError("Cannot render: no parse result supplied", rendering_stage="validation")

        headers = getattr(result, "headers", None)
        rows = getattr(result, "rows", None)
        if headers is None or rows is None:
            raise RenderingError(
                f"Cannot render: expected headers and rows, got {type(result).__name__}",
                rendering_stage="validation",
            )

        for index, row in enumerate(rows):
            if not is_record(row):
                raise RenderingError(
                    f"Cannot render: record {index} is {type(row).__name__}, expected a mapping",
                    rendering_stage="validation",
                )
        return result

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
