#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Exceptions raised by csv2xlsx.

Exception Hierarchy
-------------------
- Csv2XlsxError

  - ValidationError: a bad argument, option value or input selection
    - InvalidOptionsError: a parser or renderer got the wrong options class

  - FileError: the source file could not be accessed
    - FileNotFoundError: the source path does not exist

  - EmptyInputError: decoded content is empty or whitespace-only
  - DecodeError: the bytes are invalid for the resolved encoding
  - ParsingError: the structural CSV split failed

  - IngestionError: the one error :class:`~csv2xlsx.parsers.csv.CsvParser`
    lets escape; wraps any of the ingestion errors above

  - RenderingError: the workbook could not be built
    - OutputWriteError: the workbook could not be saved

Ingestion failures are only ever raised to callers as :class:`IngestionError`.
The concrete cause stays available on ``original_error`` and is summarized by
:attr:`IngestionError.kind`.

"""

from typing import Any


class Csv2XlsxError(Exception):
    """Base class for every csv2xlsx error.

    Parameters
    ----------
    message : str
        Human-readable description, also used as ``str(error)``
    original_error : Exception, optional
        Lower-level exception this error was raised from

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Csv2XlsxError):
    """A caller-supplied value was rejected before any work started.

    ``parameter_name`` and ``parameter_value`` identify the offending input
    when one can be named.
    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """An options object of the wrong class was passed to a parser or renderer.

    Parameters
    ----------
    component_name : str
        Short name of the receiving component, e.g. ``"csv"`` or ``"xlsx"``
    expected_type : type
        Options class the component accepts
    received_type : type
        Class of the object actually passed

    """

    def __init__(self, component_name: str, expected_type: type, received_type: type):
        super().__init__(
            f"{component_name} expects {expected_type.__name__}, got {received_type.__name__}",
            parameter_name="options",
            parameter_value=received_type,
        )
        self.component_name = component_name
        self.expected_type = expected_type
        self.received_type = received_type


class FileError(Csv2XlsxError):
    """The source file exists but could not be read."""

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """The source path does not point to an existing file."""

    def __init__(self, file_path: str):
        super().__init__(f"CSV file does not exist: {file_path}", file_path=file_path)


class EmptyInputError(Csv2XlsxError):
    """Decoded CSV content is empty or whitespace-only."""

    def __init__(self, message: str = "CSV file is empty"):
        super().__init__(message)


class DecodeError(Csv2XlsxError):
    """The file bytes cannot be decoded with the resolved encoding.

    Parameters
    ----------
    encoding : str
        Codec name that was tried
    original_error : Exception, optional
        The ``UnicodeDecodeError`` or, for unknown codecs, ``LookupError``

    """

    def __init__(self, encoding: str, original_error: Exception | None = None):
        detail = f": {original_error}" if original_error is not None else ""
        super().__init__(f"Cannot decode content as '{encoding}'{detail}", original_error=original_error)
        self.encoding = encoding


class ParsingError(Csv2XlsxError):
    """Splitting the decoded text into records failed.

    ``parsing_stage`` names the step that failed (``"record_split"``).
    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error=original_error)
        self.parsing_stage = parsing_stage


class IngestionError(Csv2XlsxError):
    """A CSV file could not be ingested.

    Every failure inside the ingestion pipeline is translated into this error,
    so callers only need to handle "file X could not be ingested: reason".

    Parameters
    ----------
    file_path : str
        Path of the source file that failed
    original_error : Exception
        The internal error that caused the failure

    Attributes
    ----------
    file_path : str
        Path of the source file
    reason : str
        Message of the underlying error

    """

    def __init__(self, file_path: str, original_error: Exception):
        reason = original_error.message if isinstance(original_error, Csv2XlsxError) else str(original_error)
        super().__init__(f"Failed to parse CSV file '{file_path}': {reason}", original_error=original_error)
        self.file_path = file_path
        self.reason = reason

    @property
    def kind(self) -> str:
        """Return a short identifier for the underlying failure category."""
        if isinstance(self.original_error, FileNotFoundError):
            return "file_not_found"
        if isinstance(self.original_error, EmptyInputError):
            return "empty_input"
        if isinstance(self.original_error, DecodeError):
            return "decode_failure"
        if isinstance(self.original_error, ParsingError):
            return "parse_failure"
        return "unexpected"


class RenderingError(Csv2XlsxError):
    """The workbook could not be built from a parse result.

    ``rendering_stage`` is ``"validation"`` for malformed results,
    ``"rendering"`` for workbook construction and ``"output_write"`` for saving.
    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error=original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """The workbook could not be saved to ``file_path``."""

    def __init__(self, file_path: str, original_error: Exception | None = None):
        detail = f" ({original_error})" if original_error is not None else ""
        super().__init__(
            f"Failed to write output file: {file_path}{detail}",
            rendering_stage="output_write",
            original_error=original_error,
        )
        self.file_path = file_path


__all__ = [
    "Csv2XlsxError",
    "ValidationError",
    "InvalidOptionsError",
    "FileError",
    "FileNotFoundError",
    "EmptyInputError",
    "DecodeError",
    "ParsingError",
    "IngestionError",
    "RenderingError",
    "OutputWriteError",
]
