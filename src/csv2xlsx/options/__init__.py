"""Option dataclasses for CSV ingestion and XLSX rendering."""

from csv2xlsx.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from csv2xlsx.options.csv import ParseOptions
from csv2xlsx.options.xlsx import XlsxOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "ParseOptions",
    "XlsxOptions",
]
