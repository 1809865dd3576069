"""Parsers that ingest CSV files into normalized results."""

from csv2xlsx.parsers.base import BaseParser
from csv2xlsx.parsers.csv import CsvParser, detect_delimiter

__all__ = ["BaseParser", "CsvParser", "detect_delimiter"]
