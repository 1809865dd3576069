"""Renderers that write parsed CSV content to spreadsheet files."""

from csv2xlsx.renderers.base import BaseRenderer
from csv2xlsx.renderers.xlsx import XlsxRenderer

__all__ = ["BaseRenderer", "XlsxRenderer"]
