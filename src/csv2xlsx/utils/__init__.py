"""Utility helpers shared by the parser, renderer and CLI."""

from csv2xlsx.utils.encoding import decode_bytes, detect_encoding, detect_encoding_with_fallback
from csv2xlsx.utils.inputs import derive_output_path, filter_csv_files, is_csv_file
from csv2xlsx.utils.spreadsheet import fit_column_width, infer_cell_value, sanitize_sheet_name

__all__ = [
    "decode_bytes",
    "derive_output_path",
    "detect_encoding",
    "detect_encoding_with_fallback",
    "filter_csv_files",
    "fit_column_width",
    "infer_cell_value",
    "is_csv_file",
    "sanitize_sheet_name",
]
