"""Bulk product import: spreadsheet loading, validation, image matching, execution."""

from .loader import (  # noqa: F401
    load_import_rows,
    load_spreadsheet,
    SpreadsheetParseError,
    UnsupportedFileTypeError,
)
from .validator import validate_row, validate_rows  # noqa: F401
from .images import ImageFile, assign_images, load_image_files  # noqa: F401
from .importer import ImportAbortedError, ImportReport, preview_frame, run_import  # noqa: F401
from .sample import sample_csv, write_sample_csv  # noqa: F401

__all__ = [
    "load_import_rows",
    "load_spreadsheet",
    "SpreadsheetParseError",
    "UnsupportedFileTypeError",
    "validate_row",
    "validate_rows",
    "ImageFile",
    "assign_images",
    "load_image_files",
    "ImportAbortedError",
    "ImportReport",
    "preview_frame",
    "run_import",
    "sample_csv",
    "write_sample_csv",
]
