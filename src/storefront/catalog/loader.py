"""Load product spreadsheets (CSV or first workbook sheet) into raw row dicts."""

from __future__ import annotations
import io
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

import pandas as pd

from storefront.persistence import repositories as repo
from .images import ImageFile, assign_images
from .validator import validate_rows, flag_existing_slugs, resolve_collections
from database.models import ImportRow

LOGGER = logging.getLogger(__name__)

CSV_EXTENSIONS = (".csv",)
EXCEL_EXTENSIONS = (".xlsx", ".xls")


class UnsupportedFileTypeError(Exception):
    pass


class SpreadsheetParseError(Exception):
    pass


Source = Union[str, Path, bytes]


def _read_frame(source: Source, filename: str) -> pd.DataFrame:
    data = io.BytesIO(source) if isinstance(source, bytes) else source
    lower = filename.lower()
    if lower.endswith(CSV_EXTENSIONS):
        return pd.read_csv(
            data,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding="utf-8",
        )
    if lower.endswith(EXCEL_EXTENSIONS):
        # first sheet only
        return pd.read_excel(data, sheet_name=0, dtype=str, keep_default_na=False)
    raise UnsupportedFileTypeError(f"Unsupported file type: {filename} (expected .csv or .xlsx)")


def load_spreadsheet(source: Source, filename: Optional[str] = None) -> List[Dict[str, str]]:
    """Parse a spreadsheet into a list of {column: trimmed string} rows.

    `source` is a path or the raw file bytes; `filename` is required for bytes
    and decides the format. Fully blank rows are dropped.
    """
    if filename is None:
        if isinstance(source, bytes):
            raise ValueError("filename is required when loading from bytes")
        filename = Path(source).name
    if not isinstance(source, bytes) and not Path(source).exists():
        raise FileNotFoundError(f"spreadsheet not found: {source}")

    try:
        df = _read_frame(source, filename)
    except UnsupportedFileTypeError:
        raise
    except Exception as e:
        LOGGER.error(f"Error parsing {filename}: {e}")
        raise SpreadsheetParseError(f"Error parsing file: {e}") from e

    df.columns = [str(c).strip() for c in df.columns]
    rows: List[Dict[str, str]] = []
    for record in df.to_dict(orient="records"):
        row = {k: ("" if v is None else str(v).strip()) for k, v in record.items()}
        if not any(row.values()):
            continue
        rows.append(row)
    LOGGER.info(f"Found {len(rows)} products in {filename}")
    return rows


def load_import_rows(
    source: Source,
    store=None,
    images: Optional[Sequence[ImageFile]] = None,
    filename: Optional[str] = None,
) -> List[ImportRow]:
    """Parse, validate and image-match a spreadsheet in one go.

    With a `store`, slugs are checked against existing products and collection
    names are resolved to ids.
    """
    raw_rows = load_spreadsheet(source, filename)
    rows = validate_rows(raw_rows)
    if store is not None:
        flag_existing_slugs(rows, repo.existing_slugs(store, (r.slug for r in rows)))
        resolve_collections(rows, repo.collection_lookup(store))
    if images:
        rows, _ = assign_images(rows, images)
    return rows


__all__ = [
    "load_spreadsheet",
    "load_import_rows",
    "SpreadsheetParseError",
    "UnsupportedFileTypeError",
]
