"""Bulk import executor: upload matched images, then create each valid row."""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Sequence

import pandas as pd

from database.config import DEFAULT_IMAGE_BUCKET
from database.models import ImportRow
from storefront.errors import UploadError

LOGGER = logging.getLogger(__name__)

ProgressCallback = Callable[[float], None]


@dataclass
class ImportReport:
    created: List[Any] = field(default_factory=list)
    with_images: List[ImportRow] = field(default_factory=list)
    without_images: List[ImportRow] = field(default_factory=list)
    degraded: List[ImportRow] = field(default_factory=list)  # some images failed to upload
    failed: List[ImportRow] = field(default_factory=list)  # validation errors, never attempted

    @property
    def created_count(self) -> int:
        return len(self.created)

    @property
    def message(self) -> str:
        return f"{self.created_count} products uploaded"


class ImportAbortedError(Exception):
    """Catalog creation failed; rows created before the failure are kept."""

    def __init__(self, message: str, report: ImportReport, row: Optional[ImportRow] = None):
        super().__init__(message)
        self.report = report
        self.row = row


def _upload_row_images(row: ImportRow, uploader, bucket: str) -> List[str]:
    urls: List[str] = []
    for image in row.images:
        try:
            urls.append(uploader.upload(image, bucket))
        except UploadError as e:
            # keep what was uploaded so far and still create the product
            LOGGER.warning(f"Failed to upload images for {row.name}: {e}")
            row.partial_images = True
            break
    return urls


def run_import(
    rows: Sequence[ImportRow],
    uploader,
    catalog,
    acting_user: Optional[str] = None,
    progress: Optional[ProgressCallback] = None,
    bucket: str = DEFAULT_IMAGE_BUCKET,
) -> ImportReport:
    """Import every error-free row, one row at a time.

    `uploader.upload(image, bucket)` returns a URL or raises UploadError, which
    is logged and ends uploads for that row. `catalog.create_product(payload, acting_user=...)`
    failing aborts the run with ImportAbortedError. `progress` receives the
    completed fraction after the image and create stage of each row.
    """
    valid = [r for r in rows if r.is_valid]
    report = ImportReport(failed=[r for r in rows if not r.is_valid])
    if not valid:
        LOGGER.warning("No valid products to upload")
        return report

    total_steps = len(valid) * 2
    completed = 0

    def step():
        nonlocal completed
        completed += 1
        if progress is not None:
            progress(completed / total_steps)

    for row in valid:
        urls = _upload_row_images(row, uploader, bucket) if row.images else []
        row.image_urls = urls
        step()

        try:
            created = catalog.create_product(row.to_payload(urls), acting_user=acting_user)
        except Exception as e:
            LOGGER.error(f"Upload failed at row {row.row_index} ({row.name}): {e}")
            raise ImportAbortedError(str(e), report, row) from e
        report.created.append(created)
        if urls:
            report.with_images.append(row)
        else:
            report.without_images.append(row)
        if row.partial_images:
            report.degraded.append(row)
        step()

    LOGGER.info(f"Upload completed: {report.message}")
    if report.degraded:
        LOGGER.warning(
            f"{len(report.degraded)} products uploaded with missing images: "
            + ", ".join(r.name for r in report.degraded)
        )
    return report


def preview_frame(rows: Sequence[ImportRow]) -> pd.DataFrame:
    """Tabular preview of parsed rows before import."""
    return pd.DataFrame(
        [
            {
                "Row": r.row_index,
                "Name": r.name,
                "Type": r.fields.get("type", ""),
                "Material": r.fields.get("material", ""),
                "Stock": r.fields.get("stock"),
                "Images": len(r.images),
                "Warnings": len(r.warnings),
                "Status": "Valid" if r.is_valid else f"{len(r.errors)} errors",
            }
            for r in rows
        ],
        columns=["Row", "Name", "Type", "Material", "Stock", "Images", "Warnings", "Status"],
    )


__all__ = ["run_import", "ImportReport", "ImportAbortedError", "preview_frame"]
