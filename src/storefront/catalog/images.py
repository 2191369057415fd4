"""Match uploaded image files to import rows by filename."""

from __future__ import annotations
import dataclasses
import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Tuple, Union

from database.models import ImportRow
from utils import hyphenate_name

LOGGER = logging.getLogger(__name__)

MAX_IMAGES_PER_ROW = 5
IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".webp"}


@dataclass
class ImageFile:
    """An image picked for upload: its original filename and bytes."""

    name: str
    content: bytes = b""
    content_type: str = "application/octet-stream"

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "ImageFile":
        p = Path(path)
        content_type = mimetypes.guess_type(p.name)[0] or "application/octet-stream"
        return cls(name=p.name, content=p.read_bytes(), content_type=content_type)


def load_image_files(directory: Union[str, Path]) -> List[ImageFile]:
    d = Path(directory)
    if not d.is_dir():
        raise FileNotFoundError(f"image directory not found: {d}")
    paths = sorted(p for p in d.iterdir() if p.is_file() and p.suffix.lower() in IMAGE_EXTENSIONS)
    return [ImageFile.from_path(p) for p in paths]


def file_matches_row(file_name: str, row: ImportRow) -> bool:
    """Substring match of the lower-cased filename on slug, SKU or hyphenated name."""
    name_l = file_name.lower().strip()
    slug = row.slug.lower()
    sku = row.sku.lower()
    hyphenated = hyphenate_name(row.name)
    return bool(
        (slug and slug in name_l)
        or (sku and sku in name_l)
        or (hyphenated and hyphenated in name_l)
    )


def match_images(row: ImportRow, files: Sequence[ImageFile]) -> List[ImageFile]:
    if row.requested_filenames:
        by_name = {}
        for f in files:
            by_name.setdefault(f.name.lower().strip(), f)
        matched = [by_name[n] for n in row.requested_filenames if n in by_name]
    else:
        matched = [f for f in files if file_matches_row(f.name, row)]
    return matched[:MAX_IMAGES_PER_ROW]


def assign_images(
    rows: Sequence[ImportRow], files: Sequence[ImageFile]
) -> Tuple[List[ImportRow], int]:
    """Return copies of `rows` with `images` set, and how many rows matched.

    Several rows may claim the same file; nothing is renamed or moved.
    """
    updated = [
        dataclasses.replace(
            r,
            fields=dict(r.fields),
            errors=list(r.errors),
            warnings=list(r.warnings),
            images=match_images(r, files),
        )
        for r in rows
    ]
    matched = sum(1 for r in updated if r.images)
    LOGGER.info(f"{len(files)} images uploaded. {matched} products matched with images.")
    return updated, matched


__all__ = ["ImageFile", "load_image_files", "assign_images", "match_images", "file_matches_row"]
