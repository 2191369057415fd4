"""Local image storage used when no hosted backend is configured."""

from __future__ import annotations
import logging
import time
import uuid
from pathlib import Path
from typing import Optional

from database.config import DatabaseConfig
from storefront.errors import UploadError

ALLOWED_CONTENT_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/webp"}
MAX_IMAGE_BYTES = 5 * 1024 * 1024


class LocalImageStorage:
    """Copy images under `media_dir/<bucket>/` and hand back a file URL.

    Applies the same checks as the hosted upload function: JPEG, PNG or WebP
    only, 5 MB at most.
    """

    def __init__(self, config: DatabaseConfig):
        self.config = config
        self.root = Path(config.media_dir)
        self.logger = logging.getLogger(__name__)

    def upload(self, image, bucket: Optional[str] = None) -> str:
        if image.content_type not in ALLOWED_CONTENT_TYPES:
            raise UploadError("Invalid file type. Only JPEG, PNG, and WebP images are allowed.")
        if len(image.content) > MAX_IMAGE_BYTES:
            raise UploadError("File too large. Maximum size is 5MB.")

        folder = self.root / (bucket or self.config.image_bucket)
        ext = image.name.rsplit(".", 1)[-1].lower() if "." in image.name else "bin"
        target = folder / f"{int(time.time() * 1000)}-{uuid.uuid4()}.{ext}"
        try:
            folder.mkdir(parents=True, exist_ok=True)
            target.write_bytes(image.content)
        except OSError as e:
            raise UploadError(f"Failed to store {image.name}: {e}") from e
        self.logger.info(f"Stored {image.name} as {target}")
        return target.resolve().as_uri()
