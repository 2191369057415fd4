"""Client for the hosted image upload function."""

from __future__ import annotations
import logging
from typing import Optional

import requests

from database.config import DatabaseConfig
from storefront.errors import UploadError

logger = logging.getLogger(__name__)


class ImageUploadClient:
    """POST one image at a time to the upload function and return its public URL.

    Content-type and size checks happen server side; a rejected file comes
    back as a non-2xx response and is raised as UploadError.
    """

    def __init__(self, config: DatabaseConfig, session: Optional[requests.Session] = None):
        if not config.upload_url:
            raise ValueError("upload_url not provided in config")
        self.config = config
        self.session = session or requests.Session()

    def upload(self, image, bucket: Optional[str] = None) -> str:
        token = self.config.access_token
        if not token:
            raise UploadError("Not authenticated")
        bucket = bucket or self.config.image_bucket
        try:
            resp = self.session.post(
                self.config.upload_url,
                headers={"Authorization": f"Bearer {token}"},
                files={"file": (image.name, image.content, image.content_type)},
                data={"bucket": bucket},
                timeout=self.config.http_timeout,
            )
        except requests.exceptions.RequestException as e:
            raise UploadError(f"Failed to upload {image.name}: {e}") from e
        if not resp.ok:
            raise UploadError(f"Failed to upload {image.name}: {resp.text}")
        try:
            url = resp.json().get("url")
        except (ValueError, AttributeError) as e:
            raise UploadError(f"Failed to upload {image.name}: unreadable response") from e
        if not url:
            raise UploadError(f"Failed to upload {image.name}: no URL returned")
        logger.info(f"Uploaded {image.name} to {bucket}")
        return url
