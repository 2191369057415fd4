"""
Storefront configuration and settings.
"""

import os
from pathlib import Path
from typing import Optional


DEFAULT_IMAGE_BUCKET = "product-images"


class DatabaseConfig:
    """Configuration for catalog storage and backend access."""

    def __init__(
        self,
        sqlite_path: Optional[str] = None,
        api_url: Optional[str] = None,
        upload_url: Optional[str] = None,
        api_key: Optional[str] = None,
        access_token: Optional[str] = None,
        media_dir: Optional[str] = None,
        http_timeout: int = 30,
        image_bucket: str = DEFAULT_IMAGE_BUCKET,
    ):
        self.database_type = "sqlite"
        self.api_url = api_url
        self.upload_url = upload_url
        self.api_key = api_key
        self.access_token = access_token
        self.http_timeout = http_timeout
        self.image_bucket = image_bucket

        project_root = Path(__file__).parent.parent.parent
        data_dir = project_root / "data"

        # Set default SQLite path if not provided
        if sqlite_path is None:
            data_dir.mkdir(exist_ok=True)
            self.sqlite_path = str(data_dir / "catalog.db")
        else:
            self.sqlite_path = sqlite_path

        if media_dir is None:
            self.media_dir = str(data_dir / "media")
        else:
            self.media_dir = media_dir

    @property
    def use_remote(self) -> bool:
        """True when the hosted backend is configured."""
        return bool(self.api_url and self.upload_url)

    @classmethod
    def from_env(cls) -> "DatabaseConfig":
        """Create config from environment variables."""
        return cls(
            sqlite_path=os.getenv("DB_SQLITE_PATH"),
            api_url=os.getenv("STOREFRONT_API_URL"),
            upload_url=os.getenv("STOREFRONT_UPLOAD_URL"),
            api_key=os.getenv("STOREFRONT_API_KEY"),
            access_token=os.getenv("STOREFRONT_ACCESS_TOKEN"),
            media_dir=os.getenv("STOREFRONT_MEDIA_DIR"),
            http_timeout=int(os.getenv("STOREFRONT_HTTP_TIMEOUT", "30")),
        )

    @classmethod
    def from_config_file(cls, config_path: str = "storefront.conf") -> "DatabaseConfig":
        """Create config from configuration file."""
        config = {}
        if os.path.exists(config_path):
            with open(config_path, "r") as f:
                for line in f:
                    line = line.strip()
                    if line and not line.startswith("#"):
                        key, value = line.split("=", 1)
                        config[key.strip()] = value.strip()

        return cls(
            sqlite_path=config.get("sqlite_path"),
            api_url=config.get("api_url"),
            upload_url=config.get("upload_url"),
            api_key=config.get("api_key"),
            access_token=config.get("access_token"),
            media_dir=config.get("media_dir"),
            http_timeout=int(config.get("http_timeout", "30")),
            image_bucket=config.get("image_bucket", DEFAULT_IMAGE_BUCKET),
        )
