"""Collaborators behind the import pipeline: image storage and catalog creation."""

from database.config import DatabaseConfig

from .rest import RestCatalogClient
from .storage import LocalImageStorage
from .upload import ImageUploadClient


def make_catalog(config: DatabaseConfig):
    """Hosted REST catalog when api/upload URLs are set, local SQLite otherwise."""
    if config.use_remote:
        return RestCatalogClient(config)
    from storefront.persistence.sqlite import CatalogStore

    return CatalogStore(config)


def make_collaborators(config: DatabaseConfig):
    """Return (image_uploader, catalog) for the configured backend."""
    uploader = ImageUploadClient(config) if config.use_remote else LocalImageStorage(config)
    return uploader, make_catalog(config)


__all__ = [
    "ImageUploadClient",
    "LocalImageStorage",
    "RestCatalogClient",
    "make_catalog",
    "make_collaborators",
]
