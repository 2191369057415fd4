"""Errors raised by the catalog collaborators (store, REST client, uploaders)."""


class CatalogCreateError(Exception):
    """The catalog refused to create a product."""


class DuplicateSlugError(CatalogCreateError):
    """A product with the same slug already exists."""

    def __init__(self, slug: str):
        super().__init__(f"Product with slug '{slug}' already exists")
        self.slug = slug


class UploadError(Exception):
    """An image could not be stored."""
