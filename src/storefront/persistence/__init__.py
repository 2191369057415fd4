"""Catalog persistence (SQLite store and repository helpers)."""

from .sqlite import CatalogStore  # noqa: F401

__all__ = ["CatalogStore"]
