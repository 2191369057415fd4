"""Jewelry storefront: bulk catalog import and the stores behind it."""
