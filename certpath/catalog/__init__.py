"""Certification catalog package."""

from certpath.catalog.loader import CatalogRepository, parse_records
from certpath.catalog.service import CatalogService

__all__ = [
    "CatalogRepository",
    "CatalogService",
    "parse_records",
]
