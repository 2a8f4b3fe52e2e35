"""Domain layer for megastore catalog."""

from megastore.domain.catalog import (
    CatalogService,
    CategoryService,
    ColorService,
    BranchService,
    service_for,
)
from megastore.domain.entities import CatalogEntry, EntityKind

__all__ = [
    "CatalogService",
    "CategoryService",
    "ColorService",
    "BranchService",
    "service_for",
    "CatalogEntry",
    "EntityKind",
]
