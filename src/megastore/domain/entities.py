"""Domain model entities for megastore.

These are pure data classes representing catalog concepts, independent of
database schema. Categories, colors and branches share the same shape, so a
single record type is used for all of them and ``EntityKind`` tells them
apart.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class EntityKind(str, Enum):
    """Catalog entity types managed by the backend."""

    CATEGORY = "category"
    COLOR = "color"
    BRANCH = "branch"

    @property
    def label(self) -> str:
        """Singular human-readable name, used in messages."""
        return self.value

    @property
    def plural(self) -> str:
        """Plural name, used for table names and URL paths."""
        if self is EntityKind.BRANCH:
            return "branches"
        if self is EntityKind.CATEGORY:
            return "categories"
        return f"{self.value}s"


@dataclass(frozen=True)
class CatalogEntry:
    """Named, soft-deletable catalog record."""

    id: int
    kind: EntityKind
    name: str
    created_at: datetime
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
