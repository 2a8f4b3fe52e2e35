"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, making it easy to change when
the database schema changes.
"""

from datetime import datetime, UTC
from typing import Optional

from megastore.domain import entities as domain
from megastore.database.models import CatalogEntryMixin


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite drops the offset on storage; every stored timestamp is UTC
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


def entry_to_domain(orm_entry: CatalogEntryMixin, kind: domain.EntityKind) -> domain.CatalogEntry:
    """Convert a SQLAlchemy catalog row to a domain CatalogEntry."""
    return domain.CatalogEntry(
        id=orm_entry.id,
        kind=kind,
        name=orm_entry.name,
        created_at=_as_utc(orm_entry.created_at),
        deleted_at=_as_utc(orm_entry.deleted_at),
    )
