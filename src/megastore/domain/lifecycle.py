"""Soft-delete lifecycle for catalog entries.

A record is Active while ``deleted_at`` is None and Deleted once it holds a
timestamp. Only two transitions exist: delete (Active -> Deleted) and
restore (Deleted -> Active). Transitions return new records; persisting them
is up to the caller.
"""

from dataclasses import replace
from datetime import datetime, UTC
from enum import Enum
from typing import Optional

from megastore.domain.entities import CatalogEntry
from megastore.domain.errors import (
    AlreadyDeletedError,
    NotDeletedError,
    RecordDeletedError,
    entry_already_deleted,
    entry_deleted,
    entry_not_deleted,
)


class LifecycleState(str, Enum):
    ACTIVE = "active"
    DELETED = "deleted"


def state_of(entry: CatalogEntry) -> LifecycleState:
    """Return the lifecycle state of an entry."""
    return LifecycleState.DELETED if entry.is_deleted else LifecycleState.ACTIVE


def ensure_visible(entry: CatalogEntry) -> CatalogEntry:
    """Return entry if it is active.

    Raises:
        RecordDeletedError: If the entry is soft-deleted
    """
    if state_of(entry) is LifecycleState.DELETED:
        raise RecordDeletedError(entry_deleted(entry.kind.label, entry.id))
    return entry


def delete(entry: CatalogEntry, now: Optional[datetime] = None) -> CatalogEntry:
    """Mark an active entry as deleted.

    Args:
        entry: Entry to delete
        now: Deletion timestamp (defaults to current UTC time)

    Returns:
        Copy of the entry with deleted_at set

    Raises:
        AlreadyDeletedError: If the entry is already deleted
    """
    if state_of(entry) is LifecycleState.DELETED:
        raise AlreadyDeletedError(entry_already_deleted(entry.kind.label, entry.id))
    return replace(entry, deleted_at=now if now is not None else datetime.now(UTC))


def restore(entry: CatalogEntry) -> CatalogEntry:
    """Bring a deleted entry back to active.

    Raises:
        NotDeletedError: If the entry is active
    """
    if state_of(entry) is LifecycleState.ACTIVE:
        raise NotDeletedError(entry_not_deleted(entry.kind.label, entry.id))
    return replace(entry, deleted_at=None)
