"""Catalog domain services.

Every catalog entity (category, color, branch) follows the same create,
update, fetch, delete, restore and list sequence. ``CatalogService`` holds
that sequence once; the per-entity services only bind the entity kind.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from megastore.domain import lifecycle
from megastore.domain.entities import CatalogEntry, EntityKind
from megastore.domain.errors import (
    DuplicateNameError,
    EntryNotFoundError,
    duplicate_name,
    entry_not_found,
)
from megastore.domain.naming import NameRule, validate_name

if TYPE_CHECKING:
    from megastore.database.base import Database

logger = logging.getLogger(__name__)

NAME_RULES = {
    EntityKind.CATEGORY: NameRule.STRICT,
    EntityKind.COLOR: NameRule.STRICT,
    EntityKind.BRANCH: NameRule.RELAXED,
}


class CatalogService:
    """Service for managing the records of one catalog entity kind."""

    def __init__(self, db: Database, kind: EntityKind):
        """Initialize catalog service.

        Args:
            db: Database instance
            kind: Entity kind managed by this service
        """
        self.db = db
        self.kind = kind
        self.name_rule = NAME_RULES[kind]

    def _find(self, entry_id: int) -> CatalogEntry:
        entry = self.db.get_entry(self.kind, entry_id)
        if entry is None:
            raise EntryNotFoundError(entry_not_found(self.kind.label, entry_id))
        return entry

    def _normalized_unique_name(
        self, name: Optional[str], exclude_id: Optional[int] = None
    ) -> str:
        normalized = validate_name(name, self.name_rule, self.kind.label)
        existing = self.db.get_active_entry_by_name(
            self.kind, normalized, exclude_id=exclude_id
        )
        if existing is not None:
            raise DuplicateNameError(duplicate_name(self.kind.label, normalized))
        return normalized

    def create_entry(self, name: Optional[str]) -> CatalogEntry:
        """Create a record.

        Args:
            name: Candidate name; stored capitalized

        Returns:
            Created record

        Raises:
            MissingNameError: If name is absent or blank
            InvalidFormatError: If name fails the kind's format rule
            DuplicateNameError: If an active record already has the name
        """
        normalized = self._normalized_unique_name(name)
        entry_id = self.db.create_entry(self.kind, normalized)
        logger.info("Created %s %s (%s)", self.kind.label, entry_id, normalized)
        return self._find(entry_id)

    def update_entry(self, entry_id: int, name: Optional[str]) -> CatalogEntry:
        """Rename a record.

        The duplicate check ignores the record being renamed, so saving a
        record under its current name succeeds.

        Raises:
            EntryNotFoundError: If the record does not exist
            RecordDeletedError: If the record is soft-deleted
            MissingNameError, InvalidFormatError, DuplicateNameError: As for create
        """
        lifecycle.ensure_visible(self._find(entry_id))
        normalized = self._normalized_unique_name(name, exclude_id=entry_id)
        self.db.update_entry_name(self.kind, entry_id, normalized)
        logger.info("Renamed %s %s to %s", self.kind.label, entry_id, normalized)
        return self._find(entry_id)

    def get_entry(self, entry_id: int) -> CatalogEntry:
        """Get an active record by ID.

        Raises:
            EntryNotFoundError: If the record does not exist
            RecordDeletedError: If the record is soft-deleted
        """
        return lifecycle.ensure_visible(self._find(entry_id))

    def delete_entry(self, entry_id: int) -> CatalogEntry:
        """Soft-delete a record.

        Raises:
            EntryNotFoundError: If the record does not exist
            AlreadyDeletedError: If the record is already deleted
        """
        deleted = lifecycle.delete(self._find(entry_id))
        self.db.set_entry_deleted_at(self.kind, entry_id, deleted.deleted_at)
        logger.info("Deleted %s %s", self.kind.label, entry_id)
        return self._find(entry_id)

    def restore_entry(self, entry_id: int) -> CatalogEntry:
        """Restore a soft-deleted record.

        Raises:
            EntryNotFoundError: If the record does not exist
            NotDeletedError: If the record is active
            DuplicateNameError: If an active record took the name meanwhile
        """
        restored = lifecycle.restore(self._find(entry_id))
        clash = self.db.get_active_entry_by_name(
            self.kind, restored.name, exclude_id=entry_id
        )
        if clash is not None:
            raise DuplicateNameError(duplicate_name(self.kind.label, restored.name))
        self.db.set_entry_deleted_at(self.kind, entry_id, None)
        logger.info("Restored %s %s", self.kind.label, entry_id)
        return self._find(entry_id)

    def list_entries(self) -> list[CatalogEntry]:
        """List every record of the kind, deleted ones included.

        Returns:
            Records in creation order
        """
        return self.db.list_entries(self.kind)


class CategoryService(CatalogService):
    """Service for managing categories."""

    def __init__(self, db: Database):
        super().__init__(db, EntityKind.CATEGORY)


class ColorService(CatalogService):
    """Service for managing colors."""

    def __init__(self, db: Database):
        super().__init__(db, EntityKind.COLOR)


class BranchService(CatalogService):
    """Service for managing branches."""

    def __init__(self, db: Database):
        super().__init__(db, EntityKind.BRANCH)


def service_for(db: Database, kind: EntityKind) -> CatalogService:
    """Return the service bound to an entity kind."""
    return SERVICES[kind](db)


SERVICES: dict[EntityKind, type[CatalogService]] = {
    EntityKind.CATEGORY: CategoryService,
    EntityKind.COLOR: ColorService,
    EntityKind.BRANCH: BranchService,
}
