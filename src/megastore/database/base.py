"""Abstract database interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from megastore.domain.entities import CatalogEntry, EntityKind


class Database(ABC):
    """Abstract database interface for megastore.

    Every catalog operation takes the entity kind, so one implementation
    serves categories, colors and branches alike.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def create_entry(self, kind: EntityKind, name: str) -> int:
        """Create an active record. Returns record ID."""
        pass

    @abstractmethod
    def get_entry(self, kind: EntityKind, entry_id: int) -> Optional[CatalogEntry]:
        """Get record by ID, whatever its lifecycle state."""
        pass

    @abstractmethod
    def get_active_entry_by_name(
        self, kind: EntityKind, name: str, exclude_id: Optional[int] = None
    ) -> Optional[CatalogEntry]:
        """Get the active record holding a normalized name.

        Args:
            kind: Entity kind
            name: Normalized name to look up
            exclude_id: Optional record ID to ignore (the record being renamed)
        """
        pass

    @abstractmethod
    def update_entry_name(self, kind: EntityKind, entry_id: int, name: str) -> None:
        """Update a record's name."""
        pass

    @abstractmethod
    def set_entry_deleted_at(
        self, kind: EntityKind, entry_id: int, deleted_at: Optional[datetime]
    ) -> None:
        """Set or clear a record's deletion timestamp."""
        pass

    @abstractmethod
    def list_entries(self, kind: EntityKind) -> list[CatalogEntry]:
        """List all records of a kind, deleted ones included, by ID."""
        pass
