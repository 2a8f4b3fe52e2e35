"""
Pydantic schemas for the catalog API.

Field names stay snake_case in Python; the JSON produced by the API uses
the camelCase names clients expect (``statusCode``, ``deletedAt``...).
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

from megastore.domain.entities import CatalogEntry


class NameIn(BaseModel):
    """Body of create and update requests.

    ``name`` is optional here so that a missing name reaches the domain
    and is reported as such rather than as a malformed request.
    """

    name: Optional[str] = Field(None, description="Candidate name; stored capitalized")


class CatalogEntryRead(BaseModel):
    """Schema for reading a catalog record."""

    id: int
    name: str
    created_at: datetime = Field(serialization_alias="createdAt")
    deleted_at: Optional[datetime] = Field(None, serialization_alias="deletedAt")

    @classmethod
    def from_entry(cls, entry: CatalogEntry) -> "CatalogEntryRead":
        return cls(
            id=entry.id,
            name=entry.name,
            created_at=entry.created_at,
            deleted_at=entry.deleted_at,
        )


class ApiResponse(BaseModel):
    """Envelope wrapped around every API response."""

    status_code: int = Field(serialization_alias="statusCode")
    message: str
    data: Any = None
    error_detail: Optional[str] = Field(None, serialization_alias="errorDetail")
