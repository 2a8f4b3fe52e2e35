"""
Catalog endpoints.

The same six routes are exposed for every entity kind: list, fetch, create,
update, delete and restore. ``build_router`` produces the router for one
kind; the application mounts one per kind under ``/products/<plural>``.
Every response, successful or not, uses the envelope from
``megastore.api.envelope``.
"""

import logging
from typing import Callable

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from megastore.api import envelope
from megastore.api.schemas import CatalogEntryRead, NameIn
from megastore.database.base import Database
from megastore.domain.catalog import CatalogService, service_for
from megastore.domain.entities import CatalogEntry, EntityKind
from megastore.domain.errors import DomainError

logger = logging.getLogger(__name__)


def get_db(request: Request) -> Database:
    """Return the database attached to the application."""
    return request.app.state.db


def _dump(entry: CatalogEntry) -> dict:
    return CatalogEntryRead.from_entry(entry).model_dump(mode="json", by_alias=True)


def _respond(operation: Callable[[], object]) -> JSONResponse:
    """Run a service call and wrap its outcome in the envelope."""
    try:
        result = operation()
    except DomainError as e:
        return envelope.domain_failure(e)
    except Exception as e:
        logger.exception("Unexpected error while handling catalog request")
        return envelope.unexpected_failure(e)

    if isinstance(result, list):
        return envelope.success([_dump(entry) for entry in result])
    return envelope.success(_dump(result))


def build_router(kind: EntityKind) -> APIRouter:
    """Create the CRUD router for one entity kind."""
    router = APIRouter()

    def get_service(db: Database = Depends(get_db)) -> CatalogService:
        return service_for(db, kind)

    @router.get("", summary=f"List all {kind.plural}")
    async def list_entries(service: CatalogService = Depends(get_service)) -> JSONResponse:
        """Return every record, deleted ones included."""
        return _respond(service.list_entries)

    @router.get("/{entry_id}", summary=f"Get a {kind.label}")
    async def get_entry(
        entry_id: int, service: CatalogService = Depends(get_service)
    ) -> JSONResponse:
        """Return an active record. Deleted records are reported as such."""
        return _respond(lambda: service.get_entry(entry_id))

    @router.post("", summary=f"Create a {kind.label}")
    async def create_entry(
        payload: NameIn, service: CatalogService = Depends(get_service)
    ) -> JSONResponse:
        return _respond(lambda: service.create_entry(payload.name))

    @router.put("/{entry_id}", summary=f"Rename a {kind.label}")
    async def update_entry(
        entry_id: int, payload: NameIn, service: CatalogService = Depends(get_service)
    ) -> JSONResponse:
        return _respond(lambda: service.update_entry(entry_id, payload.name))

    @router.delete("/{entry_id}", summary=f"Soft-delete a {kind.label}")
    async def delete_entry(
        entry_id: int, service: CatalogService = Depends(get_service)
    ) -> JSONResponse:
        return _respond(lambda: service.delete_entry(entry_id))

    @router.put("/{entry_id}/restore", summary=f"Restore a deleted {kind.label}")
    async def restore_entry(
        entry_id: int, service: CatalogService = Depends(get_service)
    ) -> JSONResponse:
        return _respond(lambda: service.restore_entry(entry_id))

    return router
