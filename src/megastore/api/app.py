"""
Application factory for the catalog API.

``create_app`` sets up logging, attaches the database and mounts one router
per entity kind. Run it with uvicorn, e.g.::

    uvicorn megastore.api.app:create_app --factory

or through ``megastore serve``.
"""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from megastore.api import envelope
from megastore.api.routes import build_router
from megastore.core.config import Settings, settings as default_settings
from megastore.core.logging_config import setup_logging
from megastore.database.base import Database
from megastore.database.factories import create_sqlite_database
from megastore.domain.entities import EntityKind


def describe_validation_error(exc: RequestValidationError) -> str:
    """Turn a request validation error into a one-line description."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part not in ("path", "query", "body")]
    parameter = location[-1] if location else "body"
    if first.get("type") == "int_parsing":
        return f"The parameter '{parameter}' must be a valid integer."
    return f"Invalid value for '{parameter}': {first.get('msg', 'invalid')}"


def create_app(db: Optional[Database] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Args:
        db: Database to serve; defaults to the SQLite database from settings
        settings: Settings to use; defaults to the module-level settings

    Returns:
        Configured FastAPI instance
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    if db is None:
        db = create_sqlite_database(database_path=settings.database_path)
        db.connect()
        db.initialize_schema()

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.db = db

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return envelope.argument_failure(describe_validation_error(exc))

    for kind in EntityKind:
        app.include_router(build_router(kind), prefix=f"/products/{kind.plural}", tags=[kind.plural])

    return app
