"""Shared pytest fixtures for megastore tests."""

import tempfile
import os
import pytest

from megastore.database.factories import create_sqlite_database
from megastore.domain.catalog import BranchService, CategoryService, ColorService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def category_service(temp_db):
    """Create a CategoryService with a temporary database."""
    return CategoryService(temp_db)


@pytest.fixture
def color_service(temp_db):
    """Create a ColorService with a temporary database."""
    return ColorService(temp_db)


@pytest.fixture
def branch_service(temp_db):
    """Create a BranchService with a temporary database."""
    return BranchService(temp_db)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def api_client(temp_db):
    """Create a FastAPI test client serving the temporary database."""
    from fastapi.testclient import TestClient
    from megastore.api.app import create_app

    return TestClient(create_app(db=temp_db))
