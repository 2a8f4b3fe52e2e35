"""Database layer for megastore application."""

from megastore.database.base import Database
from megastore.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
