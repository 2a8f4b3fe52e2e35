"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables. Defaults are provided for all fields, so the API and CLI run
without any configuration at all.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(name, default)


@dataclass
class Settings:
    """Application settings loaded from environment variables.

    Values are read when the instance is created, so tests can build a
    fresh ``Settings()`` after patching the environment.
    """

    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "Megastore Catalog API"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: _env("LOG_FILE"))

    # Path of the SQLite database file; None falls back to ~/.megastore/megastore.db
    database_path: Optional[str] = field(default_factory=lambda: _env("MEGASTORE_DB_PATH"))

    api_host: str = field(default_factory=lambda: _env("API_HOST", "127.0.0.1"))
    api_port: int = field(default_factory=lambda: int(_env("API_PORT", "8000")))


settings = Settings()
