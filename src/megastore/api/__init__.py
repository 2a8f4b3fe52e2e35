"""HTTP API for megastore catalog."""

from megastore.api.app import create_app

__all__ = ["create_app"]
