"""Configuration and logging setup."""

from megastore.core.config import Settings, settings
from megastore.core.logging_config import setup_logging

__all__ = ["Settings", "settings", "setup_logging"]
