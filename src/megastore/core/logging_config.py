"""Process-wide logging setup shared by the API and the CLI."""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER = "megastore-console"
FILE_HANDLER = "megastore-file"


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(handler.get_name() == name for handler in logger.handlers)


def _attach(logger: logging.Logger, handler: logging.Handler, name: str) -> None:
    handler.set_name(name)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Set the root level and install the megastore handlers.

    Handlers are tagged by name, so calling this again (every ``create_app``
    does) only adjusts the level. Handlers installed by others are left alone.

    Args:
        level: Level name such as "debug" or "INFO"; unknown names mean INFO
        logfile: Optional path of a file that receives the same records
    """
    root = logging.getLogger()
    root.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))

    if not _has_handler(root, CONSOLE_HANDLER):
        _attach(root, logging.StreamHandler(), CONSOLE_HANDLER)

    if logfile and not _has_handler(root, FILE_HANDLER):
        path = Path(logfile).expanduser().resolve()
        _attach(root, logging.FileHandler(path, encoding="utf-8"), FILE_HANDLER)
