# twml/utils/logger.py

import logging
import sys
from typing import Optional

ROOT_LOGGER = "twml"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"

_configured = False


def _ensure_root(level: Optional[str] = None) -> logging.Logger:
    global _configured
    root = logging.getLogger(ROOT_LOGGER)
    if not _configured:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.INFO)
        _configured = True
    if level:
        root.setLevel(level)
    return root


def set_level(level: str) -> None:
    """Apply a logging level name to the whole twml namespace."""
    _ensure_root(level.upper())


def get_logger(name: str) -> logging.Logger:
    """Return a logger living under the twml namespace."""
    _ensure_root()
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
