"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    DATABASE_URL,
    DB_RESET,
    LOG_LEVEL,
    REFRESH_INTERVAL_SECONDS,
)
from .database import engine, get_session
from .errors import AnnotatorTrackerError, NotFoundError, StorageError, ValidationError
from .logs import configure_logging
from .time import as_utc, utcnow

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "DATABASE_URL",
    "DB_RESET",
    "LOG_LEVEL",
    "REFRESH_INTERVAL_SECONDS",
    "AnnotatorTrackerError",
    "NotFoundError",
    "StorageError",
    "ValidationError",
    "configure_logging",
    "engine",
    "get_session",
    "as_utc",
    "utcnow",
]
