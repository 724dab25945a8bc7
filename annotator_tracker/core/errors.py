"""Domain exceptions raised by the annotator services."""

from __future__ import annotations


class AnnotatorTrackerError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AnnotatorTrackerError):
    """Bad input such as an empty name or a non-integer id."""

    status_code = 400


class NotFoundError(AnnotatorTrackerError):
    """No annotator exists with the requested id."""

    status_code = 404


class StorageError(AnnotatorTrackerError):
    """The database was unavailable or a query failed."""

    status_code = 500


__all__ = [
    "AnnotatorTrackerError",
    "NotFoundError",
    "StorageError",
    "ValidationError",
]
