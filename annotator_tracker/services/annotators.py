"""Annotator persistence operations."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ..core.errors import NotFoundError, StorageError, ValidationError
from ..core.time import as_utc, utcnow
from ..models import Annotator

logger = logging.getLogger(__name__)


@contextmanager
def _storage_errors(session: Session, message: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("Database error: %s", message)
        session.rollback()
        raise StorageError(message) from exc


def annotator_to_dict(annotator: Annotator) -> Dict[str, Any]:
    """Serialise an annotator model to API-friendly dict."""

    return {
        "id": annotator.id,
        "name": annotator.name,
        "start_time": (
            as_utc(annotator.start_time).isoformat() if annotator.start_time else None
        ),
    }


def _normalize_name(name: Any) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Annotator name is required")
    return name.strip()


def _get_or_404(session: Session, annotator_id: int) -> Annotator:
    try:
        annotator = session.get(Annotator, annotator_id)
    except OverflowError:
        annotator = None
    if annotator is None:
        raise NotFoundError(f"Annotator {annotator_id} not found")
    return annotator


def list_annotators(session: Session) -> List[Annotator]:
    """Return every annotator, oldest first."""

    with _storage_errors(session, "Failed to fetch annotators"):
        return list(session.exec(select(Annotator).order_by(Annotator.id)).all())


def create_annotator(session: Session, name: Any) -> Annotator:
    """Insert a new annotator with no running timer."""

    name = _normalize_name(name)
    annotator = Annotator(name=name)
    with _storage_errors(session, "Failed to create annotator"):
        session.add(annotator)
        session.commit()
        session.refresh(annotator)
    logger.info("Created annotator %s (%s)", annotator.id, annotator.name)
    return annotator


def delete_annotator(session: Session, annotator_id: int) -> None:
    """Remove an annotator; a missing id raises ``NotFoundError``."""

    with _storage_errors(session, "Failed to delete annotator"):
        annotator = _get_or_404(session, annotator_id)
        session.delete(annotator)
        session.commit()
    logger.info("Deleted annotator %s", annotator_id)


def set_start_time(
    session: Session,
    annotator_id: int,
    value: Optional[datetime],
    *,
    failure_message: str = "Failed to update annotator",
) -> Annotator:
    """Overwrite ``start_time`` only. Concurrent writers: last one wins."""

    with _storage_errors(session, failure_message):
        annotator = _get_or_404(session, annotator_id)
        annotator.start_time = value
        session.add(annotator)
        session.commit()
        session.refresh(annotator)
    return annotator


def start_timer(
    session: Session, annotator_id: int, now: Optional[datetime] = None
) -> Annotator:
    """Begin the 24-hour window for an annotator at ``now``."""

    annotator = set_start_time(
        session,
        annotator_id,
        now if now is not None else utcnow(),
        failure_message="Failed to start timer",
    )
    logger.info("Started timer for annotator %s", annotator_id)
    return annotator


def reset_timer(session: Session, annotator_id: int) -> Annotator:
    """Clear an annotator's timer so it shows as available again."""

    annotator = set_start_time(
        session, annotator_id, None, failure_message="Failed to reset timer"
    )
    logger.info("Reset timer for annotator %s", annotator_id)
    return annotator


__all__ = [
    "annotator_to_dict",
    "create_annotator",
    "delete_annotator",
    "list_annotators",
    "reset_timer",
    "set_start_time",
    "start_timer",
]
