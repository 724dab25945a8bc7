"""Annotator and timer endpoints."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from ...core import ValidationError, get_session, utcnow
from ...services.annotators import (
    annotator_to_dict,
    create_annotator,
    delete_annotator,
    list_annotators,
    reset_timer,
    start_timer,
)
from ...services.timer import derive_board

router = APIRouter(prefix="/api", tags=["annotators"])

# SQLite INTEGER is a signed 64-bit value.
_ID_MIN = -(2**63)
_ID_MAX = 2**63 - 1


def _parse_id(raw: Any) -> int:
    if raw is None or isinstance(raw, bool):
        raise ValidationError("Annotator id is required")
    if isinstance(raw, float) and not raw.is_integer():
        raise ValidationError("Annotator id must be an integer")
    try:
        value = int(raw)
    except (TypeError, ValueError) as exc:
        raise ValidationError("Annotator id must be an integer") from exc
    if not _ID_MIN <= value <= _ID_MAX:
        raise ValidationError("Annotator id is out of range")
    return value


@router.get("/annotators")
def get_annotators(session: Session = Depends(get_session)):
    """List all annotators as stored."""

    return [annotator_to_dict(annotator) for annotator in list_annotators(session)]


@router.get("/annotators/timers")
def get_annotator_timers(session: Session = Depends(get_session)):
    """List annotators with status and remaining time derived for right now."""

    return list(derive_board(list_annotators(session), utcnow()))


@router.post("/annotators")
def post_annotator(body: Dict[str, Any], session: Session = Depends(get_session)):
    """Create an annotator from ``{"name": ...}``."""

    annotator = create_annotator(session, body.get("name"))
    return annotator_to_dict(annotator)


@router.delete("/annotators")
def remove_annotator(
    annotator_id: Optional[str] = Query(None, alias="id"),
    session: Session = Depends(get_session),
):
    """Delete the annotator named by the ``id`` query parameter."""

    delete_annotator(session, _parse_id(annotator_id))
    return {"success": True}


@router.post("/annotators/start")
def post_start_timer(body: Dict[str, Any], session: Session = Depends(get_session)):
    annotator = start_timer(session, _parse_id(body.get("id")))
    return annotator_to_dict(annotator)


@router.post("/annotators/reset")
def post_reset_timer(body: Dict[str, Any], session: Session = Depends(get_session)):
    annotator = reset_timer(session, _parse_id(body.get("id")))
    return annotator_to_dict(annotator)


__all__ = ["router"]
