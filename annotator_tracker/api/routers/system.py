"""System-level API endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from ...core import REFRESH_INTERVAL_SECONDS
from ...services.timer import DEADLINE_WINDOW

router = APIRouter(tags=["system"])


@router.get("/health")
def health() -> Dict[str, bool]:
    """Simple readiness probe."""

    return {"ok": True}


@router.get("/config")
def get_config() -> Dict[str, Any]:
    """Expose frontend configuration values."""

    return {
        "deadline_hours": int(DEADLINE_WINDOW.total_seconds() // 3600),
        "refresh_interval_seconds": REFRESH_INTERVAL_SECONDS,
    }


__all__ = ["router"]
