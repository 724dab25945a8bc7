"""Aggregate API routers."""

from fastapi import APIRouter

from .annotators import router as annotators_router
from .system import router as system_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    annotators_router,
)

__all__ = ["ALL_ROUTERS"]
