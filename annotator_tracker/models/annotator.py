"""Database model for annotators."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel


class Annotator(SQLModel, table=True):
    """Named worker whose 24-hour deadline timer is tracked."""

    id: Optional[int] = ORMField(default=None, primary_key=True)
    name: str
    start_time: Optional[datetime] = None


__all__ = ["Annotator"]
