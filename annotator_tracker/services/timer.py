"""Deadline timer derivation.

Status and remaining time are never stored. They are recomputed from the
raw ``start_time`` and the current time on every read, so every function
here is pure: the same record and the same ``now`` always give the same
answer.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Dict, Iterable, NamedTuple, Optional, Tuple

from ..core.time import as_utc, utcnow
from .annotators import annotator_to_dict

DEADLINE_WINDOW = timedelta(hours=24)
DEADLINE_WINDOW_MS = DEADLINE_WINDOW // timedelta(milliseconds=1)

_MS_PER_SECOND = 1000
_MS_PER_MINUTE = 60 * _MS_PER_SECOND
_MS_PER_HOUR = 60 * _MS_PER_MINUTE


class TimerStatus(str, Enum):
    AVAILABLE = "available"
    ON_TIME = "on_time"
    LATE = "late"


class TimerState(NamedTuple):
    status: TimerStatus
    remaining_time: str


def format_remaining(remaining_ms: int) -> str:
    """Format non-negative milliseconds as zero-padded ``HH:MM:SS``.

    Partial seconds are truncated, never rounded up.
    """

    remaining_ms = max(remaining_ms, 0)
    hours = remaining_ms // _MS_PER_HOUR
    minutes = (remaining_ms % _MS_PER_HOUR) // _MS_PER_MINUTE
    seconds = (remaining_ms % _MS_PER_MINUTE) // _MS_PER_SECOND
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def _start_time_of(annotator: Any) -> Optional[datetime]:
    if isinstance(annotator, dict):
        raw = annotator.get("start_time")
    else:
        raw = getattr(annotator, "start_time", None)

    if raw is None or raw == "":
        return None
    if isinstance(raw, str):
        raw = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    return as_utc(raw)


def derive(annotator: Any, now: Optional[datetime] = None) -> TimerState:
    """Compute the display status and remaining time for one annotator.

    ``annotator`` may be an ``Annotator`` row or a serialised dict. The
    window boundary itself counts as late.
    """

    start_time = _start_time_of(annotator)
    if start_time is None:
        return TimerState(TimerStatus.AVAILABLE, "")

    now = as_utc(now) if now is not None else utcnow()
    elapsed = max(now - start_time, timedelta(0))
    elapsed_ms = elapsed // timedelta(milliseconds=1)
    remaining_ms = DEADLINE_WINDOW_MS - elapsed_ms

    if remaining_ms <= 0:
        return TimerState(TimerStatus.LATE, "00:00:00")
    return TimerState(TimerStatus.ON_TIME, format_remaining(remaining_ms))


def with_timer(annotator: Any, now: datetime) -> Dict[str, Any]:
    """Serialise a record and attach its derived ``status``/``remainingTime``."""

    record = dict(annotator) if isinstance(annotator, dict) else annotator_to_dict(annotator)
    state = derive(annotator, now)
    record["status"] = state.status.value
    record["remainingTime"] = state.remaining_time
    return record


def derive_board(
    snapshot: Iterable[Any], now: Optional[datetime] = None
) -> Tuple[Dict[str, Any], ...]:
    """Recompute the whole display for one instant.

    A periodic refresh is just this call repeated with an advancing ``now``
    over the same snapshot; the snapshot itself is left untouched.
    """

    now = now if now is not None else utcnow()
    return tuple(with_timer(annotator, now) for annotator in snapshot)


__all__ = [
    "DEADLINE_WINDOW",
    "DEADLINE_WINDOW_MS",
    "TimerState",
    "TimerStatus",
    "derive",
    "derive_board",
    "format_remaining",
    "with_timer",
]
