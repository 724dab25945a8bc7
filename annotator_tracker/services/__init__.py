"""Service layer helpers."""

from .annotators import (
    annotator_to_dict,
    create_annotator,
    delete_annotator,
    list_annotators,
    reset_timer,
    set_start_time,
    start_timer,
)
from .timer import TimerState, TimerStatus, derive, derive_board, format_remaining

__all__ = [
    "annotator_to_dict",
    "create_annotator",
    "delete_annotator",
    "list_annotators",
    "reset_timer",
    "set_start_time",
    "start_timer",
    "TimerState",
    "TimerStatus",
    "derive",
    "derive_board",
    "format_remaining",
]
