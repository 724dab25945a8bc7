"""Database model exports."""

from .annotator import Annotator

__all__ = ["Annotator"]
