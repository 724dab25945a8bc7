"""Annotator deadline timer service."""

__version__ = "0.1.0"
