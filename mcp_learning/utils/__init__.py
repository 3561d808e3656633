"""Utility functions and helpers."""

from .date_utils import to_iso8601, utcnow
from .validation import validate_arguments, validate_note_id

__all__ = [
    "to_iso8601",
    "utcnow",
    "validate_arguments",
    "validate_note_id",
]
