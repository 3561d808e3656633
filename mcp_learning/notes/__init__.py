"""Ephemeral note storage."""

from .store import NoteStore
from ..models.note import Note

__all__ = ["NoteStore", "Note"]
