"""Shared base for the capability handlers."""

from ..config.logging import LoggerMixin
from ..notes.store import NoteStore


class BaseHandler(LoggerMixin):
    """Base class for MCP capability handlers.

    Handlers hold a reference to the store, never to individual notes:
    every operation re-fetches what it needs by key.
    """

    def __init__(self, store: NoteStore) -> None:
        self.store = store
