"""In-memory note store."""

from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from ..config.logging import LoggerMixin
from ..models.note import Note


class NoteStore(LoggerMixin):
    """Keyed collection of notes, iterated in insertion order.

    The store is deliberately dumb: it enforces no create/update rules.
    Conflict and not-found checks belong to the callers that mutate it.
    Contents live only as long as the process.
    """

    def __init__(self, initial_notes: Optional[Mapping[str, str]] = None) -> None:
        self._notes: Dict[str, Note] = {}
        for key, content in (initial_notes or {}).items():
            self._notes[key] = Note.create(content)

        if self._notes:
            self.logger.info("Note store seeded", keys=list(self._notes))

    def get(self, key: str) -> Optional[Note]:
        """Return the note stored under ``key``, or None."""
        return self._notes.get(key)

    def has(self, key: str) -> bool:
        """Check whether ``key`` is present."""
        return key in self._notes

    def set(self, key: str, note: Note) -> None:
        """Insert or overwrite. Overwriting keeps the original position."""
        self._notes[key] = note

    def delete(self, key: str) -> bool:
        """Delete ``key``. Returns True if it existed."""
        return self._notes.pop(key, None) is not None

    def entries(self) -> List[Tuple[str, Note]]:
        """Snapshot of ``(key, note)`` pairs in insertion order."""
        return list(self._notes.items())

    def keys(self) -> List[str]:
        """Snapshot of keys in insertion order."""
        return list(self._notes)

    def __len__(self) -> int:
        return len(self._notes)

    def __contains__(self, key: object) -> bool:
        return key in self._notes

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"NoteStore(notes={len(self._notes)})"
