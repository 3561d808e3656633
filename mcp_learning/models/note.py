"""Note domain models for MCP Learning."""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field, field_serializer, model_validator

from ..utils.date_utils import to_iso8601, utcnow
from .base import LearningBaseModel, TimestampedModel


class Note(TimestampedModel):
    """A stored note. Its key lives in the store, not on the note."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(description="Text content of the note")

    @model_validator(mode="after")
    def _check_timestamps(self) -> "Note":
        if self.updated_at < self.created_at:
            raise ValueError("updated_at must not precede created_at")
        return self

    @classmethod
    def create(cls, content: str, now: Optional[datetime] = None) -> "Note":
        """Build a fresh note whose timestamps are both ``now``."""
        now = now or utcnow()
        return cls(content=content, created_at=now, updated_at=now)

    def revise(self, content: str, now: Optional[datetime] = None) -> "Note":
        """Return a copy with new content, keeping ``created_at``."""
        now = now or utcnow()
        return Note(
            content=content,
            created_at=self.created_at,
            updated_at=max(now, self.created_at),
        )


class NoteRecord(LearningBaseModel):
    """Serialized view of a note as exposed by the aggregate resource."""

    id: str = Field(description="Note key")
    content: str = Field(description="Note content")
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    @field_serializer("created_at", "updated_at")
    def _serialize_timestamp(self, value: datetime) -> str:
        return to_iso8601(value)

    @classmethod
    def from_note(cls, note_id: str, note: Note) -> "NoteRecord":
        return cls(
            id=note_id,
            content=note.content,
            created_at=note.created_at,
            updated_at=note.updated_at,
        )
