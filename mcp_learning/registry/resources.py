"""Catalog metadata for note resources and the ``note:///`` URI scheme."""

from urllib.parse import quote, unquote

from ..core.exceptions import UnsupportedSchemeError
from ..models.note import Note
from ..models.results import (
    APPLICATION_JSON,
    TEXT_PLAIN,
    ResourceDescriptor,
    ResourceTemplateDescriptor,
)
from ..utils.date_utils import to_iso8601

NOTE_URI_PREFIX = "note:///"
ALL_NOTES_KEY = "all"
ALL_NOTES_URI = f"{NOTE_URI_PREFIX}{ALL_NOTES_KEY}"

ALL_NOTES_RESOURCE = ResourceDescriptor(
    uri=ALL_NOTES_URI,
    name="All Notes",
    description="A JSON list of all available notes with metadata",
    mime_type=APPLICATION_JSON,
)

NOTE_TEMPLATE = ResourceTemplateDescriptor(
    uri_template=f"{NOTE_URI_PREFIX}{{id}}",
    name="Note",
    description="The plain-text content of the note with the given ID",
    mime_type=TEXT_PLAIN,
)


def note_uri(note_id: str) -> str:
    """URI of the resource holding a single note."""
    return f"{NOTE_URI_PREFIX}{quote(note_id, safe='')}"


def parse_note_uri(uri: str) -> str:
    """Return the decoded key part of a ``note:///`` URI."""
    if not uri.startswith(NOTE_URI_PREFIX):
        raise UnsupportedSchemeError(uri)
    return unquote(uri[len(NOTE_URI_PREFIX):])


def note_descriptor(note_id: str, note: Note) -> ResourceDescriptor:
    """Catalog entry for one stored note."""
    return ResourceDescriptor(
        uri=note_uri(note_id),
        name=f"Note: {note_id}",
        description=f'A note with ID "{note_id}" (created: {to_iso8601(note.created_at)})',
        mime_type=TEXT_PLAIN,
    )
