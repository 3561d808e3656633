"""Resource resolver: lists and reads ``note:///`` resources."""

import json
from typing import List

from ..core.exceptions import LearningError, NotFoundError
from ..models.note import NoteRecord
from ..models.results import (
    APPLICATION_JSON,
    TEXT_PLAIN,
    ResourceContents,
    ResourceDescriptor,
    ResourceTemplateDescriptor,
)
from ..registry.resources import (
    ALL_NOTES_RESOURCE,
    ALL_NOTES_URI,
    NOTE_TEMPLATE,
    note_descriptor,
    parse_note_uri,
)
from .handlers import BaseHandler


class ResourceResolver(BaseHandler):
    """Maps URIs to note content or to the aggregate of all notes."""

    def list_resources(self) -> List[ResourceDescriptor]:
        """One descriptor per stored note, then the aggregate.

        Built from the store on every call; nothing is cached.
        """
        resources = [
            note_descriptor(note_id, note) for note_id, note in self.store.entries()
        ]
        resources.append(ALL_NOTES_RESOURCE)
        return resources

    def list_resource_templates(self) -> List[ResourceTemplateDescriptor]:
        return [NOTE_TEMPLATE]

    def read_resource(self, uri: str) -> ResourceContents:
        """Resolve ``uri`` to its contents.

        Raises:
            UnsupportedSchemeError: If ``uri`` is not a ``note:///`` URI.
            NotFoundError: If no note is stored under the key.
        """
        # Only the literal aggregate URI matches; "note:///%61ll" is a note key.
        if uri == ALL_NOTES_URI:
            self.logger.debug("Resource read", uri=uri)
            return ResourceContents(
                uri=uri,
                mime_type=APPLICATION_JSON,
                text=self._render_all_notes(),
            )

        try:
            key = parse_note_uri(uri)
            note = self.store.get(key)
            if note is None:
                raise NotFoundError(key)

        except LearningError as e:
            self.logger.warning("Resource read failed", uri=uri, error=e.message)
            raise

        self.logger.debug("Resource read", uri=uri)
        return ResourceContents(uri=uri, mime_type=TEXT_PLAIN, text=note.content)

    def _render_all_notes(self) -> str:
        records = [
            NoteRecord.from_note(note_id, note).model_dump(mode="json", by_alias=True)
            for note_id, note in self.store.entries()
        ]
        return json.dumps(records, indent=2, ensure_ascii=False)
