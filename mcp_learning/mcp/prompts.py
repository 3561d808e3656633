"""Prompt generator: renders prompt templates, some of them store-aware."""

from typing import Any, Callable, Dict, List, Mapping, Optional

from ..core.exceptions import LearningError
from ..models.prompts import (
    MathTutorArguments,
    NoteAssistantArguments,
    PromptDescriptor,
    PromptResult,
    SummarizeNotesArguments,
)
from ..notes.store import NoteStore
from ..registry.prompts import get_prompt_descriptor, list_prompt_descriptors
from ..utils.validation import validate_arguments
from .handlers import BaseHandler


class PromptGenerator(BaseHandler):
    """Renders a prompt name plus arguments into a message sequence."""

    def __init__(self, store: NoteStore) -> None:
        super().__init__(store)
        self._renderers: Dict[str, Callable[[Any], str]] = {
            "summarize_notes": self._summarize_notes,
            "math_tutor": self._math_tutor,
            "note_assistant": self._note_assistant,
        }

    def list_prompts(self) -> List[PromptDescriptor]:
        """Return every registered prompt."""
        return list_prompt_descriptors()

    def get_prompt(
        self,
        name: str,
        arguments: Optional[Mapping[str, Any]] = None,
    ) -> PromptResult:
        """Render prompt ``name``.

        Raises:
            UnknownCapabilityError: If no prompt is registered as ``name``.
            ValidationError: If a required argument is missing or malformed.
        """
        try:
            descriptor = get_prompt_descriptor(name)
            args = validate_arguments(descriptor.arguments_model, arguments)
        except LearningError as e:
            self.logger.warning("Prompt rendering failed", prompt=name, error=e.message)
            raise

        text = self._renderers[descriptor.name](args)
        self.logger.debug("Prompt rendered", prompt=name)
        return PromptResult.single(text, description=descriptor.description)

    def _summarize_notes(self, args: SummarizeNotesArguments) -> str:
        lines = [f"- {note_id}: {note.content}" for note_id, note in self.store.entries()]
        listing = "\n".join(lines) or "- (none)"
        return (
            f"Please summarize these notes:\n\n{listing}\n\n"
            "Provide a concise overview of the main topics and ideas."
        )

    def _math_tutor(self, args: MathTutorArguments) -> str:
        return (
            f"I need help solving this math problem: {args.problem}\n\n"
            "Please break down the solution step by step. "
            'You can use the "calculate" tool to perform arithmetic operations.'
        )

    def _note_assistant(self, args: NoteAssistantArguments) -> str:
        notes_list = ", ".join(self.store.keys()) or "none"
        return (
            f"I need help with my notes. Current notes: {notes_list}\n\n"
            f"Task: {args.task}\n\n"
            "You can use create_note, update_note, and delete_note tools "
            "to help me manage my notes."
        )
