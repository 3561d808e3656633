"""Static registry of the prompts this server exposes."""

from typing import Dict, List

from ..core.exceptions import UnknownCapabilityError
from ..models.prompts import (
    MathTutorArguments,
    NoteAssistantArguments,
    PromptDescriptor,
    SummarizeNotesArguments,
)

SUMMARIZE_NOTES = PromptDescriptor(
    name="summarize_notes",
    description="Creates a summary of all notes in the system",
    arguments_model=SummarizeNotesArguments,
)

MATH_TUTOR = PromptDescriptor(
    name="math_tutor",
    description="Get help solving a math problem using the calculator",
    arguments_model=MathTutorArguments,
)

NOTE_ASSISTANT = PromptDescriptor(
    name="note_assistant",
    description="Get help managing your notes",
    arguments_model=NoteAssistantArguments,
)

PROMPT_REGISTRY: Dict[str, PromptDescriptor] = {
    prompt.name: prompt for prompt in (SUMMARIZE_NOTES, MATH_TUTOR, NOTE_ASSISTANT)
}


def list_prompt_descriptors() -> List[PromptDescriptor]:
    """All prompt descriptors, in declaration order."""
    return list(PROMPT_REGISTRY.values())


def get_prompt_descriptor(name: str) -> PromptDescriptor:
    """Look up a prompt by name."""
    try:
        return PROMPT_REGISTRY[name]
    except KeyError:
        raise UnknownCapabilityError("prompt", name) from None
