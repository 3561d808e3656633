"""Static registry of the tools this server exposes."""

from typing import Dict, List

from ..core.exceptions import UnknownCapabilityError
from ..models.tools import (
    CalculateArguments,
    CreateNoteArguments,
    DeleteNoteArguments,
    RandomNumberArguments,
    ToolDescriptor,
    TransformTextArguments,
    UpdateNoteArguments,
)

CALCULATE = ToolDescriptor(
    name="calculate",
    description="Performs basic arithmetic operations (add, subtract, multiply, divide)",
    arguments_model=CalculateArguments,
)

CREATE_NOTE = ToolDescriptor(
    name="create_note",
    description="Creates a new note with a given ID and content",
    arguments_model=CreateNoteArguments,
)

UPDATE_NOTE = ToolDescriptor(
    name="update_note",
    description="Updates an existing note's content",
    arguments_model=UpdateNoteArguments,
)

DELETE_NOTE = ToolDescriptor(
    name="delete_note",
    description="Deletes a note by its ID",
    arguments_model=DeleteNoteArguments,
)

RANDOM_NUMBER = ToolDescriptor(
    name="random_number",
    description="Generates a random number between min and max (inclusive)",
    arguments_model=RandomNumberArguments,
)

TRANSFORM_TEXT = ToolDescriptor(
    name="transform_text",
    description=(
        "Transforms text using various operations "
        "(uppercase, lowercase, reverse, word_count)"
    ),
    arguments_model=TransformTextArguments,
)

TOOL_REGISTRY: Dict[str, ToolDescriptor] = {
    tool.name: tool
    for tool in (
        CALCULATE,
        CREATE_NOTE,
        UPDATE_NOTE,
        DELETE_NOTE,
        RANDOM_NUMBER,
        TRANSFORM_TEXT,
    )
}


def list_tool_descriptors() -> List[ToolDescriptor]:
    """All tool descriptors, in declaration order."""
    return list(TOOL_REGISTRY.values())


def get_tool_descriptor(name: str) -> ToolDescriptor:
    """Look up a tool by name."""
    try:
        return TOOL_REGISTRY[name]
    except KeyError:
        raise UnknownCapabilityError("tool", name) from None
