"""MCP Learning domain models."""

from .base import LearningBaseModel, TimestampedModel
from .note import Note, NoteRecord
from .results import (
    APPLICATION_JSON,
    TEXT_PLAIN,
    ResourceContents,
    ResourceDescriptor,
    ResourceTemplateDescriptor,
    TextContent,
    ToolResult,
)
from .prompts import (
    MathTutorArguments,
    NoteAssistantArguments,
    PromptArgument,
    PromptArguments,
    PromptDescriptor,
    PromptMessage,
    PromptResult,
    SummarizeNotesArguments,
)
from .tools import (
    CalculateArguments,
    CreateNoteArguments,
    DeleteNoteArguments,
    RandomNumberArguments,
    ToolArguments,
    ToolDescriptor,
    TransformTextArguments,
    UpdateNoteArguments,
)

__all__ = [
    # Base models
    "LearningBaseModel",
    "TimestampedModel",

    # Note models
    "Note",
    "NoteRecord",

    # Results
    "TEXT_PLAIN",
    "APPLICATION_JSON",
    "TextContent",
    "ToolResult",
    "ResourceDescriptor",
    "ResourceTemplateDescriptor",
    "ResourceContents",

    # Prompt models
    "PromptArguments",
    "SummarizeNotesArguments",
    "MathTutorArguments",
    "NoteAssistantArguments",
    "PromptArgument",
    "PromptDescriptor",
    "PromptMessage",
    "PromptResult",

    # Tool models
    "ToolArguments",
    "CalculateArguments",
    "CreateNoteArguments",
    "UpdateNoteArguments",
    "DeleteNoteArguments",
    "RandomNumberArguments",
    "TransformTextArguments",
    "ToolDescriptor",
]
