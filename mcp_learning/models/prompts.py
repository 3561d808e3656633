"""Prompt argument, descriptor and message models for MCP Learning."""

from typing import List, Literal, Optional, Type

from pydantic import BaseModel, ConfigDict, Field

from .base import LearningBaseModel
from .results import TextContent


class PromptArguments(LearningBaseModel):
    """Base for prompt argument models."""


class SummarizeNotesArguments(PromptArguments):
    """``summarize_notes`` takes no arguments."""


class MathTutorArguments(PromptArguments):
    problem: str = Field(min_length=1, description="The math problem to solve")


class NoteAssistantArguments(PromptArguments):
    task: str = Field(
        min_length=1,
        description=(
            "What you want to do with notes "
            "(e.g., 'create a todo list', 'organize ideas')"
        ),
    )


class PromptArgument(LearningBaseModel):
    """One named argument a prompt accepts."""

    name: str
    description: Optional[str] = None
    required: bool = False


class PromptDescriptor(LearningBaseModel):
    """Static description of a prompt template."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Unique prompt name")
    description: str = Field(description="Human-readable description")
    arguments_model: Type[BaseModel] = Field(
        description="Model the prompt arguments are validated against"
    )

    @property
    def arguments(self) -> List[PromptArgument]:
        """Declared arguments, in field declaration order."""
        return [
            PromptArgument(
                name=name,
                description=field.description,
                required=field.is_required(),
            )
            for name, field in self.arguments_model.model_fields.items()
        ]


class PromptMessage(LearningBaseModel):
    """A single rendered prompt message."""

    role: Literal["user", "assistant"] = "user"
    content: TextContent


class PromptResult(LearningBaseModel):
    """The rendered message sequence of a prompt."""

    description: Optional[str] = None
    messages: List[PromptMessage] = Field(default_factory=list)

    @classmethod
    def single(cls, text: str, description: Optional[str] = None) -> "PromptResult":
        """Build a result holding one user message."""
        return cls(
            description=description,
            messages=[PromptMessage(role="user", content=TextContent(text=text))],
        )
