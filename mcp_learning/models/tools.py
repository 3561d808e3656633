"""Tool argument and descriptor models for MCP Learning."""

import math
from typing import Annotated, Any, Dict, Literal, Type, Union

from pydantic import BaseModel, ConfigDict, Field, WithJsonSchema, model_validator

from .base import LearningBaseModel

# JSON numbers: ints stay ints, so whole-number results print without ".0".
Number = Annotated[Union[int, float], WithJsonSchema({"type": "number"})]

ArithmeticOperation = Literal["add", "subtract", "multiply", "divide"]
TextOperation = Literal["uppercase", "lowercase", "reverse", "word_count"]


class ToolArguments(LearningBaseModel):
    """Base for tool argument models: strict types, no unknown keys."""

    model_config = ConfigDict(strict=True)


class CalculateArguments(ToolArguments):
    """Arguments of the ``calculate`` tool."""

    operation: ArithmeticOperation = Field(
        description="The arithmetic operation to perform"
    )
    a: Number = Field(description="First number")
    b: Number = Field(description="Second number")


class CreateNoteArguments(ToolArguments):
    """Arguments of the ``create_note`` tool."""

    id: str = Field(min_length=1, description="Unique identifier for the note")
    content: str = Field(description="The content of the note")


class UpdateNoteArguments(ToolArguments):
    """Arguments of the ``update_note`` tool."""

    id: str = Field(min_length=1, description="ID of the note to update")
    content: str = Field(description="New content for the note")


class DeleteNoteArguments(ToolArguments):
    """Arguments of the ``delete_note`` tool."""

    id: str = Field(min_length=1, description="ID of the note to delete")


class RandomNumberArguments(ToolArguments):
    """Arguments of the ``random_number`` tool."""

    min: Number = Field(default=0, description="Minimum value (default: 0)")
    max: Number = Field(default=100, description="Maximum value (default: 100)")

    @model_validator(mode="after")
    def _check_range(self) -> "RandomNumberArguments":
        if not all(math.isfinite(bound) for bound in (self.min, self.max)):
            raise ValueError("min and max must be finite numbers")
        if self.low > self.high:
            raise ValueError(
                f"no integer lies between min ({self.min}) and max ({self.max})"
            )
        return self

    @property
    def low(self) -> int:
        """Smallest integer the draw may return."""
        return math.ceil(self.min)

    @property
    def high(self) -> int:
        """Largest integer the draw may return."""
        return math.floor(self.max)


class TransformTextArguments(ToolArguments):
    """Arguments of the ``transform_text`` tool."""

    text: str = Field(description="The text to transform")
    operation: TextOperation = Field(description="The transformation to apply")


class ToolDescriptor(LearningBaseModel):
    """Static description of a tool: name, purpose and argument schema."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Unique tool name")
    description: str = Field(description="Human-readable description")
    arguments_model: Type[BaseModel] = Field(
        description="Model the call arguments are validated against"
    )

    @property
    def input_schema(self) -> Dict[str, Any]:
        """JSON schema of the accepted arguments."""
        schema = self.arguments_model.model_json_schema()
        schema.pop("title", None)
        schema.pop("description", None)
        for prop in schema.get("properties", {}).values():
            prop.pop("title", None)
        schema.setdefault("required", [])
        return schema
