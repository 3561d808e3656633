"""Result and resource models returned by the capability handlers."""

from typing import List, Literal

from pydantic import Field

from .base import LearningBaseModel

TEXT_PLAIN = "text/plain"
APPLICATION_JSON = "application/json"


class TextContent(LearningBaseModel):
    """A text content item."""

    type: Literal["text"] = "text"
    text: str


class ToolResult(LearningBaseModel):
    """Uniform envelope for tool calls, successful or not."""

    content: List[TextContent] = Field(description="Text payload of the call")
    is_error: bool = Field(default=False, description="Whether the call failed")

    @classmethod
    def success(cls, text: str) -> "ToolResult":
        return cls(content=[TextContent(text=text)])

    @classmethod
    def failure(cls, message: str) -> "ToolResult":
        return cls(content=[TextContent(text=f"Error: {message}")], is_error=True)

    @property
    def text(self) -> str:
        """The concatenated text of all content items."""
        return "\n".join(item.text for item in self.content)


class ResourceDescriptor(LearningBaseModel):
    """Catalog entry for a readable resource."""

    uri: str
    name: str
    description: str
    mime_type: str = TEXT_PLAIN


class ResourceTemplateDescriptor(LearningBaseModel):
    """Catalog entry for a parameterized family of resources."""

    uri_template: str
    name: str
    description: str
    mime_type: str = TEXT_PLAIN


class ResourceContents(LearningBaseModel):
    """Contents of one resource read."""

    uri: str
    mime_type: str
    text: str
