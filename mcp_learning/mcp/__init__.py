"""MCP protocol implementation."""

from .protocol import MCPProtocolHandler
from .prompts import PromptGenerator
from .resources import ResourceResolver
from .tools import ToolDispatcher

__all__ = ["MCPProtocolHandler", "PromptGenerator", "ResourceResolver", "ToolDispatcher"]
