"""
MCP Learning - A learning MCP server demonstrating tools, resources and prompts.

This package provides an MCP (Model Context Protocol) server with:
- Tools for arithmetic, text transformation and note management
- Note resources addressed by note:/// URIs
- Prompt templates that can read the current notes
- stdio and Server-Sent Events (SSE) transports
"""

__version__ = "1.0.0"

from .core.server import LearningServer
from .config.settings import Settings

__all__ = ["LearningServer", "Settings"]
