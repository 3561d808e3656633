"""Test utilities and helper functions for MCP Learning tests."""

import json
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional

from mcp.client.session import ClientSession
from mcp.shared.memory import create_connected_server_and_client_session

from mcp_learning.config.settings import Settings
from mcp_learning.core.server import LearningServer
from mcp_learning.mcp.resources import ResourceResolver
from mcp_learning.mcp.tools import ToolDispatcher
from mcp_learning.models.results import ToolResult

WELCOME_CONTENT = "Welcome to the Learning MCP Server! This is an example note."


class NoteTestHelper:
    """Helper class for note-related testing."""

    @staticmethod
    def create_notes(dispatcher: ToolDispatcher, notes: Dict[str, str]) -> List[ToolResult]:
        """Create several notes through the create_note tool."""
        return [
            dispatcher.call_tool("create_note", {"id": note_id, "content": content})
            for note_id, content in notes.items()
        ]

    @staticmethod
    def read_all_notes(resolver: ResourceResolver) -> List[Dict[str, Any]]:
        """Read and decode the aggregate notes resource."""
        return json.loads(resolver.read_resource("note:///all").text)


class AssertionHelpers:
    """Custom assertion helpers for testing."""

    @staticmethod
    def assert_success(result: ToolResult, text: Optional[str] = None) -> None:
        """Assert a tool result is a success, optionally with exact text."""
        assert result.is_error is False, result.text
        assert len(result.content) == 1
        assert result.content[0].type == "text"
        if text is not None:
            assert result.text == text

    @staticmethod
    def assert_failure(result: ToolResult, text: Optional[str] = None) -> None:
        """Assert a tool result is a flagged error, optionally with exact text."""
        assert result.is_error is True
        assert result.text.startswith("Error: ")
        if text is not None:
            assert result.text == text


@asynccontextmanager
async def connected_client(settings: Settings) -> AsyncIterator[ClientSession]:
    """Client session connected in-memory to a fresh server.

    The session's task group must be entered and exited by the same task,
    so open it inside the test body rather than from an async fixture.
    """
    server = LearningServer(settings)
    async with create_connected_server_and_client_session(server.mcp_server) as session:
        yield session
