"""MCP protocol handler implementation."""

from typing import Any, Dict, Iterable, List, Optional

from mcp import types
from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.shared.exceptions import McpError
from pydantic import AnyUrl

from ..config.logging import LoggerMixin
from ..config.settings import Settings
from ..core.exceptions import LearningError
from ..models.prompts import PromptDescriptor, PromptResult
from ..models.results import (
    ResourceContents,
    ResourceDescriptor,
    ResourceTemplateDescriptor,
    ToolResult,
)
from ..models.tools import ToolDescriptor
from .prompts import PromptGenerator
from .resources import ResourceResolver
from .tools import ToolDispatcher

INSTRUCTIONS = (
    "A learning server demonstrating the three MCP capabilities. "
    "TOOLS: calculate, create_note, update_note, delete_note, random_number, "
    "transform_text. RESOURCES: note:/// URIs for reading stored notes. "
    "PROMPTS: summarize_notes, math_tutor, note_assistant."
)


def to_mcp_error(error: LearningError) -> McpError:
    """Convert a domain error into a JSON-RPC error for the transport."""
    return McpError(
        types.ErrorData(code=error.rpc_code, message=error.message, data=error.to_dict())
    )


def tool_to_mcp(descriptor: ToolDescriptor) -> types.Tool:
    return types.Tool(
        name=descriptor.name,
        description=descriptor.description,
        inputSchema=descriptor.input_schema,
    )


def tool_result_to_mcp(result: ToolResult) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=item.text) for item in result.content],
        isError=result.is_error,
    )


def resource_to_mcp(descriptor: ResourceDescriptor) -> types.Resource:
    return types.Resource(
        uri=AnyUrl(descriptor.uri),
        name=descriptor.name,
        description=descriptor.description,
        mimeType=descriptor.mime_type,
    )


def resource_template_to_mcp(descriptor: ResourceTemplateDescriptor) -> types.ResourceTemplate:
    return types.ResourceTemplate(
        uriTemplate=descriptor.uri_template,
        name=descriptor.name,
        description=descriptor.description,
        mimeType=descriptor.mime_type,
    )


def resource_contents_to_mcp(contents: ResourceContents) -> List[ReadResourceContents]:
    return [ReadResourceContents(content=contents.text, mime_type=contents.mime_type)]


def prompt_to_mcp(descriptor: PromptDescriptor) -> types.Prompt:
    return types.Prompt(
        name=descriptor.name,
        description=descriptor.description,
        arguments=[
            types.PromptArgument(
                name=argument.name,
                description=argument.description,
                required=argument.required,
            )
            for argument in descriptor.arguments
        ],
    )


def prompt_result_to_mcp(result: PromptResult) -> types.GetPromptResult:
    return types.GetPromptResult(
        description=result.description,
        messages=[
            types.PromptMessage(
                role=message.role,
                content=types.TextContent(type="text", text=message.content.text),
            )
            for message in result.messages
        ],
    )


class MCPProtocolHandler(LoggerMixin):
    """Routes MCP requests to the capability handlers.

    The handlers are synchronous and the async wrappers below never await
    between reading and mutating the store, so every request runs to
    completion before another one can observe the store.
    """

    def __init__(
        self,
        settings: Settings,
        tool_dispatcher: ToolDispatcher,
        resource_resolver: ResourceResolver,
        prompt_generator: PromptGenerator,
    ):
        self.settings = settings
        self.tool_dispatcher = tool_dispatcher
        self.resource_resolver = resource_resolver
        self.prompt_generator = prompt_generator
        self.server: Optional[Server] = None
        self._initialized = False

    def initialize(self) -> Server:
        """Create the MCP server and register the request handlers."""
        if self.server is not None:
            return self.server

        self.server = Server(
            self.settings.MCP_SERVER_NAME,
            version=self.settings.MCP_SERVER_VERSION,
            instructions=INSTRUCTIONS,
        )
        self._register_handlers(self.server)
        self._initialized = True

        self.logger.info(
            "MCP protocol handler initialized",
            server_name=self.settings.MCP_SERVER_NAME,
            version=self.settings.MCP_SERVER_VERSION,
        )
        return self.server

    def _register_handlers(self, server: Server) -> None:
        """Register MCP method handlers."""

        @server.list_tools()
        async def handle_list_tools() -> List[types.Tool]:
            """List available tools."""
            return [tool_to_mcp(tool) for tool in self.tool_dispatcher.list_tools()]

        # Arguments are validated by the dispatcher against the same models
        # the advertised schemas come from.
        @server.call_tool(validate_input=False)
        async def handle_call_tool(
            name: str, arguments: Optional[Dict[str, Any]]
        ) -> types.CallToolResult:
            """Handle tool calls."""
            result = self.tool_dispatcher.call_tool(name, arguments)
            return tool_result_to_mcp(result)

        @server.list_resources()
        async def handle_list_resources() -> List[types.Resource]:
            """List available resources."""
            return [
                resource_to_mcp(resource)
                for resource in self.resource_resolver.list_resources()
            ]

        @server.list_resource_templates()
        async def handle_list_resource_templates() -> List[types.ResourceTemplate]:
            """List resource templates."""
            return [
                resource_template_to_mcp(template)
                for template in self.resource_resolver.list_resource_templates()
            ]

        @server.read_resource()
        async def handle_read_resource(uri: AnyUrl) -> Iterable[ReadResourceContents]:
            """Read a resource by URI."""
            try:
                contents = self.resource_resolver.read_resource(str(uri))
            except LearningError as e:
                raise to_mcp_error(e) from e
            return resource_contents_to_mcp(contents)

        @server.list_prompts()
        async def handle_list_prompts() -> List[types.Prompt]:
            """List available prompts."""
            return [prompt_to_mcp(prompt) for prompt in self.prompt_generator.list_prompts()]

        @server.get_prompt()
        async def handle_get_prompt(
            name: str, arguments: Optional[Dict[str, str]]
        ) -> types.GetPromptResult:
            """Render a prompt."""
            try:
                result = self.prompt_generator.get_prompt(name, arguments)
            except LearningError as e:
                raise to_mcp_error(e) from e
            return prompt_result_to_mcp(result)

    def create_initialization_options(self):
        """Initialization options advertising the registered capabilities."""
        return self.initialize().create_initialization_options()

    def close(self) -> None:
        """Close the MCP protocol handler."""
        self._initialized = False
        self.logger.info("MCP protocol handler closed")

    @property
    def is_initialized(self) -> bool:
        """Check if the handler is initialized."""
        return self._initialized
