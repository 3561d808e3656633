"""Main MCP Learning server implementation."""

import random
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request, Response
from mcp.server import Server
from mcp.server.sse import SseServerTransport
from mcp.server.stdio import stdio_server

from ..config.logging import LoggerMixin, setup_logging
from ..config.settings import Settings
from ..mcp.prompts import PromptGenerator
from ..mcp.protocol import MCPProtocolHandler
from ..mcp.resources import ResourceResolver
from ..mcp.tools import ToolDispatcher
from ..notes.store import NoteStore


class LearningServer(LoggerMixin):
    """Owns the note store and the capability handlers for one process."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Initialize the server with configuration."""
        self.settings = settings or Settings()

        # Set up logging
        setup_logging(self.settings)
        self.logger.info(
            "Initializing MCP Learning server",
            version=self.settings.MCP_SERVER_VERSION,
        )

        # Initialize components; the store is the only shared state
        self.store = NoteStore(self.settings.initial_notes)
        self.tool_dispatcher = ToolDispatcher(self.store, rng=rng)
        self.resource_resolver = ResourceResolver(self.store)
        self.prompt_generator = PromptGenerator(self.store)
        self.mcp_handler = MCPProtocolHandler(
            self.settings,
            self.tool_dispatcher,
            self.resource_resolver,
            self.prompt_generator,
        )
        self.mcp_handler.initialize()

        # FastAPI app is only created for the SSE transport
        self.app: Optional[FastAPI] = None
        self._running = False

    @property
    def mcp_server(self) -> Server:
        """The underlying MCP SDK server."""
        return self.mcp_handler.initialize()

    async def run(self) -> None:
        """Serve requests on the configured transport."""
        if self.settings.TRANSPORT == "sse":
            await self.run_sse()
        else:
            await self.run_stdio()

    async def run_stdio(self) -> None:
        """Serve MCP over stdin/stdout until the client disconnects."""
        self.logger.info(
            "Learning MCP Server running on stdio",
            tools=[tool.name for tool in self.tool_dispatcher.list_tools()],
            prompts=[prompt.name for prompt in self.prompt_generator.list_prompts()],
        )
        self._running = True
        try:
            async with stdio_server() as (read_stream, write_stream):
                await self.mcp_server.run(
                    read_stream,
                    write_stream,
                    self.mcp_handler.create_initialization_options(),
                )
        finally:
            self._shutdown()

    @asynccontextmanager
    async def lifespan(self, app: FastAPI) -> AsyncGenerator[None, None]:
        """FastAPI lifespan context manager."""
        self._running = True
        self.logger.info(
            "Learning MCP Server running on SSE",
            host=self.settings.SERVER_HOST,
            port=self.settings.SERVER_PORT,
        )
        try:
            yield
        finally:
            self._shutdown()

    def create_app(self) -> FastAPI:
        """Create the FastAPI application serving MCP over SSE."""
        app = FastAPI(
            title="MCP Learning",
            description="Learning MCP server with tools, resources and prompts",
            version=self.settings.MCP_SERVER_VERSION,
            lifespan=self.lifespan,
        )
        sse = SseServerTransport("/messages/")

        async def handle_sse(request: Request) -> Response:
            async with sse.connect_sse(
                request.scope, request.receive, request._send
            ) as (read_stream, write_stream):
                await self.mcp_server.run(
                    read_stream,
                    write_stream,
                    self.mcp_handler.create_initialization_options(),
                )
            return Response()

        @app.get("/health")
        async def health_check():
            """Health check endpoint."""
            return {
                "status": "healthy",
                "server": self.settings.MCP_SERVER_NAME,
                "version": self.settings.MCP_SERVER_VERSION,
                "notes": len(self.store),
                "mcp": self.mcp_handler.is_initialized,
            }

        app.add_route("/sse", handle_sse, methods=["GET"])
        app.mount("/messages/", app=sse.handle_post_message)

        self.app = app
        return app

    async def run_sse(self) -> None:
        """Serve MCP over SSE using uvicorn."""
        app = self.create_app()

        config = uvicorn.Config(
            app,
            host=self.settings.SERVER_HOST,
            port=self.settings.SERVER_PORT,
            log_level=self.settings.LOG_LEVEL.lower(),
            access_log=self.settings.DEBUG,
        )

        server = uvicorn.Server(config)
        await server.serve()

    def _shutdown(self) -> None:
        self._running = False
        self.mcp_handler.close()
        self.logger.info("Server shutdown complete", notes_discarded=len(self.store))

    @property
    def is_running(self) -> bool:
        """Check if the server is running."""
        return self._running
