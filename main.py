"""Main entry point for the MCP Learning server."""

import asyncio
import sys

from mcp_learning import LearningServer, Settings
from mcp_learning.config.logging import server_logger


async def main() -> None:
    """Main entry point."""
    try:
        settings = Settings()
        server = LearningServer(settings)
        await server.run()

    except KeyboardInterrupt:
        server_logger.info("Server stopped by user")
    except Exception as e:
        server_logger.error("Fatal error running server", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
