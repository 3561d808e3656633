"""Command-line interface for MCP Learning."""

import asyncio
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .config.settings import Settings
from .core.server import LearningServer
from .registry.prompts import list_prompt_descriptors
from .registry.resources import ALL_NOTES_RESOURCE, NOTE_TEMPLATE
from .registry.tools import list_tool_descriptors

app = typer.Typer(
    name="mcp-learning",
    help="MCP Learning - a learning MCP server with tools, resources and prompts",
    add_completion=False,
)
# stdout belongs to the stdio transport
console = Console(stderr=True)


@app.command("server")
def run_server(
    transport: Optional[str] = typer.Option(
        None, "--transport", "-t", help="Transport to serve on (stdio or sse)"
    ),
    host: Optional[str] = typer.Option(None, "--host", "-h", help="Host to bind to (sse)"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port to bind to (sse)"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
    no_seed: bool = typer.Option(False, "--no-seed", help="Start with an empty note store"),
) -> None:
    """Start the MCP Learning server."""
    try:
        settings = Settings()

        if transport is not None:
            if transport not in ("stdio", "sse"):
                console.print(f"[red]Unknown transport: {transport}[/red]")
                raise typer.Exit(code=2)
            settings.TRANSPORT = transport
        if host is not None:
            settings.SERVER_HOST = host
        if port is not None:
            settings.SERVER_PORT = port
        if debug:
            settings.DEBUG = True
            settings.LOG_LEVEL = "DEBUG"
        if no_seed:
            settings.SEED_WELCOME_NOTE = False

        if settings.TRANSPORT == "sse":
            console.print(
                f"[green]Starting MCP Learning server on "
                f"{settings.SERVER_HOST}:{settings.SERVER_PORT}[/green]"
            )
        else:
            console.print("[green]Starting MCP Learning server on stdio[/green]")

        server = LearningServer(settings)
        asyncio.run(server.run())

    except KeyboardInterrupt:
        console.print("\n[yellow]Server stopped by user[/yellow]")
    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"[red]Error starting server: {e}[/red]")
        sys.exit(1)


@app.command("capabilities")
def show_capabilities() -> None:
    """List the tools, resources and prompts the server offers."""
    out = Console()

    tools = Table(title="Tools")
    tools.add_column("Name", style="cyan")
    tools.add_column("Description")
    tools.add_column("Required")
    for tool in list_tool_descriptors():
        required = ", ".join(tool.input_schema["required"]) or "-"
        tools.add_row(tool.name, tool.description, required)
    out.print(tools)

    resources = Table(title="Resources")
    resources.add_column("URI", style="cyan")
    resources.add_column("Name")
    resources.add_column("MIME type")
    resources.add_row(NOTE_TEMPLATE.uri_template, NOTE_TEMPLATE.name, NOTE_TEMPLATE.mime_type)
    resources.add_row(
        ALL_NOTES_RESOURCE.uri, ALL_NOTES_RESOURCE.name, ALL_NOTES_RESOURCE.mime_type
    )
    out.print(resources)

    prompts = Table(title="Prompts")
    prompts.add_column("Name", style="cyan")
    prompts.add_column("Description")
    prompts.add_column("Arguments")
    for prompt in list_prompt_descriptors():
        arguments = ", ".join(
            f"{arg.name}{'' if arg.required else '?'}" for arg in prompt.arguments
        )
        prompts.add_row(prompt.name, prompt.description, arguments or "-")
    out.print(prompts)


@app.command("init")
def init_project(
    directory: Path = typer.Argument(Path("."), help="Directory to initialize"),
    force: bool = typer.Option(False, "--force", help="Overwrite existing files"),
) -> None:
    """Write a starter .env configuration file."""
    directory = directory.resolve()

    if not directory.exists():
        directory.mkdir(parents=True)

    config_file = directory / ".env"

    if config_file.exists() and not force:
        console.print(f"[yellow]Configuration file already exists: {config_file}[/yellow]")
        console.print("Use --force to overwrite")
        return

    config_content = """# MCP Learning Configuration
TRANSPORT=stdio
SERVER_HOST=localhost
SERVER_PORT=8000
DEBUG=false
LOG_LEVEL=INFO
# LOG_FILE=./logs/mcp-learning.log

# MCP server identity
MCP_SERVER_NAME=learning-mcp-server
MCP_SERVER_VERSION=1.0.0

# Note store seeding
SEED_WELCOME_NOTE=true
WELCOME_NOTE_ID=welcome
"""

    config_file.write_text(config_content)
    console.print(f"[green]Initialized MCP Learning project in {directory}[/green]")
    console.print(f"Configuration file: {config_file}")


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from . import __version__
    Console().print(f"MCP Learning version {__version__}")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
