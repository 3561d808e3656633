"""Configuration settings for MCP Learning."""

from pathlib import Path
from typing import Dict, Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..utils.validation import RESERVED_NOTE_IDS


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server Configuration
    SERVER_HOST: str = Field(default="localhost", description="Host for the SSE transport")
    SERVER_PORT: int = Field(default=8000, description="Port for the SSE transport")
    TRANSPORT: Literal["stdio", "sse"] = Field(
        default="stdio", description="Transport used to serve MCP requests"
    )
    DEBUG: bool = Field(default=False, description="Debug mode")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FILE: Optional[Path] = Field(
        default=None, description="Optional file that receives a copy of the logs"
    )

    # MCP Protocol Configuration
    MCP_SERVER_NAME: str = Field(
        default="learning-mcp-server", description="MCP server name"
    )
    MCP_SERVER_VERSION: str = Field(
        default="1.0.0", description="MCP server version"
    )

    # Note store seeding
    SEED_WELCOME_NOTE: bool = Field(
        default=True, description="Seed the note store with a welcome note on startup"
    )
    WELCOME_NOTE_ID: str = Field(
        default="welcome", min_length=1, description="Key of the seeded welcome note"
    )
    WELCOME_NOTE_CONTENT: str = Field(
        default="Welcome to the Learning MCP Server! This is an example note.",
        description="Content of the seeded welcome note",
    )

    @field_validator("WELCOME_NOTE_ID")
    @classmethod
    def _check_welcome_note_id(cls, value: str) -> str:
        if value in RESERVED_NOTE_IDS:
            raise ValueError(f'"{value}" is a reserved note ID')
        return value

    def create_directories(self) -> None:
        """Create necessary directories."""
        if self.LOG_FILE is not None:
            self.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)

    @property
    def initial_notes(self) -> Dict[str, str]:
        """Notes the store is seeded with at construction."""
        if not self.SEED_WELCOME_NOTE:
            return {}
        return {self.WELCOME_NOTE_ID: self.WELCOME_NOTE_CONTENT}

    def __repr__(self) -> str:
        """String representation of settings."""
        return (
            f"Settings(name={self.MCP_SERVER_NAME}, transport={self.TRANSPORT}, "
            f"debug={self.DEBUG})"
        )
