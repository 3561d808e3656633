"""Pytest configuration and shared fixtures for MCP Learning tests."""

import os
import random
import tempfile
from datetime import datetime, timedelta, UTC
from pathlib import Path
from typing import Callable, Generator

import pytest

from mcp_learning.config.settings import Settings
from mcp_learning.mcp.prompts import PromptGenerator
from mcp_learning.mcp.resources import ResourceResolver
from mcp_learning.mcp.tools import ToolDispatcher
from mcp_learning.notes.store import NoteStore

from tests.utils import WELCOME_CONTENT


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings that ignore any local .env file."""
    return Settings(
        _env_file=None,
        SERVER_HOST="127.0.0.1",
        SERVER_PORT=8001,  # Different port to avoid conflicts
        DEBUG=True,
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
def store() -> NoteStore:
    """A store seeded with the welcome note."""
    return NoteStore({"welcome": WELCOME_CONTENT})


@pytest.fixture
def empty_store() -> NoteStore:
    """A store with no notes."""
    return NoteStore()


@pytest.fixture
def rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(1234)


class FakeClock:
    """Clock that advances one second every time it is read."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + timedelta(seconds=1)
        return current


@pytest.fixture
def clock() -> FakeClock:
    """A monotonically advancing fake clock."""
    return FakeClock(datetime(2024, 1, 15, 10, 30, tzinfo=UTC))


@pytest.fixture
def dispatcher(store: NoteStore, rng: random.Random, clock: Callable[[], datetime]) -> ToolDispatcher:
    """Tool dispatcher over the seeded store."""
    return ToolDispatcher(store, rng=rng, clock=clock)


@pytest.fixture
def resolver(store: NoteStore) -> ResourceResolver:
    """Resource resolver over the seeded store."""
    return ResourceResolver(store)


@pytest.fixture
def generator(store: NoteStore) -> PromptGenerator:
    """Prompt generator over the seeded store."""
    return PromptGenerator(store)


# Environment cleanup
@pytest.fixture(autouse=True)
def cleanup_env():
    """Clean up environment variables before/after tests."""
    # Store original env vars
    original_env = dict(os.environ)

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)
