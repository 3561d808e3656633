"""Logging configuration for MCP Learning."""

import logging
from typing import List, Optional

import structlog
from rich.console import Console
from rich.logging import RichHandler

from .settings import Settings


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Set up structured logging with Rich formatting.

    structlog events are handed to the standard library, so every handler
    (the Rich console on stderr and the optional log file) receives them.
    Nothing is written to stdout: with the stdio transport it carries the
    JSON-RPC stream.
    """
    if settings is None:
        settings = Settings()

    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=settings.DEBUG,
        markup=False,
        rich_tracebacks=True,
    )
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.dev.ConsoleRenderer(colors=False)
                if settings.DEBUG
                else structlog.processors.JSONRenderer(),
            ],
        )
    )
    handlers: List[logging.Handler] = [console_handler]

    if settings.LOG_FILE is not None:
        settings.create_directories()
        file_handler = logging.FileHandler(settings.LOG_FILE, encoding="utf-8")
        file_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                foreign_pre_chain=shared_processors,
                processors=[
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    structlog.processors.format_exc_info,
                    structlog.processors.JSONRenderer(),
                ],
            )
        )
        handlers.append(file_handler)

    # Configure standard library logging
    logging.basicConfig(level=level, handlers=handlers, force=True)

    # Configure structlog
    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


def get_module_logger(module_name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger for a specific module."""
    return get_logger(f"mcp_learning.{module_name}")


class LoggerMixin:
    """Mixin class to add logging capabilities to any class."""

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        """Get a logger for this class."""
        return get_logger(f"{self.__class__.__module__}.{self.__class__.__name__}")


server_logger = get_module_logger("server")
