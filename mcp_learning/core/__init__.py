"""Core server functionality for MCP Learning."""

from .exceptions import (
    ConflictError,
    DomainError,
    LearningError,
    NotFoundError,
    UnknownCapabilityError,
    UnknownOperationError,
    UnsupportedSchemeError,
    ValidationError,
)

__all__ = [
    "LearningError",
    "ValidationError",
    "ConflictError",
    "NotFoundError",
    "DomainError",
    "UnknownOperationError",
    "UnknownCapabilityError",
    "UnsupportedSchemeError",
]
