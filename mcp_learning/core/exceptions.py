"""Custom exceptions for MCP Learning."""

from typing import Any, Dict, Optional

# JSON-RPC error codes used when an error crosses the protocol boundary.
INVALID_PARAMS = -32602
RESOURCE_NOT_FOUND = -32002


class LearningError(Exception):
    """Base exception for all MCP Learning errors."""

    rpc_code: int = INVALID_PARAMS

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [self.message]
        if self.error_code:
            parts.append(f"(code: {self.error_code})")
        return " ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "error": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }


class ValidationError(LearningError):
    """Raised when arguments are missing or malformed."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ConflictError(LearningError):
    """Raised when creating a note whose key is already taken."""

    def __init__(self, note_id: str) -> None:
        super().__init__(
            f'Note with ID "{note_id}" already exists',
            "NOTE_CONFLICT",
            {"note_id": note_id},
        )


class NotFoundError(LearningError):
    """Raised when a requested note does not exist."""

    rpc_code = RESOURCE_NOT_FOUND

    def __init__(self, note_id: str) -> None:
        super().__init__(
            f'Note with ID "{note_id}" not found',
            "NOTE_NOT_FOUND",
            {"note_id": note_id},
        )


class DomainError(LearningError):
    """Raised when an operation has no meaningful result for its inputs."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "DOMAIN_ERROR")


class UnknownOperationError(LearningError):
    """Raised for an unrecognized value of a tool's ``operation`` argument."""

    def __init__(self, operation: Any) -> None:
        super().__init__(
            f"Unknown operation: {operation}",
            "UNKNOWN_OPERATION",
            {"operation": operation},
        )


class UnknownCapabilityError(LearningError):
    """Raised for an unrecognized tool, prompt or resource."""

    def __init__(self, kind: str, name: str, message: Optional[str] = None) -> None:
        super().__init__(
            message or f"Unknown {kind}: {name}",
            "UNKNOWN_CAPABILITY",
            {"kind": kind, "name": name},
        )


class UnsupportedSchemeError(UnknownCapabilityError):
    """Raised when a resource URI does not use the ``note:///`` scheme."""

    def __init__(self, uri: str) -> None:
        super().__init__("resource", uri, f"Unsupported URI scheme: {uri}")
        self.error_code = "UNSUPPORTED_SCHEME"
