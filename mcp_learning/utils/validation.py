"""Argument validation against pydantic models."""

from typing import Any, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import UnknownOperationError, ValidationError

ModelType = TypeVar("ModelType", bound=BaseModel)

# Arguments whose enum violations are reported as unknown operations.
OPERATION_FIELD = "operation"

# Note keys that cannot round-trip through a note:/// URI: "all" names the
# aggregate resource, dot segments are collapsed by URL normalization.
RESERVED_NOTE_IDS = frozenset({"all", ".", ".."})


def format_validation_errors(error: PydanticValidationError) -> str:
    """Render pydantic errors as ``field: message; field: message``."""
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "arguments"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


def validate_arguments(
    model: Type[ModelType],
    arguments: Optional[Mapping[str, Any]],
) -> ModelType:
    """Validate a raw argument mapping into a typed model instance.

    An out-of-enum ``operation`` is reported as UnknownOperationError; every
    other shape mismatch becomes ValidationError.
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        raise ValidationError(
            f"arguments: expected an object, got {type(arguments).__name__}"
        )

    try:
        return model.model_validate(dict(arguments))
    except PydanticValidationError as e:
        for item in e.errors():
            if item["type"] == "literal_error" and item["loc"] == (OPERATION_FIELD,):
                raise UnknownOperationError(item["input"]) from e

        first = e.errors()[0]["loc"] if e.errors() else ()
        field = str(first[0]) if first else None
        raise ValidationError(format_validation_errors(e), field) from e


def validate_note_id(note_id: str) -> None:
    """Reject note keys that would collide with reserved resource URIs."""
    if note_id in RESERVED_NOTE_IDS:
        raise ValidationError(
            f'"{note_id}" is a reserved note ID', "id"
        )
