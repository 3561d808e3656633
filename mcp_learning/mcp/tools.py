"""Tool dispatcher: validates arguments and runs tools against the store."""

import math
import operator
import random
from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..core.exceptions import (
    ConflictError,
    DomainError,
    LearningError,
    NotFoundError,
)
from ..models.note import Note
from ..models.results import ToolResult
from ..models.tools import (
    CalculateArguments,
    CreateNoteArguments,
    DeleteNoteArguments,
    RandomNumberArguments,
    ToolDescriptor,
    TransformTextArguments,
    UpdateNoteArguments,
)
from ..notes.store import NoteStore
from ..registry.tools import get_tool_descriptor, list_tool_descriptors
from ..utils.date_utils import utcnow
from ..utils.validation import validate_arguments, validate_note_id
from .handlers import BaseHandler

_ARITHMETIC: Dict[str, Callable[[Any, Any], Any]] = {
    "add": operator.add,
    "subtract": operator.sub,
    "multiply": operator.mul,
    "divide": operator.truediv,
}

_TRANSFORMS: Dict[str, Callable[[str], Any]] = {
    "uppercase": str.upper,
    "lowercase": str.lower,
    "reverse": lambda text: text[::-1],
    "word_count": lambda text: len(text.split()),
}


def format_number(value: Any) -> str:
    """Render a number, dropping the ``.0`` of whole-valued floats."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class ToolDispatcher(BaseHandler):
    """Runs tool calls and wraps every outcome in a ToolResult.

    ``call_tool`` never raises: validation failures, domain errors and
    unexpected exceptions all come back as flagged error results.
    """

    def __init__(
        self,
        store: NoteStore,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        super().__init__(store)
        self.rng = rng or random.Random()
        self.clock = clock
        self._tools: Dict[str, Callable[[Any], str]] = {
            "calculate": self._calculate,
            "create_note": self._create_note,
            "update_note": self._update_note,
            "delete_note": self._delete_note,
            "random_number": self._random_number,
            "transform_text": self._transform_text,
        }

    def list_tools(self) -> List[ToolDescriptor]:
        """Return every registered tool."""
        return list_tool_descriptors()

    def call_tool(
        self,
        name: str,
        arguments: Optional[Mapping[str, Any]] = None,
    ) -> ToolResult:
        """Validate ``arguments`` for tool ``name`` and execute it."""
        try:
            descriptor = get_tool_descriptor(name)
            args = validate_arguments(descriptor.arguments_model, arguments)
            text = self._tools[descriptor.name](args)
        except LearningError as e:
            self.logger.warning(
                "Tool call failed",
                tool=name,
                error=e.message,
                error_code=e.error_code,
            )
            return ToolResult.failure(e.message)
        except Exception as e:
            self.logger.exception("Tool call raised unexpectedly", tool=name)
            return ToolResult.failure(str(e))

        self.logger.debug("Tool call succeeded", tool=name)
        return ToolResult.success(text)

    # Pure tools

    def _calculate(self, args: CalculateArguments) -> str:
        if args.operation == "divide" and args.b == 0:
            raise DomainError("Cannot divide by zero")

        try:
            result = _ARITHMETIC[args.operation](args.a, args.b)
        except OverflowError:
            raise DomainError("Result is too large to represent") from None
        if isinstance(result, float) and not math.isfinite(result):
            raise DomainError("Result is not a finite number")

        return (
            f"Result: {format_number(args.a)} {args.operation} "
            f"{format_number(args.b)} = {format_number(result)}"
        )

    def _random_number(self, args: RandomNumberArguments) -> str:
        value = self.rng.randint(args.low, args.high)
        return (
            f"Random number between {format_number(args.min)} and "
            f"{format_number(args.max)}: {value}"
        )

    def _transform_text(self, args: TransformTextArguments) -> str:
        result = _TRANSFORMS[args.operation](args.text)
        return f"Result: {result}"

    # Note tools

    def _create_note(self, args: CreateNoteArguments) -> str:
        validate_note_id(args.id)
        if self.store.has(args.id):
            raise ConflictError(args.id)

        self.store.set(args.id, Note.create(args.content, now=self.clock()))
        self.logger.info("Note created", note_id=args.id)
        return f'Note "{args.id}" created successfully'

    def _update_note(self, args: UpdateNoteArguments) -> str:
        note = self.store.get(args.id)
        if note is None:
            raise NotFoundError(args.id)

        self.store.set(args.id, note.revise(args.content, now=self.clock()))
        self.logger.info("Note updated", note_id=args.id)
        return f'Note "{args.id}" updated successfully'

    def _delete_note(self, args: DeleteNoteArguments) -> str:
        if not self.store.delete(args.id):
            raise NotFoundError(args.id)

        self.logger.info("Note deleted", note_id=args.id)
        return f'Note "{args.id}" deleted successfully'
