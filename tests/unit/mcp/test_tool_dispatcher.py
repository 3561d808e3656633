"""Tests for the tool dispatcher."""

import random
from unittest.mock import patch

import pytest

from mcp_learning.mcp.tools import ToolDispatcher, format_number
from mcp_learning.notes.store import NoteStore
from tests.utils import AssertionHelpers, NoteTestHelper


class TestFormatNumber:
    """Test number rendering."""

    @pytest.mark.parametrize(
        "value,expected",
        [(5, "5"), (5.0, "5"), (2.5, "2.5"), (-3, "-3"), (0.1 + 0.2, "0.30000000000000004")],
    )
    def test_format_number(self, value, expected):
        assert format_number(value) == expected


class TestToolListing:
    """Test tool listing."""

    def test_lists_six_tools_in_order(self, dispatcher: ToolDispatcher):
        names = [tool.name for tool in dispatcher.list_tools()]

        assert names == [
            "calculate",
            "create_note",
            "update_note",
            "delete_note",
            "random_number",
            "transform_text",
        ]

    def test_unknown_tool(self, dispatcher: ToolDispatcher):
        result = dispatcher.call_tool("nonexistent", {})

        AssertionHelpers.assert_failure(result, "Error: Unknown tool: nonexistent")


class TestCalculate:
    """Test the calculate tool."""

    @pytest.mark.parametrize(
        "operation,a,b,expected",
        [
            ("add", 5, 3, "Result: 5 add 3 = 8"),
            ("subtract", 5, 3, "Result: 5 subtract 3 = 2"),
            ("multiply", 4, 2.5, "Result: 4 multiply 2.5 = 10"),
            ("divide", 10, 4, "Result: 10 divide 4 = 2.5"),
            ("divide", 9, 3, "Result: 9 divide 3 = 3"),
            ("add", -1.5, 0.5, "Result: -1.5 add 0.5 = -1"),
        ],
    )
    def test_operations(self, dispatcher: ToolDispatcher, operation, a, b, expected):
        result = dispatcher.call_tool("calculate", {"operation": operation, "a": a, "b": b})

        AssertionHelpers.assert_success(result, expected)

    def test_divide_by_zero(self, dispatcher: ToolDispatcher):
        result = dispatcher.call_tool("calculate", {"operation": "divide", "a": 10, "b": 0})

        AssertionHelpers.assert_failure(result, "Error: Cannot divide by zero")

    def test_divide_by_float_zero(self, dispatcher: ToolDispatcher):
        result = dispatcher.call_tool("calculate", {"operation": "divide", "a": 1, "b": 0.0})

        AssertionHelpers.assert_failure(result, "Error: Cannot divide by zero")

    def test_unknown_operation(self, dispatcher: ToolDispatcher):
        result = dispatcher.call_tool("calculate", {"operation": "power", "a": 2, "b": 3})

        AssertionHelpers.assert_failure(result, "Error: Unknown operation: power")

    def test_overflow_is_reported(self, dispatcher: ToolDispatcher):
        result = dispatcher.call_tool(
            "calculate", {"operation": "multiply", "a": 1e308, "b": 10}
        )

        AssertionHelpers.assert_failure(result)

    def test_missing_argument(self, dispatcher: ToolDispatcher):
        result = dispatcher.call_tool("calculate", {"operation": "add", "a": 1})

        AssertionHelpers.assert_failure(result)
        assert "b" in result.text

    def test_string_number_rejected(self, dispatcher: ToolDispatcher):
        result = dispatcher.call_tool("calculate", {"operation": "add", "a": "1", "b": 2})

        AssertionHelpers.assert_failure(result)

    def test_none_arguments(self, dispatcher: ToolDispatcher):
        result = dispatcher.call_tool("calculate", None)

        AssertionHelpers.assert_failure(result)

    def test_does_not_touch_store(self, dispatcher: ToolDispatcher, store: NoteStore):
        before = store.entries()
        dispatcher.call_tool("calculate", {"operation": "add", "a": 1, "b": 2})

        assert store.entries() == before


class TestRandomNumber:
    """Test the random_number tool."""

    def test_defaults(self, dispatcher: ToolDispatcher):
        result = dispatcher.call_tool("random_number", {})

        AssertionHelpers.assert_success(result)
        prefix = "Random number between 0 and 100: "
        assert result.text.startswith(prefix)
        assert 0 <= int(result.text[len(prefix):]) <= 100

    def test_within_bounds(self, store: NoteStore):
        dispatcher = ToolDispatcher(store, rng=random.Random(7))

        for _ in range(200):
            result = dispatcher.call_tool("random_number", {"min": 3, "max": 6})
            value = int(result.text.rsplit(": ", 1)[1])
            assert 3 <= value <= 6

    def test_equal_bounds(self, dispatcher: ToolDispatcher):
        result = dispatcher.call_tool("random_number", {"min": 5, "max": 5})

        AssertionHelpers.assert_success(result, "Random number between 5 and 5: 5")

    def test_fractional_bounds(self, dispatcher: ToolDispatcher):
        result = dispatcher.call_tool("random_number", {"min": 1.5, "max": 2.5})

        AssertionHelpers.assert_success(result, "Random number between 1.5 and 2.5: 2")

    def test_inverted_bounds(self, dispatcher: ToolDispatcher):
        result = dispatcher.call_tool("random_number", {"min": 10, "max": 1})

        AssertionHelpers.assert_failure(result)

    def test_uses_injected_rng(self, store: NoteStore):
        with patch.object(random.Random, "randint", return_value=42) as mock_randint:
            dispatcher = ToolDispatcher(store, rng=random.Random())
            result = dispatcher.call_tool("random_number", {"min": 0, "max": 100})

        mock_randint.assert_called_once_with(0, 100)
        AssertionHelpers.assert_success(result, "Random number between 0 and 100: 42")


class TestTransformText:
    """Test the transform_text tool."""

    @pytest.mark.parametrize(
        "operation,text,expected",
        [
            ("uppercase", "Hello", "Result: HELLO"),
            ("lowercase", "Hello", "Result: hello"),
            ("reverse", "abc", "Result: cba"),
            ("word_count", "  the quick\tbrown\nfox  ", "Result: 4"),
            ("word_count", "", "Result: 0"),
            ("word_count", "   ", "Result: 0"),
            ("uppercase", "", "Result: "),
        ],
    )
    def test_operations(self, dispatcher: ToolDispatcher, operation, text, expected):
        result = dispatcher.call_tool("transform_text", {"text": text, "operation": operation})

        AssertionHelpers.assert_success(result, expected)

    def test_unknown_operation(self, dispatcher: ToolDispatcher):
        result = dispatcher.call_tool("transform_text", {"text": "x", "operation": "title"})

        AssertionHelpers.assert_failure(result, "Error: Unknown operation: title")


class TestNoteTools:
    """Test create_note, update_note and delete_note."""

    def test_create_note(self, dispatcher: ToolDispatcher, store: NoteStore):
        result = dispatcher.call_tool("create_note", {"id": "todo", "content": "buy milk"})

        AssertionHelpers.assert_success(result, 'Note "todo" created successfully')
        note = store.get("todo")
        assert note.content == "buy milk"
        assert note.created_at == note.updated_at
        assert store.keys() == ["welcome", "todo"]

    def test_create_duplicate(self, dispatcher: ToolDispatcher, store: NoteStore):
        original = store.get("welcome")

        result = dispatcher.call_tool("create_note", {"id": "welcome", "content": "x"})

        AssertionHelpers.assert_failure(result, 'Error: Note with ID "welcome" already exists')
        assert store.get("welcome") is original

    @pytest.mark.parametrize("note_id", ["all", ".", ".."])
    def test_create_reserved_id(
        self, dispatcher: ToolDispatcher, store: NoteStore, note_id: str
    ):
        result = dispatcher.call_tool("create_note", {"id": note_id, "content": "x"})

        AssertionHelpers.assert_failure(result, f'Error: "{note_id}" is a reserved note ID')
        assert store.get(note_id) is None

    def test_create_empty_id(self, dispatcher: ToolDispatcher, store: NoteStore):
        result = dispatcher.call_tool("create_note", {"id": "", "content": "x"})

        AssertionHelpers.assert_failure(result)
        assert len(store) == 1

    def test_update_note(self, dispatcher: ToolDispatcher, store: NoteStore):
        dispatcher.call_tool("create_note", {"id": "todo", "content": "v1"})
        created = store.get("todo").created_at

        result = dispatcher.call_tool("update_note", {"id": "todo", "content": "v2"})

        AssertionHelpers.assert_success(result, 'Note "todo" updated successfully')
        note = store.get("todo")
        assert note.content == "v2"
        assert note.created_at == created
        assert note.updated_at > created

    def test_update_keeps_position(self, dispatcher: ToolDispatcher, store: NoteStore):
        NoteTestHelper.create_notes(dispatcher, {"a": "1", "b": "2"})

        dispatcher.call_tool("update_note", {"id": "welcome", "content": "changed"})

        assert store.keys() == ["welcome", "a", "b"]

    def test_update_missing(self, dispatcher: ToolDispatcher, store: NoteStore):
        result = dispatcher.call_tool("update_note", {"id": "nope", "content": "x"})

        AssertionHelpers.assert_failure(result, 'Error: Note with ID "nope" not found')
        assert store.get("nope") is None

    def test_delete_note(self, dispatcher: ToolDispatcher, store: NoteStore):
        result = dispatcher.call_tool("delete_note", {"id": "welcome"})

        AssertionHelpers.assert_success(result, 'Note "welcome" deleted successfully')
        assert len(store) == 0

    def test_delete_missing(self, dispatcher: ToolDispatcher, store: NoteStore):
        before = store.entries()

        result = dispatcher.call_tool("delete_note", {"id": "nope"})

        AssertionHelpers.assert_failure(result, 'Error: Note with ID "nope" not found')
        assert store.entries() == before

    def test_delete_twice(self, dispatcher: ToolDispatcher):
        dispatcher.call_tool("delete_note", {"id": "welcome"})
        result = dispatcher.call_tool("delete_note", {"id": "welcome"})

        AssertionHelpers.assert_failure(result, 'Error: Note with ID "welcome" not found')

    def test_create_after_delete(self, dispatcher: ToolDispatcher, store: NoteStore):
        dispatcher.call_tool("delete_note", {"id": "welcome"})
        result = dispatcher.call_tool("create_note", {"id": "welcome", "content": "again"})

        AssertionHelpers.assert_success(result)
        assert store.get("welcome").content == "again"

    def test_unexpected_exception_becomes_error_result(self, dispatcher: ToolDispatcher):
        with patch.object(NoteStore, "has", side_effect=RuntimeError("boom")):
            result = dispatcher.call_tool("create_note", {"id": "x", "content": "y"})

        AssertionHelpers.assert_failure(result, "Error: boom")
