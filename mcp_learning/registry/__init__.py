"""Declarative descriptions of the tools, prompts and resources served.

Tool and prompt argument schemas are generated from the pydantic models in
:mod:`mcp_learning.models`, so what a client sees in a listing is exactly
what the handlers validate against.
"""

from .prompts import PROMPT_REGISTRY, get_prompt_descriptor, list_prompt_descriptors
from .resources import (
    ALL_NOTES_KEY,
    ALL_NOTES_RESOURCE,
    ALL_NOTES_URI,
    NOTE_TEMPLATE,
    NOTE_URI_PREFIX,
    note_descriptor,
    note_uri,
    parse_note_uri,
)
from .tools import TOOL_REGISTRY, get_tool_descriptor, list_tool_descriptors

__all__ = [
    # Tools
    "TOOL_REGISTRY",
    "get_tool_descriptor",
    "list_tool_descriptors",

    # Prompts
    "PROMPT_REGISTRY",
    "get_prompt_descriptor",
    "list_prompt_descriptors",

    # Resources
    "NOTE_URI_PREFIX",
    "ALL_NOTES_KEY",
    "ALL_NOTES_URI",
    "ALL_NOTES_RESOURCE",
    "NOTE_TEMPLATE",
    "note_uri",
    "parse_note_uri",
    "note_descriptor",
]
