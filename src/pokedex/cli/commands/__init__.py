"""Command implementations for the Pokedex CLI."""

from .keypad import add_keypad_arguments, handle_keypad
from .search import add_search_arguments, handle_search
from .types import add_types_arguments, handle_types

__all__ = [
    "add_keypad_arguments",
    "handle_keypad",
    "add_search_arguments",
    "handle_search",
    "add_types_arguments",
    "handle_types",
]
