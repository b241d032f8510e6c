"""Search query parsing and catalog filtering."""

from .filters import apply_filters, matches
from .query import REGION_TO_GENERATION, parse_search_query, tokenize

__all__ = [
    "apply_filters",
    "matches",
    "REGION_TO_GENERATION",
    "parse_search_query",
    "tokenize",
]
