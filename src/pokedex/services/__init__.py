"""Catalog access and search services."""

from .catalog import Catalog, format_dex_number, load_catalog
from .search import SearchService

__all__ = [
    "Catalog",
    "format_dex_number",
    "load_catalog",
    "SearchService",
]
