"""Search service tying query parsing and filtering to a loaded catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from ..core.types import CatalogEntity, EffectivenessReport
from ..effectiveness.calculator import calculate_effectiveness
from ..search.filters import apply_filters
from ..search.query import parse_search_query

if TYPE_CHECKING:
    from .catalog import Catalog


class SearchService:
    """Runs raw search text against an in-memory catalog.

    Example:
        service = SearchService(load_catalog("catalog.json"))
        for entity in service.search("fire gen1"):
            print(entity.name)
    """

    def __init__(self, catalog: "Catalog"):
        """Initialize SearchService.

        Args:
            catalog: Loaded species catalog.
        """
        self._catalog = catalog

    @property
    def catalog(self) -> "Catalog":
        return self._catalog

    def search(self, raw: str) -> list[CatalogEntity]:
        """Species matching the raw query, in catalog order.

        Blank text returns the whole catalog without parsing.
        """
        if not raw.strip():
            return list(self._catalog.species)

        filters = parse_search_query(raw)
        results = apply_filters(
            self._catalog.species,
            self._catalog.types_by_entity_id,
            filters,
        )
        logger.debug(f"Search {raw!r}: {len(results)} of {len(self._catalog)} species")
        return results

    def search_ids(self, raw: str) -> list[int]:
        """Dex numbers of matching species, in catalog order."""
        return [entity.id for entity in self.search(raw)]

    def effectiveness(self, dex_number: int) -> EffectivenessReport:
        """Defensive effectiveness of one species by dex number."""
        return calculate_effectiveness(self._catalog.types_of(dex_number))
