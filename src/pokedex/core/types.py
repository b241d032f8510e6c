"""Type definitions for the Pokedex keypad."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class CatalogEntity:
    """A species row supplied by the data-access layer.

    Attributes:
        id: National dex number, unique across the catalog.
        name: Species name (lowercase slug, e.g. "mr-mime").
        generation_id: Generation the species was introduced in, if known.
        is_legendary: Legendary flag.
        is_mythical: Mythical flag.
    """

    id: int
    name: str
    generation_id: Optional[int] = None
    is_legendary: bool = False
    is_mythical: bool = False


@dataclass(frozen=True)
class SearchFilters:
    """Structured predicates parsed from a raw search string.

    Absent values (None, empty string, empty set) place no constraint.
    """

    name_query: str = ""
    dex_number: Optional[int] = None
    types: frozenset[str] = field(default_factory=frozenset)
    generation_id: Optional[int] = None
    legendary: Optional[bool] = None
    mythical: Optional[bool] = None


class TypeEffectivenessPage(Enum):
    """Page of the type-effectiveness panel."""

    WEAK = "weak"
    RESIST = "resist"
    IMMUNE = "immune"

    def next(self) -> "TypeEffectivenessPage":
        """Page shown after pressing right: WEAK -> RESIST -> IMMUNE -> WEAK."""
        pages = list(TypeEffectivenessPage)
        return pages[(pages.index(self) + 1) % len(pages)]

    def previous(self) -> "TypeEffectivenessPage":
        """Page shown after pressing left."""
        pages = list(TypeEffectivenessPage)
        return pages[(pages.index(self) - 1) % len(pages)]


@dataclass(frozen=True)
class EffectivenessReport:
    """Non-neutral defensive multipliers split into display views.

    Attributes:
        multipliers: Every non-neutral attacking type and its multiplier.
        weaknesses: Multiplier > 1, highest first.
        resistances: 0 < multiplier < 1, lowest first.
        immunities: Multiplier == 0.
    """

    multipliers: dict[str, float]
    weaknesses: list[tuple[str, float]]
    resistances: list[tuple[str, float]]
    immunities: list[tuple[str, float]]

    def entries_for(self, page: TypeEffectivenessPage) -> list[tuple[str, float]]:
        """Return the view shown on the given panel page."""
        if page is TypeEffectivenessPage.WEAK:
            return self.weaknesses
        if page is TypeEffectivenessPage.RESIST:
            return self.resistances
        if page is TypeEffectivenessPage.IMMUNE:
            return self.immunities
        raise AssertionError(f"Unhandled page: {page!r}")
