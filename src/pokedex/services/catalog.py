"""In-memory species catalog and its JSON loader.

The catalog is the hand-off from the data-access layer: species rows plus a
lookup of each species' types in slot order. Files are opened through
fsspec so a path may be local or any fsspec URL (e.g. memory://, s3://).

Expected document shape:

    {
        "species": [
            {"id": 6, "name": "charizard", "generation_id": 1,
             "is_legendary": false, "is_mythical": false},
            ...
        ],
        "types": {"6": ["fire", "flying"], ...}
    }

"types" may also be a list of rows {"pokemon_id": 6, "type": "fire", "slot": 1},
which are grouped per species and ordered by slot.
"""

from __future__ import annotations

import json
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Optional

import fsspec
from loguru import logger

from ..core.exceptions import CatalogLoadError
from ..core.types import CatalogEntity


@dataclass
class Catalog:
    """Species in dex order with their type lookup."""

    species: list[CatalogEntity] = field(default_factory=list)
    types_by_entity_id: dict[int, list[str]] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.species)

    def get(self, dex_number: int) -> Optional[CatalogEntity]:
        """Species with the given dex number, or None."""
        for entity in self.species:
            if entity.id == dex_number:
                return entity
        return None

    def types_of(self, dex_number: int) -> list[str]:
        """Types of a species in slot order; empty when unknown."""
        return list(self.types_by_entity_id.get(dex_number, []))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Catalog":
        """Build a catalog from a decoded JSON document.

        Malformed species rows and type entries are skipped with a warning.
        """
        species: list[CatalogEntity] = []
        for row in data.get("species", []):
            entity = _entity_from_row(row)
            if entity is not None:
                species.append(entity)
        species.sort(key=lambda e: e.id)

        return cls(species=species, types_by_entity_id=_types_from(data.get("types", {})))


def _entity_from_row(row: Any) -> Optional[CatalogEntity]:
    try:
        generation_id = row.get("generation_id")
        return CatalogEntity(
            id=int(row["id"]),
            name=str(row["name"]),
            generation_id=int(generation_id) if generation_id is not None else None,
            is_legendary=_flag(row, "is_legendary"),
            is_mythical=_flag(row, "is_mythical"),
        )
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        logger.warning(f"Skipping malformed species row {row!r}: {e}")
        return None


def _flag(row: dict[str, Any], name: str) -> bool:
    value = row.get(name, False)
    if not isinstance(value, bool):
        raise TypeError(f"{name} must be a JSON boolean, got {value!r}")
    return value


def _type_name(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"type name must be a string, got {value!r}")
    return value.lower()


def _types_from(value: Any) -> dict[int, list[str]]:
    if isinstance(value, dict):
        types: dict[int, list[str]] = {}
        for key, names in value.items():
            try:
                if not isinstance(names, list):
                    raise TypeError(f"expected a list of type names, got {names!r}")
                types[int(key)] = [_type_name(t) for t in names]
            except (TypeError, ValueError) as e:
                logger.warning(f"Skipping malformed types entry {key!r}: {e}")
        return types

    slotted: dict[int, list[tuple[int, str]]] = defaultdict(list)
    for row in value:
        try:
            slotted[int(row["pokemon_id"])].append(
                (int(row.get("slot", 0)), _type_name(row["type"]))
            )
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Skipping malformed type row {row!r}: {e}")

    return {
        pokemon_id: [name for _, name in sorted(rows)]
        for pokemon_id, rows in slotted.items()
    }


def load_catalog(source: str) -> Catalog:
    """Load a catalog JSON document from a path or fsspec URL.

    Args:
        source: Local path or fsspec URL.

    Returns:
        Catalog sorted by dex number.

    Raises:
        CatalogLoadError: If the source cannot be opened or decoded.
    """
    try:
        with fsspec.open(source, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogLoadError(source, str(e)) from e

    if not isinstance(data, dict):
        raise CatalogLoadError(source, "top-level JSON value must be an object")

    try:
        catalog = Catalog.from_dict(data)
    except (AttributeError, TypeError, ValueError) as e:
        raise CatalogLoadError(source, str(e)) from e

    logger.info(f"Loaded catalog from {source}: {len(catalog)} species")
    return catalog


def format_dex_number(dex_number: Optional[int]) -> str:
    """Zero-padded four digit dex label, "----" when nothing is selected."""
    if dex_number is None:
        return "----"
    return f"{dex_number:04d}"
