"""Core configuration, types and exceptions for the Pokedex keypad."""

from .config import CatalogConfig, Config, InputConfig
from .exceptions import (
    CatalogError,
    CatalogLoadError,
    ConfigurationError,
    PokedexError,
)
from .types import (
    CatalogEntity,
    EffectivenessReport,
    SearchFilters,
    TypeEffectivenessPage,
)

__all__ = [
    "CatalogConfig",
    "Config",
    "InputConfig",
    "PokedexError",
    "ConfigurationError",
    "CatalogError",
    "CatalogLoadError",
    "CatalogEntity",
    "EffectivenessReport",
    "SearchFilters",
    "TypeEffectivenessPage",
]
