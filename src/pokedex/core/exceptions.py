"""Custom exceptions for the Pokedex keypad."""


class PokedexError(Exception):
    """Base exception for all Pokedex errors."""

    pass


class ConfigurationError(PokedexError):
    """Startup configuration is invalid (key map or timing)."""

    pass


class CatalogError(PokedexError):
    """Catalog operation failed."""

    pass


class CatalogLoadError(CatalogError):
    """Catalog source could not be read or decoded."""

    def __init__(self, source: str, reason: str):
        """Initialize exception with the source and failure reason.

        Args:
            source: Path or URL the catalog was loaded from.
            reason: Human-readable failure reason.
        """
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to load catalog from {source}: {reason}")
