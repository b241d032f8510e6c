"""Configuration management for the Pokedex keypad."""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .exceptions import ConfigurationError


@dataclass
class InputConfig:
    """Multi-tap keypad timing, in milliseconds."""

    # Idle time after which a pending character is committed
    commit_delay_ms: int = 800
    # Hold time on the dual key before repeat-delete starts
    long_press_ms: int = 500
    # Interval between repeated deletes while the dual key is held
    repeat_interval_ms: int = 150

    def validate(self) -> None:
        """Reject non-positive durations.

        Raises:
            ConfigurationError: If any duration is zero or negative.
        """
        for name in ("commit_delay_ms", "long_press_ms", "repeat_interval_ms"):
            value = getattr(self, name)
            if value <= 0:
                raise ConfigurationError(f"{name} must be positive, got {value}")


@dataclass
class CatalogConfig:
    """Species catalog source configuration."""

    path: str | None = None


@dataclass
class Config:
    """Main application configuration."""

    input: InputConfig = field(default_factory=InputConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        config = cls()
        config._apply_env()
        config.input.validate()
        return config

    @classmethod
    def from_file(cls, path: Path) -> "Config":
        """Load configuration from a TOML file, then apply env overrides.

        Args:
            path: Path to a TOML file with optional [input] and [catalog] tables.

        Returns:
            Config with file values overridden by environment variables.
        """
        with open(path, "rb") as f:
            data = tomllib.load(f)

        config = cls()
        config._apply_mapping(data)
        config._apply_env()
        config.input.validate()
        return config

    @classmethod
    def from_env_or_file(cls, path: Path | None = None) -> "Config":
        """Load from an explicit path, POKEDEX_CONFIG, or the environment only."""
        if path is None and (env_path := os.environ.get("POKEDEX_CONFIG")):
            path = Path(env_path)
        if path is not None:
            return cls.from_file(path)
        return cls.from_env()

    def _apply_mapping(self, data: dict[str, Any]) -> None:
        input_data = data.get("input", {})
        for name in ("commit_delay_ms", "long_press_ms", "repeat_interval_ms"):
            if name in input_data:
                setattr(self.input, name, int(input_data[name]))

        catalog_data = data.get("catalog", {})
        if "path" in catalog_data:
            self.catalog.path = str(catalog_data["path"])

    def _apply_env(self) -> None:
        env_ints = {
            "POKEDEX_COMMIT_DELAY_MS": "commit_delay_ms",
            "POKEDEX_LONG_PRESS_MS": "long_press_ms",
            "POKEDEX_REPEAT_INTERVAL_MS": "repeat_interval_ms",
        }
        for env_name, attr in env_ints.items():
            if raw := os.environ.get(env_name):
                try:
                    setattr(self.input, attr, int(raw))
                except ValueError as e:
                    raise ConfigurationError(
                        f"{env_name} must be an integer, got {raw!r}"
                    ) from e

        if path := os.environ.get("POKEDEX_CATALOG"):
            self.catalog.path = path
