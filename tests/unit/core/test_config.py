"""Tests for configuration loading."""

from pathlib import Path

import pytest

from pokedex.core.config import CatalogConfig, Config, InputConfig
from pokedex.core.exceptions import ConfigurationError

ENV_VARS = (
    "POKEDEX_COMMIT_DELAY_MS",
    "POKEDEX_LONG_PRESS_MS",
    "POKEDEX_REPEAT_INTERVAL_MS",
    "POKEDEX_CATALOG",
    "POKEDEX_CONFIG",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without POKEDEX_* variables."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    """Tests for default configuration values."""

    def test_input_defaults(self):
        """Default timings are 800/500/150 ms."""
        config = InputConfig()
        assert config.commit_delay_ms == 800
        assert config.long_press_ms == 500
        assert config.repeat_interval_ms == 150

    def test_catalog_default(self):
        """No catalog source by default."""
        assert CatalogConfig().path is None

    def test_validate_rejects_non_positive(self):
        """Zero or negative durations are configuration errors."""
        with pytest.raises(ConfigurationError, match="long_press_ms"):
            InputConfig(long_press_ms=0).validate()
        with pytest.raises(ConfigurationError, match="repeat_interval_ms"):
            InputConfig(repeat_interval_ms=-5).validate()


class TestFromEnv:
    """Tests for Config.from_env."""

    def test_no_env(self):
        """Without variables the defaults are used."""
        config = Config.from_env()
        assert config.input == InputConfig()
        assert config.catalog.path is None

    def test_env_overrides(self, monkeypatch):
        """Variables override each timing and the catalog path."""
        monkeypatch.setenv("POKEDEX_COMMIT_DELAY_MS", "1000")
        monkeypatch.setenv("POKEDEX_LONG_PRESS_MS", "400")
        monkeypatch.setenv("POKEDEX_REPEAT_INTERVAL_MS", "100")
        monkeypatch.setenv("POKEDEX_CATALOG", "memory://catalog.json")

        config = Config.from_env()

        assert config.input.commit_delay_ms == 1000
        assert config.input.long_press_ms == 400
        assert config.input.repeat_interval_ms == 100
        assert config.catalog.path == "memory://catalog.json"

    def test_env_not_an_integer(self, monkeypatch):
        """Non-integer timings raise ConfigurationError."""
        monkeypatch.setenv("POKEDEX_COMMIT_DELAY_MS", "soon")
        with pytest.raises(ConfigurationError, match="POKEDEX_COMMIT_DELAY_MS"):
            Config.from_env()

    def test_env_non_positive(self, monkeypatch):
        """Zero timings from the environment are rejected."""
        monkeypatch.setenv("POKEDEX_REPEAT_INTERVAL_MS", "0")
        with pytest.raises(ConfigurationError):
            Config.from_env()


class TestFromFile:
    """Tests for Config.from_file and from_env_or_file."""

    def write_config(self, tmp_path: Path) -> Path:
        path = tmp_path / "pokedex.toml"
        path.write_text(
            "[input]\n"
            "commit_delay_ms = 600\n"
            "long_press_ms = 300\n"
            "\n"
            "[catalog]\n"
            'path = "/data/catalog.json"\n'
        )
        return path

    def test_from_file(self, tmp_path: Path):
        """File tables set values; missing keys keep defaults."""
        config = Config.from_file(self.write_config(tmp_path))
        assert config.input.commit_delay_ms == 600
        assert config.input.long_press_ms == 300
        assert config.input.repeat_interval_ms == 150
        assert config.catalog.path == "/data/catalog.json"

    def test_env_overrides_file(self, tmp_path: Path, monkeypatch):
        """Environment variables win over file values."""
        monkeypatch.setenv("POKEDEX_COMMIT_DELAY_MS", "900")
        config = Config.from_file(self.write_config(tmp_path))
        assert config.input.commit_delay_ms == 900
        assert config.input.long_press_ms == 300

    def test_empty_file(self, tmp_path: Path):
        """An empty file yields the defaults."""
        path = tmp_path / "empty.toml"
        path.write_text("")
        assert Config.from_file(path).input == InputConfig()

    def test_file_non_positive(self, tmp_path: Path):
        """Invalid file values are rejected."""
        path = tmp_path / "bad.toml"
        path.write_text("[input]\ncommit_delay_ms = 0\n")
        with pytest.raises(ConfigurationError):
            Config.from_file(path)

    def test_from_env_or_file_uses_config_variable(self, tmp_path: Path, monkeypatch):
        """POKEDEX_CONFIG names the file when no path is given."""
        monkeypatch.setenv("POKEDEX_CONFIG", str(self.write_config(tmp_path)))
        assert Config.from_env_or_file().input.commit_delay_ms == 600

    def test_from_env_or_file_explicit_path(self, tmp_path: Path):
        """An explicit path is loaded directly."""
        config = Config.from_env_or_file(self.write_config(tmp_path))
        assert config.catalog.path == "/data/catalog.json"

    def test_from_env_or_file_without_file(self):
        """With neither path nor variable only the environment is read."""
        assert Config.from_env_or_file().input == InputConfig()
