"""Tests for the species catalog and its loader."""

import json
import uuid
from pathlib import Path

import fsspec
import pytest

from pokedex.core.exceptions import CatalogError, CatalogLoadError
from pokedex.services.catalog import Catalog, format_dex_number, load_catalog

DOCUMENT = {
    "species": [
        {"id": 6, "name": "charizard", "generation_id": 1},
        {"id": 1, "name": "bulbasaur", "generation_id": 1},
        {"id": 144, "name": "articuno", "generation_id": 1, "is_legendary": True},
    ],
    "types": {"1": ["grass", "poison"], "6": ["Fire", "Flying"], "144": ["ice", "flying"]},
}


@pytest.fixture
def memory_url():
    """Provide a unique memory:// URL and remove it afterwards."""
    fs = fsspec.filesystem("memory")
    path = f"/catalogs/{uuid.uuid4().hex}.json"
    yield f"memory://{path}"
    if fs.exists(path):
        fs.rm(path)


def write_memory(url: str, text: str) -> None:
    fs = fsspec.filesystem("memory")
    fs.pipe(url.removeprefix("memory://"), text.encode("utf-8"))


class TestCatalog:
    """Tests for the Catalog container."""

    def test_len_and_get(self, catalog: Catalog):
        """Lookup by dex number."""
        assert len(catalog) == 11
        assert catalog.get(6).name == "charizard"
        assert catalog.get(9999) is None

    def test_types_of(self, catalog: Catalog):
        """Types in slot order, empty when unknown."""
        assert catalog.types_of(6) == ["fire", "flying"]
        assert catalog.types_of(10001) == []

    def test_types_of_returns_copy(self, catalog: Catalog):
        """Callers cannot mutate the stored lookup."""
        catalog.types_of(6).append("dragon")
        assert catalog.types_of(6) == ["fire", "flying"]


class TestFromDict:
    """Tests for Catalog.from_dict."""

    def test_sorted_by_dex_number(self):
        """Species are ordered by dex number."""
        catalog = Catalog.from_dict(DOCUMENT)
        assert [e.id for e in catalog.species] == [1, 6, 144]

    def test_fields(self):
        """Rows map onto CatalogEntity fields with defaults."""
        catalog = Catalog.from_dict(DOCUMENT)
        articuno = catalog.get(144)
        assert articuno.is_legendary
        assert not articuno.is_mythical
        assert articuno.generation_id == 1

    def test_type_names_lowercased(self):
        """Type names are normalised to lowercase."""
        assert Catalog.from_dict(DOCUMENT).types_of(6) == ["fire", "flying"]

    def test_slot_rows(self):
        """Type rows are grouped per species and ordered by slot."""
        catalog = Catalog.from_dict(
            {
                "species": [{"id": 6, "name": "charizard"}],
                "types": [
                    {"pokemon_id": 6, "type": "flying", "slot": 2},
                    {"pokemon_id": 6, "type": "fire", "slot": 1},
                    {"pokemon_id": 4, "type": "fire", "slot": 1},
                ],
            }
        )
        assert catalog.types_of(6) == ["fire", "flying"]
        assert catalog.types_of(4) == ["fire"]

    def test_malformed_rows_skipped(self):
        """Rows without an id or name are dropped."""
        catalog = Catalog.from_dict(
            {
                "species": [
                    {"id": 1, "name": "bulbasaur"},
                    {"name": "nobody"},
                    {"id": "x", "name": "bad"},
                    "not a row",
                ],
                "types": [{"pokemon_id": 1, "type": "grass"}, {"type": "poison"}],
            }
        )
        assert [e.name for e in catalog.species] == ["bulbasaur"]
        assert catalog.types_of(1) == ["grass"]

    def test_missing_generation(self):
        """Absent generation stays unknown."""
        catalog = Catalog.from_dict({"species": [{"id": 1, "name": "a"}]})
        assert catalog.get(1).generation_id is None

    def test_empty_document(self):
        """An empty document gives an empty catalog."""
        assert len(Catalog.from_dict({})) == 0

    @pytest.mark.parametrize("flag", ["false", "true", 0, 1, None])
    def test_non_boolean_flags_skip_row(self, flag):
        """Flags must be JSON booleans; anything else drops the row."""
        catalog = Catalog.from_dict(
            {
                "species": [
                    {"id": 1, "name": "bulbasaur"},
                    {"id": 6, "name": "charizard", "is_legendary": flag},
                    {"id": 151, "name": "mew", "is_mythical": flag},
                ]
            }
        )
        assert [e.name for e in catalog.species] == ["bulbasaur"]

    def test_boolean_flags_kept(self):
        """Real booleans are read as given."""
        catalog = Catalog.from_dict(
            {"species": [{"id": 151, "name": "mew", "is_legendary": False, "is_mythical": True}]}
        )
        assert not catalog.get(151).is_legendary
        assert catalog.get(151).is_mythical

    def test_string_types_value_skipped(self):
        """A types value that is not a list is dropped, not split into letters."""
        catalog = Catalog.from_dict(
            {
                "species": [{"id": 4, "name": "charmander"}, {"id": 6, "name": "charizard"}],
                "types": {"4": ["fire"], "6": "fire"},
            }
        )
        assert catalog.types_of(6) == []
        assert catalog.types_of(4) == ["fire"]

    def test_non_integer_types_key_skipped(self):
        """A bad dex key drops that entry and keeps the rest."""
        catalog = Catalog.from_dict(
            {
                "species": [{"id": 6, "name": "charizard"}],
                "types": {"abc": ["fire"], "6": ["fire", "flying"]},
            }
        )
        assert catalog.types_by_entity_id == {6: ["fire", "flying"]}

    def test_non_string_type_name_skipped(self):
        """Type names must be strings in either types layout."""
        catalog = Catalog.from_dict(
            {
                "species": [{"id": 6, "name": "charizard"}],
                "types": {"6": ["fire", 3]},
            }
        )
        assert catalog.types_of(6) == []

        rows = Catalog.from_dict(
            {
                "types": [
                    {"pokemon_id": 6, "type": "fire", "slot": 1},
                    {"pokemon_id": 6, "type": None, "slot": 2},
                ]
            }
        )
        assert rows.types_of(6) == ["fire"]

    def test_bad_types_entry_does_not_fail_load(self, memory_url: str):
        """Loading continues past a malformed types entry."""
        write_memory(
            memory_url,
            json.dumps({"species": [{"id": 6, "name": "charizard"}], "types": {"six": ["fire"]}}),
        )
        assert len(load_catalog(memory_url)) == 1


class TestLoadCatalog:
    """Tests for load_catalog."""

    def test_local_file(self, tmp_path: Path):
        """Plain paths are read from disk."""
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(DOCUMENT))

        catalog = load_catalog(str(path))

        assert [e.name for e in catalog.species] == ["bulbasaur", "charizard", "articuno"]

    def test_memory_url(self, memory_url: str):
        """fsspec URLs are supported."""
        write_memory(memory_url, json.dumps(DOCUMENT))
        assert len(load_catalog(memory_url)) == 3

    def test_missing_file(self, tmp_path: Path):
        """A missing source raises CatalogLoadError."""
        source = str(tmp_path / "absent.json")
        with pytest.raises(CatalogLoadError) as exc_info:
            load_catalog(source)
        assert exc_info.value.source == source

    def test_invalid_json(self, memory_url: str):
        """Undecodable content raises CatalogLoadError."""
        write_memory(memory_url, "{not json")
        with pytest.raises(CatalogLoadError):
            load_catalog(memory_url)

    def test_top_level_not_object(self, memory_url: str):
        """A JSON array at the top level is rejected."""
        write_memory(memory_url, "[]")
        with pytest.raises(CatalogLoadError, match="must be an object"):
            load_catalog(memory_url)

    def test_bad_types_section(self, memory_url: str):
        """An unusable types section is a load error."""
        write_memory(memory_url, json.dumps({"species": [], "types": 5}))
        with pytest.raises(CatalogError):
            load_catalog(memory_url)


class TestFormatDexNumber:
    """Tests for format_dex_number."""

    @pytest.mark.parametrize(
        "dex_number,label",
        [(6, "0006"), (151, "0151"), (1025, "1025"), (10001, "10001"), (None, "----")],
    )
    def test_format(self, dex_number, label: str):
        """Four digits, zero padded; dashes when nothing is selected."""
        assert format_dex_number(dex_number) == label
