"""Tests for the Fabric version catalog models."""

import json

import pytest

from lodestone.exceptions import CatalogError
from lodestone.loaders.fabric import FabricVersions, load_fabric_versions, parse_fabric_versions

CATALOG = {
    "game": [
        {"version": "25w14craftmine", "stable": False},
        {"version": "1.21.5", "stable": True},
        {"version": "1.21.4", "stable": True},
    ],
    "mappings": [{"gameVersion": "1.21.5", "build": 1}],
    "intermediary": [
        {"maven": "net.fabricmc:intermediary:1.21.5", "version": "1.21.5", "stable": True},
    ],
    "loader": [
        {
            "separator": ".",
            "build": 17,
            "maven": "net.fabricmc:fabric-loader:0.16.17",
            "version": "0.16.17",
            "stable": False,
        },
        {
            "separator": ".",
            "build": 14,
            "maven": "net.fabricmc:fabric-loader:0.16.14",
            "version": "0.16.14",
            "stable": True,
        },
    ],
    "installer": [
        {
            "url": "https://maven.fabricmc.net/net/fabricmc/fabric-installer/1.0.3/fabric-installer-1.0.3.jar",
            "maven": "net.fabricmc:fabric-installer:1.0.3",
            "version": "1.0.3",
            "stable": True,
        },
    ],
}


class TestParseFabricVersions:
    """Test parsing of the catalog document."""

    def test_parses_all_lists(self):
        versions = parse_fabric_versions(json.dumps(CATALOG))
        assert [g.version for g in versions.game] == ["25w14craftmine", "1.21.5", "1.21.4"]
        assert versions.loader[1].build == 14
        assert versions.intermediary[0].maven == "net.fabricmc:intermediary:1.21.5"
        assert versions.installer[0].url.endswith("fabric-installer-1.0.3.jar")

    def test_accepts_bytes(self):
        versions = parse_fabric_versions(json.dumps(CATALOG).encode("utf-8"))
        assert len(versions.game) == 3

    def test_unknown_keys_ignored(self):
        """Extra top-level lists such as mappings do not break parsing."""
        versions = parse_fabric_versions(json.dumps(CATALOG))
        assert not hasattr(versions, "mappings")

    def test_missing_field_raises(self):
        broken = json.loads(json.dumps(CATALOG))
        del broken["loader"][0]["build"]
        with pytest.raises(CatalogError):
            parse_fabric_versions(json.dumps(broken))

    def test_invalid_json_raises(self):
        with pytest.raises(CatalogError):
            parse_fabric_versions("{not json")


class TestFabricVersions:
    """Test catalog accessors."""

    def test_stable_game_versions(self):
        versions = FabricVersions.model_validate(CATALOG)
        assert [g.version for g in versions.stable_game_versions()] == ["1.21.5", "1.21.4"]

    def test_latest_loader(self):
        versions = FabricVersions.model_validate(CATALOG)
        assert versions.latest_loader().version == "0.16.14"
        assert versions.latest_loader(stable_only=False).version == "0.16.17"

    def test_latest_loader_empty(self):
        assert FabricVersions().latest_loader() is None


class TestLoadFabricVersions:
    """Test loading a saved catalog file."""

    def test_load(self, tmp_path):
        path = tmp_path / "versions.json"
        path.write_text(json.dumps(CATALOG), encoding="utf-8")
        assert len(load_fabric_versions(path).installer) == 1

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(CatalogError):
            load_fabric_versions(tmp_path / "missing.json")
