"""Mod loader version catalogs."""

from lodestone.loaders.fabric import (
    FABRIC_META_URL,
    FabricVersions,
    GameVersion,
    InstallerVersion,
    IntermediaryVersion,
    LoaderVersion,
    load_fabric_versions,
    parse_fabric_versions,
)

__all__ = [
    "FABRIC_META_URL",
    "FabricVersions",
    "GameVersion",
    "InstallerVersion",
    "IntermediaryVersion",
    "LoaderVersion",
    "load_fabric_versions",
    "parse_fabric_versions",
]
