"""Pydantic models for the Fabric meta version catalog."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field, ValidationError

from lodestone.exceptions import CatalogError

# Endpoint the catalog document is fetched from
FABRIC_META_URL = "https://meta.fabricmc.net/v2/versions/"


class GameVersion(BaseModel):
    """A Minecraft game version supported by Fabric."""

    version: str
    stable: bool


class LoaderVersion(BaseModel):
    """A Fabric loader version."""

    separator: str
    build: int
    maven: str
    version: str
    stable: bool


class IntermediaryVersion(BaseModel):
    """An intermediary mappings version."""

    maven: str
    version: str
    stable: bool


class InstallerVersion(BaseModel):
    """A Fabric installer version."""

    url: str
    maven: str
    version: str
    stable: bool


class FabricVersions(BaseModel):
    """All version information from the Fabric meta API, in document order."""

    game: list[GameVersion] = Field(default_factory=list)
    loader: list[LoaderVersion] = Field(default_factory=list)
    intermediary: list[IntermediaryVersion] = Field(default_factory=list)
    installer: list[InstallerVersion] = Field(default_factory=list)

    def stable_game_versions(self) -> list[GameVersion]:
        """Return the stable game versions, newest first as listed."""
        return [game for game in self.game if game.stable]

    def latest_loader(self, stable_only: bool = True) -> Optional[LoaderVersion]:
        """Return the first loader listed, skipping unstable ones unless asked."""
        for loader in self.loader:
            if loader.stable or not stable_only:
                return loader
        return None


def parse_fabric_versions(data: Union[str, bytes]) -> FabricVersions:
    """Parse a Fabric meta catalog JSON document.

    Args:
        data: The raw JSON response body.

    Returns:
        The parsed catalog.

    Raises:
        CatalogError: If the document is not valid JSON or does not match the catalog shape.
    """
    try:
        return FabricVersions.model_validate_json(data)
    except ValidationError as e:
        raise CatalogError(f"Failed to parse Fabric version catalog: {e}") from e


def load_fabric_versions(path: Path) -> FabricVersions:
    """Read and parse a saved Fabric meta catalog document.

    Raises:
        CatalogError: If the file cannot be read or parsed.
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise CatalogError(f"Failed to read Fabric version catalog {path}: {e}") from e
    return parse_fabric_versions(data)
