"""Exceptions raised by lodestone."""

from pathlib import Path


class LodestoneError(Exception):
    """Base exception for lodestone."""

    pass


class FilenameError(LodestoneError, ValueError):
    """Raised when nothing usable is left of a filename after cleaning."""

    def __init__(self, name: str, message: str = "Path did not contain any valid filename characters"):
        super().__init__(f"{message}: {name!r}")
        self.name = name


class ExistenceCheckError(LodestoneError, OSError):
    """Raised when the filesystem cannot tell whether a path exists."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Could not check whether {path} exists: {reason}")
        self.path = path


class CatalogError(LodestoneError):
    """Raised when a version catalog document cannot be read or validated."""

    pass
