"""Filesystem-safe, non-colliding names for Minecraft instances and mods."""

from lodestone.exceptions import CatalogError, ExistenceCheckError, FilenameError, LodestoneError
from lodestone.utils.paths import PathSanitizer, clean_path, unique_path

__version__ = "0.1.0"

__all__ = [
    "CatalogError",
    "ExistenceCheckError",
    "FilenameError",
    "LodestoneError",
    "PathSanitizer",
    "clean_path",
    "unique_path",
    "__version__",
]
