"""Utility functions for Lodestone."""

from lodestone.utils.filename import clean_filename, split_filename
from lodestone.utils.paths import PathSanitizer, clean_path, path_exists, resolve_path, unique_path

__all__ = [
    "PathSanitizer",
    "clean_filename",
    "clean_path",
    "path_exists",
    "resolve_path",
    "split_filename",
    "unique_path",
]
