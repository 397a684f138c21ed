"""Filename sanitization utilities."""

import re
from typing import Optional

from lodestone.exceptions import FilenameError

# Characters hazardous in filenames on Windows/macOS/Linux
INVALID_FILENAME_CHARS = re.compile(r"[*:\"'\\/?<>|]")

# Names that cannot be created as a directory entry
_RESERVED_NAMES = {"", ".", ".."}


def clean_filename(name: str) -> str:
    """Remove invalid characters from a single filename.

    Names without invalid characters are returned untouched, so cleaning
    twice gives the same result as cleaning once.

    Args:
        name: The filename to clean (final path segment only).

    Returns:
        The filename with every invalid character removed and surrounding
        whitespace trimmed.

    Raises:
        FilenameError: If nothing usable is left after cleaning.
    """
    if not INVALID_FILENAME_CHARS.search(name):
        return name

    cleaned = INVALID_FILENAME_CHARS.sub("", name).strip()
    if cleaned in _RESERVED_NAMES:
        raise FilenameError(name)

    return cleaned


def split_filename(name: str) -> tuple[str, Optional[str]]:
    """Split a filename into its stem and extension.

    The extension is whatever follows the last dot. A leading dot alone
    (``.bashrc``) does not start an extension.

    Returns:
        ``(stem, extension)``, where extension is None if there is none.
    """
    if name == "..":
        return name, None

    stem, dot, extension = name.rpartition(".")
    if not dot or not stem:
        return name, None

    return stem, extension


def numbered_filename(stem: str, extension: Optional[str], counter: int) -> str:
    """Build ``"<stem> (<counter>)"``, keeping the extension at the end."""
    if extension is None:
        return f"{stem} ({counter})"
    return f"{stem} ({counter}).{extension}"
