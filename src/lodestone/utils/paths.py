"""Path resolution and disambiguation utilities."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

from lodestone.exceptions import ExistenceCheckError
from lodestone.utils.filename import clean_filename, numbered_filename, split_filename


def resolve_path(input_path: Optional[Union[str, Path]]) -> Optional[Path]:
    """Turn a user-typed directory into an absolute Path.

    ``~`` and ``$VARS`` are expanded first. Blank input gives None.
    """
    text = str(input_path or "").strip()
    if not text:
        return None
    return Path(os.path.expandvars(text)).expanduser().resolve()


def has_final_segment(path: Path) -> bool:
    """Return True if the path ends in a name that can be rewritten."""
    return path.name not in ("", "..")


def path_exists(path: Path) -> bool:
    """Check whether something exists at ``path``, following symlinks.

    Raises:
        ExistenceCheckError: If the filesystem refuses to answer, e.g. when
            the containing directory is not readable.
    """
    try:
        path.stat()
    except (FileNotFoundError, NotADirectoryError):
        return False
    except OSError as e:
        raise ExistenceCheckError(path, e.strerror or str(e)) from e
    except ValueError as e:
        # embedded null byte
        raise ExistenceCheckError(path, str(e)) from e
    return True


class PathSanitizer:
    """Holds a candidate path and rewrites its final segment in place.

    Both operations return the sanitizer itself so they can be chained::

        target = PathSanitizer(instances_dir / name).clean().unique().path

    The parent directories of the path are never changed.
    """

    def __init__(self, path: Union[str, Path], logger: logging.Logger | None = None):
        self.path = Path(path)
        self.logger = logger or logging.getLogger(__name__)

    def __repr__(self) -> str:
        return f"PathSanitizer({str(self.path)!r})"

    def clean(self) -> PathSanitizer:
        """Strip invalid characters from the final segment.

        Raises:
            FilenameError: If no valid filename characters remain.
        """
        if not has_final_segment(self.path):
            return self

        name = self.path.name
        cleaned = clean_filename(name)
        if cleaned != name:
            self.logger.debug(f"Cleaned filename: {name!r} -> {cleaned!r}")
            self.path = self.path.with_name(cleaned)

        return self

    def unique(self) -> PathSanitizer:
        """Number the final segment until it no longer collides with an existing entry.

        ``file.txt`` becomes ``file (1).txt``, then ``file (2).txt`` and so on.
        Nothing changes if the path does not exist yet.

        Raises:
            ExistenceCheckError: If an existence check fails.
        """
        if not has_final_segment(self.path):
            return self

        if not path_exists(self.path):
            return self

        stem, extension = split_filename(self.path.name)
        counter = 1
        candidate = self.path.with_name(numbered_filename(stem, extension, counter))
        while path_exists(candidate):
            self.logger.debug(f"Name taken: {candidate}")
            counter += 1
            candidate = self.path.with_name(numbered_filename(stem, extension, counter))

        self.logger.debug(f"Unique path: {self.path} -> {candidate}")
        self.path = candidate
        return self


def clean_path(path: Union[str, Path]) -> Path:
    """Return ``path`` with invalid characters removed from its final segment."""
    return PathSanitizer(path).clean().path


def unique_path(path: Union[str, Path]) -> Path:
    """Return ``path``, numbered if needed so that nothing exists there yet."""
    return PathSanitizer(path).unique().path
