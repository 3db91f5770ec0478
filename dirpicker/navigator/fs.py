"""Filesystem probing and one-level directory scanning."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .types import DirectoryEntry, FileEntry, FolderEntry

logger = logging.getLogger(__name__)


def normalize_path(path: Path | str) -> Path:
    """Return an absolute, symlink-resolved path, or the absolute path on failure."""
    raw = Path(path)
    try:
        return raw.resolve()
    except (OSError, RuntimeError):
        return Path(os.path.abspath(raw))


def is_readable_path(path: Path) -> bool:
    """Return whether ``path`` exists and the process may read it."""
    try:
        return path.exists() and os.access(path, os.R_OK)
    except OSError:
        return False


def is_readable_directory(path: Path) -> bool:
    """Return whether ``path`` is an existing, readable directory."""
    try:
        return path.is_dir() and os.access(path, os.R_OK)
    except OSError:
        return False


def entry_sort_key(entry: DirectoryEntry) -> tuple[bool, str]:
    """Folders first, then case-insensitive name."""
    return (not entry.is_dir, entry.name.lower())


def scan_directory(directory: Path, show_hidden: bool = True) -> list[DirectoryEntry]:
    """List immediate children of ``directory`` sorted for display.

    Raises ``OSError`` when the directory itself cannot be enumerated. Per-child
    stat failures (entries vanishing mid-scan, broken links) only drop the
    metadata, never the entry.
    """
    resolved_directory = normalize_path(directory)
    entries: list[DirectoryEntry] = []
    with os.scandir(directory) as children:
        for child in children:
            name = child.name
            if not show_hidden and name.startswith("."):
                continue
            child_path = resolved_directory / name
            if child.is_symlink():
                child_path = normalize_path(child_path)

            try:
                is_dir = child.is_dir()
            except OSError:
                is_dir = False

            file_size: int | None = None
            mtime_ns: int | None = None
            try:
                stat = child.stat()
                mtime_ns = int(stat.st_mtime_ns)
                if not is_dir:
                    file_size = int(stat.st_size)
            except OSError:
                logger.debug("stat failed for %s", child.path)

            if is_dir:
                entries.append(FolderEntry(name=name, path=child_path, mtime_ns=mtime_ns))
            else:
                entries.append(FileEntry(name=name, path=child_path, file_size=file_size, mtime_ns=mtime_ns))

    entries.sort(key=entry_sort_key)
    return entries


__all__ = [
    "normalize_path",
    "is_readable_path",
    "is_readable_directory",
    "entry_sort_key",
    "scan_directory",
]
