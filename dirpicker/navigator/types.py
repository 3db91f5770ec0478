"""Domain datatypes for one-level directory listings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

from ..errors import ListingBlockedError


@dataclass(frozen=True)
class FolderEntry:
    """Listed child that is a directory and can be descended into."""

    name: str
    path: Path
    mtime_ns: int | None = None

    is_dir: ClassVar[bool] = True


@dataclass(frozen=True)
class FileEntry:
    """Listed child that is not a directory and can be picked."""

    name: str
    path: Path
    file_size: int | None = None
    mtime_ns: int | None = None

    is_dir: ClassVar[bool] = False


DirectoryEntry = FolderEntry | FileEntry


@dataclass
class NavigationState:
    """Per-session location pointer owned by the navigator."""

    current_directory: Path


@dataclass(frozen=True)
class DirectoryListing:
    """Entries of one loaded directory in display order.

    ``error`` is set when enumeration was blocked; ``entries`` is then empty
    but ``path`` still became the current directory.
    """

    path: Path
    entries: tuple[DirectoryEntry, ...] = ()
    error: ListingBlockedError | None = None

    @property
    def blocked(self) -> bool:
        return self.error is not None


__all__ = [
    "FolderEntry",
    "FileEntry",
    "DirectoryEntry",
    "NavigationState",
    "DirectoryListing",
]
