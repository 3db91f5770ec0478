"""Directory navigation model.

This package contains the non-UI browsing primitives:
- folder/file entry variants and listing results
- one-level filesystem scanning with display ordering
- the session navigator with start-root fallback and up/home rules
"""

from __future__ import annotations

from .types import DirectoryEntry, DirectoryListing, FileEntry, FolderEntry, NavigationState
from .fs import entry_sort_key, is_readable_directory, is_readable_path, normalize_path, scan_directory
from .navigator import SECONDARY_STORAGE_ROOT, Navigator, default_filesystem_root, default_preferred_root

__all__ = [
    "DirectoryEntry",
    "DirectoryListing",
    "FileEntry",
    "FolderEntry",
    "NavigationState",
    "entry_sort_key",
    "is_readable_directory",
    "is_readable_path",
    "normalize_path",
    "scan_directory",
    "SECONDARY_STORAGE_ROOT",
    "Navigator",
    "default_filesystem_root",
    "default_preferred_root",
]
