"""Directory resolution, listing, and up/home transition rules.

The navigator owns the current-location pointer for one browsing session.
It never talks to the presentation layer: failures come back as exceptions
(``AccessDeniedError``, ``AtRootError``) or as a blocked ``DirectoryListing``
so the controller decides which notice to surface.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..config import load_show_hidden, load_start_roots
from ..errors import AccessDeniedError, AtRootError, ListingBlockedError
from .fs import is_readable_directory, is_readable_path, normalize_path, scan_directory
from .types import DirectoryListing, NavigationState

logger = logging.getLogger(__name__)

SECONDARY_STORAGE_ROOT = Path("/sdcard")


def default_filesystem_root() -> Path:
    """Return the root of the drive holding the working directory."""
    return Path(Path.cwd().anchor or os.sep)


def default_preferred_root() -> Path:
    """Return ``$EXTERNAL_STORAGE`` when set, otherwise the user's home."""
    external = os.environ.get("EXTERNAL_STORAGE", "").strip()
    if external:
        return Path(external)
    try:
        return Path.home()
    except RuntimeError:
        return default_filesystem_root()


class Navigator:
    """Stateful directory walker for a single browsing session."""

    def __init__(
        self,
        preferred_root: Path | None = None,
        secondary_root: Path | None = None,
        filesystem_root: Path | None = None,
        show_hidden: bool | None = None,
    ) -> None:
        configured_preferred, configured_secondary = load_start_roots()
        self.preferred_root = Path(preferred_root or configured_preferred or default_preferred_root())
        self.secondary_root = Path(secondary_root or configured_secondary or SECONDARY_STORAGE_ROOT)
        self.filesystem_root = Path(filesystem_root or default_filesystem_root())
        self.show_hidden = load_show_hidden() if show_hidden is None else show_hidden
        self._state: NavigationState | None = None

    @property
    def current_directory(self) -> Path | None:
        """Directory currently displayed, ``None`` before the first load."""
        return self._state.current_directory if self._state is not None else None

    def reset(self) -> None:
        """Drop session state once a selection is made or cancelled."""
        self._state = None

    def resolve_start_directory(self) -> Path:
        """Return the first readable start root: preferred, secondary, then filesystem root."""
        for candidate in (self.preferred_root, self.secondary_root):
            if is_readable_directory(candidate):
                return normalize_path(candidate)
            logger.debug("start root %s not readable", candidate)
        return normalize_path(self.filesystem_root)

    def load_directory(self, path: Path | str) -> DirectoryListing:
        """Enter ``path`` and return its sorted children.

        Raises ``AccessDeniedError`` without touching state when the path is
        missing or unreadable. When enumeration itself fails the directory is
        still entered and an empty listing carrying ``ListingBlockedError`` is
        returned.
        """
        target = normalize_path(path)
        if not is_readable_path(target):
            raise AccessDeniedError(f"Access Denied: {target.name or target}", path=target)

        try:
            entries = scan_directory(target, show_hidden=self.show_hidden)
        except OSError as exc:
            logger.debug("listing %s blocked: %s", target, exc)
            blocked = ListingBlockedError("System blocked access", path=target)
            blocked.__cause__ = exc
            self._enter(target)
            return DirectoryListing(path=target, error=blocked)

        self._enter(target)
        return DirectoryListing(path=target, entries=tuple(entries))

    def navigate_up(self, current: Path | str) -> Path:
        """Return the parent of ``current``; raises ``AtRootError`` at the filesystem root."""
        current_path = normalize_path(current)
        parent = current_path.parent
        if parent == current_path:
            raise AtRootError("Cannot go up further", path=current_path)
        return parent

    def is_at_home(self, current: Path | str, home: Path | str) -> bool:
        """Return whether ``current`` and ``home`` name the same absolute path."""
        return str(normalize_path(current)) == str(normalize_path(home))

    def _enter(self, directory: Path) -> None:
        if self._state is None:
            self._state = NavigationState(current_directory=directory)
        else:
            self._state.current_directory = directory
        logger.debug("entered %s", directory)
