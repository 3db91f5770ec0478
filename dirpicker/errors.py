"""Exception taxonomy for navigation and listing failures.

Every error here is recovered at the selection-controller boundary and turned
into a single user-visible notice; none reaches the embedding host.
"""

from __future__ import annotations

from pathlib import Path


class PickerError(Exception):
    """Base class for all dirpicker errors."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class AccessError(PickerError):
    """A directory could not be entered or enumerated."""


class AccessDeniedError(AccessError):
    """Path is missing or not readable; navigation state is left untouched."""


class ListingBlockedError(AccessError):
    """Path passed the readability check but enumerating it failed."""


class NavError(PickerError):
    """A navigation step has no valid target."""


class AtRootError(NavError):
    """The current directory has no parent."""


__all__ = [
    "PickerError",
    "AccessError",
    "AccessDeniedError",
    "ListingBlockedError",
    "NavError",
    "AtRootError",
]
