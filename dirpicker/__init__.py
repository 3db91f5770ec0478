"""Public package surface for dirpicker.

Exports the navigator, the selection controller with its session/result
types, and the permission gates. Most implementation lives in submodules.
"""

from __future__ import annotations

from .controller import (
    AwaitingPermission,
    Browsing,
    Cancelled,
    Picked,
    PresentationHooks,
    SelectionController,
    SelectionResult,
    Terminated,
)
from .errors import AccessDeniedError, AccessError, AtRootError, ListingBlockedError, NavError, PickerError
from .navigator import DirectoryEntry, DirectoryListing, FileEntry, FolderEntry, Navigator
from .permissions import (
    PermissionGate,
    PromptPermissionGate,
    ReadableRootGate,
    StaticPermissionGate,
    select_permission_gate,
)

__all__ = [
    "AwaitingPermission",
    "Browsing",
    "Cancelled",
    "Picked",
    "PresentationHooks",
    "SelectionController",
    "SelectionResult",
    "Terminated",
    "AccessDeniedError",
    "AccessError",
    "AtRootError",
    "ListingBlockedError",
    "NavError",
    "PickerError",
    "DirectoryEntry",
    "DirectoryListing",
    "FileEntry",
    "FolderEntry",
    "Navigator",
    "PermissionGate",
    "PromptPermissionGate",
    "ReadableRootGate",
    "StaticPermissionGate",
    "select_permission_gate",
]
