"""Selection session state machine.

The controller drives one browsing session: it waits for storage permission,
dispatches entry clicks to descend or pick, applies the up/home/back rules,
and hands exactly one ``SelectionResult`` to the result sink. Presentation is
injected as plain callables so the session logic stays deterministic and
testable without any UI.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .errors import AccessDeniedError, AtRootError
from .navigator import DirectoryEntry, FileEntry, FolderEntry, Navigator, is_readable_path
from .permissions import PermissionGate

logger = logging.getLogger(__name__)

NOTICE_PERMISSION_DENIED = "Permission Denied"


@dataclass(frozen=True)
class Picked:
    """A file was chosen."""

    path: Path

    @property
    def uri(self) -> str:
        """``file://`` URI the host can hand to another process."""
        return self.path.as_uri()


@dataclass(frozen=True)
class Cancelled:
    """The user left without choosing."""


SelectionResult = Picked | Cancelled


@dataclass(frozen=True)
class AwaitingPermission:
    """Session is waiting for storage access."""


@dataclass(frozen=True)
class Browsing:
    """Session shows the listing of ``path``."""

    path: Path


@dataclass(frozen=True)
class Terminated:
    """Session ended with ``result``; no transition leaves this state."""

    result: SelectionResult


SessionState = AwaitingPermission | Browsing | Terminated


@dataclass(frozen=True)
class PresentationHooks:
    """Rendering callbacks supplied by the hosting UI."""

    display_entries: Callable[[tuple[DirectoryEntry, ...]], None]
    display_path: Callable[[str], None]
    show_notice: Callable[[str], None]


class SelectionController:
    """Single-session pick flow over a :class:`Navigator`."""

    def __init__(
        self,
        navigator: Navigator,
        permission_gate: PermissionGate,
        presentation: PresentationHooks,
        on_complete: Callable[[SelectionResult], None],
    ) -> None:
        self.navigator = navigator
        self.permission_gate = permission_gate
        self.presentation = presentation
        self.on_complete = on_complete
        self.state: SessionState = AwaitingPermission()
        self._permission_request = 0

    @property
    def terminated(self) -> bool:
        return isinstance(self.state, Terminated)

    @property
    def current_path(self) -> Path | None:
        """Displayed directory while browsing, otherwise ``None``."""
        return self.state.path if isinstance(self.state, Browsing) else None

    def start(self) -> None:
        """Open the start directory, asking for permission first when needed."""
        if self.terminated:
            return
        if self.permission_gate.check_granted():
            self._enter_home()
        else:
            self._request_permission()

    def cancel(self) -> None:
        """End the session without a pick."""
        if not self.terminated:
            self._finish(Cancelled())

    def on_entry_clicked(self, entry: DirectoryEntry) -> None:
        """Descend into folders; pick files."""
        if not isinstance(self.state, Browsing):
            logger.debug("ignoring click on %s while %s", entry.name, type(self.state).__name__)
            return
        if isinstance(entry, FolderEntry):
            self._load(entry.path)
        elif isinstance(entry, FileEntry):
            if is_readable_path(entry.path):
                self._finish(Picked(entry.path))
            else:
                self.presentation.show_notice(f"Access Denied: {entry.name}")
        else:
            raise TypeError(f"unsupported entry type: {type(entry).__name__}")

    def on_up_requested(self) -> None:
        """Load the parent of the current directory."""
        # Up is a Browsing-only control; other states have no listing to leave.
        if not isinstance(self.state, Browsing):
            return
        try:
            parent = self.navigator.navigate_up(self.state.path)
        except AtRootError as exc:
            self.presentation.show_notice(str(exc))
            return
        self._load(parent)

    def on_home_requested(self) -> None:
        """Reload the start directory, re-requesting permission if it was revoked."""
        if self.terminated:
            return
        if self.permission_gate.check_granted():
            self._enter_home()
        else:
            self._request_permission()

    def on_back_requested(self) -> None:
        """Ascend one level, or cancel when already at home or at the root."""
        state = self.state
        if isinstance(state, Terminated):
            return
        if isinstance(state, AwaitingPermission):
            self._finish(Cancelled())
            return

        home = self.navigator.resolve_start_directory()
        if self.navigator.is_at_home(state.path, home):
            self._finish(Cancelled())
            return
        try:
            parent = self.navigator.navigate_up(state.path)
        except AtRootError:
            self._finish(Cancelled())
            return
        self._load(parent)

    def _request_permission(self) -> None:
        self._permission_request += 1
        request_id = self._permission_request

        def on_result(granted: bool) -> None:
            self._on_permission_result(request_id, granted)

        self.permission_gate.request_access(on_result)

    def _on_permission_result(self, request_id: int, granted: bool) -> None:
        if self.terminated or request_id != self._permission_request:
            logger.debug("ignoring stale permission result %s", request_id)
            return
        if not granted:
            self.presentation.show_notice(NOTICE_PERMISSION_DENIED)
            return
        self._enter_home()

    def _enter_home(self) -> None:
        self._load(self.navigator.resolve_start_directory())

    def _load(self, path: Path) -> bool:
        try:
            listing = self.navigator.load_directory(path)
        except AccessDeniedError as exc:
            self.presentation.show_notice(str(exc))
            return False

        self.state = Browsing(listing.path)
        self.presentation.display_path(str(listing.path))
        self.presentation.display_entries(listing.entries)
        if listing.error is not None:
            self.presentation.show_notice(str(listing.error))
        return True

    def _finish(self, result: SelectionResult) -> None:
        self.state = Terminated(result)
        self.navigator.reset()
        logger.debug("session finished with %s", result)
        self.on_complete(result)


__all__ = [
    "NOTICE_PERMISSION_DENIED",
    "Picked",
    "Cancelled",
    "SelectionResult",
    "AwaitingPermission",
    "Browsing",
    "Terminated",
    "SessionState",
    "PresentationHooks",
    "SelectionController",
]
