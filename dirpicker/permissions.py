"""Storage permission gates.

Each platform gets one gate strategy chosen at startup by
:func:`select_permission_gate`; the controller only sees the
``check_granted`` / ``request_access`` pair.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable
from pathlib import Path

from .navigator import default_preferred_root

logger = logging.getLogger(__name__)

PermissionCallback = Callable[[bool], None]


class PermissionGate:
    """Interface for storage-access permission checks."""

    def check_granted(self) -> bool:
        raise NotImplementedError

    def request_access(self, callback: PermissionCallback) -> None:
        """Ask for access and report the outcome through ``callback``.

        The callback may run before this method returns or at any later time.
        """
        raise NotImplementedError


class StaticPermissionGate(PermissionGate):
    """Gate with a fixed answer, for platforms without a storage permission model."""

    def __init__(self, granted: bool = True) -> None:
        self.granted = granted

    def check_granted(self) -> bool:
        return self.granted

    def request_access(self, callback: PermissionCallback) -> None:
        callback(self.granted)


class ReadableRootGate(PermissionGate):
    """Grant access when the storage root is readable by this process.

    Requesting access cannot change filesystem modes, so it re-checks and
    reports the current answer.
    """

    def __init__(self, storage_root: Path) -> None:
        self.storage_root = Path(storage_root)

    def check_granted(self) -> bool:
        try:
            return self.storage_root.is_dir() and os.access(self.storage_root, os.R_OK)
        except OSError:
            return False

    def request_access(self, callback: PermissionCallback) -> None:
        callback(self.check_granted())


class PromptPermissionGate(PermissionGate):
    """Delegate to a host-provided check and asynchronous prompt.

    Every check queries the host, so a grant revoked mid-session is noticed.
    """

    def __init__(
        self,
        check: Callable[[], bool],
        prompt: Callable[[PermissionCallback], None],
    ) -> None:
        self._check = check
        self._prompt = prompt

    def check_granted(self) -> bool:
        return bool(self._check())

    def request_access(self, callback: PermissionCallback) -> None:
        self._prompt(lambda granted: callback(bool(granted)))


def select_permission_gate(
    platform: str | None = None,
    storage_root: Path | None = None,
    check: Callable[[], bool] | None = None,
    prompt: Callable[[PermissionCallback], None] | None = None,
) -> PermissionGate:
    """Pick the gate strategy for ``platform`` (defaults to ``sys.platform``).

    A host prompt wins when supplied; Windows has no storage permission model;
    everything else checks readability of ``storage_root`` (default: the
    navigator's preferred root).
    """
    platform_name = platform if platform is not None else sys.platform
    if prompt is not None:
        gate: PermissionGate = PromptPermissionGate(check or (lambda: False), prompt)
    elif platform_name.startswith("win"):
        gate = StaticPermissionGate(granted=True)
    else:
        gate = ReadableRootGate(storage_root if storage_root is not None else default_preferred_root())
    logger.debug("using %s for platform %s", type(gate).__name__, platform_name)
    return gate


__all__ = [
    "PermissionCallback",
    "PermissionGate",
    "StaticPermissionGate",
    "ReadableRootGate",
    "PromptPermissionGate",
    "select_permission_gate",
]
