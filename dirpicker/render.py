"""Plain-text rendering of directory listings.

Formats one row per entry with folder/file/image markers and size labels, and
provides a stream-backed presenter hosts can plug straight into a
``SelectionController``.
"""

from __future__ import annotations

import re
import sys
from typing import TextIO

from .controller import PresentationHooks
from .navigator import DirectoryEntry, FileEntry

IMAGE_SUFFIXES = (".jpg", ".jpeg", ".png", ".bmp", ".webp")
SIZE_LABEL_MIN_BYTES = 10 * 1024

FOLDER_MARKER = "[D]"
FILE_MARKER = "[F]"
IMAGE_MARKER = "[I]"

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")

_RESET = "\033[0m"
_FOLDER_COLOR = "\033[1;34m"
_IMAGE_COLOR = "\033[35m"
_SIZE_COLOR = "\033[2;37m"
_NOTICE_COLOR = "\033[33m"


def is_image_name(name: str) -> bool:
    """Return whether ``name`` has a thumbnail-capable image suffix."""
    return name.lower().endswith(IMAGE_SUFFIXES)


def sanitize_display_name(name: str) -> str:
    """Escape control characters so filenames cannot drive the terminal."""
    if _CONTROL_RE.search(name) is None:
        return name
    return _CONTROL_RE.sub(lambda match: f"\\x{ord(match.group()):02x}", name)


def _truncate(text: str, width: int) -> str:
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    if width <= 3:
        return text[:width]
    return text[: width - 3] + "..."


def format_entry_row(entry: DirectoryEntry, width: int = 80, no_color: bool = False) -> str:
    """Render one listing row, clipped to ``width`` visible columns."""
    name = sanitize_display_name(entry.name)
    if entry.is_dir:
        marker, color, label = FOLDER_MARKER, _FOLDER_COLOR, name + "/"
    elif is_image_name(entry.name):
        marker, color, label = IMAGE_MARKER, _IMAGE_COLOR, name
    else:
        marker, color, label = FILE_MARKER, "", name

    size_label = ""
    if isinstance(entry, FileEntry) and entry.file_size is not None and entry.file_size >= SIZE_LABEL_MIN_BYTES:
        size_label = f" [{entry.file_size // 1024} KB]"

    label = _truncate(label, max(0, width - len(marker) - 1 - len(size_label)))
    if no_color:
        return _truncate(f"{marker} {label}{size_label}", width)
    row = f"{marker} {color}{label}{_RESET if color else ''}"
    if size_label:
        row += f"{_SIZE_COLOR}{size_label}{_RESET}"
    return row


class ConsolePresenter:
    """Write paths, listings, and notices to a text stream."""

    def __init__(self, stream: TextIO | None = None, width: int = 80, no_color: bool = False) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.width = max(1, width)
        self.no_color = no_color

    def display_path(self, path: str) -> None:
        self.stream.write(_truncate(sanitize_display_name(path), self.width) + "\n")

    def display_entries(self, entries: tuple[DirectoryEntry, ...]) -> None:
        if not entries:
            self.stream.write("  (empty)\n")
            return
        for index, entry in enumerate(entries, start=1):
            prefix = f"{index:>3} "
            self.stream.write(prefix + format_entry_row(entry, self.width - len(prefix), self.no_color) + "\n")

    def show_notice(self, message: str) -> None:
        text = f"! {sanitize_display_name(message)}"
        if not self.no_color:
            text = f"{_NOTICE_COLOR}{text}{_RESET}"
        self.stream.write(text + "\n")

    def hooks(self) -> PresentationHooks:
        return PresentationHooks(
            display_entries=self.display_entries,
            display_path=self.display_path,
            show_notice=self.show_notice,
        )
