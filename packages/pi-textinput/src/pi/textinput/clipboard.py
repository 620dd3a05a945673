"""Clipboard capability consumed by the text input."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

import pyperclip

logger = logging.getLogger(__name__)


@runtime_checkable
class ClipboardProvider(Protocol):
    """Read/write access to a clipboard, supplied by the host."""

    def read(self) -> str:
        """Return the current clipboard text."""
        ...

    def write(self, text: str) -> None:
        """Replace the clipboard contents with *text*."""
        ...


class MemoryClipboard:
    """Clipboard that lives in process memory.

    Used by hosts without a system clipboard, and in tests.
    """

    def __init__(self, text: str = "") -> None:
        self._text = text

    def read(self) -> str:
        return self._text

    def write(self, text: str) -> None:
        self._text = text


class SystemClipboard:
    """The operating system clipboard, through pyperclip.

    A host without a usable clipboard mechanism reads as empty and ignores
    writes; each failure is logged.
    """

    def read(self) -> str:
        try:
            return pyperclip.paste() or ""
        except pyperclip.PyperclipException as exc:
            logger.warning("System clipboard unavailable for paste: %s", exc)
            return ""

    def write(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            logger.warning("System clipboard unavailable for copy: %s", exc)
