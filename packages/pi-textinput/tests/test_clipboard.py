"""Tests for pi.textinput.clipboard."""

from __future__ import annotations

import logging

import pyperclip
import pytest

from pi.textinput.clipboard import ClipboardProvider, MemoryClipboard, SystemClipboard


class TestMemoryClipboard:
    def test_round_trip(self) -> None:
        clipboard = MemoryClipboard()
        assert clipboard.read() == ""
        clipboard.write("hello")
        assert clipboard.read() == "hello"

    def test_initial_text(self) -> None:
        assert MemoryClipboard("seed").read() == "seed"

    def test_satisfies_protocol(self) -> None:
        assert isinstance(MemoryClipboard(), ClipboardProvider)
        assert isinstance(SystemClipboard(), ClipboardProvider)


class TestSystemClipboard:
    """SystemClipboard delegates to pyperclip and degrades quietly."""

    def test_delegates_to_pyperclip(self, monkeypatch: pytest.MonkeyPatch) -> None:
        store: dict[str, str] = {}
        monkeypatch.setattr(pyperclip, "copy", lambda text: store.update(text=text))
        monkeypatch.setattr(pyperclip, "paste", lambda: store.get("text", ""))

        clipboard = SystemClipboard()
        clipboard.write("copied")
        assert store == {"text": "copied"}
        assert clipboard.read() == "copied"

    def test_unavailable_clipboard_reads_empty(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        def fail() -> str:
            raise pyperclip.PyperclipException("no clipboard mechanism")

        monkeypatch.setattr(pyperclip, "paste", fail)
        with caplog.at_level(logging.WARNING, logger="pi.textinput.clipboard"):
            assert SystemClipboard().read() == ""
        assert "no clipboard mechanism" in caplog.text

    def test_unavailable_clipboard_ignores_writes(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        def fail(text: str) -> None:
            raise pyperclip.PyperclipException("no clipboard mechanism")

        monkeypatch.setattr(pyperclip, "copy", fail)
        with caplog.at_level(logging.WARNING, logger="pi.textinput.clipboard"):
            SystemClipboard().write("lost")
        assert any(record.levelno == logging.WARNING for record in caplog.records)
