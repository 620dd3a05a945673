"""Line-structured text storage with byte-offset addressing."""

from __future__ import annotations

import re

from pi.textinput.types import TextPoint
from pi.textinput.utils import byte_len, split_at_byte, utf16_len

_LINE_BREAK_RE = re.compile(r"[\n\r]")


def split_lines(content: str, multiline: bool) -> list[str]:
    """Split *content* into lines the way a text control stores them.

    Multiline controls normalize ``\\r\\n`` to ``\\n`` and then break on
    either ``\\n`` or ``\\r``. Single-line controls keep the whole text as
    one line, embedded line breaks included.
    """
    if not multiline:
        return [content]
    return _LINE_BREAK_RE.split(content.replace("\r\n", "\n"))


class TextBuffer:
    """Ordered sequence of lines, none of which contains a line terminator.

    The buffer is never empty: a control with no content holds exactly one
    empty line. Offsets are UTF-8 byte offsets into the content with lines
    joined by a single ``\\n``.
    """

    def __init__(self, content: str = "", *, multiline: bool = False) -> None:
        self.multiline = multiline
        self._lines: list[str] = split_lines(content, multiline)

    # -- content ---------------------------------------------------------

    @property
    def lines(self) -> list[str]:
        """A copy of the stored lines."""
        return list(self._lines)

    def get_content(self) -> str:
        return "\n".join(self._lines)

    def set_content(self, content: str) -> None:
        self._lines = split_lines(content, self.multiline)

    def line(self, line: int) -> str:
        return self._lines[line]

    def set_line(self, line: int, text: str) -> None:
        self._lines[line] = text

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def last_line(self) -> int:
        return len(self._lines) - 1

    def line_length(self, line: int) -> int:
        """Length of *line* in UTF-8 bytes."""
        return byte_len(self._lines[line])

    def is_empty(self) -> bool:
        return len(self._lines) <= 1 and (not self._lines or not self._lines[0])

    # -- length metrics --------------------------------------------------

    def __len__(self) -> int:
        return self.byte_len()

    def byte_len(self) -> int:
        """Content length in UTF-8 bytes (each line break counts as one)."""
        return sum(byte_len(line) + 1 for line in self._lines) - 1

    def utf16_len(self) -> int:
        """Content length in UTF-16 code units (each line break counts as one)."""
        return sum(utf16_len(line) + 1 for line in self._lines) - 1

    def char_count(self) -> int:
        """Content length in Unicode scalar values (each line break counts as one)."""
        return sum(len(line) + 1 for line in self._lines) - 1

    # -- offset conversion -----------------------------------------------

    def text_point_to_offset(self, point: TextPoint) -> int:
        """Convert a TextPoint into a byte offset from the start of the content."""
        preceding = sum(byte_len(line) + 1 for line in self._lines[: point.line])
        return preceding + point.index

    def offset_to_text_point(self, offset: int) -> TextPoint:
        """Convert a byte offset from the start of the content into a TextPoint.

        An offset equal to a line's length stays at the end of that line. The
        last line is never walked past, so offsets beyond the content land on
        the last line.
        """
        line = 0
        index = offset
        for text in self._lines[:-1]:
            length = byte_len(text)
            if index <= length:
                break
            index -= length + 1
            line += 1
        return TextPoint(line=line, index=index)

    # -- range access ----------------------------------------------------

    def text_between(self, start: TextPoint, end: TextPoint) -> str:
        """Return the content between two points (``start <= end``)."""
        if start.line == end.line:
            _, tail = split_at_byte(self._lines[start.line], start.index)
            head, _ = split_at_byte(tail, end.index - start.index)
            return head
        _, first = split_at_byte(self._lines[start.line], start.index)
        last, _ = split_at_byte(self._lines[end.line], end.index)
        return "\n".join([first, *self._lines[start.line + 1 : end.line], last])

    def splice(self, start: TextPoint, end: TextPoint, insert_lines: list[str]) -> TextPoint:
        """Replace the range ``[start, end)`` with *insert_lines*.

        The part of the start line before *start* is joined to the first
        inserted line, and the part of the end line after *end* is joined to
        the last one; every line in between is replaced wholesale. Returns the
        point just past the inserted text.
        """
        prefix, _ = split_at_byte(self._lines[start.line], start.index)
        _, suffix = split_at_byte(self._lines[end.line], end.index)

        new_lines = list(insert_lines) or [""]
        new_lines[0] = prefix + new_lines[0]
        last = len(new_lines) - 1
        caret = TextPoint(line=start.line + last, index=byte_len(new_lines[last]))
        new_lines[last] += suffix

        self._lines[start.line : end.line + 1] = new_lines
        return caret
