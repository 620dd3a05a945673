"""Caret and selection state over a TextBuffer."""

from __future__ import annotations

import logging

from pi.textinput.buffer import TextBuffer
from pi.textinput.types import SelectionDirection, SelectionState, TextPoint
from pi.textinput.utils import floor_char_boundary, is_char_boundary, utf16_len

logger = logging.getLogger(__name__)


class SelectionModel:
    """Owns the edit point, the selection origin and the selection direction.

    The selection runs from ``selection_origin`` to ``edit_point``. For a
    backward selection the origin sits after the edit point. An origin equal
    to the edit point is a valid zero-length selection, which is not the same
    as having no selection at all.
    """

    def __init__(self, buffer: TextBuffer, direction: SelectionDirection = "none") -> None:
        self._buffer = buffer
        self.edit_point = TextPoint()
        self.selection_origin: TextPoint | None = None
        self.selection_direction: SelectionDirection = direction

    # -- queries ---------------------------------------------------------

    def has_selection(self) -> bool:
        return self.selection_origin is not None

    def selection_origin_or_edit_point(self) -> TextPoint:
        return self.selection_origin if self.selection_origin is not None else self.edit_point

    def selection_start(self) -> TextPoint:
        """Start of the selection, or the edit point if there is none.

        Always less than or equal to :meth:`selection_end`.
        """
        if self.selection_direction == "backward":
            return self.edit_point
        return self.selection_origin_or_edit_point()

    def selection_end(self) -> TextPoint:
        if self.selection_direction == "backward":
            return self.selection_origin_or_edit_point()
        return self.edit_point

    def selection_start_offset(self) -> int:
        return self._buffer.text_point_to_offset(self.selection_start())

    def selection_end_offset(self) -> int:
        return self._buffer.text_point_to_offset(self.selection_end())

    def sorted_selection_bounds(self) -> tuple[TextPoint, TextPoint]:
        return self.selection_start(), self.selection_end()

    def sorted_selection_offsets_range(self) -> range:
        """Selection as a half-open range of byte offsets.

        Empty at the edit point when there is no selection.
        """
        return range(self.selection_start_offset(), self.selection_end_offset())

    def selection_state(self) -> SelectionState:
        return SelectionState(
            start=self.selection_start(),
            end=self.selection_end(),
            direction=self.selection_direction,
        )

    def get_selection_text(self) -> str | None:
        """The selected text, or ``None`` if nothing (or nothing visible) is selected."""
        if not self.has_selection():
            return None
        text = self._buffer.text_between(*self.sorted_selection_bounds())
        return text or None

    def selection_utf16_len(self) -> int:
        """Length of the selected text in UTF-16 code units."""
        return utf16_len(self.get_selection_text() or "")

    def current_line_length(self) -> int:
        return self._buffer.line_length(self.edit_point.line)

    # -- mutations -------------------------------------------------------

    def begin_selection(self) -> None:
        """Anchor a selection at the edit point unless one is already active."""
        if self.selection_origin is None:
            self.selection_origin = self.edit_point

    def clear_selection(self) -> None:
        self.selection_origin = None
        self.selection_direction = "none"

    def select_all(self) -> None:
        last_line = self._buffer.last_line
        self.selection_direction = "none"
        self.selection_origin = TextPoint(0, 0)
        self.edit_point = TextPoint(last_line, self._buffer.line_length(last_line))
        self.check()

    def set_selection_range(self, start: int, end: int, direction: SelectionDirection) -> None:
        """Select the byte range ``[start, end)``.

        Out-of-range offsets are clamped: *end* to the content length, then
        *start* to *end*. Offsets inside a multi-byte character move back to
        its first byte.
        """
        start, end = max(0, start), max(0, end)
        text_end = len(self._buffer)
        if end > text_end:
            logger.debug("Clamping selection end %d to content length %d", end, text_end)
            end = text_end
        if start > end:
            logger.debug("Clamping selection start %d to end %d", start, end)
            start = end

        self.selection_direction = direction
        start_point = self._snap(self._buffer.offset_to_text_point(start))
        end_point = self._snap(self._buffer.offset_to_text_point(end))
        if direction == "backward":
            self.selection_origin = end_point
            self.edit_point = start_point
        else:
            self.selection_origin = start_point
            self.edit_point = end_point
        self.check()

    def _snap(self, point: TextPoint) -> TextPoint:
        """Move *point* back onto a character boundary of its line."""
        index = floor_char_boundary(self._buffer.line(point.line), point.index)
        return TextPoint(point.line, index)

    def clamp_edit_point(self) -> None:
        """Pull the edit point back inside the buffer."""
        line = min(self.edit_point.line, self._buffer.last_line)
        index = floor_char_boundary(self._buffer.line(line), self.edit_point.index)
        self.edit_point = TextPoint(line, index)

    # -- invariants ------------------------------------------------------

    def check(self) -> None:
        """Assert that the edit point and selection are valid for the buffer.

        Violations mean a caller bypassed the editing API. The checks are
        plain ``assert`` statements and disappear under ``python -O``.
        """
        buffer = self._buffer
        assert buffer.line_count >= 1
        assert buffer.multiline or buffer.line_count == 1, "single-line input holds several lines"

        origin = self.selection_origin
        if origin is not None:
            assert origin.line < buffer.line_count
            assert origin.index <= buffer.line_length(origin.line)
            assert is_char_boundary(buffer.line(origin.line), origin.index)
            if self.selection_direction == "backward":
                assert self.edit_point <= origin
            else:
                assert origin <= self.edit_point

        point = self.edit_point
        assert point.line < buffer.line_count
        assert point.index <= buffer.line_length(point.line)
        assert is_char_boundary(buffer.line(point.line), point.index)
