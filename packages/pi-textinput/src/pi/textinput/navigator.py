"""Caret movement: lines, bytes, grapheme clusters, words and limits."""

from __future__ import annotations

from pi.textinput.buffer import TextBuffer
from pi.textinput.selection import SelectionModel
from pi.textinput.types import Direction, Selection, TextPoint
from pi.textinput.utils import (
    byte_len,
    ceil_char_boundary,
    first_grapheme,
    floor_char_boundary,
    get_segmenter,
    is_word_segment,
    last_grapheme,
    len_of_first_n_chars,
    split_at_byte,
    split_word_bounds,
)

_segmenter = get_segmenter()


class Navigator:
    """Computes new edit points and moves the caret.

    Every public move either extends the selection (``"selected"``) or
    collapses it (``"not_selected"``). A non-extending horizontal move made
    while a selection exists only collapses the caret onto the selection edge
    on the side of the move.
    """

    def __init__(self, buffer: TextBuffer, selection: SelectionModel) -> None:
        self._buffer = buffer
        self._selection = selection

    # -- vertical --------------------------------------------------------

    def adjust_vertical(self, adjust: int, select: Selection) -> None:
        """Move the caret by *adjust* lines, keeping its character column.

        Moving above the first line lands at the start of the document, below
        the last line at the end of the document.
        """
        if not self._buffer.multiline:
            return
        self._move_vertical(adjust, select)
        self._finish()

    def _move_vertical(self, adjust: int, select: Selection) -> None:
        sel = self._selection
        if select == "selected":
            sel.begin_selection()
        else:
            sel.clear_selection()

        point = sel.edit_point
        target = point.line + adjust
        if target < 0:
            sel.edit_point = TextPoint(0, 0)
            return
        if target > self._buffer.last_line:
            last = self._buffer.last_line
            sel.edit_point = TextPoint(last, self._buffer.line_length(last))
            return

        before, _ = split_at_byte(self._buffer.line(point.line), point.index)
        column = len(before)
        sel.edit_point = TextPoint(target, len_of_first_n_chars(self._buffer.line(target), column))

    # -- horizontal ------------------------------------------------------

    def adjust_horizontal(self, adjust: int, select: Selection) -> None:
        """Move the caret by *adjust* bytes, wrapping across lines.

        Each line break crossed consumes one byte of the adjustment. A move
        that would land inside a multi-byte character stops at the next
        character boundary in the direction of travel.
        """
        direction: Direction = "forward" if adjust >= 0 else "backward"
        if self._collapse_or_extend(direction, select):
            self._finish()
            return
        self._perform_horizontal_adjustment(adjust, select)
        self._finish()

    def adjust_horizontal_by_one(self, direction: Direction, select: Selection) -> None:
        """Move the caret one grapheme cluster, or across one line break."""
        if self._collapse_or_extend(direction, select):
            self._finish()
            return
        point = self._selection.edit_point
        before, after = split_at_byte(self._buffer.line(point.line), point.index)
        if direction == "forward":
            cluster = first_grapheme(after)
            adjust = byte_len(cluster) if cluster else 1
        else:
            cluster = last_grapheme(before)
            adjust = -byte_len(cluster) if cluster else -1
        self._perform_horizontal_adjustment(adjust, select)
        self._finish()

    def adjust_horizontal_by_word(self, direction: Direction, select: Selection) -> None:
        """Move the caret past the next word in *direction*.

        Whitespace and punctuation are skipped until a segment containing a
        letter or digit has been passed. At a line edge the scan continues on
        the neighbouring line.
        """
        if self._collapse_or_extend(direction, select):
            self._finish()
            return

        point = self._selection.edit_point
        line_text = self._buffer.line(point.line)
        before, after = split_at_byte(line_text, point.index)
        newline_adjustment = 0

        if direction == "backward":
            if point.index == 0 and point.line > 0:
                scanned = self._buffer.line(point.line - 1)
                newline_adjustment = 1
            else:
                scanned = before
            segments = reversed(split_word_bounds(scanned))
        else:
            if not after and point.line < self._buffer.last_line:
                scanned = self._buffer.line(point.line + 1)
                newline_adjustment = 1
            else:
                scanned = after
            segments = iter(split_word_bounds(scanned))

        shift = 0
        for segment in segments:
            shift += byte_len(segment)
            if is_word_segment(segment):
                break
        shift += newline_adjustment

        self._perform_horizontal_adjustment(shift if direction == "forward" else -shift, select)
        self._finish()

    def adjust_horizontal_to_line_end(self, direction: Direction, select: Selection) -> None:
        """Move the caret to the start or end of the current line."""
        if self._collapse_or_extend(direction, select):
            self._finish()
            return
        point = self._selection.edit_point
        if direction == "backward":
            shift = -point.index
        else:
            shift = self._buffer.line_length(point.line) - point.index
        self._perform_horizontal_adjustment(shift, select)
        self._finish()

    def adjust_horizontal_to_limit(
        self, direction: Direction, select: Selection, update_cursor: bool
    ) -> None:
        """Move the caret to the start or end of the whole document.

        With ``update_cursor=False`` the caret stays where it is; only the
        selection handling applies.
        """
        if self._collapse_or_extend(direction, select):
            self._finish()
            return
        if update_cursor:
            sel = self._selection
            if direction == "backward":
                sel.edit_point = TextPoint(0, 0)
            else:
                last = self._buffer.last_line
                sel.edit_point = TextPoint(last, self._buffer.line_length(last))
        self._finish()

    def move_to_line_edge(self, direction: Direction) -> None:
        """Put the caret at the start or end of its line, leaving any selection anchored."""
        sel = self._selection
        point = sel.edit_point
        index = 0 if direction == "backward" else self._buffer.line_length(point.line)
        sel.edit_point = TextPoint(point.line, index)
        self._finish()

    def set_edit_point_index(self, graphemes: int) -> None:
        """Place the caret after the first *graphemes* clusters of the current line."""
        sel = self._selection
        clusters = _segmenter.segment(self._buffer.line(sel.edit_point.line))
        index = sum(byte_len(g) for g in clusters[:graphemes])
        sel.edit_point = TextPoint(sel.edit_point.line, index)
        self._finish()

    # -- internals -------------------------------------------------------

    def _collapse_or_extend(self, direction: Direction, select: Selection) -> bool:
        """Prepare the selection for a horizontal move.

        Returns ``True`` when the move was consumed by collapsing an existing
        selection onto its edge.
        """
        sel = self._selection
        if select == "selected":
            sel.begin_selection()
            sel.selection_direction = direction
            return False
        if sel.has_selection():
            sel.edit_point = sel.selection_start() if direction == "backward" else sel.selection_end()
            sel.clear_selection()
            return True
        return False

    def _perform_horizontal_adjustment(self, adjust: int, select: Selection) -> None:
        sel = self._selection
        buffer = self._buffer
        while True:
            point = sel.edit_point
            if adjust < 0:
                remaining = point.index
                if -adjust > remaining and point.line > 0:
                    self._move_vertical(-1, select)
                    line = sel.edit_point.line
                    sel.edit_point = TextPoint(line, buffer.line_length(line))
                    # the line break itself takes one unit
                    adjust += remaining + 1
                    continue
                index = floor_char_boundary(buffer.line(point.line), max(0, point.index + adjust))
            else:
                remaining = buffer.line_length(point.line) - point.index
                if adjust > remaining and point.line < buffer.last_line:
                    self._move_vertical(1, select)
                    sel.edit_point = TextPoint(sel.edit_point.line, 0)
                    adjust -= remaining + 1
                    continue
                index = ceil_char_boundary(
                    buffer.line(point.line),
                    min(buffer.line_length(point.line), point.index + adjust),
                )
            sel.edit_point = TextPoint(point.line, index)
            return

    def _finish(self) -> None:
        """Re-derive the selection direction from the caret and validate."""
        sel = self._selection
        origin = sel.selection_origin
        if origin is not None:
            if sel.edit_point < origin:
                sel.selection_direction = "backward"
            elif origin < sel.edit_point:
                sel.selection_direction = "forward"
        sel.check()
