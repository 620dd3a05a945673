"""Insert, delete and replace operations honoring the selection and length limits."""

from __future__ import annotations

import logging

from pi.textinput.buffer import TextBuffer, split_lines
from pi.textinput.navigator import Navigator
from pi.textinput.selection import SelectionModel
from pi.textinput.types import Direction
from pi.textinput.utils import truncate_utf16

logger = logging.getLogger(__name__)


class MutationEngine:
    """Applies edits to a TextBuffer through the current selection.

    ``max_length`` is measured in UTF-16 code units, like the ``maxlength``
    attribute of an HTML text control.
    """

    def __init__(
        self,
        buffer: TextBuffer,
        selection: SelectionModel,
        navigator: Navigator,
        *,
        max_length: int | None = None,
    ) -> None:
        self._buffer = buffer
        self._selection = selection
        self._navigator = navigator
        self.max_length = max_length

    def replace_selection(self, insert: str) -> None:
        """Replace the selected text with *insert*.

        Does nothing without a selection. When a ``max_length`` is set, the
        insertion is truncated (at a code point boundary) to what still fits
        once the selection is gone; if nothing fits, the selection is left
        untouched as well.
        """
        sel = self._selection
        if not sel.has_selection():
            return

        start, end = sel.sorted_selection_bounds()

        allowed: int | None = None
        if self.max_length is not None:
            len_after_removal = self._buffer.utf16_len() - sel.selection_utf16_len()
            if len_after_removal >= self.max_length:
                logger.debug(
                    "Rejecting edit: %d code units would remain, max_length is %d",
                    len_after_removal,
                    self.max_length,
                )
                return
            allowed = self.max_length - len_after_removal

        text = truncate_utf16(insert, allowed)
        if len(text) < len(insert):
            logger.debug("Truncated insertion from %d to %d characters", len(insert), len(text))

        sel.clear_selection()
        sel.edit_point = self._buffer.splice(start, end, split_lines(text, self._buffer.multiline))
        sel.check()

    def delete_char(self, direction: Direction) -> None:
        """Delete the selection, or one grapheme cluster (or line break) next to the caret."""
        sel = self._selection
        if sel.selection_origin is None or sel.selection_origin == sel.edit_point:
            self._navigator.adjust_horizontal_by_one(direction, "selected")
        self.replace_selection("")

    def insert_char(self, ch: str) -> None:
        self.insert_string(ch)

    def insert_string(self, text: str) -> None:
        """Insert *text* at the caret, replacing the selection if there is one."""
        self._selection.begin_selection()
        self.replace_selection(text)
