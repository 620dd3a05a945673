"""Key event dispatch: maps decoded key presses onto editing actions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pi.textinput.config import DEFAULT_PAGE_SIZE
from pi.textinput.keybindings import KeybindingsManager
from pi.textinput.keys import KeyEvent, KeyId
from pi.textinput.types import KeyReaction, Selection

if TYPE_CHECKING:
    from pi.textinput.text_input import TextInput

logger = logging.getLogger(__name__)


class KeyCommandDispatcher:
    """Runs the editing action bound to a key event.

    Bindings are tried in a fixed order and the first match wins. Bindings
    checked before printable characters take precedence over text entry;
    everything after only applies to non-printable keys. Shift never
    triggers an action by itself: it turns caret moves into selection
    extensions.
    """

    def __init__(
        self,
        text_input: TextInput,
        keybindings: KeybindingsManager,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self._input = text_input
        self.keybindings = keybindings
        self.page_size = page_size

    def handle_keydown_aux(self, printable: str | None, key: KeyId, modifiers: int) -> KeyReaction:
        return self.handle_keydown(KeyEvent(key=key, modifiers=modifiers, printable=printable))

    def handle_keydown(self, event: KeyEvent) -> KeyReaction:
        reaction = self._dispatch(event)
        logger.debug("Key %s (modifiers=%d) -> %s", event.key, event.modifiers, reaction)
        return reaction

    def _dispatch(self, event: KeyEvent) -> KeyReaction:  # noqa: C901
        kb = self.keybindings
        ti = self._input
        select: Selection = "selected" if event.shift else "not_selected"

        if kb.matches(event, "cursorLineStart"):
            ti.adjust_horizontal_to_line_end("backward", select)
            return "redraw_selection"

        if kb.matches(event, "cursorLineEnd"):
            ti.adjust_horizontal_to_line_end("forward", select)
            return "redraw_selection"

        if kb.matches(event, "cursorWordLeft"):
            ti.adjust_horizontal_by_word("backward", select)
            return "redraw_selection"

        if kb.matches(event, "cursorWordRight"):
            ti.adjust_horizontal_by_word("forward", select)
            return "redraw_selection"

        if kb.matches(event, "selectAll"):
            ti.select_all()
            return "redraw_selection"

        if kb.matches(event, "copy"):
            text = ti.get_selection_text()
            if text is not None:
                ti.clipboard.write(text)
            return "dispatch_input"

        if kb.matches(event, "paste"):
            ti.insert_string(ti.clipboard.read())
            return "dispatch_input"

        # Regular character input
        if event.printable is not None:
            ti.insert_char(event.printable)
            return "dispatch_input"

        if kb.matches(event, "deleteCharForward"):
            ti.delete_char("forward")
            return "dispatch_input"

        if kb.matches(event, "deleteCharBackward"):
            ti.delete_char("backward")
            return "dispatch_input"

        if kb.matches(event, "cursorDocumentStart"):
            ti.adjust_horizontal_to_limit("backward", select, True)
            return "redraw_selection"

        if kb.matches(event, "cursorDocumentEnd"):
            ti.adjust_horizontal_to_limit("forward", select, True)
            return "redraw_selection"

        if kb.matches(event, "cursorLeft"):
            ti.adjust_horizontal_by_one("backward", select)
            return "redraw_selection"

        if kb.matches(event, "cursorRight"):
            ti.adjust_horizontal_by_one("forward", select)
            return "redraw_selection"

        if kb.matches(event, "cursorUp"):
            ti.adjust_vertical(-1, select)
            return "redraw_selection"

        if kb.matches(event, "cursorDown"):
            ti.adjust_vertical(1, select)
            return "redraw_selection"

        if kb.matches(event, "newLine"):
            return ti.handle_return()

        if kb.matches(event, "cursorHome"):
            if kb.platform.home_end_moves_caret:
                ti.navigator.move_to_line_edge("backward")
            return "redraw_selection"

        if kb.matches(event, "cursorEnd"):
            if kb.platform.home_end_moves_caret:
                ti.navigator.move_to_line_edge("forward")
            return "redraw_selection"

        if kb.matches(event, "pageUp"):
            ti.adjust_vertical(-self.page_size, select)
            return "redraw_selection"

        if kb.matches(event, "pageDown"):
            ti.adjust_vertical(self.page_size, select)
            return "redraw_selection"

        return "nothing"
