"""TextInput - editable text state of a single- or multi-line text control."""

from __future__ import annotations

from pi.textinput.buffer import TextBuffer
from pi.textinput.clipboard import ClipboardProvider, MemoryClipboard
from pi.textinput.config import DEFAULT_PAGE_SIZE, TextInputOptions
from pi.textinput.dispatcher import KeyCommandDispatcher
from pi.textinput.keybindings import KeybindingsConfig, KeybindingsManager
from pi.textinput.keys import KeyEvent, KeyId
from pi.textinput.mutation import MutationEngine
from pi.textinput.navigator import Navigator
from pi.textinput.platforms import PlatformKeymap
from pi.textinput.selection import SelectionModel
from pi.textinput.types import (
    Direction,
    KeyReaction,
    Selection,
    SelectionDirection,
    SelectionState,
    TextPoint,
)


class TextInput:
    """Caret, selection and content of a text control.

    All state changes go through the methods below; the lines are never
    handed out for in-place editing. Positions are ``TextPoint`` values with
    UTF-8 byte indices, and offsets are UTF-8 byte offsets into
    :meth:`get_content`.
    """

    def __init__(
        self,
        initial: str = "",
        clipboard: ClipboardProvider | None = None,
        *,
        multiline: bool = False,
        max_length: int | None = None,
        min_length: int | None = None,
        selection_direction: SelectionDirection = "none",
        platform: PlatformKeymap | None = None,
        keybindings: KeybindingsConfig | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self.buffer = TextBuffer(multiline=multiline)
        self.selection = SelectionModel(self.buffer, selection_direction)
        self.navigator = Navigator(self.buffer, self.selection)
        self.mutations = MutationEngine(
            self.buffer, self.selection, self.navigator, max_length=max_length
        )
        self.min_length = min_length
        self.clipboard: ClipboardProvider = clipboard if clipboard is not None else MemoryClipboard()
        self.dispatcher = KeyCommandDispatcher(
            self,
            KeybindingsManager(keybindings, platform=platform),
            page_size=page_size,
        )
        self.set_content(initial, update_cursor=False)

    @classmethod
    def from_options(
        cls,
        initial: str = "",
        clipboard: ClipboardProvider | None = None,
        options: TextInputOptions | None = None,
    ) -> TextInput:
        opts = options or TextInputOptions()
        return cls(
            initial,
            clipboard,
            multiline=opts.multiline,
            max_length=opts.max_length,
            min_length=opts.min_length,
            selection_direction=opts.selection_direction,
            platform=opts.platform,
            keybindings=opts.keybindings,
            page_size=opts.page_size,
        )

    # -- state -----------------------------------------------------------

    @property
    def multiline(self) -> bool:
        return self.buffer.multiline

    @property
    def lines(self) -> list[str]:
        return self.buffer.lines

    @property
    def edit_point(self) -> TextPoint:
        return self.selection.edit_point

    @property
    def selection_origin(self) -> TextPoint | None:
        return self.selection.selection_origin

    @property
    def selection_direction(self) -> SelectionDirection:
        return self.selection.selection_direction

    @property
    def max_length(self) -> int | None:
        return self.mutations.max_length

    @max_length.setter
    def max_length(self, value: int | None) -> None:
        self.mutations.max_length = value

    # -- content ---------------------------------------------------------

    def get_content(self) -> str:
        """Current contents, lines joined by ``\\n``."""
        return self.buffer.get_content()

    def set_content(self, content: str, update_cursor: bool) -> None:
        """Replace the contents and drop the selection.

        Multiline inputs break *content* into lines at ``\\r\\n``, ``\\n``
        and ``\\r``. With *update_cursor* the edit point is clamped into the
        new content; otherwise the caller must make sure it is still valid.
        """
        self.buffer.set_content(content)
        if update_cursor:
            self.selection.clamp_edit_point()
        self.selection.selection_origin = None
        self.selection.check()

    def single_line_content(self) -> str:
        """Contents of a single-line input."""
        assert not self.multiline, "single_line_content() called on a multiline input"
        return self.buffer.line(0)

    def set_single_line_content(self, content: str) -> None:
        """Replace the line of a single-line input, keeping the caret inside it."""
        assert not self.multiline, "set_single_line_content() called on a multiline input"
        self.buffer.set_line(0, content)
        self.selection.clear_selection()
        self.selection.clamp_edit_point()
        self.selection.check()

    def current_line_length(self) -> int:
        return self.selection.current_line_length()

    def is_empty(self) -> bool:
        return self.buffer.is_empty()

    def __len__(self) -> int:
        return len(self.buffer)

    def utf16_len(self) -> int:
        return self.buffer.utf16_len()

    def char_count(self) -> int:
        return self.buffer.char_count()

    def text_point_to_offset(self, point: TextPoint) -> int:
        return self.buffer.text_point_to_offset(point)

    def offset_to_text_point(self, offset: int) -> TextPoint:
        return self.buffer.offset_to_text_point(offset)

    # -- selection -------------------------------------------------------

    def has_selection(self) -> bool:
        return self.selection.has_selection()

    def selection_origin_or_edit_point(self) -> TextPoint:
        return self.selection.selection_origin_or_edit_point()

    def selection_start(self) -> TextPoint:
        return self.selection.selection_start()

    def selection_end(self) -> TextPoint:
        return self.selection.selection_end()

    def selection_start_offset(self) -> int:
        return self.selection.selection_start_offset()

    def selection_end_offset(self) -> int:
        return self.selection.selection_end_offset()

    def sorted_selection_bounds(self) -> tuple[TextPoint, TextPoint]:
        return self.selection.sorted_selection_bounds()

    def sorted_selection_offsets_range(self) -> range:
        return self.selection.sorted_selection_offsets_range()

    def selection_state(self) -> SelectionState:
        return self.selection.selection_state()

    def get_selection_text(self) -> str | None:
        return self.selection.get_selection_text()

    def clear_selection(self) -> None:
        self.selection.clear_selection()

    def clear_selection_to_limit(self, direction: Direction, update_cursor: bool) -> None:
        """Drop the selection, then move to the start or end of the content."""
        self.selection.clear_selection()
        self.navigator.adjust_horizontal_to_limit(direction, "not_selected", update_cursor)

    def select_all(self) -> None:
        self.selection.select_all()

    def set_selection_range(self, start: int, end: int, direction: SelectionDirection) -> None:
        self.selection.set_selection_range(start, end, direction)

    # -- editing ---------------------------------------------------------

    def replace_selection(self, insert: str) -> None:
        self.mutations.replace_selection(insert)

    def delete_char(self, direction: Direction) -> None:
        self.mutations.delete_char(direction)

    def insert_char(self, ch: str) -> None:
        self.mutations.insert_char(ch)

    def insert_string(self, text: str) -> None:
        self.mutations.insert_string(text)

    def handle_return(self) -> KeyReaction:
        """Insert a line break, or ask the host to run its default action."""
        if not self.multiline:
            return "trigger_default_action"
        self.insert_char("\n")
        return "dispatch_input"

    # -- navigation ------------------------------------------------------

    def adjust_vertical(self, adjust: int, select: Selection) -> None:
        self.navigator.adjust_vertical(adjust, select)

    def adjust_horizontal(self, adjust: int, select: Selection) -> None:
        self.navigator.adjust_horizontal(adjust, select)

    def adjust_horizontal_by_one(self, direction: Direction, select: Selection) -> None:
        self.navigator.adjust_horizontal_by_one(direction, select)

    def adjust_horizontal_by_word(self, direction: Direction, select: Selection) -> None:
        self.navigator.adjust_horizontal_by_word(direction, select)

    def adjust_horizontal_to_line_end(self, direction: Direction, select: Selection) -> None:
        self.navigator.adjust_horizontal_to_line_end(direction, select)

    def adjust_horizontal_to_limit(
        self, direction: Direction, select: Selection, update_cursor: bool
    ) -> None:
        self.navigator.adjust_horizontal_to_limit(direction, select, update_cursor)

    def set_edit_point_index(self, graphemes: int) -> None:
        self.navigator.set_edit_point_index(graphemes)

    # -- keyboard --------------------------------------------------------

    def handle_keydown(self, event: KeyEvent) -> KeyReaction:
        """Process a decoded key press and tell the host how to react."""
        return self.dispatcher.handle_keydown(event)

    def handle_keydown_aux(self, printable: str | None, key: KeyId, modifiers: int) -> KeyReaction:
        return self.dispatcher.handle_keydown_aux(printable, key, modifiers)
