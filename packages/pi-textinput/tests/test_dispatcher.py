"""Tests for key dispatch through TextInput.handle_keydown."""

from __future__ import annotations

from pi.textinput import TextInput, TextInputOptions
from pi.textinput.clipboard import MemoryClipboard
from pi.textinput.keys import ALT, CTRL, SHIFT, SUPER, KeyEvent
from pi.textinput.platforms import DEFAULT, MAC
from pi.textinput.types import KeyReaction, TextPoint


def press(ti: TextInput, key: str, modifiers: int = 0, printable: str | None = None) -> KeyReaction:
    return ti.handle_keydown(KeyEvent(key=key, modifiers=modifiers, printable=printable))


def make(content: str = "", *, platform=DEFAULT, **kwargs) -> TextInput:
    ti = TextInput(content, MemoryClipboard(), platform=platform, **kwargs)
    ti.adjust_horizontal_to_limit("forward", "not_selected", True)
    return ti


# =============================================================================
# Text entry and deletion
# =============================================================================


class TestTextEntry:
    def test_printable_is_inserted(self) -> None:
        ti = make("ab")
        assert press(ti, "c", printable="c") == "dispatch_input"
        assert ti.get_content() == "abc"

    def test_shifted_printable_is_inserted(self) -> None:
        ti = make()
        press(ti, "a", SHIFT, printable="A")
        assert ti.get_content() == "A"

    def test_backspace_and_delete(self) -> None:
        ti = make("abc")
        assert press(ti, "backspace") == "dispatch_input"
        assert ti.get_content() == "ab"
        press(ti, "home")
        assert press(ti, "delete") == "dispatch_input"
        assert ti.get_content() == "b"

    def test_enter_in_single_line_triggers_default_action(self) -> None:
        ti = make("abc")
        assert press(ti, "enter") == "trigger_default_action"
        assert ti.get_content() == "abc"

    def test_enter_in_multiline_inserts_line_break(self) -> None:
        ti = make("abc", multiline=True)
        assert press(ti, "enter") == "dispatch_input"
        assert ti.lines == ["abc", ""]
        assert press(ti, "kpEnter") == "dispatch_input"
        assert ti.lines == ["abc", "", ""]
        assert ti.edit_point == TextPoint(2, 0)

    def test_handle_return_directly(self) -> None:
        assert TextInput("x").handle_return() == "trigger_default_action"
        assert TextInput("x", multiline=True).handle_return() == "dispatch_input"


# =============================================================================
# Clipboard
# =============================================================================


class TestClipboardKeys:
    def test_copy_writes_selection(self) -> None:
        ti = make("hello")
        assert press(ti, "a", CTRL) == "redraw_selection"
        assert press(ti, "c", CTRL) == "dispatch_input"
        assert ti.clipboard.read() == "hello"
        assert ti.get_content() == "hello"

    def test_copy_without_selection_keeps_clipboard(self) -> None:
        ti = make("hello")
        ti.clipboard.write("kept")
        press(ti, "c", CTRL)
        assert ti.clipboard.read() == "kept"

    def test_paste_inserts_clipboard_text(self) -> None:
        ti = make("ab")
        ti.clipboard.write("xyz")
        assert press(ti, "v", CTRL) == "dispatch_input"
        assert ti.get_content() == "abxyz"

    def test_paste_replaces_selection(self) -> None:
        ti = make("hello world")
        ti.set_selection_range(0, 5, "forward")
        ti.clipboard.write("bye")
        press(ti, "v", CTRL)
        assert ti.get_content() == "bye world"

    def test_paste_honors_max_length(self) -> None:
        ti = make("ab", max_length=4)
        ti.clipboard.write("xyz")
        press(ti, "v", CTRL)
        assert ti.get_content() == "abxy"

    def test_mac_uses_command_key(self) -> None:
        ti = make("hello", platform=MAC)
        ti.clipboard.write("!")
        assert press(ti, "v", CTRL) == "nothing"
        assert press(ti, "v", SUPER) == "dispatch_input"
        assert ti.get_content() == "hello!"


# =============================================================================
# Navigation
# =============================================================================


class TestNavigationKeys:
    def test_arrows_move_by_grapheme(self) -> None:
        ti = make("abc")
        assert press(ti, "left") == "redraw_selection"
        assert ti.edit_point == TextPoint(0, 2)
        press(ti, "right")
        assert ti.edit_point == TextPoint(0, 3)

    def test_shift_arrow_selects(self) -> None:
        ti = make("abc")
        press(ti, "left", SHIFT)
        assert ti.get_selection_text() == "c"
        assert ti.selection_direction == "backward"

    def test_arrow_collapses_selection(self) -> None:
        ti = make("abcdef")
        ti.set_selection_range(1, 4, "forward")
        press(ti, "left")
        assert not ti.has_selection()
        assert ti.edit_point == TextPoint(0, 1)

    def test_up_and_down(self) -> None:
        ti = make("abc\nde", multiline=True)
        press(ti, "up")
        assert ti.edit_point == TextPoint(0, 2)
        press(ti, "down", SHIFT)
        assert ti.get_selection_text() == "c\nde"

    def test_word_motion(self) -> None:
        ti = make("foo bar")
        assert press(ti, "b", CTRL | ALT) == "redraw_selection"
        assert ti.edit_point == TextPoint(0, 4)
        press(ti, "left", ALT)
        assert ti.edit_point == TextPoint(0, 0)
        press(ti, "f", CTRL | ALT)
        assert ti.edit_point == TextPoint(0, 3)
        press(ti, "right", ALT | SHIFT)
        assert ti.get_selection_text() == " bar"

    def test_word_motion_wins_over_printable(self) -> None:
        ti = make("foo bar")
        press(ti, "b", CTRL | ALT, printable="b")
        assert ti.get_content() == "foo bar"
        assert ti.edit_point == TextPoint(0, 4)

    def test_emacs_line_motion(self) -> None:
        ti = make("hello")
        press(ti, "a", CTRL | ALT)
        assert ti.edit_point == TextPoint(0, 0)
        press(ti, "e", CTRL | ALT | SHIFT)
        assert ti.get_selection_text() == "hello"

    def test_page_keys_move_by_page_size(self) -> None:
        ti = make("\n".join(str(n) for n in range(40)), multiline=True)
        for _ in range(4):
            press(ti, "up")
        assert ti.edit_point.line == 35
        press(ti, "pageUp")
        assert ti.edit_point.line == 7
        press(ti, "pageDown")
        assert ti.edit_point.line == 35
        press(ti, "pageDown")
        assert ti.edit_point == TextPoint(39, 2)

    def test_page_size_is_configurable(self) -> None:
        ti = TextInput.from_options(
            "\n".join("x" * 3 for _ in range(10)),
            options=TextInputOptions(multiline=True, page_size=4, platform=DEFAULT),
        )
        ti.handle_keydown(KeyEvent("pageDown"))
        assert ti.edit_point == TextPoint(4, 0)

    def test_page_keys_in_single_line_do_nothing(self) -> None:
        ti = make("abc")
        assert press(ti, "pageUp") == "redraw_selection"
        assert ti.edit_point == TextPoint(0, 3)


# =============================================================================
# Platform differences
# =============================================================================


class TestDefaultPlatform:
    def test_select_all_with_ctrl(self) -> None:
        ti = make("hello")
        press(ti, "a", CTRL)
        assert ti.get_selection_text() == "hello"

    def test_home_and_end_move_within_line(self) -> None:
        ti = make("ab\ncd", multiline=True)
        assert press(ti, "home") == "redraw_selection"
        assert ti.edit_point == TextPoint(1, 0)
        assert press(ti, "end") == "redraw_selection"
        assert ti.edit_point == TextPoint(1, 2)

    def test_home_keeps_selection_anchor(self) -> None:
        ti = make("hello")
        press(ti, "left", SHIFT)
        press(ti, "home")
        assert ti.selection_origin == TextPoint(0, 5)
        assert ti.get_selection_text() == "hello"
        assert ti.selection_direction == "backward"

    def test_ctrl_a_does_not_move_to_line_start(self) -> None:
        ti = make("hello")
        press(ti, "a", CTRL)
        assert ti.edit_point == TextPoint(0, 5)


class TestMacPlatform:
    def test_select_all_with_command(self) -> None:
        ti = make("hello", platform=MAC)
        assert press(ti, "a", SUPER) == "redraw_selection"
        assert ti.get_selection_text() == "hello"

    def test_ctrl_a_and_ctrl_e_move_to_line_edges(self) -> None:
        ti = make("hello", platform=MAC)
        assert press(ti, "a", CTRL) == "redraw_selection"
        assert ti.edit_point == TextPoint(0, 0)
        assert not ti.has_selection()
        press(ti, "e", CTRL)
        assert ti.edit_point == TextPoint(0, 5)

    def test_command_arrows(self) -> None:
        ti = make("ab\ncd", platform=MAC, multiline=True)
        press(ti, "left", SUPER)
        assert ti.edit_point == TextPoint(1, 0)
        press(ti, "right", SUPER)
        assert ti.edit_point == TextPoint(1, 2)
        press(ti, "up", SUPER)
        assert ti.edit_point == TextPoint(0, 0)
        press(ti, "down", SUPER | SHIFT)
        assert ti.get_selection_text() == "ab\ncd"

    def test_home_and_end_only_redraw(self) -> None:
        ti = make("hello", platform=MAC)
        assert press(ti, "home") == "redraw_selection"
        assert ti.edit_point == TextPoint(0, 5)
        assert press(ti, "end") == "redraw_selection"
        assert ti.edit_point == TextPoint(0, 5)


# =============================================================================
# Unhandled keys and configuration
# =============================================================================


class TestUnhandled:
    def test_unbound_key_does_nothing(self) -> None:
        ti = make("abc")
        assert press(ti, "f1") == "nothing"
        assert press(ti, "b", CTRL) == "nothing"
        assert ti.get_content() == "abc"

    def test_lone_modifier_does_nothing(self) -> None:
        ti = make("abc")
        assert press(ti, "shift", SHIFT) == "nothing"
        assert not ti.has_selection()

    def test_handle_keydown_aux(self) -> None:
        ti = make("ab")
        assert ti.handle_keydown_aux("c", "c", 0) == "dispatch_input"
        assert ti.handle_keydown_aux(None, "left", SHIFT) == "redraw_selection"
        assert ti.get_selection_text() == "c"

    def test_custom_keybindings(self) -> None:
        ti = make("abc", keybindings={"cursorLeft": ["left", "ctrl+b"]})
        assert press(ti, "b", CTRL) == "redraw_selection"
        assert ti.edit_point == TextPoint(0, 2)
