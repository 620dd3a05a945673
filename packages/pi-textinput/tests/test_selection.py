"""Tests for pi.textinput.selection -- caret and selection state."""

from __future__ import annotations

from pi.textinput import TextInput
from pi.textinput.types import SelectionState, TextPoint, selection_direction_from_str


def _multiline(content: str) -> TextInput:
    return TextInput(content, multiline=True)


class TestSelectionDirectionFromStr:
    def test_known_values(self) -> None:
        assert selection_direction_from_str("forward") == "forward"
        assert selection_direction_from_str("backward") == "backward"
        assert selection_direction_from_str("none") == "none"

    def test_unknown_value_falls_back_to_none(self) -> None:
        assert selection_direction_from_str("sideways") == "none"


class TestSetSelectionRange:
    """set_selection_range takes byte offsets and clamps them."""

    def test_forward_range(self) -> None:
        ti = TextInput("abcdef")
        ti.set_selection_range(2, 5, "forward")
        assert ti.selection_start_offset() == 2
        assert ti.selection_end_offset() == 5
        assert ti.has_selection()
        assert ti.get_selection_text() == "cde"
        assert ti.selection_origin == TextPoint(0, 2)
        assert ti.edit_point == TextPoint(0, 5)
        assert ti.selection_direction == "forward"

    def test_backward_range_puts_caret_at_start(self) -> None:
        ti = TextInput("abcdef")
        ti.set_selection_range(2, 5, "backward")
        assert ti.selection_origin == TextPoint(0, 5)
        assert ti.edit_point == TextPoint(0, 2)
        assert ti.selection_start() == TextPoint(0, 2)
        assert ti.selection_end() == TextPoint(0, 5)
        assert ti.get_selection_text() == "cde"

    def test_end_clamped_to_length_then_start_to_end(self) -> None:
        ti = TextInput("abc")
        ti.set_selection_range(4, 100, "forward")
        assert ti.sorted_selection_offsets_range() == range(3, 3)
        assert ti.has_selection()
        assert ti.get_selection_text() is None

    def test_start_after_end_collapses_to_end(self) -> None:
        ti = TextInput("abcdef")
        ti.set_selection_range(5, 2, "forward")
        assert ti.selection_start_offset() == 2
        assert ti.selection_end_offset() == 2

    def test_offsets_span_lines(self) -> None:
        ti = _multiline("abc\nde")
        ti.set_selection_range(1, 5, "forward")
        assert ti.selection_origin == TextPoint(0, 1)
        assert ti.edit_point == TextPoint(1, 1)
        assert ti.get_selection_text() == "bc\nd"

    def test_offset_inside_character_snaps_to_its_start(self) -> None:
        ti = TextInput("a\u00e9b")
        ti.set_selection_range(0, 2, "forward")
        assert ti.edit_point == TextPoint(0, 1)
        assert ti.get_selection_text() == "a"

    def test_sorted_range(self) -> None:
        ti = TextInput("abcdef")
        ti.set_selection_range(2, 5, "none")
        assert ti.sorted_selection_offsets_range() == range(2, 5)


class TestSelectionQueries:
    """Queries with and without an active selection."""

    def test_no_selection_bounds_are_the_caret(self) -> None:
        ti = TextInput("abc")
        ti.set_edit_point_index(2)
        assert not ti.has_selection()
        assert ti.selection_start() == ti.edit_point == ti.selection_end()
        assert ti.selection_origin_or_edit_point() == TextPoint(0, 2)
        assert ti.sorted_selection_offsets_range() == range(2, 2)
        assert ti.get_selection_text() is None

    def test_zero_length_selection_is_still_a_selection(self) -> None:
        ti = TextInput("abc")
        ti.set_selection_range(1, 1, "none")
        assert ti.has_selection()
        assert ti.get_selection_text() is None

    def test_selection_utf16_len(self) -> None:
        ti = TextInput("a\U0001F600b")
        ti.select_all()
        assert ti.selection.selection_utf16_len() == 4

    def test_selection_state_snapshot(self) -> None:
        ti = TextInput("abcdef")
        ti.set_selection_range(1, 3, "forward")
        state = ti.selection_state()
        assert state == SelectionState(TextPoint(0, 1), TextPoint(0, 3), "forward")
        assert ti.selection_state() == state
        ti.adjust_horizontal_by_one("forward", "selected")
        assert ti.selection_state() != state


class TestSelectAllAndClear:
    def test_select_all_spans_every_line(self) -> None:
        ti = _multiline("ab\ncde")
        ti.select_all()
        assert ti.selection_origin == TextPoint(0, 0)
        assert ti.edit_point == TextPoint(1, 3)
        assert ti.get_selection_text() == "ab\ncde"

    def test_select_all_after_backward_selection(self) -> None:
        ti = TextInput("abcdef")
        ti.set_selection_range(1, 3, "backward")
        ti.select_all()
        assert ti.selection_start() == TextPoint(0, 0)
        assert ti.selection_end() == TextPoint(0, 6)

    def test_clear_selection_resets_direction(self) -> None:
        ti = TextInput("abcdef")
        ti.set_selection_range(1, 3, "backward")
        ti.clear_selection()
        assert not ti.has_selection()
        assert ti.selection_direction == "none"

    def test_clear_selection_to_limit(self) -> None:
        ti = _multiline("ab\ncd")
        ti.set_selection_range(1, 4, "forward")
        ti.clear_selection_to_limit("forward", True)
        assert not ti.has_selection()
        assert ti.edit_point == TextPoint(1, 2)
        ti.clear_selection_to_limit("backward", True)
        assert ti.edit_point == TextPoint(0, 0)
