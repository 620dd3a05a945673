"""Core type definitions for pi-textinput."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

SelectionDirection = Literal["forward", "backward", "none"]

# Direction in which to move the caret or delete a character.
Direction = Literal["forward", "backward"]

# Whether a caret move extends the selection (shift held) or collapses it.
Selection = Literal["selected", "not_selected"]

# What the host should do after a key event has been handled.
KeyReaction = Literal[
    "trigger_default_action",
    "dispatch_input",
    "redraw_selection",
    "nothing",
]


def selection_direction_from_str(value: str | None) -> SelectionDirection:
    """Parse a ``selectionDirection`` attribute value, defaulting to ``"none"``."""
    if value == "forward":
        return "forward"
    if value == "backward":
        return "backward"
    return "none"


@dataclass(frozen=True, order=True)
class TextPoint:
    """A caret position: 0-based line and UTF-8 byte index within that line."""

    line: int = 0
    index: int = 0


@dataclass(frozen=True)
class SelectionState:
    """Snapshot of the selection, compared by the host to detect changes."""

    start: TextPoint
    end: TextPoint
    direction: SelectionDirection
