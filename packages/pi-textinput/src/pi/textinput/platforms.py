"""Platform keymap strategies.

Mac-like hosts use Meta (Cmd) as the primary command modifier, get Emacs
style ``ctrl+a`` / ``ctrl+e`` line motions and Cmd+arrow jumps, and leave
Home/End to the host. Every other platform uses Ctrl as the primary
modifier and moves the caret within the line on Home/End.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

from pi.textinput.keys import CTRL, SUPER, KeyId


@dataclass(frozen=True)
class PlatformKeymap:
    """Platform-dependent part of the key dispatch table."""

    name: str
    primary_modifier: int
    extra_bindings: dict[str, list[KeyId]] = field(default_factory=dict)
    home_end_moves_caret: bool = True


MAC = PlatformKeymap(
    name="mac",
    primary_modifier=SUPER,
    extra_bindings={
        "cursorLineStart": ["ctrl+a", "super+left"],
        "cursorLineEnd": ["ctrl+e", "super+right"],
        "cursorDocumentStart": ["super+up"],
        "cursorDocumentEnd": ["super+down"],
    },
    home_end_moves_caret=False,
)

DEFAULT = PlatformKeymap(name="default", primary_modifier=CTRL)


def current_platform() -> PlatformKeymap:
    """Return the keymap for the platform this process runs on."""
    return MAC if sys.platform == "darwin" else DEFAULT
