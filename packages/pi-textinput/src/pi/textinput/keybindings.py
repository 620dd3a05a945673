"""Text input keybindings manager."""

from __future__ import annotations

import logging
from typing import Literal

from pi.textinput.keys import KeyEvent, KeyId, matches_key, parse_key_id
from pi.textinput.platforms import PlatformKeymap, current_platform

logger = logging.getLogger(__name__)

EditorAction = Literal[
    # Line and word motion
    "cursorLineStart",
    "cursorLineEnd",
    "cursorWordLeft",
    "cursorWordRight",
    # Clipboard
    "selectAll",
    "copy",
    "paste",
    # Deletion
    "deleteCharForward",
    "deleteCharBackward",
    # Cursor movement
    "cursorDocumentStart",
    "cursorDocumentEnd",
    "cursorLeft",
    "cursorRight",
    "cursorUp",
    "cursorDown",
    # Text input
    "newLine",
    # Line edges and paging
    "cursorHome",
    "cursorEnd",
    "pageUp",
    "pageDown",
]

KeybindingsConfig = dict[EditorAction, KeyId | list[KeyId]]

DEFAULT_KEYBINDINGS: dict[EditorAction, KeyId | list[KeyId]] = {
    # Line and word motion
    "cursorLineStart": "ctrl+alt+a",
    "cursorLineEnd": "ctrl+alt+e",
    "cursorWordLeft": ["ctrl+alt+b", "alt+left"],
    "cursorWordRight": ["ctrl+alt+f", "alt+right"],
    # Clipboard
    "selectAll": "primary+a",
    "copy": "primary+c",
    "paste": "primary+v",
    # Deletion
    "deleteCharForward": "delete",
    "deleteCharBackward": "backspace",
    # Cursor movement
    "cursorDocumentStart": [],
    "cursorDocumentEnd": [],
    "cursorLeft": "left",
    "cursorRight": "right",
    "cursorUp": "up",
    "cursorDown": "down",
    # Text input
    "newLine": ["enter", "kpEnter"],
    # Line edges and paging
    "cursorHome": "home",
    "cursorEnd": "end",
    "pageUp": "pageUp",
    "pageDown": "pageDown",
}


def _as_list(keys: KeyId | list[KeyId]) -> list[KeyId]:
    return list(keys) if isinstance(keys, list) else [keys]


class KeybindingsManager:
    """Resolves actions to key identifiers for one platform.

    Bindings are layered: defaults, then the platform's extra bindings, then
    the user configuration, which replaces the key list of every action it
    names.
    """

    def __init__(
        self,
        config: KeybindingsConfig | None = None,
        platform: PlatformKeymap | None = None,
    ) -> None:
        self.platform = platform or current_platform()
        self._action_to_keys: dict[EditorAction, list[KeyId]] = {}
        self._build_maps(config or {})

    def _build_maps(self, config: KeybindingsConfig) -> None:
        self._action_to_keys.clear()

        # Start with defaults
        for action, keys in DEFAULT_KEYBINDINGS.items():
            self._action_to_keys[action] = _as_list(keys)

        # Platform additions
        for action, keys in self.platform.extra_bindings.items():
            self._action_to_keys.setdefault(action, []).extend(keys)

        # Override with user config
        for action, keys in config.items():
            key_array = _as_list(keys)
            for key_id in key_array:
                if parse_key_id(key_id) is None:
                    raise ValueError(f"Invalid key identifier for {action}: {key_id!r}")
            logger.debug("Overriding keybinding %s -> %s", action, key_array)
            self._action_to_keys[action] = key_array

    def matches(self, event: KeyEvent, action: EditorAction) -> bool:
        """Check if a key event triggers a specific action."""
        keys = self._action_to_keys.get(action)
        if not keys:
            return False
        primary = self.platform.primary_modifier
        return any(matches_key(event, key, primary) for key in keys)

    def get_keys(self, action: EditorAction) -> list[KeyId]:
        """Get keys bound to an action."""
        return self._action_to_keys.get(action, [])

    def set_config(self, config: KeybindingsConfig) -> None:
        """Update configuration."""
        self._build_maps(config)
