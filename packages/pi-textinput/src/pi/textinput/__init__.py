"""pi-textinput: editable text state for single- and multi-line text controls."""

# Text storage
from pi.textinput.buffer import TextBuffer, split_lines

# Clipboard capability
from pi.textinput.clipboard import ClipboardProvider, MemoryClipboard, SystemClipboard

# Configuration
from pi.textinput.config import DEFAULT_PAGE_SIZE, TextInputOptions

# Key dispatch
from pi.textinput.dispatcher import KeyCommandDispatcher

# Keybindings
from pi.textinput.keybindings import (
    DEFAULT_KEYBINDINGS,
    EditorAction,
    KeybindingsConfig,
    KeybindingsManager,
)

# Keyboard events
from pi.textinput.keys import (
    ALT,
    CTRL,
    MODIFIERS,
    SHIFT,
    SUPER,
    Key,
    KeyEvent,
    KeyId,
    matches_key,
    modifier_bits,
    parse_key_id,
)

# Editing components
from pi.textinput.mutation import MutationEngine
from pi.textinput.navigator import Navigator

# Platform keymaps
from pi.textinput.platforms import DEFAULT, MAC, PlatformKeymap, current_platform
from pi.textinput.selection import SelectionModel

# The aggregate
from pi.textinput.text_input import TextInput

# Core types
from pi.textinput.types import (
    Direction,
    KeyReaction,
    Selection,
    SelectionDirection,
    SelectionState,
    TextPoint,
    selection_direction_from_str,
)

__all__ = [
    # Text storage
    "TextBuffer",
    "split_lines",
    # Clipboard
    "ClipboardProvider",
    "MemoryClipboard",
    "SystemClipboard",
    # Configuration
    "DEFAULT_PAGE_SIZE",
    "TextInputOptions",
    # Key dispatch
    "KeyCommandDispatcher",
    # Keybindings
    "DEFAULT_KEYBINDINGS",
    "EditorAction",
    "KeybindingsConfig",
    "KeybindingsManager",
    # Keyboard events
    "ALT",
    "CTRL",
    "MODIFIERS",
    "SHIFT",
    "SUPER",
    "Key",
    "KeyEvent",
    "KeyId",
    "matches_key",
    "modifier_bits",
    "parse_key_id",
    # Editing components
    "MutationEngine",
    "Navigator",
    "SelectionModel",
    # Platform keymaps
    "DEFAULT",
    "MAC",
    "PlatformKeymap",
    "current_platform",
    # The aggregate
    "TextInput",
    # Core types
    "Direction",
    "KeyReaction",
    "Selection",
    "SelectionDirection",
    "SelectionState",
    "TextPoint",
    "selection_direction_from_str",
]
