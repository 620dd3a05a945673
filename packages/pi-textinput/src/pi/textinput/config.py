"""Construction options for a text input."""

from __future__ import annotations

from dataclasses import dataclass

from pi.textinput.keybindings import KeybindingsConfig
from pi.textinput.platforms import PlatformKeymap
from pi.textinput.types import SelectionDirection

# Lines moved by PageUp / PageDown.
DEFAULT_PAGE_SIZE = 28


@dataclass
class TextInputOptions:
    """Text input configuration.

    ``max_length`` and ``min_length`` count UTF-16 code units. Only
    ``max_length`` is enforced while editing; ``min_length`` is kept for the
    host's validation. ``platform`` defaults to the running platform.
    """

    multiline: bool = False
    max_length: int | None = None
    min_length: int | None = None
    selection_direction: SelectionDirection = "none"
    platform: PlatformKeymap | None = None
    page_size: int = DEFAULT_PAGE_SIZE
    keybindings: KeybindingsConfig | None = None
