"""Decoded key events and key identifier matching.

The host decodes its native keyboard events into a :class:`KeyEvent`: an
optional printable character, a symbolic key name and a modifier bitmask.
Bindings refer to keys with identifiers such as ``"ctrl+alt+b"`` or
``"shift+left"``; :func:`matches_key` checks an event against one.
"""

from __future__ import annotations

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Type alias
# ---------------------------------------------------------------------------

KeyId = str

# ---------------------------------------------------------------------------
# Key helper object
# ---------------------------------------------------------------------------


class Key:
    """Named key constants and modifier combinators."""

    # Editing keys
    backspace = "backspace"
    delete = "delete"
    enter = "enter"
    kp_enter = "kpEnter"

    # Navigation keys
    home = "home"
    end = "end"
    page_up = "pageUp"
    page_down = "pageDown"
    up = "up"
    down = "down"
    left = "left"
    right = "right"

    # Letter keys with editing bindings
    a = "a"
    b = "b"
    c = "c"
    e = "e"
    f = "f"
    v = "v"

    @staticmethod
    def ctrl(key: str) -> str:
        return f"ctrl+{key}"

    @staticmethod
    def shift(key: str) -> str:
        return f"shift+{key}"

    @staticmethod
    def alt(key: str) -> str:
        return f"alt+{key}"

    @staticmethod
    def meta(key: str) -> str:
        return f"super+{key}"

    @staticmethod
    def ctrl_alt(key: str) -> str:
        return f"ctrl+alt+{key}"

    @staticmethod
    def primary(key: str) -> str:
        return f"primary+{key}"


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

MODIFIERS: dict[str, int] = {
    "shift": 1,
    "alt": 2,
    "ctrl": 4,
    "super": 8,
}

SHIFT = MODIFIERS["shift"]
ALT = MODIFIERS["alt"]
CTRL = MODIFIERS["ctrl"]
SUPER = MODIFIERS["super"]

# Modifiers that select a command (shift only toggles selection extension).
COMMAND_MODIFIERS = ALT | CTRL | SUPER

# Accepted spellings for modifier names in key identifiers.
_MODIFIER_ALIASES: dict[str, str] = {
    "control": "ctrl",
    "option": "alt",
    "meta": "super",
    "cmd": "super",
}

PRIMARY = "primary"


# ---------------------------------------------------------------------------
# Key events
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class KeyEvent:
    """A decoded key press."""

    key: KeyId
    modifiers: int = 0
    printable: str | None = None

    @property
    def shift(self) -> bool:
        return bool(self.modifiers & SHIFT)

    @property
    def alt(self) -> bool:
        return bool(self.modifiers & ALT)

    @property
    def ctrl(self) -> bool:
        return bool(self.modifiers & CTRL)

    @property
    def meta(self) -> bool:
        return bool(self.modifiers & SUPER)


def modifier_bits(
    *, shift: bool = False, alt: bool = False, ctrl: bool = False, meta: bool = False
) -> int:
    bits = 0
    if shift:
        bits |= SHIFT
    if alt:
        bits |= ALT
    if ctrl:
        bits |= CTRL
    if meta:
        bits |= SUPER
    return bits


# ---------------------------------------------------------------------------
# Key identifier parsing
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ParsedKeyId:
    key: str
    modifiers: int
    primary: bool = False


def parse_key_id(key_id: str) -> ParsedKeyId | None:
    """Split a key identifier like ``"ctrl+shift+a"`` into its components.

    ``primary`` stands for the platform's primary command modifier and is
    resolved at match time. Returns ``None`` if the identifier is empty or
    names only modifiers.
    """
    if not key_id:
        return None

    modifier = 0
    primary = False
    key_parts: list[str] = []

    for part in key_id.split("+"):
        lower = _MODIFIER_ALIASES.get(part.lower(), part.lower())
        if lower in MODIFIERS:
            modifier |= MODIFIERS[lower]
        elif lower == PRIMARY:
            primary = True
        else:
            key_parts.append(part)

    # "ctrl++" leaves two empty parts, which join back into the plus key
    key = "+".join(key_parts) if key_parts else ""
    if not key:
        return None

    return ParsedKeyId(key=key, modifiers=modifier, primary=primary)


# ---------------------------------------------------------------------------
# matches_key
# ---------------------------------------------------------------------------


def matches_key(event: KeyEvent, key_id: KeyId, primary_modifier: int = CTRL) -> bool:
    """Return ``True`` if *event* matches the named *key_id*.

    Every modifier named in *key_id* must be held; extra modifiers are
    tolerated, so ``"left"`` also matches ``shift+left``. A ``primary``
    binding resolves to *primary_modifier* and additionally requires the
    other command modifiers to be released.
    """
    parsed = parse_key_id(key_id)
    if parsed is None:
        return False
    if event.key.lower() != parsed.key.lower():
        return False

    required = parsed.modifiers
    if parsed.primary:
        if event.modifiers & (COMMAND_MODIFIERS & ~primary_modifier):
            return False
        required |= primary_modifier

    return event.modifiers & required == required
