"""Unicode text utilities: byte offsets, UTF-16 lengths, segmentation.

Caret positions are tracked as UTF-8 byte offsets into each line while the
lines themselves are stored as Python strings. The helpers here convert
between the two and provide grapheme-cluster and word-boundary segmentation.
"""

from __future__ import annotations

import grapheme
import regex


# ---------------------------------------------------------------------------
# Grapheme segmenter wrapper (mirrors Intl.Segmenter API)
# ---------------------------------------------------------------------------


class _GraphemeSegmenter:
    """Thin wrapper around ``grapheme.graphemes`` matching the Intl.Segmenter API."""

    @staticmethod
    def segment(text: str) -> list[str]:
        return list(grapheme.graphemes(text))


def get_segmenter() -> _GraphemeSegmenter:
    """Return a grapheme segmenter instance."""
    return _GraphemeSegmenter()


_segmenter = get_segmenter()

# Default Unicode word boundaries (UAX #29) need the WORD flag; the stdlib
# ``re`` module only knows ASCII-ish ``\w`` transitions.
_WORD_BOUNDARY_RE = regex.compile(r"\b", flags=regex.WORD)


# ---------------------------------------------------------------------------
# Length metrics
# ---------------------------------------------------------------------------


def _encode(text: str) -> bytes:
    return text.encode("utf-8", "surrogatepass")


def _decode(data: bytes) -> str:
    return data.decode("utf-8", "surrogatepass")


def byte_len(text: str) -> int:
    """Return the length of *text* in UTF-8 bytes."""
    return len(_encode(text))


def utf16_len(text: str) -> int:
    """Return the length of *text* in UTF-16 code units."""
    return sum(2 if ord(ch) > 0xFFFF else 1 for ch in text)


# ---------------------------------------------------------------------------
# Byte-offset helpers
# ---------------------------------------------------------------------------


def is_char_boundary(text: str, byte_index: int) -> bool:
    """Return ``True`` if *byte_index* does not split a UTF-8 sequence of *text*."""
    data = _encode(text)
    if byte_index < 0 or byte_index > len(data):
        return False
    if byte_index == len(data):
        return True
    # Continuation bytes look like 0b10xxxxxx.
    return (data[byte_index] & 0xC0) != 0x80


def floor_char_boundary(text: str, byte_index: int) -> int:
    """Largest character boundary of *text* that is ``<= byte_index``."""
    data = _encode(text)
    index = max(0, min(byte_index, len(data)))
    while index < len(data) and index > 0 and (data[index] & 0xC0) == 0x80:
        index -= 1
    return index


def ceil_char_boundary(text: str, byte_index: int) -> int:
    """Smallest character boundary of *text* that is ``>= byte_index``."""
    data = _encode(text)
    index = max(0, min(byte_index, len(data)))
    while index < len(data) and (data[index] & 0xC0) == 0x80:
        index += 1
    return index


def split_at_byte(text: str, byte_index: int) -> tuple[str, str]:
    """Split *text* at a UTF-8 byte offset into ``(before, after)``.

    Raises ``UnicodeDecodeError`` if *byte_index* is not a character boundary.
    """
    data = _encode(text)
    return _decode(data[:byte_index]), _decode(data[byte_index:])


def len_of_first_n_chars(text: str, n: int) -> int:
    """Byte length of the first *n* code points of *text*.

    Saturates at the length of the whole string.
    """
    return byte_len(text[:n])


def truncate_utf16(text: str, max_units: int | None) -> str:
    """Return the longest prefix of *text* that fits in *max_units* UTF-16 code units.

    A surrogate pair is never split: an astral character that would straddle
    the limit is dropped entirely. ``None`` means unbounded.
    """
    if max_units is None:
        return text
    units = 0
    for i, ch in enumerate(text):
        units += 2 if ord(ch) > 0xFFFF else 1
        if units > max_units:
            return text[:i]
    return text


# ---------------------------------------------------------------------------
# Segmentation
# ---------------------------------------------------------------------------


def first_grapheme(text: str) -> str | None:
    """Return the first grapheme cluster of *text*, or ``None`` if empty."""
    for g in grapheme.graphemes(text):
        return g
    return None


def last_grapheme(text: str) -> str | None:
    """Return the last grapheme cluster of *text*, or ``None`` if empty."""
    graphemes = _segmenter.segment(text)
    return graphemes[-1] if graphemes else None


def split_word_bounds(text: str) -> list[str]:
    """Split *text* at every Unicode default word boundary.

    Concatenating the result gives back *text*. Words, runs of whitespace
    and individual punctuation marks come out as separate segments.
    """
    if not text:
        return []
    bounds = {0, len(text)}
    bounds.update(m.start() for m in _WORD_BOUNDARY_RE.finditer(text))
    ordered = sorted(bounds)
    return [text[start:end] for start, end in zip(ordered, ordered[1:])]


def is_word_segment(segment: str) -> bool:
    """Return ``True`` if *segment* contains a letter or a digit."""
    return any(ch.isalpha() or ch.isnumeric() for ch in segment)
