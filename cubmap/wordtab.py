"""Small text helpers: splitting on blanks and substring searches."""

from __future__ import annotations

_BLANKS = " \t"


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs only."""
    words: list[str] = []
    current: list[str] = []
    for char in text:
        if char in _BLANKS:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        words.append("".join(current))
    return words


def find(text: str, needle: str) -> int:
    """Return the position of the first ``needle`` in ``text``, or -1."""
    if not needle:
        raise ValueError("needle must not be empty")
    return text.find(needle)


def find_unquoted(text: str, needle: str) -> int:
    """Return the position of the first ``needle`` outside double quotes, or -1.

    A double quote opens or closes a quoted run; a match is only taken where
    the quote state, after the current character, is outside.
    """
    if not needle:
        raise ValueError("needle must not be empty")
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1