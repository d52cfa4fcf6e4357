"""Reading XPM pixmaps, from files or in-memory string arrays, into images."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from .colors import lookup_color
from .image import Image
from .wordtab import find, find_unquoted, split_words

_TRANSPARENT = 0xFF000000
_DIRECT_CPP = 2


class XpmError(ValueError):
    """Raised when XPM data cannot be read or is malformed."""


def _blank(text: str, start: int, count: int) -> str:
    end = min(len(text), start + count)
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Replace ``/* */`` and ``//`` comments outside quotes with spaces.

    The length of the text is kept, so positions stay valid.
    """
    while (begin := find_unquoted(text, "/*")) != -1:
        end = find(text[begin + 2:], "*/")
        text = _blank(text, begin, end + 4)
    while (begin := find_unquoted(text, "//")) != -1:
        end = find(text[begin + 2:], "\n")
        text = _blank(text, begin, end + 3)
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield, in order, every string enclosed in a pair of double quotes."""
    pos = 0
    while True:
        opening = text.find('"', pos)
        if opening == -1:
            return
        closing = text.find('"', opening + 1)
        if closing == -1:
            return
        yield text[opening + 1:closing]
        pos = closing + 1


def _atoi(word: str) -> int:
    rest = word.lstrip(" \t\n\v\f\r")
    sign = 1
    if rest[:1] in ("+", "-"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    digits = ""
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits += char
    return sign * int(digits) if digits else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _key(line: str, start: int, cpp: int) -> str:
    return line[start:start + cpp].ljust(cpp, "\0")


def _parse_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"XPM header needs four values, got {line!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if not (width and height and ncolors and cpp):
        raise XpmError(f"invalid XPM header {line!r}")
    if cpp < 0 or ncolors < 0:
        raise XpmError(f"invalid XPM header {line!r}")
    return width, height, ncolors, cpp


def _parse_color(line: str, cpp: int) -> tuple[str, int]:
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line without a 'c' key: {line!r}") from None
    if index >= len(words):
        raise XpmError(f"colour line without a colour value: {line!r}")
    end = words[index + 1] if index + 1 < len(words) else None
    return _key(line, 0, cpp), lookup_color(words[index], end)


def parse_xpm(lines: Iterable[str], bpp: int = 32, endian: int = 0) -> Image:
    """Build an image from the strings of an XPM: header, colours, pixel rows.

    With one or two characters per pixel a later colour definition replaces
    an earlier one for the same key; with more, the first one is kept.
    Pixels whose key is undefined are 0 and "None" pixels are 0xFF000000.
    """
    stream = iter(lines)
    width, height, ncolors, cpp = _parse_header(_next_line(stream, "header"))
    direct = cpp <= _DIRECT_CPP

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        key, color = _parse_color(_next_line(stream, "colour table end"), cpp)
        if direct:
            palette[key] = color
        else:
            palette.setdefault(key, color)

    try:
        image = Image(width, height, bpp, endian)
    except ValueError as exc:
        raise XpmError(str(exc)) from exc

    for row in range(height):
        line = _next_line(stream, "last pixel row")
        for x in range(width):
            color = palette.get(_key(line, cpp * x, cpp), 0)
            if color == -1:
                color = _TRANSPARENT
            image.set_row_pixel(row, x, color)
    return image


def xpm_file_to_image(path: str | Path, bpp: int = 32, endian: int = 0) -> Image:
    """Read an XPM file, dropping comments, and build its image."""
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise XpmError(f"cannot read XPM file {path}: {exc}") from exc
    text = strip_comments(raw.decode("latin-1"))
    return parse_xpm(quoted_lines(text), bpp, endian)


def xpm_to_image(data: Iterable[str], bpp: int = 32, endian: int = 0) -> Image:
    """Build an image from XPM data given as a sequence of strings."""
    return parse_xpm(data, bpp, endian)