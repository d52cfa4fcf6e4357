"""Loading and validating .cub scene files: textures, colours and the map grid."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

_SPACES = frozenset("\t\n\v\f\r ")
_HEADER_PREFIXES = ("NO", "SO", "WE", "EA", "F", "C")
_COLOR_PREFIXES = ("F", "C")
_TEXTURE_KEYS = ("NO", "SO", "WE", "EA")
_PLAYER = frozenset("NSEW")
_OPEN = frozenset("0NSEW")
_MAP_CHARS = frozenset("\n01NSEW")
_FLOOD_BLOCKERS = frozenset("1Z\n")


class MapError(ValueError):
    """Raised when a scene file is unreadable or describes an invalid scene."""


@dataclass
class MapInfo:
    """Everything read from a scene file."""

    lines: list[str] = field(default_factory=list)
    grid: list[str] = field(default_factory=list)
    no: str | None = None
    so: str | None = None
    we: str | None = None
    ea: str | None = None
    floor: int | None = None
    ceiling: int | None = None
    player_x: int = -1
    player_y: int = -1
    filled: list[str] = field(default_factory=list)


def check_extension(path: str | os.PathLike[str]) -> bool:
    """Check that the text after the first dot of ``path`` is exactly ``cub``."""
    text = os.fspath(path)
    dot = text.find(".")
    if dot == -1:
        raise MapError('Invalid map, ".cub" extention needed.')
    if text[dot + 1:] != "cub":
        raise MapError("Incorrect extention.")
    return True


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Read a file as lines, each keeping its trailing newline."""
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise MapError("Open failed.") from exc
    parts = os.fsdecode(raw).split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def is_map_line(line: str) -> bool:
    """Tell whether ``line`` starts the map: not a header or blank line, and holds a wall."""
    if line.startswith(_HEADER_PREFIXES) or line[:1] == "\n":
        return False
    return "1" in line


def first_word(text: str) -> str:
    """Return the text up to the first whitespace character."""
    for index, char in enumerate(text):
        if char in _SPACES:
            return text[:index]
    return text


def _atoi(word: str) -> int:
    rest = word.lstrip("\t\n\v\f\r ")
    sign = 1
    if rest[:1] in ("+", "-"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    return sign * int("".join(digits)) if digits else 0


def parse_rgb(text: str) -> int:
    """Parse ``R,G,B`` (up to the first whitespace) into 0xRRGGBB."""
    parts = [part for part in first_word(text).split(",") if part]
    if len(parts) < 3:
        raise MapError("Invalid RGB values.")
    red, green, blue = (_atoi(part) for part in parts[:3])
    if not all(0 <= channel <= 255 for channel in (red, green, blue)):
        raise MapError("Invalid RGB values.")
    return (red << 16) | (green << 8) | blue


def _value_start(line: str) -> int:
    # Skips blanks after the two-character key two characters at a time.
    start = 2
    while start < len(line) and line[start] in _SPACES:
        start += 2
    return start


def _check_readable(key: str, path: str) -> None:
    try:
        descriptor = os.open(path, os.O_RDONLY)
    except OSError as exc:
        raise MapError(f"Invalid {key} texture. PATH: {path}") from exc
    os.close(descriptor)


def parse_header(info: MapInfo) -> MapInfo:
    """Read texture paths and floor/ceiling colours from the header lines."""
    for line in info.lines:
        if not line.startswith(_HEADER_PREFIXES):
            continue
        key = line[:2]
        start = _value_start(line)
        if start >= len(line):
            raise MapError(f"{key} not included in the file.")
        if line.startswith(_COLOR_PREFIXES):
            color = parse_rgb(line[start:])
            if line.startswith("F"):
                info.floor = color
            else:
                info.ceiling = color
        else:
            path = first_word(line[start - 1:])
            _check_readable(key, path)
            setattr(info, key.lower(), path)
    if any(getattr(info, key.lower()) is None for key in _TEXTURE_KEYS):
        raise MapError("Not all textures are included in the file.")
    return info


def extract_map(info: MapInfo) -> list[str]:
    """Store and return the lines from the first map line to the end of the file."""
    start = next((index for index, line in enumerate(info.lines) if is_map_line(line)), None)
    if start is None:
        raise MapError("File is missing the map.")
    info.grid = info.lines[start:]
    return info.grid


def _cell(grid: list[str], y: int, x: int) -> str:
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return ""


def find_player(grid: list[str]) -> tuple[int, int]:
    """Return the (x, y) of the single player start in the grid."""
    found = [
        (x, y)
        for y, row in enumerate(grid)
        for x, char in enumerate(row)
        if char in _PLAYER
    ]
    if len(found) > 1:
        raise MapError(f"'{len(found)}' player positions in map.")
    if not found:
        raise MapError("No player starting position.")
    return found[-1]


def check_playable(grid: list[str]) -> tuple[int, int]:
    """Return the player position, requiring an open floor cell next to it."""
    x, y = find_player(grid)
    neighbours = (
        _cell(grid, y, x + 1),
        _cell(grid, y + 1, x),
        _cell(grid, y, x - 1),
        _cell(grid, y - 1, x),
    )
    if "0" not in neighbours:
        raise MapError("Map does not contain any player accessable room.")
    return x, y


def check_characters(grid: list[str]) -> None:
    """Reject any map character other than walls, floor, player starts and whitespace."""
    for row in grid:
        for char in row:
            if char not in _MAP_CHARS and char not in _SPACES:
                raise MapError(f"'{char}' is not a valid character for the map.")


def pad_map(grid: list[str]) -> list[str]:
    """Frame the grid with 'X' cells and mark whitespace inside it as 'L'.

    Every row of the result has the same length and ends with a newline.
    """
    if not grid:
        raise MapError("File is missing the map.")
    width = 0
    for row in grid:
        if len(row) > width:
            width = len(row) + 1
    border = "X" * (width + 1) + "\n"
    padded = [border]
    for row in grid:
        body = "".join("L" if char in _SPACES else char for char in row[:-1])
        padded.append("X" + body + "X" * (width - len(row) + 1) + "\n")
    padded.append(border)
    return padded


def _touches_open(padded: list[str], y: int, x: int) -> bool:
    if y <= 0 or x <= 0:
        return True
    return any(
        _cell(padded, y + dy, x + dx) in _OPEN
        for dy, dx in ((1, 0), (-1, 0), (0, 1), (0, -1))
    )


def check_spaces(padded: list[str]) -> None:
    """Reject whitespace cells that lie next to floor or a player start."""
    for y, row in enumerate(padded):
        for x, char in enumerate(row):
            if char == "L" and _touches_open(padded, y, x):
                raise MapError("Found space inside map.")


def flood_fill(padded: list[str]) -> list[str]:
    """Fill the outside of a padded map from its corner with 'Z'.

    Raises MapError if the fill reaches floor or a player start, which means
    the walls do not close the map. Returns the filled rows.
    """
    cells = [list(row) for row in padded]
    closed = True
    stack = [(0, 0)]
    while stack:
        x, y = stack.pop()
        if y < 0 or x < 0 or y >= len(cells) or x >= len(cells[y]):
            continue
        char = cells[y][x]
        if char in _OPEN:
            closed = False
            continue
        if char in _FLOOD_BLOCKERS:
            continue
        cells[y][x] = "Z"
        stack.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    if not closed:
        raise MapError("Map not closed.")
    return ["".join(row) for row in cells]


def validate_map(info: MapInfo) -> list[str]:
    """Run every map check, store the player start and return the filled grid."""
    info.player_x, info.player_y = check_playable(info.grid)
    check_characters(info.grid)
    padded = pad_map(info.grid)
    check_spaces(padded)
    info.filled = flood_fill(padded)
    return info.filled


def load(path: str | os.PathLike[str]) -> MapInfo:
    """Read, parse and validate a .cub scene file."""
    check_extension(path)
    info = MapInfo(lines=read_lines(path))
    parse_header(info)
    extract_map(info)
    validate_map(info)
    return info