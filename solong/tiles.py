"""Tile and window sizes derived from the floor texture."""

from __future__ import annotations

import re
from pathlib import Path

from .game_map import MapError

FLOOR_TEXTURE = Path("assets/textures/floor.xpm")

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*[+-]?\d+")


def _atoi(word: str) -> int:
    match = _INT_PREFIX.match(word)
    return int(match.group()) if match else 0


def _first_lines(text: str, count: int) -> list[str]:
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines[:count]


def _parse_size_line(line: str) -> tuple[int, int]:
    words = [word for word in (" " + line[1:]).split(" ") if word]
    if len(words) < 2:
        raise MapError("S", f"no size in {line!r}")
    width, height = _atoi(words[0]), _atoi(words[1])
    if width <= 0 or height <= 0:
        raise MapError("S", f"bad size in {line!r}")
    return width, height


def tile_size_from_xpm(path=FLOOR_TEXTURE) -> tuple[int, int]:
    """Return (width, height) from the size line, the fourth line, of an XPM file."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise MapError("S", str(path)) from exc
    lines = _first_lines(text, 4)
    for line in lines:
        if line[0] in "\r\n":
            raise MapError("S", f"blank line in {path}")
    if len(lines) < 4:
        raise MapError("S", f"{path} is too short")
    return _parse_size_line(lines[3])


def window_size(rows, tile_size) -> tuple[int, int]:
    """Return the window (width, height) in pixels for a map of tiles."""
    rows = list(rows)
    if not rows:
        raise ValueError("map has no rows")
    tile_width, tile_height = tile_size
    return tile_width * len(rows[-1]), tile_height * len(rows)