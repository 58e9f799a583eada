"""Reading and validating game maps stored in ``.ber`` files."""

from __future__ import annotations

import os
from collections.abc import Iterable, MutableSequence, Sequence
from dataclasses import dataclass

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTABLE = "C"
FILLED = "X"
TILES = frozenset((WALL, FLOOR, PLAYER, EXIT, COLLECTABLE))

_MESSAGES = {
    "D": "cannot open map file or its name does not end in .ber",
    "L": "map holds a character other than 0, 1, P, E or C",
    "H": "map is empty or holds an empty line",
    "X": "map is not rectangular",
    "M": "out of memory while reading the map",
    "1": "map is not enclosed by walls",
    "P": "map needs exactly one player and an exit",
    "G": "map needs collectables and one exit, all of them reachable",
    "S": "cannot work out the tile size",
}


class MapError(ValueError):
    """A map, or a file it depends on, is unusable.

    ``code`` is a one-letter tag telling which check failed.
    """

    def __init__(self, code: str, detail: str | None = None) -> None:
        self.code = code
        message = _MESSAGES.get(code, "invalid map")
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


@dataclass(frozen=True)
class MapInfo:
    """A validated map with the positions the game starts from."""

    rows: tuple[str, ...]
    player: tuple[int, int]
    exit: tuple[int, int]
    collectables: int

    @property
    def width(self) -> int:
        return len(self.rows[-1])

    @property
    def height(self) -> int:
        return len(self.rows)


def has_ber_extension(path) -> bool:
    """Tell whether ``path`` ends in ``.ber`` and is at least 9 characters long."""
    name = os.fspath(path)
    return len(name) - 4 >= 5 and name.endswith(".ber")


def _strip_line_end(line: str) -> str:
    end = len(line)
    if end >= 2:
        if line[-1] in "\r\n":
            end = len(line) - 1
        if line[-2] in "\r\n":
            end = len(line) - 2
    return line[:end]


def check_line(line, expected_width=None) -> str:
    """Return ``line`` without its line end, after checking its tiles and width."""
    row = _strip_line_end(line)
    if any(tile not in TILES for tile in row):
        raise MapError("L", repr(row))
    if not row:
        raise MapError("H")
    if expected_width is not None and len(row) != expected_width:
        raise MapError("X", f"expected width {expected_width}, got {len(row)}")
    return row


def _split_lines(text: str) -> list[str]:
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def read_map(path) -> MapInfo:
    """Read, check and validate the map stored at ``path``."""
    name = os.fspath(path)
    if not has_ber_extension(name):
        raise MapError("D", name)
    try:
        with open(name, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError("D", name) from exc
    rows: list[str] = []
    width: int | None = None
    for line in _split_lines(text):
        row = check_line(line, width)
        width = len(row)
        rows.append(row)
    if not rows:
        raise MapError("H")
    return validate_map(rows)


def check_enclosed(rows: Sequence[str]) -> None:
    """Raise unless the first and last rows and both side columns are walls."""
    end = len(rows[0])
    last = len(rows) - 1
    for index, row in enumerate(rows):
        if index in (0, last):
            if len(row) < end or any(tile != WALL for tile in row[:end]):
                raise MapError("1", f"row {index}")
        elif len(row) < end or row[0] != WALL or row[end - 1] != WALL:
            raise MapError("1", f"row {index}")


def _positions(rows: Iterable[Sequence[str]], tile: str):
    for y, row in enumerate(rows):
        for x, cell in enumerate(row):
            if cell == tile:
                yield x, y


def find_player(rows) -> tuple[int, int]:
    """Return the (x, y) of the only player; raise if there is none or several."""
    found = list(_positions(rows, PLAYER))
    if len(found) != 1:
        raise MapError("P", f"{len(found)} players")
    return found[0]


def find_exit(rows) -> tuple[int, int]:
    """Return the (x, y) of the first exit found row by row."""
    found = next(_positions(rows, EXIT), None)
    if found is None:
        raise MapError("P", "no exit")
    return found


def count_goals(rows) -> int:
    """Return the number of collectables, checking there is at least one and one exit."""
    collectables = sum(row.count(COLLECTABLE) for row in rows)
    exits = sum(row.count(EXIT) for row in rows)
    if collectables == 0 or exits != 1:
        raise MapError("G", f"{collectables} collectables, {exits} exits")
    return collectables


def flood_fill(grid: MutableSequence[MutableSequence[str]], x, y, stop) -> None:
    """Mark with ``X`` every cell reachable from (x, y) without crossing walls or ``stop``."""
    height = len(grid)
    width = len(grid[0]) if grid else 0
    pending = [(x, y)]
    while pending:
        cx, cy = pending.pop()
        if not (0 <= cx < width and 0 <= cy < height) or cx >= len(grid[cy]):
            continue
        cell = grid[cy][cx]
        if cell in (WALL, FILLED) or cell == stop:
            continue
        grid[cy][cx] = FILLED
        pending.extend(((cx + 1, cy), (cx - 1, cy), (cx, cy + 1), (cx, cy - 1)))


def goals_reachable(grid, target) -> bool:
    """Tell whether no cell of ``grid`` still holds ``target``."""
    return all(target not in row for row in grid)


def validate_map(rows) -> MapInfo:
    """Check that a rectangular map is enclosed and playable; describe it."""
    rows = tuple(rows)
    if not rows:
        raise MapError("H")
    check_enclosed(rows)
    player = find_player(rows)
    exit_at = find_exit(rows)
    collectables = count_goals(rows)

    grid = [list(row) for row in rows]
    flood_fill(grid, *player, EXIT)
    if not goals_reachable(grid, COLLECTABLE):
        raise MapError("G", "a collectable cannot be reached")

    grid = [list(row) for row in rows]
    flood_fill(grid, *player, " ")
    if not goals_reachable(grid, EXIT):
        raise MapError("G", "the exit cannot be reached")

    return MapInfo(rows, player, exit_at, collectables)