"""Command line entry point: load a map and report the game window."""

from __future__ import annotations

import sys

from .game_map import MapError, read_map
from .tiles import FLOOR_TEXTURE, tile_size_from_xpm, window_size

WINDOW_TITLE = "EPIC: The Game"


def _argument_error(count: int) -> int:
    print("\033[1;31mError\033[0;31m", file=sys.stderr)
    if count < 1:
        print("This ain't the piscine btw, add a program argument", file=sys.stderr)
    else:
        print("Too many arguments!! Only 1 is needed.", file=sys.stderr)
    return 1


def main(argv=None) -> int:
    """Validate the map named on the command line and describe its window."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return _argument_error(len(args))
    try:
        info = read_map(args[0])
        tile = tile_size_from_xpm(FLOOR_TEXTURE)
    except MapError as exc:
        print("Error", file=sys.stderr)
        print(exc, file=sys.stderr)
        return 1
    width, height = window_size(info.rows, tile)
    print(f"{WINDOW_TITLE}: {width}x{height} window, {info.collectables} collectables")
    for row in info.rows:
        print(row)
    return 0


if __name__ == "__main__":
    sys.exit(main())