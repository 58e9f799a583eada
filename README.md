# solong

Loading and checking maps for a small tile-based puzzle game. The player walks
through a walled map, picks up every collectable and leaves through the exit.
The package also holds a reader for the XPM textures the game's tiles come in.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Map files

A map is a text file whose name ends in `.ber` (and is at least nine
characters long). Each line is one row of tiles:

| Character | Meaning     |
|-----------|-------------|
| `1`       | wall        |
| `0`       | floor       |
| `P`       | player      |
| `C`       | collectable |
| `E`       | exit        |

A map is accepted only when all of these hold:

- every row has the same width, is not empty, and uses only the characters above;
- the map is closed in by walls on all four sides;
- there is exactly one player and exactly one exit;
- there is at least one collectable;
- the player can reach every collectable without passing over the exit, and
  can reach the exit.

## Command line

```
solong maps/level1.ber
```

The command checks the map, then reads the tile size from the floor texture
`assets/textures/floor.xpm` (relative to the current directory). On success it
prints a line such as

```
EPIC: The Game: 320x160 window, 3 collectables
```

followed by the rows of the map, and exits with status 0. With no argument or
more than one, or when the map or the floor texture is unusable, it prints
`Error` and a reason on standard error and exits with status 1.

## Library use

```python
from solong.game_map import MapError, read_map

try:
    info = read_map("maps/level1.ber")
except MapError as err:
    print(f"bad map ({err.code}): {err}")
else:
    print(info.width, info.height, info.player, info.exit, info.collectables)
```

`read_map` returns a `MapInfo` holding the map's `rows`, the `(x, y)` of the
`player` and of the `exit`, the number of `collectables`, and its `width` and
`height`. `validate_map` does the same checks on rows you already have. Every
failed check raises `MapError`, whose `code` is a one-letter tag for the check.

The single steps can be called on their own: `has_ber_extension`,
`check_line`, `check_enclosed`, `find_player`, `find_exit`, `count_goals`,
`flood_fill` (marks reachable cells with `X` in a grid of lists) and
`goals_reachable`.

Other modules:

- `solong.tiles`: `tile_size_from_xpm` reads a tile's width and height from
  the fourth line of an XPM file, and `window_size` gives the pixel size of a
  map for a tile size.
- `solong.xpm`: `read_xpm_file` and `parse_xpm` decode XPM images into an
  `Image`; `strip_comments`, `quoted_lines` and `text_to_rgb` are the steps
  they use. Colours may be `#rrggbb` or X11 colour names; unknown names give
  black, and `None` gives the transparent value `0xFF000000`. A malformed
  image raises `XpmError`.
- `solong.colornames`: `lookup_color` looks up an X11 colour name, ignoring
  case; `"none"` gives -1 and an unknown name gives `None`.
- `solong.pixels`: `PixelFormat.from_masks` describes a true-colour visual and
  `convert` turns a `0xRRGGBB` colour into its pixel value (unchanged at depth
  24 or more). `Image` is a pixel buffer with 32-bit padded rows and
  `set_pixel` / `get_pixel`.
- `solong.wordtab`: `split_words` splits on spaces and tabs, `find` and
  `find_unquoted` search text, the latter skipping double-quoted parts.

## What it does not do

The package opens no window and draws nothing: there is no game loop, no
keyboard handling, no player movement and no move counter. The command only
checks a map and reports the window it would need.