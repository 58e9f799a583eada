"""Reading XPM images into pixel buffers."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike

from .colornames import lookup_color
from .pixels import LSB_FIRST, Image
from .wordtab import find_unquoted, split_words

TRANSPARENT = 0xFF000000

_HEX_PREFIX = re.compile(r"[0-9a-fA-F]+")
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")


class XpmError(ValueError):
    """Raised when XPM data cannot be understood."""


def _atoi(word: str) -> int:
    match = _INT_PREFIX.match(word)
    return int(match.group()) if match else 0


def _to_c_int(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def strip_comments(text):
    """Blank out comments outside string literals, keeping the text's length."""
    while (start := find_unquoted(text, "/*")) != -1:
        end = text.find("*/", start + 2)
        if end == -1:
            raise XpmError("unterminated comment")
        text = text[:start] + " " * (end + 2 - start) + text[end + 2:]
    while (start := find_unquoted(text, "//")) != -1:
        end = text.find("\n", start + 2)
        stop = len(text) if end == -1 else end + 1
        text = text[:start] + " " * (stop - start) + text[stop:]
    return text


def quoted_lines(text) -> Iterator[str]:
    """Yield the contents of each double-quoted string in ``text``."""
    pos = 0
    while (start := text.find('"', pos)) != -1:
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def text_to_rgb(name, suffix=None):
    """Return the colour a definition names: ``#hex`` or a colour name.

    Unknown names give 0 and "None" gives -1.
    """
    if name.startswith("#"):
        match = _HEX_PREFIX.match(name, 1)
        return _to_c_int(int(match.group(), 16)) if match else 0
    if suffix:
        name = f"{name} {suffix}"[:63]
    color = lookup_color(name)
    return 0 if color is None else color


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"bad XPM header: {line!r}")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError(f"bad XPM header: {line!r}")
    return values  # type: ignore[return-value]


def _read_colors(lines: Iterator[str], count: int, cpp: int) -> dict[str, int]:
    colors: dict[str, int] = {}
    for _ in range(count):
        line = next(lines, None)
        if line is None:
            raise XpmError("missing colour definition")
        words = split_words(line[cpp:])
        try:
            value_at = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour definition without 'c' key: {line!r}") from None
        if value_at >= len(words):
            raise XpmError(f"colour definition without a value: {line!r}")
        suffix = words[value_at + 1] if value_at + 1 < len(words) else None
        rgb = text_to_rgb(words[value_at], suffix)
        key = line[:cpp]
        # Short keys let a later definition win; longer keys keep the first.
        if cpp <= 2:
            colors[key] = rgb
        else:
            colors.setdefault(key, rgb)
    return colors


def parse_xpm(lines: Iterable[str], byte_order=LSB_FIRST) -> Image:
    """Build an image from the string lines of an XPM (without quotes)."""
    it = iter(lines)
    header = next(it, None)
    if header is None:
        raise XpmError("empty XPM data")
    width, height, ncolors, cpp = _read_header(header)
    colors = _read_colors(it, ncolors, cpp)
    image = Image(width, height, byte_order=byte_order)
    for y in range(height):
        row = next(it, None)
        if row is None:
            raise XpmError(f"missing pixel row {y}")
        for x in range(width):
            color = colors.get(row[cpp * x:cpp * (x + 1)], 0)
            image.set_pixel(x, y, TRANSPARENT if color == -1 else color)
    return image


def read_xpm_file(path: str | PathLike[str], byte_order=LSB_FIRST) -> Image:
    """Load an XPM file into an image."""
    with open(path, encoding="latin-1") as handle:
        text = handle.read()
    return parse_xpm(quoted_lines(strip_comments(text)), byte_order)