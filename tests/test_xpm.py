import pytest

from solong.colornames import lookup_color
from solong.pixels import MSB_FIRST
from solong.xpm import (
    TRANSPARENT,
    XpmError,
    parse_xpm,
    quoted_lines,
    read_xpm_file,
    strip_comments,
    text_to_rgb,
)

SAMPLE = [
    "3 2 3 1",
    ". c #FF0000",
    "# c None",
    "g c light grey",
    ".#g",
    "g.#",
]

SAMPLE_FILE = """/* XPM */
static char *tile[] = {
/* columns rows colors chars-per-pixel */
"3 2 3 1",
". c #FF0000",
"# c None", // transparent
"g c light grey",
/* pixels */
".#g",
"g.#"
};
"""


def test_hex_color():
    assert text_to_rgb("#FF0000") == 0xFF0000
    assert text_to_rgb("#00ff00", None) == 0x00FF00


def test_hex_without_digits_is_zero():
    assert text_to_rgb("#zz") == 0


def test_named_colors():
    assert text_to_rgb("red") == lookup_color("red")
    assert text_to_rgb("RED") == lookup_color("red")
    assert text_to_rgb("light", "grey") == lookup_color("light grey")


def test_none_and_unknown():
    assert text_to_rgb("None") == -1
    assert text_to_rgb("no-such-colour") == 0


def test_parse_sample_pixels():
    img = parse_xpm(SAMPLE)
    assert (img.width, img.height) == (3, 2)
    grey = lookup_color("light grey")
    assert [img.get_pixel(x, 0) for x in range(3)] == [0xFF0000, TRANSPARENT, grey]
    assert [img.get_pixel(x, 1) for x in range(3)] == [grey, 0xFF0000, TRANSPARENT]


def test_byte_order_only_changes_layout():
    little = parse_xpm(SAMPLE)
    big = parse_xpm(SAMPLE, MSB_FIRST)
    assert little.data != big.data
    assert all(little.get_pixel(x, y) == big.get_pixel(x, y)
               for y in range(2) for x in range(3))


def test_two_char_keys_later_definition_wins():
    img = parse_xpm(["1 1 2 2", "aa c #000001", "aa c #000002", "aa"])
    assert img.get_pixel(0, 0) == 0x000002


def test_long_keys_first_definition_wins():
    img = parse_xpm(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert img.get_pixel(0, 0) == 0x000001


def test_undefined_key_is_black():
    img = parse_xpm(["2 1 1 1", ". c white", ".x"])
    assert img.get_pixel(0, 0) == lookup_color("white")
    assert img.get_pixel(1, 0) == 0


@pytest.mark.parametrize("header", ["0 2 1 1", "2 2 1", "a b c d", "2 2 0 1"])
def test_bad_header(header):
    with pytest.raises(XpmError):
        parse_xpm([header, ". c red", "..", ".."])


def test_color_without_c_key():
    with pytest.raises(XpmError):
        parse_xpm(["1 1 1 1", ". m red", "."])


def test_missing_rows():
    with pytest.raises(XpmError):
        parse_xpm(SAMPLE[:-1])


def test_empty_data():
    with pytest.raises(XpmError):
        parse_xpm([])


def test_strip_comments_keeps_length_and_strings():
    text = 'a /* x */ "/* kept */" b // tail\nc'
    out = strip_comments(text)
    assert len(out) == len(text)
    assert "/* kept */" in out
    assert "x" not in out
    assert "tail" not in out
    assert out.endswith("c")


def test_unterminated_comment():
    with pytest.raises(XpmError):
        strip_comments("abc /* never closed")


def test_quoted_lines():
    assert list(quoted_lines('x "one", "two" "unclosed')) == ["one", "two"]


def test_read_file_matches_parse(tmp_path):
    path = tmp_path / "floor.xpm"
    path.write_text(SAMPLE_FILE, encoding="latin-1")
    from_file = read_xpm_file(path)
    from_lines = parse_xpm(SAMPLE)
    assert from_file.data == from_lines.data
    assert (from_file.width, from_file.height) == (3, 2)


def test_read_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_xpm_file(tmp_path / "absent.xpm")