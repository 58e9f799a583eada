import pytest

from solong.game_map import MapError
from solong.tiles import tile_size_from_xpm, window_size


def xpm(size_line):
    return (
        "/* XPM */\n"
        "static char *floor[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        f"{size_line}\n"
        '"  c #000000",\n'
        "};\n"
    )


def test_reads_size_from_fourth_line(tmp_path):
    path = tmp_path / "floor.xpm"
    path.write_text(xpm('"32 48 1 1 ",'))
    assert tile_size_from_xpm(path) == (32, 48)


def test_missing_file(tmp_path):
    with pytest.raises(MapError) as info:
        tile_size_from_xpm(tmp_path / "none.xpm")
    assert info.value.code == "S"


@pytest.mark.parametrize("size_line", ['"0 48 1 1",', '"32",', '"32 -4 1 1",', '"a b c d",'])
def test_bad_size_line(tmp_path, size_line):
    path = tmp_path / "floor.xpm"
    path.write_text(xpm(size_line))
    with pytest.raises(MapError) as info:
        tile_size_from_xpm(path)
    assert info.value.code == "S"


def test_blank_line_before_size(tmp_path):
    path = tmp_path / "floor.xpm"
    path.write_text('/* XPM */\n\nstatic char *x[] = {\n"32 32 1 1",\n')
    with pytest.raises(MapError) as info:
        tile_size_from_xpm(path)
    assert info.value.code == "S"


def test_too_short(tmp_path):
    path = tmp_path / "floor.xpm"
    path.write_text("/* XPM */\nstatic char *x[] = {\n")
    with pytest.raises(MapError) as info:
        tile_size_from_xpm(path)
    assert info.value.code == "S"


def test_window_size():
    assert window_size(["111", "1P1"], (32, 48)) == (96, 96)


def test_window_size_scales_with_tile():
    rows = ["11111", "1PCE1", "11111"]
    small = window_size(rows, (1, 1))
    assert small == (len(rows[-1]), len(rows))
    assert window_size(rows, (2, 3)) == (small[0] * 2, small[1] * 3)


def test_window_size_empty():
    with pytest.raises(ValueError):
        window_size([], (32, 32))