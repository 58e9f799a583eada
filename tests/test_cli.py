import pytest

from solong.cli import main

ROWS = ["11111", "1PCE1", "11111"]


@pytest.fixture
def game_dir(tmp_path, monkeypatch):
    textures = tmp_path / "assets" / "textures"
    textures.mkdir(parents=True)
    (textures / "floor.xpm").write_text(
        '/* XPM */\nstatic char *floor[] = {\n/* size */\n"32 32 1 1",\n" c #000000",\n'
    )
    (tmp_path / "level.ber").write_text("\n".join(ROWS) + "\n")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_no_arguments(capsys):
    assert main([]) == 1
    assert "add a program argument" in capsys.readouterr().err


def test_too_many_arguments(capsys):
    assert main(["a.ber", "b.ber"]) == 1
    assert "Too many arguments!! Only 1 is needed." in capsys.readouterr().err


def test_valid_map(game_dir, capsys):
    assert main(["level.ber"]) == 0
    out = capsys.readouterr().out
    assert "EPIC: The Game" in out
    assert out.splitlines()[1:] == ROWS


def test_invalid_map(game_dir, capsys):
    (game_dir / "broken.ber").write_text("11111\n1P0E1\n11111\n")
    assert main(["broken.ber"]) == 1
    assert capsys.readouterr().err.startswith("Error")


def test_missing_floor_texture(game_dir, capsys):
    (game_dir / "assets" / "textures" / "floor.xpm").unlink()
    assert main(["level.ber"]) == 1
    assert "tile size" in capsys.readouterr().err