import pygame
import pytest

from solong.cli import main
from solong.mapfile import debug_report, load_map

MAP_TEXT = "11111\n1PCE1\n11111\n"
ENEMY_MAP_TEXT = "111111\n1PCEX1\n111111\n"


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    yield
    pygame.quit()


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


@pytest.mark.parametrize("argv", [[], ["a.ber", "b.ber"]])
def test_wrong_number_of_arguments(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().err == "Error\nWrong number of arguments\n"


@pytest.mark.parametrize(
    "arg, message",
    [
        ("", "NULL map argument"),
        (".ber", "Map argument invalid"),
        ("map.txt", "Wrong map extension"),
        ("maps/.ber", "No map name"),
    ],
)
def test_bad_map_argument(arg, message, capsys):
    assert main([arg]) == 1
    assert capsys.readouterr().err == f"Error\n{message}\n"


def test_missing_map_file(tmp_path, capsys):
    assert main([str(tmp_path / "none.ber")]) == 1
    assert capsys.readouterr().err == "Error\nMap file not found or has an error\n"


def test_open_map_rejected(tmp_path, capsys):
    path = _write(tmp_path, "open.ber", "11111\n1PCE0\n11111\n")
    assert main([path]) == 1
    assert capsys.readouterr().err == "Error\nMap is not closed\n"


def test_enemy_needs_bonus(tmp_path, capsys):
    path = _write(tmp_path, "enemy.ber", ENEMY_MAP_TEXT)
    assert main([path]) == 1
    assert capsys.readouterr().err == "Error\nInvalid character\n"


def test_bonus_accepts_enemy_then_needs_images(headless, tmp_path, capsys):
    path = _write(tmp_path, "enemy.ber", ENEMY_MAP_TEXT)
    assets = tmp_path / "assets"
    assets.mkdir()
    assert main(["--bonus", "--assets", str(assets), path]) == 1
    assert capsys.readouterr().err == "Error\nCould not load image door_01\n"


def test_debug_prints_report(headless, tmp_path, capsys):
    path = _write(tmp_path, "ok.ber", MAP_TEXT)
    assets = tmp_path / "assets"
    assets.mkdir()
    assert main(["--debug", "--assets", str(assets), path]) == 1
    captured = capsys.readouterr()
    assert captured.out == debug_report(load_map(path))
    assert captured.err == "Error\nCould not load image door_01\n"