import pytest

from solong.mapfile import MapError, MapInfo, check_map_path, debug_report, load_map, parse_map

VALID_ROWS = ["11111", "1PCE1", "11111"]
VALID_TEXT = "\n".join(VALID_ROWS) + "\n"


def test_valid_map_dimensions_follow_rows():
    info = parse_map(VALID_TEXT)
    assert info.rows == tuple(VALID_ROWS)
    assert info.height == len(VALID_ROWS)
    assert info.width == len(VALID_ROWS[0])


def test_valid_map_counts_components():
    info = parse_map(VALID_TEXT)
    assert (info.collectibles, info.exits, info.players) == (1, 1, 1)


def test_leading_and_trailing_newlines_are_ignored():
    info = parse_map("\n\n" + VALID_TEXT + "\n\n")
    assert info.rows == tuple(VALID_ROWS)


def test_extra_players_become_empty_space():
    info = parse_map("1111111\n1PCPEP1\n1111111\n")
    assert info.players == 1
    assert info.rows[1] == "1PC0E01"


def test_multiple_collectibles_and_exits_counted():
    rows = ["1111111", "1PCCEE1", "1111111"]
    info = parse_map("\n".join(rows))
    assert info.collectibles == "".join(rows).count("C")
    assert info.exits == "".join(rows).count("E")


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "Map is empty"),
        ("\n\n\n", "Map is empty"),
        ("11111\n1PCE1\n\n11111\n", "Line Break inside of map"),
        ("11111\n1PCE1\n1111\n", "Map is not rectangular"),
        ("1PCE1\n", "Map is not rectangular"),
        ("11111\n1PCE1\n11101\n", "Map is not closed"),
        ("11111\n0PCE1\n11111\n", "Map is not closed"),
        ("11111\n1PCE0\n11111\n", "Map is not closed"),
        ("11111\n1PCZ1\n11111\n", "Invalid character"),
        ("11111\n1P0E1\n11111\n", "Wrong number of collectibles"),
        ("11111\n1PC01\n11111\n", "Wrong number of map exits"),
        ("11111\n10CE1\n11111\n", "Wrong number of starting positions"),
    ],
)
def test_invalid_maps(text, message):
    with pytest.raises(MapError) as excinfo:
        parse_map(text)
    assert str(excinfo.value) == message


def test_enemy_rejected_without_bonus():
    with pytest.raises(MapError, match="Invalid character"):
        parse_map("111111\n1PCXE1\n111111\n")


def test_enemy_accepted_with_bonus():
    info = parse_map("111111\n1PCXE1\n111111\n", allow_enemies=True)
    assert "X" in info.rows[1]


def test_carriage_return_is_invalid():
    with pytest.raises(MapError, match="Invalid character"):
        parse_map("11111\r\n1PCE1\r\n11111\r\n")


def test_load_map_reads_file(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text(VALID_TEXT)
    assert load_map(path) == parse_map(VALID_TEXT)


def test_load_map_missing_file(tmp_path):
    with pytest.raises(MapError, match="Map file not found or has an error"):
        load_map(tmp_path / "missing.ber")


def test_load_map_empty_file(tmp_path):
    path = tmp_path / "empty.ber"
    path.write_bytes(b"")
    with pytest.raises(MapError, match="Map is empty"):
        load_map(path)


def test_load_map_bonus(tmp_path):
    path = tmp_path / "enemy.ber"
    path.write_text("111111\n1PCXE1\n111111\n")
    info = load_map(path, allow_enemies=True)
    assert isinstance(info, MapInfo) and info.rows[1] == "1PCXE1"


@pytest.mark.parametrize("path", ["maps/level.ber", "a.ber", "level.ber"])
def test_check_map_path_accepts(path):
    assert check_map_path(path) == path


@pytest.mark.parametrize(
    "path, message",
    [
        ("", "NULL map argument"),
        (".ber", "Map argument invalid"),
        ("ber", "Map argument invalid"),
        ("level.txt", "Wrong map extension"),
        ("level.BER", "Wrong map extension"),
        ("maps/.ber", "No map name"),
    ],
)
def test_check_map_path_rejects(path, message):
    with pytest.raises(MapError) as excinfo:
        check_map_path(path)
    assert str(excinfo.value) == message


def test_debug_report_lists_rows_and_counts():
    info = parse_map(VALID_TEXT)
    report = debug_report(info)
    assert report.startswith("\n" + VALID_TEXT)
    assert f"\nHeight: {info.height}\n" in report
    assert f"\nWidth: {info.width}\n" in report
    assert f"\nCollectibles: {info.collectibles}\n" in report
    assert f"\nStarting positions: {info.players}\n" in report
    assert report.endswith(f"\nExits: {info.exits}\n")