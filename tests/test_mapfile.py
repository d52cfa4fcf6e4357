import pytest

from cubmap.mapfile import (
    MapError,
    MapInfo,
    check_characters,
    check_extension,
    check_playable,
    check_spaces,
    extract_map,
    find_player,
    first_word,
    flood_fill,
    is_map_line,
    load,
    pad_map,
    parse_header,
    parse_rgb,
    read_lines,
    validate_map,
)

HEADER = (
    "NO ./no.xpm\n"
    "SO ./so.xpm\n"
    "WE ./we.xpm\n"
    "EA ./ea.xpm\n"
    "\n"
    "F 220,100,0\n"
    "C 225,30,0\n"
    "\n"
)

CLOSED_MAP = ["111111\n", "100001\n", "10N001\n", "111111\n"]
OPEN_MAP = ["111111\n", "100001\n", "1N000\n", "111111\n"]
SPACE_MAP = ["111111\n", "10 001\n", "1N0001\n", "111111\n"]


@pytest.fixture
def scene_dir(tmp_path, monkeypatch):
    for name in ("no", "so", "we", "ea"):
        (tmp_path / f"{name}.xpm").write_text("texture")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _write(directory, rows, name="map.cub"):
    (directory / name).write_text(HEADER + "".join(rows))
    return name


def test_check_extension_accepts_cub():
    assert check_extension("map.cub") is True


@pytest.mark.parametrize(
    "path, message",
    [
        ("map", "extention needed"),
        ("map.txt", "Incorrect extention"),
        ("map.cub.bak", "Incorrect extention"),
        ("./map.cub", "Incorrect extention"),
    ],
)
def test_check_extension_rejects(path, message):
    with pytest.raises(MapError, match=message):
        check_extension(path)


def test_read_lines_keeps_newlines(tmp_path):
    path = tmp_path / "data.cub"
    path.write_bytes(b"ab\ncd\n\nef")
    assert read_lines(path) == ["ab\n", "cd\n", "\n", "ef"]


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(MapError, match="Open failed"):
        read_lines(tmp_path / "absent.cub")


@pytest.mark.parametrize(
    "line, expected",
    [
        ("111\n", True),
        ("  101\n", True),
        ("\n", False),
        ("000\n", False),
        ("NO ./a1.xpm\n", False),
        ("F 1,1,1\n", False),
        ("C 1,1,1\n", False),
    ],
)
def test_is_map_line(line, expected):
    assert is_map_line(line) is expected


def test_first_word_stops_at_whitespace():
    assert first_word("./path/x.xpm\n") == "./path/x.xpm"
    assert first_word("abc def") == "abc"
    assert first_word("") == ""


def test_parse_rgb_channels_round_trip():
    color = parse_rgb("220,100,0\n")
    assert color >> 16 == 220
    assert (color >> 8) & 0xFF == 100
    assert color & 0xFF == 0


def test_parse_rgb_extremes():
    assert parse_rgb("0,0,0") == 0
    color = parse_rgb("255,255,255")
    assert (color >> 16, (color >> 8) & 0xFF, color & 0xFF) == (255, 255, 255)


@pytest.mark.parametrize("text", ["256,0,0", "-1,0,0", "1,2", "0,0,300"])
def test_parse_rgb_rejects(text):
    with pytest.raises(MapError, match="Invalid RGB values"):
        parse_rgb(text)


def test_parse_header_reads_textures_and_colors(scene_dir):
    info = MapInfo(lines=HEADER.splitlines(keepends=True))
    parse_header(info)
    assert (info.no, info.so, info.we, info.ea) == ("./no.xpm", "./so.xpm", "./we.xpm", "./ea.xpm")
    assert info.floor >> 16 == 220
    assert info.ceiling >> 16 == 225


def test_parse_header_missing_texture(scene_dir):
    info = MapInfo(lines=["NO ./no.xpm\n", "SO ./so.xpm\n", "WE ./we.xpm\n"])
    with pytest.raises(MapError, match="Not all textures"):
        parse_header(info)


def test_parse_header_unreadable_texture(scene_dir):
    info = MapInfo(lines=["NO ./missing.xpm\n"])
    with pytest.raises(MapError, match="Invalid NO texture"):
        parse_header(info)


def test_parse_header_key_without_value(scene_dir):
    info = MapInfo(lines=["NO\n"])
    with pytest.raises(MapError, match="NO not included"):
        parse_header(info)


def test_extract_map_takes_rest_of_file():
    lines = HEADER.splitlines(keepends=True) + CLOSED_MAP
    info = MapInfo(lines=lines)
    assert extract_map(info) == CLOSED_MAP
    assert info.grid == CLOSED_MAP


def test_extract_map_missing():
    info = MapInfo(lines=HEADER.splitlines(keepends=True))
    with pytest.raises(MapError, match="missing the map"):
        extract_map(info)


def test_find_player_position():
    assert find_player(["1111\n", "10W1\n", "1111\n"]) == (2, 1)


def test_find_player_too_many():
    with pytest.raises(MapError, match="'2' player positions"):
        find_player(["1NS1\n"])


def test_find_player_none():
    with pytest.raises(MapError, match="No player"):
        find_player(["1001\n"])


def test_check_playable_returns_player_cell():
    x, y = check_playable(CLOSED_MAP)
    assert CLOSED_MAP[y][x] == "N"


def test_check_playable_walled_in():
    with pytest.raises(MapError, match="accessable room"):
        check_playable(["111\n", "1N1\n", "111\n"])


def test_check_characters_rejects():
    with pytest.raises(MapError, match="'x' is not a valid character"):
        check_characters(["10x1\n"])


def test_pad_map_frames_grid():
    padded = pad_map(CLOSED_MAP)
    assert len(padded) == len(CLOSED_MAP) + 2
    assert len({len(row) for row in padded}) == 1
    assert set(padded[0].rstrip("\n")) == {"X"}
    assert padded[0] == padded[-1]
    assert all(row.endswith("\n") for row in padded)
    for original, row in zip(CLOSED_MAP, padded[1:-1]):
        assert row.startswith("X" + original.rstrip("\n"))


def test_pad_map_marks_spaces():
    padded = pad_map(SPACE_MAP)
    assert padded[2][3] == "L"


def test_check_spaces_rejects_space_beside_floor():
    with pytest.raises(MapError, match="space inside map"):
        check_spaces(pad_map(SPACE_MAP))


def test_flood_fill_closed_map():
    padded = pad_map(CLOSED_MAP)
    filled = flood_fill(padded)
    assert "X" not in "".join(filled)
    assert [len(row) for row in filled] == [len(row) for row in padded]
    assert filled[3][3] == "N"
    assert filled[2][2] == "0"


def test_flood_fill_open_map():
    with pytest.raises(MapError, match="Map not closed"):
        flood_fill(pad_map(OPEN_MAP))


def test_validate_map_stores_player():
    info = MapInfo(grid=list(CLOSED_MAP))
    filled = validate_map(info)
    assert filled == info.filled
    assert info.grid[info.player_y][info.player_x] == "N"


def test_load_valid_scene(scene_dir):
    info = load(_write(scene_dir, CLOSED_MAP))
    assert info.grid == CLOSED_MAP
    assert info.no == "./no.xpm"
    assert info.grid[info.player_y][info.player_x] == "N"
    assert "X" not in "".join(info.filled)


def test_load_open_scene(scene_dir):
    with pytest.raises(MapError, match="Map not closed"):
        load(_write(scene_dir, OPEN_MAP))