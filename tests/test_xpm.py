import pytest

from cubmap.xpm import (
    XpmError,
    parse_xpm,
    quoted_lines,
    strip_comments,
    xpm_file_to_image,
    xpm_to_image,
)

SMALL = [
    "2 2 3 1",
    "r c red",
    "b c #0000FF",
    ". c None",
    "rb",
    ".r",
]


def test_strip_block_comment_blanks_it():
    assert strip_comments('/* x */"ab"') == " " * 7 + '"ab"'


def test_strip_keeps_comment_marks_inside_quotes():
    text = '"/* no */"'
    assert strip_comments(text) == text


def test_strip_line_comment_keeps_length():
    text = 'a // hi\n"b"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "//" not in result
    assert list(quoted_lines(result)) == ["b"]


def test_quoted_lines_in_order():
    assert list(quoted_lines('x "ab" y "cd" "e')) == ["ab", "cd"]


def test_quoted_lines_empty_without_quotes():
    assert list(quoted_lines("no strings here")) == []


def test_parse_small_image():
    image = xpm_to_image(SMALL)
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == 0x0000FF
    assert image.get_pixel(0, 1) == 0xFF000000
    assert image.get_pixel(1, 1) == 0xFF0000


def test_parse_big_endian_bytes():
    image = parse_xpm(["1 1 1 1", "a c #112233", "a"], 32, 1)
    assert bytes(image.data[:4]) == bytes([0x00, 0x11, 0x22, 0x33])
    assert image.get_pixel(0, 0) == 0x112233


def test_two_char_keys_later_definition_wins():
    image = xpm_to_image(["1 1 2 2", "ab c #000001", "ab c #000002", "ab"])
    assert image.get_pixel(0, 0) == 0x000002


def test_three_char_keys_first_definition_wins():
    image = xpm_to_image(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert image.get_pixel(0, 0) == 0x000001


def test_space_key_and_two_word_name():
    image = xpm_to_image(["2 1 2 1", "  c dark red", "x c white", " x"])
    assert image.get_pixel(0, 0) == 0x8B0000
    assert image.get_pixel(1, 0) == 0xFFFFFF


def test_undefined_key_gives_zero():
    image = xpm_to_image(["1 1 1 1", "a c white", "z"])
    assert image.get_pixel(0, 0) == 0


@pytest.mark.parametrize(
    "data",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1"],
        ["1 1 1 1", "a s red", "a"],
        ["1 1 1 1", "a c"],
        ["1 2 1 1", "a c red", "a"],
        [],
    ],
)
def test_malformed_data_raises(data):
    with pytest.raises(XpmError):
        xpm_to_image(data)


def test_file_round_trip(tmp_path):
    path = tmp_path / "img.xpm"
    path.write_text(
        "/* XPM */\n"
        "static char *img[] = {\n"
        "// size\n"
        '"2 1 2 1",\n'
        '"g c green", /* colour */\n'
        '"k c black",\n'
        '"gk"\n'
        "};\n"
    )
    image = xpm_file_to_image(path)
    assert (image.width, image.height) == (2, 1)
    assert image.get_pixel(0, 0) == 0x00FF00
    assert image.get_pixel(1, 0) == 0x000000


def test_file_matches_in_memory(tmp_path):
    path = tmp_path / "small.xpm"
    path.write_text("{\n" + ",\n".join(f'"{line}"' for line in SMALL) + "\n};\n")
    from_file = xpm_file_to_image(path)
    from_data = xpm_to_image(SMALL)
    assert from_file.data == from_data.data


def test_missing_file_raises(tmp_path):
    with pytest.raises(XpmError):
        xpm_file_to_image(tmp_path / "absent.xpm")