import pytest

from cubmap.colors import lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("red", 0xff0000),
        ("snow", 0xfffafa),
        ("navy", 0x80),
        ("gray100", 0xffffff),
        ("black", 0x0),
        ("lightgreen", 0x90ee90),
    ],
)
def test_single_word_names(name, expected):
    assert lookup_color(name) == expected


def test_none_is_transparent_marker():
    assert lookup_color("none") == -1
    assert lookup_color("None") == -1


def test_lookup_ignores_case():
    assert lookup_color("RED") == lookup_color("red")
    assert lookup_color("GhostWhite") == lookup_color("ghostwhite")


def test_two_word_name_joined_with_space():
    assert lookup_color("ghost", "white") == 0xf8f8ff
    assert lookup_color("ghost", "white") == lookup_color("ghostwhite")


def test_duplicate_names_resolve_to_first_entry():
    assert lookup_color("dark", "slate") == 0x2f4f4f
    assert lookup_color("light", "goldenrod") == 0xfafad2


def test_unknown_name_is_zero():
    assert lookup_color("not-a-colour") == 0
    assert lookup_color("red", "ish") == 0


def test_hex_spec_round_trip():
    for value in (0x0, 0xff0000, 0x123456, 0xabcdef):
        assert lookup_color(f"#{value:06x}") == value


def test_hex_spec_ignores_end_and_is_case_insensitive():
    assert lookup_color("#FF00ff", "ignored") == 0xff00ff


def test_hex_spec_without_digits_is_zero():
    assert lookup_color("#") == 0
    assert lookup_color("#zz") == 0


def test_hex_spec_stops_at_first_non_digit():
    assert lookup_color("#12zz") == 0x12


def test_hex_spec_accepts_0x_prefix():
    assert lookup_color("#0x1f") == lookup_color("#1f")


def test_hex_spec_wraps_to_signed_32_bits():
    assert lookup_color("#ffffffff") == -1


def test_every_gray_step_is_a_gray_level():
    for level in range(101):
        color = lookup_color(f"gray{level}")
        red, green, blue = (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF
        assert red == green == blue
        assert lookup_color(f"grey{level}") == color


def test_gray_steps_increase():
    values = [lookup_color(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    assert values[0] == 0
    assert values[-1] == 0xffffff