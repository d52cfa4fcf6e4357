import pytest

from cubmap.wordtab import find, find_unquoted, split_words


def test_split_on_spaces_and_tabs():
    assert split_words("16 7 \t2  1") == ["16", "7", "2", "1"]


def test_split_blank_only():
    assert split_words(" \t  ") == []
    assert split_words("") == []


def test_split_keeps_other_whitespace_in_words():
    assert split_words("a\nb c") == ["a\nb", "c"]


@pytest.mark.parametrize("text", ["one two", "  lead", "trail\t", "x\t\ty  z"])
def test_split_rejoin_invariant(text):
    words = split_words(text)
    assert all(" " not in w and "\t" not in w and w for w in words)
    assert "".join(words) == text.replace(" ", "").replace("\t", "")


@pytest.mark.parametrize(
    "text,needle",
    [("abc\"def\"", '"'), ("hello world", "world"), ("/* x */", "*/"), ("aaab", "ab")],
)
def test_find_locates_first_match(text, needle):
    pos = find(text, needle)
    assert text[pos:].startswith(needle)
    assert needle not in text[: pos + len(needle) - 1]


def test_find_missing():
    assert find("abc", "x") == -1
    assert find("ab", "abc") == -1


def test_find_empty_needle_raises():
    with pytest.raises(ValueError):
        find("abc", "")
    with pytest.raises(ValueError):
        find_unquoted("abc", "")


def test_find_unquoted_skips_quoted_text():
    text = '"a /* b" /* c */'
    pos = find_unquoted(text, "/*")
    assert pos == text.index("/*", text.rindex('"') + 1)


def test_find_unquoted_without_quotes_matches_find():
    text = "static /* comment */ int"
    assert find_unquoted(text, "/*") == find(text, "/*")


def test_find_unquoted_only_inside_quotes():
    assert find_unquoted('"// inside"', "//") == -1