import pytest

from solong.wordtab import find, find_unquoted, split_words


def test_split_on_spaces_and_tabs():
    assert split_words("  16 16\t2  1 ") == ["16", "16", "2", "1"]


def test_split_empty_and_blank():
    assert split_words("") == []
    assert split_words(" \t  ") == []


def test_split_keeps_other_characters():
    assert split_words("c #FF0000\n") == ["c", "#FF0000\n"]


def test_find_locates_needle():
    text = "static char *xpm[] = {"
    pos = find(text, "xpm")
    assert text[pos:pos + 3] == "xpm"
    assert "xpm" not in text[:pos]


def test_find_missing_and_too_long():
    assert find("abc", "z") == -1
    assert find("abc", "abcd") == -1


def test_find_unquoted_skips_quoted_match():
    text = '"/*" x /* y */'
    pos = find_unquoted(text, "/*")
    assert text[pos:pos + 2] == "/*"
    assert text[:pos].count('"') % 2 == 0
    assert pos > text.index('"', 1)


def test_find_unquoted_only_inside_quotes():
    assert find_unquoted('"a // b"', "//") == -1


def test_find_unquoted_matches_plain_text():
    assert find_unquoted("// comment", "//") == 0


@pytest.mark.parametrize("func", [find, find_unquoted])
def test_empty_needle_rejected(func):
    with pytest.raises(ValueError):
        func("abc", "")