import pytest

from orion_cli.tokenizer import InputToken, tokenize


def test_splits_on_whitespace():
    assert [t.text for t in tokenize("  go  12\tnorth ")] == ["go", "12", "north"]


def test_integer_values():
    tokens = tokenize("scan -3 +4 7x 05")

    assert [t.value for t in tokens] == [None, -3, 4, None, 5]


def test_quoted_segments_stay_together():
    assert tokenize('rename "Alpha Centauri" 2') == [
        InputToken("rename"),
        InputToken("Alpha Centauri"),
        InputToken("2", 2),
    ]


def test_blank_line():
    assert tokenize("   ") == []


def test_unbalanced_quote():
    with pytest.raises(ValueError):
        tokenize('say "hello')


def test_str_is_raw_text():
    assert str(tokenize("42")[0]) == "42"
