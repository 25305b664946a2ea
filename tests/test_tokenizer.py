# tests/test_tokenizer.py
from markov_textgen.context import char_tokenize, normalize_text


def test_char_tokenize_keeps_whitespace():
    assert char_tokenize("a b\n") == ["a", " ", "b", "\n"]
    assert char_tokenize("") == []


def test_normalize_leaves_text_alone_by_default():
    assert normalize_text("one\ntwo\n\n") == "one\ntwo\n\n"
    assert normalize_text("tail  ") == "tail  "


def test_normalize_folds_newline_runs():
    assert normalize_text("one \n\n  two\nthree\n", strip_newlines=True) == "one two three"
    assert normalize_text("", strip_newlines=True) == ""
