# tests/test_cli.py - command line smoke checks
import io
import json

import pytest

from markov_textgen.cli import main


@pytest.fixture
def conf(tmp_path):
    return str(tmp_path / "conf.json")


@pytest.fixture
def text_file(tmp_path):
    def write(text):
        p = tmp_path / "input.txt"
        p.write_text(text, encoding="utf-8")
        return str(p)
    return write


def test_generate_single_path(conf, text_file, capsys):
    rc = main(["--config", conf, "generate", text_file("ab"), "--order", "1", "-n", "3"])
    assert rc == 0
    assert capsys.readouterr().out == "ab\nab\nab\n"


def test_generate_seed_is_repeatable(conf, text_file, capsys):
    path = text_file("the quick brown fox jumps over the lazy dog")
    main(["--config", conf, "generate", path, "-k", "1", "--seed", "3", "-n", "4"])
    first = capsys.readouterr().out
    main(["--config", conf, "generate", path, "-k", "1", "--seed", "3", "-n", "4"])
    assert capsys.readouterr().out == first


def test_generate_max_tokens(conf, text_file, capsys):
    path = text_file("abcdefghij")
    main(["--config", conf, "generate", path, "-k", "2", "--max-tokens", "4"])
    assert capsys.readouterr().out == "abcd\n"


def test_generate_from_stdin(conf, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("xyz"))
    assert main(["--config", conf, "generate", "-k", "3"]) == 0
    assert capsys.readouterr().out == "xyz\n"


def test_generate_uses_config_defaults(tmp_path, text_file, capsys):
    conf = tmp_path / "conf.json"
    conf.write_text(json.dumps({"order": 2, "samples": 2, "strip_newlines": True}))
    main(["--config", str(conf), "generate", text_file("ab\ncd\n")])
    assert capsys.readouterr().out == "ab cd\nab cd\n"


def test_missing_input_returns_error(conf, tmp_path, capsys):
    rc = main(["--config", conf, "generate", str(tmp_path / "missing.txt")])
    assert rc == 1
    assert "cannot read input" in capsys.readouterr().err


def test_chain_summary(conf, text_file, capsys):
    assert main(["--config", conf, "chain", text_file("ab"), "--order", "1"]) == 0
    out = capsys.readouterr().out
    assert "3 contexts, 2 transitions, 1 terminal" in out
    assert "NONWORD" in out


def test_config_set_and_show(conf, capsys):
    assert main(["--config", conf, "config", "order", "5"]) == 0
    with open(conf, encoding="utf8") as f:
        assert json.load(f)["order"] == 5
    assert main(["--config", conf, "config"]) == 0
    assert "order" in capsys.readouterr().out


def test_config_unknown_key(conf, capsys):
    assert main(["--config", conf, "config", "bogus", "1"]) == 2
    assert "no such option" in capsys.readouterr().err


def test_bad_log_level(conf, text_file):
    assert main(["--config", conf, "--log-level", "loud", "generate", text_file("ab")]) == 2


def test_generate_keeps_trailing_whitespace(conf, text_file, capsys):
    main(["--config", conf, "generate", text_file("ab \n"), "-k", "4"])
    assert capsys.readouterr().out == "ab \n\n"


def test_generate_rejects_none_samples_from_config(conf, text_file, capsys):
    path = text_file("ab")
    # "none" is only a value for untyped options, so samples keeps a number
    assert main(["--config", conf, "config", "samples", "none"]) == 2
    assert main(["--config", conf, "generate", path, "-k", "1"]) == 0
    assert capsys.readouterr().out.endswith("ab\n")


@pytest.mark.parametrize("bad", [{"samples": "two"}, {"samples": None},
                                 {"samples": 0}, {"max_tokens": -3}, {"max_tokens": True}])
def test_generate_reports_bad_config_values(tmp_path, text_file, capsys, bad):
    conf = tmp_path / "conf.json"
    conf.write_text(json.dumps(bad))
    assert main(["--config", str(conf), "generate", text_file("ab"), "-k", "1"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "config error" in captured.err


def test_generate_accepts_numeric_strings_in_config(tmp_path, text_file, capsys):
    conf = tmp_path / "conf.json"
    conf.write_text(json.dumps({"samples": "2", "max_tokens": "1"}))
    assert main(["--config", str(conf), "generate", text_file("ab"), "-k", "1"]) == 0
    assert capsys.readouterr().out == "a\na\n"
