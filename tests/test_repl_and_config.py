import logging

import pytest

from lispy import config, repl


def _feed(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def test_repl_prints_results(monkeypatch, capsys):
    _feed(monkeypatch, ["+ 1 2", "def {x} {1 2}", "x", "", "head {}"])
    assert repl.main() == 0
    out = capsys.readouterr().out
    assert "Lispy Version" in out
    lines = out.splitlines()
    assert "3" in lines
    assert "()" in lines
    assert "{1 2}" in lines
    assert "Error: Function 'head' passed { }." in lines


def test_repl_survives_syntax_errors(monkeypatch, capsys):
    _feed(monkeypatch, ["(+ 1", "(+ 1 1)"])
    assert repl.main() == 0
    out = capsys.readouterr().out
    assert "Syntax error: Unmatched '('" in out
    assert "2" in out.splitlines()


def test_repl_exit(monkeypatch):
    _feed(monkeypatch, ["exit", "+ 1 1"])
    with pytest.raises(SystemExit) as info:
        repl.main()
    assert info.value.code == 0


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("LISPY_LOG_LEVEL", "debug")
    assert config.get_log_level() == logging.DEBUG
    monkeypatch.setenv("LISPY_LOG_LEVEL", "bogus")
    assert config.get_log_level() == logging.WARNING
    monkeypatch.delenv("LISPY_LOG_LEVEL")
    assert config.get_log_level() == logging.WARNING


def test_prompt_from_environment(monkeypatch):
    monkeypatch.delenv("LISPY_PROMPT", raising=False)
    assert config.get_prompt() == "lispy> "
    monkeypatch.setenv("LISPY_PROMPT", ">> ")
    assert config.get_prompt() == ">> "


def test_default_prelude_is_packaged(monkeypatch):
    monkeypatch.delenv("LISPY_PRELUDE_PATH", raising=False)
    path = config.get_prelude_path()
    assert path.name == "prelude.lspy"
    assert path.is_file()
