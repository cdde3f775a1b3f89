"""Tests for the console entry point."""

import io
import sys

from cricket import config
from cricket.main import main, parse_args


def test_parse_args_defaults():
    args = parse_args([])
    assert args.config is None
    assert args.log_level is None
    assert not args.no_demo


def test_main_runs_commands_from_stdin(tmp_path, monkeypatch, capsys):
    path = tmp_path / "cricket.toml"
    path.write_text('[cricket]\ndemo_players = ["Ann"]\n')
    monkeypatch.setattr(config, "load_dotenv", lambda: False)
    monkeypatch.delenv("CRICKET_DEMO_PLAYERS", raising=False)
    monkeypatch.setattr(sys, "stdin", io.StringIO("add Ben\nstart\nhit 1 20\nquit\nadd Never\n"))

    assert main(["--config", str(path), "--log-level", "warning"]) == 0

    out = capsys.readouterr().out
    assert "[0] Ann" in out
    assert "[1] Ben" in out
    assert "Leader: Ben" in out
    assert out.rstrip().endswith("bye")
    assert "Never" not in out
