"""Tests for the terminal entry points."""

import pytest

from cli import arena as arena_cli
from cli import main as main_cli


class TestParseUserMove:
    def test_coordinate_label(self):
        assert main_cli.parse_user_move("d3") == 19

    def test_row_col(self):
        assert main_cli.parse_user_move("3 4") == 19

    def test_empty_or_unknown(self):
        assert main_cli.parse_user_move("") is None
        assert main_cli.parse_user_move("move to d3") is None

    @pytest.mark.parametrize("command", ["z9", "9 1", "a b"])
    def test_invalid(self, command):
        with pytest.raises(ValueError):
            main_cli.parse_user_move(command)


class TestBuildAgent:
    def test_cli_overrides_config(self, tmp_path):
        path = tmp_path / "agent.json"
        path.write_text('{"search": {"depth": 3, "time_limit_ms": 900}}', encoding="utf-8")
        args = main_cli.parse_args(["--config", str(path), "--depth", "2"])
        agent = main_cli.build_agent(args, main_cli.Board())
        assert agent.depth == 2
        assert agent.config.time_limit_ms == 900

    def test_defaults(self):
        agent = main_cli.build_agent(main_cli.parse_args([]), main_cli.Board())
        assert agent.depth == 4
        assert agent.config.time_limit_ms is None


class TestRunCli:
    def test_watch_mode_finishes_game(self, capsys):
        main_cli.run_cli(["--watch", "--depth", "1", "--log-level", "ERROR"])
        out = capsys.readouterr().out
        assert "Winner:" in out or "Game ended in draw." in out

    def test_human_can_quit(self, monkeypatch, capsys):
        monkeypatch.setattr("builtins.input", lambda prompt="": "quit")
        main_cli.run_cli(["--depth", "1", "--log-level", "ERROR"])
        assert "Exiting game." in capsys.readouterr().out

    def test_human_move_then_quit(self, monkeypatch, capsys):
        answers = iter(["e9", "a1", "d3", "quit"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
        main_cli.run_cli(["--depth", "1", "--log-level", "ERROR"])
        out = capsys.readouterr().out
        assert "Invalid coordinate." in out
        assert "Illegal move for current state." in out
        assert "You played d3 flipping 1." in out
        assert "AI (white) played" in out


class TestArenaCli:
    def test_prints_summary(self, capsys):
        arena_cli.main(["--games", "2", "--depth", "1", "--seed", "3", "--log-level", "ERROR"])
        out = capsys.readouterr().out
        assert "minimax(depth=1) vs random" in out
        assert "score=" in out

    def test_rejects_negative_depth(self):
        with pytest.raises(ValueError):
            arena_cli.main(["--games", "1", "--depth", "-3", "--log-level", "ERROR"])

    def test_seed_repeats_summary(self, capsys):
        argv = ["--games", "2", "--depth", "1", "--max-plies", "12", "--seed", "5", "--log-level", "ERROR"]
        arena_cli.main(argv)
        first = capsys.readouterr().out
        arena_cli.main(argv)
        assert capsys.readouterr().out == first
