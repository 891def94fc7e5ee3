"""Tests for sugoroku/cli.py."""

import pytest

from sugoroku import cli
from sugoroku.config.settings import Settings


@pytest.fixture
def files(tmp_path, player_list_toml, world_toml):
    players = tmp_path / "players.toml"
    board = tmp_path / "board.toml"
    players.write_text(player_list_toml, encoding="utf-8")
    board.write_text(world_toml, encoding="utf-8")
    return players, board


class TestCli:
    def test_world_to_tex(self, files, capsys):
        _, board = files
        assert cli.main(["world-to-tex", str(board)]) == 0
        assert board.with_suffix(".tex").exists()
        assert str(board.with_suffix(".tex")) in capsys.readouterr().out

    def test_play_runs_console(self, files, monkeypatch):
        players, board = files
        seen = {}
        monkeypatch.setattr(cli, "run_console", lambda session: seen.setdefault("session", session))
        assert cli.main(["play", str(players), str(board), "--locale", "ja", "--min-dice", "0"]) == 0
        session = seen["session"]
        assert session.roster.order == ("Alice", "Bob")
        assert session.locale.value == "ja"
        assert session.world.min_dice == 0

    def test_world_to_tex_locale(self, files):
        _, board = files
        assert cli.main(["world-to-tex", str(board), "--locale", "ja"]) == 0
        assert "プレイヤーは2 マス進む。" in board.with_suffix(".tex").read_text(encoding="utf-8")

    def test_locale_defaults_to_settings(self, files, monkeypatch):
        players, board = files
        seen = {}
        monkeypatch.setattr(cli, "get_settings", lambda: Settings(locale="ja", min_dice=0))
        monkeypatch.setattr(cli, "run_console", lambda session: seen.setdefault("session", session))
        assert cli.main(["play", str(players), str(board)]) == 0
        assert seen["session"].locale.value == "ja"
        assert seen["session"].world.min_dice == 0

    def test_game_error_exit_status(self, files, tmp_path, capsys):
        players, _ = files
        missing = tmp_path / "missing.toml"
        assert cli.main(["play", str(players), str(missing)]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_subcommand_required(self):
        with pytest.raises(SystemExit):
            cli.main([])
