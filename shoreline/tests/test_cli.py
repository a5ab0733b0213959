"""
Tests for the command-line interface.
"""

import pytest

from ..cli import main


class TestCLI:
    """Tests for CLI commands."""

    def test_catalog(self, capsys):
        main(["catalog"])
        out = capsys.readouterr().out
        assert "Beach Nourishment" in out
        assert "King Tide Flooding" in out
        assert "normal" in out

    def test_simulate(self, capsys):
        main(["simulate", "--seed", "1", "NOURISH", "REEF"])
        out = capsys.readouterr().out
        assert out.index("Game start: 2020") < out.index("chose Beach Nourishment")
        assert "Width 40 ft | Budget $85M" in out
        assert "Result: in_progress" in out

    def test_simulate_stops_after_game_over(self, capsys):
        main(["simulate", "RETREAT", "RETREAT", "DUNES"])
        out = capsys.readouterr().out
        assert "Stopped: Game is over" in out
        assert "Result: lost" in out

    def test_goal_width_policy(self, capsys):
        main(["simulate", "--difficulty", "easy", "--win-policy", "goal_width"] + ["DUNES"] * 8)
        out = capsys.readouterr().out
        assert "Result: lost" in out

    def test_play(self, capsys, monkeypatch):
        inputs = iter(["NOURISH", "undo", "undo", "DUNES", "reset", "quit"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(inputs))
        main(["play", "--seed", "2"])
        out = capsys.readouterr().out
        assert "chose Beach Nourishment" in out
        assert "Nothing to undo." in out
        assert "chose Dune Restoration" in out

    def test_no_command(self, capsys):
        with pytest.raises(SystemExit):
            main([])
