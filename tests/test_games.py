"""Tests for the cube game stage."""

import pytest

from aoc2023.errors import GameParseError
from aoc2023.inputs import iter_lines
from aoc2023.models import CubeColor, CubeSet, ErrorPolicy, PuzzlePart
from aoc2023.pipeline.stage_games import (
    DEFAULT_BAG,
    game_power,
    is_possible,
    parse_game,
    sum_possible_ids,
    sum_powers,
)


class TestParseGame:
    """Tests for parse_game."""

    def test_parse_record(self):
        """A record becomes one CubeSet per reveal."""
        game = parse_game("Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green")

        assert game.id == 1
        assert len(game.reveals) == 3
        assert game.reveals[0] == CubeSet(red=4, blue=3)
        assert game.reveals[1] == CubeSet(red=1, green=2, blue=6)
        assert game.reveals[2] == CubeSet(green=2)

    def test_maximums(self):
        """Maximums are taken per colour across reveals."""
        game = parse_game("Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red")

        assert game.maximums == CubeSet(red=20, green=13, blue=6)
        assert game.maximums.count(CubeColor.GREEN) == 13

    def test_missing_colour_is_zero(self):
        """A colour that never appears has a maximum of zero."""
        game = parse_game("Game 7: 2 red; 1 red")
        assert game.maximums == CubeSet(red=2)
        assert game_power(game) == 0

    @pytest.mark.parametrize(
        "line,reason",
        [
            ("3 blue, 4 red", "missing ':'"),
            ("Round 1: 3 blue", "bad header"),
            ("Game x: 3 blue", "bad header"),
            ("Game 1: three blue", "bad cube entry"),
            ("Game 1: 3 purple", "unknown colour"),
            ("Game 1: 3 blue, 2 blue", "repeated"),
        ],
    )
    def test_invalid_records(self, line, reason):
        """Malformed records raise GameParseError."""
        with pytest.raises(GameParseError, match=reason):
            parse_game(line)


class TestScoring:
    """Tests for possibility and power."""

    def test_is_possible(self, games_example):
        """Games 1, 2 and 5 fit the default bag."""
        games = [parse_game(line) for line in iter_lines(games_example)]
        possible = [game.id for game in games if is_possible(game)]

        assert possible == [1, 2, 5]

    def test_custom_bag(self):
        """A bigger bag admits more games."""
        game = parse_game("Game 3: 20 red")
        assert not is_possible(game, DEFAULT_BAG)
        assert is_possible(game, CubeSet(red=20))

    def test_game_power(self):
        """Power is the product of per-colour maximums."""
        game = parse_game("Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green")
        assert game_power(game) == 48


class TestReports:
    """Tests for the summing entry points."""

    def test_sum_possible_ids(self, games_example):
        """The worked example sums to 8."""
        report = sum_possible_ids(iter_lines(games_example))

        assert report.total == 8
        assert report.part == PuzzlePart.ONE
        assert report.bag == DEFAULT_BAG
        assert len(report.games) == 5

    def test_sum_powers(self, games_example):
        """The worked example powers sum to 2286."""
        report = sum_powers(iter_lines(games_example))

        assert report.total == 2286
        assert report.part == PuzzlePart.TWO

    def test_power_with_unseen_colour(self):
        """A colour never revealed contributes zero to the power."""
        report = sum_powers(["Game 1: 3 red; 2 blue", "Game 2: 1 red, 2 green, 3 blue"])

        assert report.total == 0 + 6

    def test_abort_on_bad_record(self, games_example):
        """The abort policy raises with the line number."""
        lines = list(iter_lines(games_example)) + ["Game 6: 1 purple"]

        with pytest.raises(GameParseError) as exc_info:
            sum_powers(lines)

        assert exc_info.value.line_number == 6

    def test_skip_bad_record(self, games_example):
        """The skip policy records the failure and scores the rest."""
        lines = ["garbage"] + list(iter_lines(games_example))
        report = sum_possible_ids(lines, on_error=ErrorPolicy.SKIP)

        assert report.total == 8
        assert len(report.failures) == 1
        assert "missing ':'" in report.failures[0]
