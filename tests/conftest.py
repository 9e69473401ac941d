"""Pytest configuration and fixtures."""

import pytest

PART_ONE_EXAMPLE = """1abc2
pqr3stu8vwx
a1b2c3d4e5f
treb7uchet
"""

PART_TWO_EXAMPLE = """two1nine
eightwothree
abcone2threexyz
xtwone3four
4nineeightseven2
zoneight234
7pqrstsixteen
"""

GAMES_EXAMPLE = """Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue
Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red
Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red
Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green
"""


@pytest.fixture
def part_one_example():
    """Worked example for day 1, part one."""
    return PART_ONE_EXAMPLE


@pytest.fixture
def part_two_example():
    """Worked example for day 1, part two."""
    return PART_TWO_EXAMPLE


@pytest.fixture
def games_example():
    """Worked example for day 2."""
    return GAMES_EXAMPLE


@pytest.fixture
def data_dir(tmp_path):
    """Create a data directory laid out like the real one."""
    root = tmp_path / "data"
    (root / "inputs").mkdir(parents=True)
    (root / "examples").mkdir()
    (root / "examples" / "01.txt").write_text(PART_ONE_EXAMPLE)
    (root / "examples" / "01-2.txt").write_text(PART_TWO_EXAMPLE)
    (root / "examples" / "02.txt").write_text(GAMES_EXAMPLE)
    (root / "inputs" / "01.txt").write_text(PART_TWO_EXAMPLE)
    return root
