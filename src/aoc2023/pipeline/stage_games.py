"""Cube Game Stage - Parse and score cube game records.

Each record reads ``Game <id>: <reveal>; <reveal>; ...`` where a reveal is a
comma-separated list of ``<count> <colour>`` entries, for example::

    Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green

Part one sums the ids of games possible with a given bag. Part two sums the
power (product of per-colour maximums) of every game.
"""

import logging
import re
from typing import Iterable, Optional

from aoc2023.errors import GameParseError
from aoc2023.models import CubeColor, CubeSet, ErrorPolicy, Game, GameReport, PuzzlePart

logger = logging.getLogger(__name__)


DEFAULT_BAG = CubeSet(red=12, green=13, blue=14)

GAME_HEADER_PATTERN = re.compile(r"^\s*Game\s+(\d+)\s*$")
CUBE_ENTRY_PATTERN = re.compile(r"^\s*(\d+)\s+([a-z]+)\s*$")


def _parse_reveal(text: str, record: str, line_number: Optional[int]) -> CubeSet:
    counts: dict[str, int] = {}
    for entry in text.split(","):
        if not entry.strip():
            continue
        match = CUBE_ENTRY_PATTERN.match(entry)
        if not match:
            raise GameParseError(record, f"bad cube entry {entry.strip()!r}", line_number)

        count, color = int(match.group(1)), match.group(2)
        try:
            color = CubeColor(color).value
        except ValueError:
            raise GameParseError(record, f"unknown colour {color!r}", line_number) from None
        if color in counts:
            raise GameParseError(record, f"colour {color!r} repeated in one reveal", line_number)
        counts[color] = count

    return CubeSet(**counts)


def parse_game(line: str, line_number: Optional[int] = None) -> Game:
    """Parse one game record.

    Args:
        line: Record text.
        line_number: 1-indexed line number, used only for error messages.

    Returns:
        Game with one CubeSet per reveal.

    Raises:
        GameParseError: If the header, an entry or a colour is invalid.
    """
    header, sep, body = line.partition(":")
    if not sep:
        raise GameParseError(line, "missing ':' after game id", line_number)

    match = GAME_HEADER_PATTERN.match(header)
    if not match:
        raise GameParseError(line, f"bad header {header.strip()!r}", line_number)

    reveals = tuple(_parse_reveal(part, line, line_number) for part in body.split(";"))
    return Game(id=int(match.group(1)), reveals=reveals)


def is_possible(game: Game, bag: CubeSet = DEFAULT_BAG) -> bool:
    """Check if every reveal could have come from ``bag``."""
    return game.maximums.fits_within(bag)


def game_power(game: Game) -> int:
    """Product of the fewest cubes of each colour that make the game possible."""
    maximums = game.maximums
    return maximums.red * maximums.green * maximums.blue


def parse_games(
    lines: Iterable[str],
    on_error: ErrorPolicy = ErrorPolicy.ABORT,
) -> tuple[list[Game], list[str]]:
    """Parse many records, applying the error policy.

    Returns:
        Tuple of (parsed games, messages for skipped records).
    """
    games = []
    failures = []
    for line_number, line in enumerate(lines, start=1):
        try:
            games.append(parse_game(line, line_number))
        except GameParseError as exc:
            if on_error == ErrorPolicy.ABORT:
                raise
            logger.warning("Skipping line %d: %s", line_number, exc.message)
            failures.append(exc.message)
    return games, failures


def sum_possible_ids(
    lines: Iterable[str],
    bag: CubeSet = DEFAULT_BAG,
    on_error: ErrorPolicy = ErrorPolicy.ABORT,
) -> GameReport:
    """Sum the ids of games possible with ``bag`` (part one)."""
    games, failures = parse_games(lines, on_error)
    total = sum(game.id for game in games if is_possible(game, bag))
    logger.info("Scored %d games against %s: %d", len(games), bag, total)
    return GameReport(
        part=PuzzlePart.ONE,
        games=tuple(games),
        total=total,
        failures=tuple(failures),
        bag=bag,
    )


def sum_powers(
    lines: Iterable[str],
    on_error: ErrorPolicy = ErrorPolicy.ABORT,
) -> GameReport:
    """Sum the power of every game (part two)."""
    games, failures = parse_games(lines, on_error)
    total = sum(game_power(game) for game in games)
    logger.info("Scored %d games by power: %d", len(games), total)
    return GameReport(
        part=PuzzlePart.TWO,
        games=tuple(games),
        total=total,
        failures=tuple(failures),
    )
