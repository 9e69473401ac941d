"""Pipeline stages for the aoc2023 puzzles.

Calibration (day 1):
1. stage_scan - line to ordered digit tokens, overlapping words included
2. stage_reduce - digit tokens to a two-digit calibration value

Cube games (day 2):
- stage_games - parse game records, score possible ids and powers

Each stage is a pure function of one line. The orchestrator applies the
calibration stages to a whole input and sums the results.
"""

from .orchestrator import CalibrationPipeline, calibrate_line, solve_part_one, solve_part_two
from .stage_games import (
    DEFAULT_BAG,
    game_power,
    is_possible,
    parse_game,
    sum_possible_ids,
    sum_powers,
)
from .stage_reduce import reduce_calibration
from .stage_scan import OVERLAP_RULES, WORD_DIGITS, LineScanner, scan_line

__all__ = [
    # Scan
    "LineScanner",
    "OVERLAP_RULES",
    "WORD_DIGITS",
    "scan_line",
    # Reduce
    "reduce_calibration",
    # Driver
    "CalibrationPipeline",
    "calibrate_line",
    "solve_part_one",
    "solve_part_two",
    # Cube games
    "DEFAULT_BAG",
    "game_power",
    "is_possible",
    "parse_game",
    "sum_possible_ids",
    "sum_powers",
]
