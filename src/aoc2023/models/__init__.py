"""Models for the aoc2023 puzzle pipeline.

All models are frozen Pydantic models: every value produced while
processing a line is immutable, and nothing is shared between lines.

Model Hierarchy:
- Line -> DigitToken(s) -> LineResult -> CalibrationReport
- Line -> Game -> CubeSet(s) -> GameReport
"""

from .base import (
    ErrorPolicy,
    FrozenModel,
    PuzzlePart,
    TokenKind,
)
from .calibration import (
    CalibrationReport,
    LineResult,
)
from .game import (
    CubeColor,
    CubeSet,
    Game,
    GameReport,
)
from .token import (
    DigitToken,
    OverlapRule,
)

__all__ = [
    # Base types
    "ErrorPolicy",
    "FrozenModel",
    "PuzzlePart",
    "TokenKind",
    # Tokens
    "DigitToken",
    "OverlapRule",
    # Calibration
    "CalibrationReport",
    "LineResult",
    # Games
    "CubeColor",
    "CubeSet",
    "Game",
    "GameReport",
]
