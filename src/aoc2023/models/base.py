"""Base models and common types for the aoc2023 pipeline."""

from enum import Enum

from pydantic import BaseModel


class TokenKind(str, Enum):
    """How a digit token was recognised in a line."""

    DIGIT = "digit"
    WORD = "word"
    OVERLAP = "overlap"


class ErrorPolicy(str, Enum):
    """What the driver does when a single line fails."""

    ABORT = "abort"  # re-raise the first failure
    SKIP = "skip"  # report the failure and leave the line out of the total


class PuzzlePart(int, Enum):
    """Puzzle part being solved."""

    ONE = 1
    TWO = 2


class FrozenModel(BaseModel):
    """Base class for the immutable per-line value objects."""

    class Config:
        frozen = True
