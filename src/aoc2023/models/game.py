"""Cube game record models."""

from enum import Enum
from typing import Optional

from pydantic import Field

from .base import FrozenModel, PuzzlePart


class CubeColor(str, Enum):
    """Cube colours that can appear in a game record."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"


class CubeSet(FrozenModel):
    """Cubes revealed from the bag in one handful (or the bag contents)."""

    red: int = Field(default=0, ge=0)
    green: int = Field(default=0, ge=0)
    blue: int = Field(default=0, ge=0)

    def count(self, color: CubeColor) -> int:
        return getattr(self, color.value)

    def fits_within(self, bag: "CubeSet") -> bool:
        """Check if every colour count is within the bag's count."""
        return all(self.count(c) <= bag.count(c) for c in CubeColor)


class Game(FrozenModel):
    """A single game: its id and each handful revealed."""

    id: int = Field(..., ge=0)
    reveals: tuple[CubeSet, ...] = Field(default=())

    @property
    def maximums(self) -> CubeSet:
        """Per-colour maximum across all reveals."""
        return CubeSet(
            **{
                c.value: max((r.count(c) for r in self.reveals), default=0)
                for c in CubeColor
            }
        )


class GameReport(FrozenModel):
    """Result of scoring a list of game records."""

    part: PuzzlePart
    games: tuple[Game, ...] = Field(default=())
    total: int = Field(default=0, ge=0)
    failures: tuple[str, ...] = Field(
        default=(), description="Error messages for skipped records"
    )
    bag: Optional[CubeSet] = None
