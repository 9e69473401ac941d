"""Token-level models produced by the line scanner."""

from pydantic import Field

from .base import FrozenModel, TokenKind


class DigitToken(FrozenModel):
    """A single recognised digit."""

    value: int = Field(..., ge=0, le=9)
    position: int = Field(..., ge=0, description="0-indexed scan position of the match")
    kind: TokenKind = Field(default=TokenKind.DIGIT)


class OverlapRule(FrozenModel):
    """A number-word run whose letters spell two adjacent number-words.

    ``digits`` lists the values emitted, in order, when ``pattern`` matches.
    """

    pattern: str = Field(..., min_length=1)
    digits: tuple[int, ...]

    @property
    def length(self) -> int:
        return len(self.pattern)
