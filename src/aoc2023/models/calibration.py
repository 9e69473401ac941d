"""Per-line and per-run calibration results."""

from typing import Optional

from pydantic import Field

from .base import FrozenModel, PuzzlePart


class LineResult(FrozenModel):
    """
    Outcome of calibrating one line.

    Exactly one of ``value`` or ``error`` is set. Failed lines carry the
    exception class name in ``error_kind`` so the driver can report them
    without re-raising.
    """

    line_number: int = Field(..., ge=1, description="1-indexed line number")
    text: str
    digits: tuple[int, ...] = Field(default=())
    value: Optional[int] = Field(None, ge=0, le=99)
    error: Optional[str] = None
    error_kind: Optional[str] = None

    @property
    def ok(self) -> bool:
        """Check if the line produced a calibration value."""
        return self.error is None


class CalibrationReport(FrozenModel):
    """Summed calibration values for a whole input."""

    part: PuzzlePart = Field(default=PuzzlePart.TWO)
    results: tuple[LineResult, ...] = Field(default=())
    total: int = Field(default=0, ge=0)

    @property
    def failures(self) -> list[LineResult]:
        """Lines that were skipped."""
        return [r for r in self.results if not r.ok]

    @property
    def line_count(self) -> int:
        return len(self.results)

    @property
    def ok_count(self) -> int:
        return self.line_count - len(self.failures)
