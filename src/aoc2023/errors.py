"""Exceptions raised by the aoc2023 puzzle pipeline."""

from typing import Any, Optional


class PuzzleError(Exception):
    """Base exception for all puzzle pipeline errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        """Initialize the exception.

        Args:
            message: Error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class EmptyLineError(PuzzleError):
    """A line produced no digit tokens, so no calibration value exists."""

    def __init__(self, text: str = "", line_number: Optional[int] = None) -> None:
        if line_number is None:
            message = f"No digits found in line {text!r}"
        else:
            message = f"No digits found in line {line_number}: {text!r}"
        super().__init__(message, {"text": text, "line_number": line_number})
        self.text = text
        self.line_number = line_number


class MalformedOverlapError(PuzzleError, AssertionError):
    """The overlap rule table itself is inconsistent.

    This is a bug in the fixed table, never a property of the input, so the
    driver does not catch it.
    """

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(
            f"Malformed overlap rule {pattern!r}: {reason}",
            {"pattern": pattern},
        )
        self.pattern = pattern


class GameParseError(PuzzleError):
    """A cube game record could not be parsed."""

    def __init__(self, text: str, reason: str, line_number: Optional[int] = None) -> None:
        super().__init__(
            f"Invalid game record {text!r}: {reason}",
            {"line_number": line_number} if line_number is not None else None,
        )
        self.text = text
        self.line_number = line_number


class PuzzleInputNotFoundError(PuzzleError, FileNotFoundError):
    """A day's input or example file does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Puzzle input not found: {path}", {"path": path})
        self.path = path


class PuzzleInputDecodeError(PuzzleError):
    """A puzzle file is not valid UTF-8 text."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Puzzle input is not valid UTF-8: {path} ({reason})", {"path": path})
        self.path = path
