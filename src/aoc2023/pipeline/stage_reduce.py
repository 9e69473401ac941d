"""Reduce Stage - Combine a line's digits into its calibration value."""

from typing import Optional, Sequence

from aoc2023.errors import EmptyLineError


def reduce_calibration(
    digits: Sequence[int],
    text: str = "",
    line_number: Optional[int] = None,
) -> int:
    """Combine the first and last digit into a two-digit number.

    A single digit is used for both places ("treb7uchet" -> 77).

    Args:
        digits: Ordered digit values from the scanner.
        text: Source line, used only for the error message.
        line_number: 1-indexed line number, used only for the error message.

    Returns:
        ``first * 10 + last``

    Raises:
        EmptyLineError: If ``digits`` is empty.
    """
    if not digits:
        raise EmptyLineError(text, line_number)
    return digits[0] * 10 + digits[-1]
