"""Scan Stage - Recover digit tokens from a line of text.

A line mixes ASCII digits with the English words "one" through "nine".
Number-words may share letters ("eightwo" spells both "eight" and "two"),
so the scanner never consumes a whole word span and skips ahead. At every
position it tries, in priority order:

1. the overlap rules (two number-words sharing a letter), longest first
2. the nine canonical number-words
3. a single ASCII digit character

After a word or overlap match the scan resumes on the final letter of the
match, which is the only letter a following number-word can share.
"""

import logging
from typing import Optional, Sequence

from aoc2023.errors import MalformedOverlapError
from aoc2023.models import DigitToken, OverlapRule, TokenKind

logger = logging.getLogger(__name__)


WORD_DIGITS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}

# Number-word pairs that share a letter. Found against the puzzle corpus,
# not derived: longer chains are handled by resuming on the final letter.
OVERLAP_RULES: tuple[OverlapRule, ...] = (
    OverlapRule(pattern="oneight", digits=(1, 8)),
    OverlapRule(pattern="twone", digits=(2, 1)),
    OverlapRule(pattern="threeight", digits=(3, 8)),
    OverlapRule(pattern="fiveight", digits=(5, 8)),
    OverlapRule(pattern="sevenine", digits=(7, 9)),
    OverlapRule(pattern="eightwo", digits=(8, 2)),
    OverlapRule(pattern="eighthree", digits=(8, 3)),
    OverlapRule(pattern="nineight", digits=(9, 8)),
)

_DIGIT_WORDS = {value: word for word, value in WORD_DIGITS.items()}


def validate_overlap_rule(rule: OverlapRule) -> None:
    """Check that a rule's pattern really spells its digits.

    The first digit's word must start the pattern and the last digit's word
    must end it.

    Raises:
        MalformedOverlapError: If the rule is inconsistent.
    """
    if not rule.digits:
        raise MalformedOverlapError(rule.pattern, "empty digit sequence")

    for digit in rule.digits:
        if digit not in _DIGIT_WORDS:
            raise MalformedOverlapError(rule.pattern, f"{digit} has no number-word")

    first_word = _DIGIT_WORDS[rule.digits[0]]
    last_word = _DIGIT_WORDS[rule.digits[-1]]
    if not rule.pattern.startswith(first_word):
        raise MalformedOverlapError(rule.pattern, f"does not start with {first_word!r}")
    if not rule.pattern.endswith(last_word):
        raise MalformedOverlapError(rule.pattern, f"does not end with {last_word!r}")


class LineScanner:
    """Scans one line at a time into ordered digit tokens.

    The scanner holds only its fixed pattern tables, so a single instance
    can be reused across lines and processes.
    """

    def __init__(
        self,
        words: bool = True,
        overlap_rules: Optional[Sequence[OverlapRule]] = None,
    ):
        """Initialize the scanner.

        Args:
            words: Recognise number-words. When False only ASCII digit
                characters are tokens.
            overlap_rules: Overlap table to use (default OVERLAP_RULES).

        Raises:
            MalformedOverlapError: If any overlap rule is inconsistent.
        """
        self.words = words
        rules = OVERLAP_RULES if overlap_rules is None else overlap_rules
        for rule in rules:
            validate_overlap_rule(rule)

        # Longest first so a more specific overlap wins at the same position
        self.overlap_rules: tuple[OverlapRule, ...] = tuple(
            sorted(rules, key=lambda r: r.length, reverse=True)
        )

    def _match_at(self, line: str, pos: int) -> tuple[list[DigitToken], int]:
        """Try every pattern at ``pos`` in priority order.

        Returns:
            Tuple of (tokens emitted, characters to advance).
        """
        if self.words:
            for rule in self.overlap_rules:
                if line.startswith(rule.pattern, pos):
                    tokens = [
                        DigitToken(value=d, position=pos, kind=TokenKind.OVERLAP)
                        for d in rule.digits
                    ]
                    return tokens, rule.length - 1

            for word, value in WORD_DIGITS.items():
                if line.startswith(word, pos):
                    token = DigitToken(value=value, position=pos, kind=TokenKind.WORD)
                    return [token], len(word) - 1

        char = line[pos]
        if "0" <= char <= "9":
            return [DigitToken(value=int(char), position=pos)], 1

        return [], 1

    def scan(self, line: str) -> list[DigitToken]:
        """Scan a line into digit tokens, left to right.

        Args:
            line: A single line of text (no cross-line state).

        Returns:
            Tokens in order of occurrence. Empty if the line has no digits.
        """
        tokens: list[DigitToken] = []
        pos = 0
        while pos < len(line):
            emitted, advance = self._match_at(line, pos)
            tokens.extend(emitted)
            pos += advance

        logger.debug("Scanned %r -> %s", line, [t.value for t in tokens])
        return tokens

    def scan_digits(self, line: str) -> list[int]:
        """Scan a line and return only the digit values."""
        return [token.value for token in self.scan(line)]


def scan_line(line: str, words: bool = True) -> list[int]:
    """Scan a line with the default overlap table."""
    return LineScanner(words=words).scan_digits(line)
