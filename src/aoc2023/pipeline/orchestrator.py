"""Calibration driver - apply scan and reduce to every line and sum.

Lines are independent, so large inputs are fanned out to a process pool in
chunks. Results always come back in input order.
"""

import logging
from concurrent.futures import ProcessPoolExecutor
from typing import Iterable, Optional

from aoc2023.config import settings
from aoc2023.errors import EmptyLineError
from aoc2023.inputs import iter_lines
from aoc2023.models import CalibrationReport, ErrorPolicy, LineResult, PuzzlePart

from .stage_reduce import reduce_calibration
from .stage_scan import LineScanner

logger = logging.getLogger(__name__)


def calibrate_line(text: str, line_number: int, scanner: LineScanner) -> LineResult:
    """Calibrate one line, returning failures as a result instead of raising.

    Args:
        text: Line text.
        line_number: 1-indexed line number.
        scanner: Scanner to use.

    Returns:
        LineResult with either ``value`` or ``error`` set.
    """
    digits = scanner.scan_digits(text)
    try:
        value = reduce_calibration(digits, text, line_number)
    except EmptyLineError as exc:
        return LineResult(
            line_number=line_number,
            text=text,
            error=exc.message,
            error_kind=type(exc).__name__,
        )
    return LineResult(line_number=line_number, text=text, digits=tuple(digits), value=value)


def _calibrate_chunk_worker(args: tuple) -> list[LineResult]:
    """Worker function for parallel calibration.

    Args:
        args: Tuple of (numbered lines, words flag)

    Returns:
        LineResults for the chunk, in order
    """
    numbered_lines, words = args
    scanner = LineScanner(words=words)
    return [calibrate_line(text, number, scanner) for number, text in numbered_lines]


class CalibrationPipeline:
    """Sums calibration values over an input.

    Part one recognises digit characters only; part two also recognises
    number-words, including overlapping ones.
    """

    def __init__(
        self,
        part: PuzzlePart = PuzzlePart.TWO,
        on_error: Optional[ErrorPolicy] = None,
        max_workers: Optional[int] = None,
        parallel_threshold: Optional[int] = None,
    ):
        """Initialize the pipeline.

        Args:
            part: Puzzle part (1 = digits only, 2 = digits and words)
            on_error: Policy for lines without digits (default from settings)
            max_workers: Process pool size; 1 runs sequentially (default from settings)
            parallel_threshold: Minimum line count before using the pool
        """
        self.part = PuzzlePart(part)
        self.on_error = ErrorPolicy(on_error or settings.on_error)
        self.max_workers = max_workers or settings.max_workers
        self.parallel_threshold = parallel_threshold or settings.parallel_threshold
        self.words = self.part == PuzzlePart.TWO
        self.scanner = LineScanner(words=self.words)

    def run(self, lines: Iterable[str]) -> CalibrationReport:
        """Calibrate every line and sum the values.

        Args:
            lines: Input lines, in order.

        Returns:
            CalibrationReport with one LineResult per line.

        Raises:
            EmptyLineError: On the first line without digits when the policy
                is ``abort``.
        """
        numbered_lines = list(enumerate(lines, start=1))

        if self.max_workers > 1 and len(numbered_lines) >= self.parallel_threshold:
            results = self._run_parallel(numbered_lines)
        else:
            results = self._run_sequential(numbered_lines)

        total = 0
        for result in results:
            if result.ok:
                total += result.value
            elif self.on_error == ErrorPolicy.ABORT:
                raise EmptyLineError(result.text, result.line_number)
            else:
                logger.warning("Skipping line %d: %s", result.line_number, result.error)

        report = CalibrationReport(part=self.part, results=tuple(results), total=total)
        logger.info(
            "Calibrated %d/%d lines (part %d): total %d",
            report.ok_count,
            report.line_count,
            self.part.value,
            total,
        )
        return report

    def _run_sequential(self, numbered_lines: list[tuple[int, str]]) -> list[LineResult]:
        """Calibrate lines in the current process."""
        return [calibrate_line(text, number, self.scanner) for number, text in numbered_lines]

    def _run_parallel(self, numbered_lines: list[tuple[int, str]]) -> list[LineResult]:
        """Calibrate lines in chunks using ProcessPoolExecutor."""
        chunk_size = max(1, len(numbered_lines) // (self.max_workers * 4))
        work_items = [
            (numbered_lines[i : i + chunk_size], self.words)
            for i in range(0, len(numbered_lines), chunk_size)
        ]
        logger.debug(
            "Calibrating %d lines in %d chunks on %d workers",
            len(numbered_lines),
            len(work_items),
            self.max_workers,
        )

        results: list[LineResult] = []
        with ProcessPoolExecutor(max_workers=self.max_workers) as executor:
            for chunk_results in executor.map(_calibrate_chunk_worker, work_items):
                results.extend(chunk_results)
        return results


def solve_part_one(text: str, on_error: Optional[ErrorPolicy] = None) -> int:
    """Sum of calibration values using digit characters only."""
    return CalibrationPipeline(PuzzlePart.ONE, on_error=on_error).run(iter_lines(text)).total


def solve_part_two(text: str, on_error: Optional[ErrorPolicy] = None) -> int:
    """Sum of calibration values using digits and number-words."""
    return CalibrationPipeline(PuzzlePart.TWO, on_error=on_error).run(iter_lines(text)).total
