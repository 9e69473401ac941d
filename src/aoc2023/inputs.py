"""Per-day puzzle input loading.

Files live under the configured data directory::

    <data_dir>/inputs/01.txt        real puzzle input for day 1
    <data_dir>/examples/01.txt      worked example for day 1
    <data_dir>/examples/01-2.txt    part-specific example, when the parts differ
"""

from pathlib import Path
from typing import Iterator, Optional

from aoc2023.config import settings
from aoc2023.errors import PuzzleInputDecodeError, PuzzleInputNotFoundError


def _day_filename(day: int, part: Optional[int] = None) -> str:
    if not 1 <= day <= 25:
        raise ValueError(f"Day must be between 1 and 25, got {day}")
    if part is None:
        return f"{day:02d}.txt"
    return f"{day:02d}-{part}.txt"


def read_file(path: Path) -> str:
    """Read a puzzle file as UTF-8 text.

    Raises:
        PuzzleInputNotFoundError: If the file does not exist.
        PuzzleInputDecodeError: If the file is not valid UTF-8.
    """
    path = Path(path)
    if not path.is_file():
        raise PuzzleInputNotFoundError(str(path))
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise PuzzleInputDecodeError(str(path), exc.reason) from exc


def read_input(day: int, data_dir: Optional[Path] = None) -> str:
    """Read the real puzzle input for ``day``."""
    base = Path(data_dir) if data_dir else settings.data_dir
    return read_file(base / "inputs" / _day_filename(day))


def read_example(day: int, part: Optional[int] = None, data_dir: Optional[Path] = None) -> str:
    """Read the worked example for ``day``.

    A part-specific example (``01-2.txt``) is preferred when ``part`` is
    given; otherwise falls back to the shared one (``01.txt``).
    """
    examples_dir = (Path(data_dir) if data_dir else settings.data_dir) / "examples"
    if part is not None:
        part_path = examples_dir / _day_filename(day, part)
        if part_path.is_file():
            return read_file(part_path)
    return read_file(examples_dir / _day_filename(day))


def iter_lines(text: str) -> Iterator[str]:
    """Yield the non-blank lines of ``text`` without line endings."""
    for line in text.splitlines():
        if line.strip():
            yield line
