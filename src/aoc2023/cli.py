"""Advent of Code 2023 puzzle pipeline CLI."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from aoc2023.config import settings
from aoc2023.errors import EmptyLineError, PuzzleError
from aoc2023.inputs import iter_lines, read_example, read_file, read_input
from aoc2023.models import CalibrationReport, CubeSet, ErrorPolicy, PuzzlePart
from aoc2023.pipeline import (
    CalibrationPipeline,
    LineScanner,
    reduce_calibration,
    sum_possible_ids,
    sum_powers,
)
from aoc2023.utils import setup_logging

app = typer.Typer(
    name="aoc2023",
    help="Advent of Code 2023: trebuchet calibration and cube game records",
    add_completion=False,
)
console = Console()


def _fail(exc: PuzzleError) -> None:
    console.print(f"[bold red]Error:[/bold red] {exc.message}")
    raise typer.Exit(code=1)


def _print_calibration(report: CalibrationReport) -> None:
    for failure in report.failures:
        console.print(f"[yellow]Skipped line {failure.line_number}:[/yellow] {failure.error}")
    console.print(
        f"[dim]Part {report.part.value}: {report.ok_count}/{report.line_count} lines calibrated[/dim]"
    )
    console.print(f"[bold green]Total:[/bold green] {report.total}")


def _bag(red: Optional[int], green: Optional[int], blue: Optional[int]) -> CubeSet:
    return CubeSet(
        red=settings.max_red if red is None else red,
        green=settings.max_green if green is None else green,
        blue=settings.max_blue if blue is None else blue,
    )


@app.command()
def calibrate(
    path: Path = typer.Argument(..., help="Path to calibration document"),
    part: int = typer.Option(2, min=1, max=2, help="1 = digits only, 2 = digits and words"),
    on_error: Optional[ErrorPolicy] = typer.Option(None, help="Abort or skip lines without digits"),
    workers: Optional[int] = typer.Option(None, help="Number of parallel workers"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every scanned line"),
) -> None:
    """Sum the calibration values of a document."""
    setup_logging(verbose=verbose)
    try:
        text = read_file(path)
        pipeline = CalibrationPipeline(PuzzlePart(part), on_error=on_error, max_workers=workers)
        report = pipeline.run(iter_lines(text))
    except PuzzleError as exc:
        _fail(exc)
    _print_calibration(report)


@app.command()
def scan(
    line: str = typer.Argument(..., help="Line of text to scan"),
    part: int = typer.Option(2, min=1, max=2, help="1 = digits only, 2 = digits and words"),
) -> None:
    """Show the digit tokens recognised in a single line."""
    tokens = LineScanner(words=part == 2).scan(line)

    table = Table(title=line)
    table.add_column("Position", justify="right")
    table.add_column("Digit", justify="right")
    table.add_column("Kind")
    for token in tokens:
        table.add_row(str(token.position), str(token.value), token.kind.value)
    console.print(table)

    try:
        value = reduce_calibration([token.value for token in tokens], line)
    except EmptyLineError:
        console.print("[yellow]No digits found[/yellow]")
        return
    console.print(f"[bold green]Calibration:[/bold green] {value}")


@app.command()
def games(
    path: Path = typer.Argument(..., help="Path to game records"),
    part: int = typer.Option(1, min=1, max=2, help="1 = sum possible ids, 2 = sum powers"),
    red: Optional[int] = typer.Option(None, help="Red cubes in the bag"),
    green: Optional[int] = typer.Option(None, help="Green cubes in the bag"),
    blue: Optional[int] = typer.Option(None, help="Blue cubes in the bag"),
    on_error: Optional[ErrorPolicy] = typer.Option(None, help="Abort or skip malformed records"),
) -> None:
    """Score cube game records."""
    setup_logging()
    policy = on_error or settings.on_error
    try:
        lines = list(iter_lines(read_file(path)))
        if part == 1:
            report = sum_possible_ids(lines, _bag(red, green, blue), on_error=policy)
        else:
            report = sum_powers(lines, on_error=policy)
    except PuzzleError as exc:
        _fail(exc)

    for failure in report.failures:
        console.print(f"[yellow]Skipped:[/yellow] {failure}")
    console.print(f"[dim]Part {report.part.value}: {len(report.games)} games[/dim]")
    console.print(f"[bold green]Total:[/bold green] {report.total}")


@app.command()
def day(
    number: int = typer.Argument(..., min=1, max=25, help="Puzzle day"),
    part: int = typer.Option(1, min=1, max=2, help="Puzzle part"),
    example: bool = typer.Option(False, "--example", help="Use the worked example input"),
    data_dir: Optional[Path] = typer.Option(None, help="Data directory (default from settings)"),
) -> None:
    """Solve a day's puzzle from the data directory."""
    setup_logging()
    try:
        if example:
            text = read_example(number, part, data_dir=data_dir)
        else:
            text = read_input(number, data_dir=data_dir)

        if number == 1:
            report = CalibrationPipeline(PuzzlePart(part)).run(iter_lines(text))
            total = report.total
        elif number == 2:
            lines = list(iter_lines(text))
            if part == 1:
                total = sum_possible_ids(lines, _bag(None, None, None), on_error=settings.on_error).total
            else:
                total = sum_powers(lines, on_error=settings.on_error).total
        else:
            console.print(f"[yellow]Day {number} not yet implemented[/yellow]")
            raise typer.Exit(code=1)
    except PuzzleError as exc:
        _fail(exc)

    console.print(f"[bold blue]Day {number}, part {part}:[/bold blue] {total}")


if __name__ == "__main__":
    app()
