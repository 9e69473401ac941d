"""Advent of Code 2023 puzzle pipeline."""

__version__ = "0.1.0"
