"""Shared utilities for the aoc2023 pipeline."""

from .logging import setup_logging

__all__ = ["setup_logging"]
