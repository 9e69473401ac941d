"""Configuration management for the aoc2023 puzzle pipeline."""

from pathlib import Path

from pydantic_settings import BaseSettings

from aoc2023.models.base import ErrorPolicy


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Inputs
    data_dir: Path = Path("./data")

    # Processing
    on_error: ErrorPolicy = ErrorPolicy.ABORT
    max_workers: int = 1
    parallel_threshold: int = 1000

    # Cube game bag
    max_red: int = 12
    max_green: int = 13
    max_blue: int = 14

    # Logging
    log_level: str = "WARNING"

    @property
    def inputs_dir(self) -> Path:
        """Directory holding the real puzzle inputs."""
        return self.data_dir / "inputs"

    @property
    def examples_dir(self) -> Path:
        """Directory holding the worked examples from the puzzle text."""
        return self.data_dir / "examples"

    class Config:
        env_prefix = "AOC_"
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
