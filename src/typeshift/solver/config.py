"""Typeshift solver configuration."""

from dotenv import find_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None


class SolverConfig(BaseSettings):
    """Configuration settings for the Typeshift solver.

    Values may be overridden by `TYPESHIFT_*` environment variables or a `.env` file.
    """

    word_list_path: str = "wordlist.txt"
    """Path to the dictionary file, one word per line (optionally double-quoted)."""

    min_word_length: int = 4
    """Shortest word kept when loading the dictionary. Default: 4."""

    max_word_length: int = 6
    """Longest word kept when loading the dictionary. Default: 6."""

    max_steps: int | None = None
    """Maximum number of search steps before giving up. If None (default), no limit."""

    time_limit: float | None = None
    """Maximum wall-clock time for one search, in seconds. If None (default), no limit."""

    report_interval: int = 10_000
    """Interval (in search steps) at which to log progress. Default: 10,000."""

    log_level: str = "INFO"
    """Level for the `typeshift` logger. Default: INFO."""

    model_config = SettingsConfigDict(
        env_prefix="TYPESHIFT_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )


config = SolverConfig()
