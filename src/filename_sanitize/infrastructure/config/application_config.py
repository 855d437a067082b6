"""Configuration management for the filename-sanitize command line tool."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


@dataclass
class Config:
    """Configuration for the command line tool."""

    base_directory: Optional[str] = None
    default_filename: Optional[str] = None
    separator: Optional[str] = None
    verbose: bool = False
    log_to_file: bool = False
    log_dir: Path = Path("logs")

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from environment variables or .env file.

        Args:
            env_path: Optional path to .env file (defaults to .env in current directory)

        Returns:
            Config object
        """
        if env_path is None:
            env_path = Path.cwd() / ".env"

        if env_path.exists():
            load_dotenv(env_path)

        verbose_str = os.getenv("VERBOSE", "false").lower()
        log_to_file_str = os.getenv("LOG_TO_FILE", "false").lower()

        return cls(
            base_directory=os.getenv("BASE_DIRECTORY") or None,
            default_filename=os.getenv("DEFAULT_FILENAME") or None,
            separator=os.getenv("SEPARATOR") or None,
            verbose=verbose_str in ("true", "1", "yes"),
            log_to_file=log_to_file_str in ("true", "1", "yes"),
            log_dir=Path(os.getenv("LOG_DIR", "logs")),
        )

    @classmethod
    def from_args(
        cls,
        base_directory: Optional[str] = None,
        default_filename: Optional[str] = None,
        separator: Optional[str] = None,
        verbose: Optional[bool] = None,
        log_to_file: Optional[bool] = None,
    ) -> "Config":
        """
        Create configuration from explicit arguments, falling back to environment.

        Args:
            base_directory: Directory prepended to every result (overrides env)
            default_filename: Fallback name for unusable input (overrides env)
            separator: Custom separator (overrides env)
            verbose: Enable verbose output (overrides env)
            log_to_file: Write a log file into log_dir (overrides env)

        Returns:
            Config object
        """
        config = cls.from_env()

        if base_directory is not None:
            config.base_directory = base_directory
        if default_filename is not None:
            config.default_filename = default_filename
        if separator is not None:
            config.separator = separator
        if verbose is not None:
            config.verbose = verbose
        if log_to_file is not None:
            config.log_to_file = log_to_file

        return config

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        if self.default_filename is not None and not self.default_filename.strip():
            raise ValueError("Default filename must not be blank")

        if self.log_dir.exists() and not self.log_dir.is_dir():
            raise ValueError(f"Not a directory: {self.log_dir}")
