"""
Configuration loader with file reading and error wrapping.
"""

from pathlib import Path

from ..const import DEFAULT_FILENAME, DEFAULT_MAX_DEPTH
from ..logging import get_logger
from .errors import ParseError
from .parser import Block, parse_config


logger = get_logger("config.loader")


class ConfigError(Exception):
    """Exception raised for configuration errors."""

    pass


class ConfigLoader:
    """
    Loads configuration from files or strings.

    Usage:
        loader = ConfigLoader()
        block = loader.load_file("/etc/nginx/nginx.conf")
        # or
        block = loader.load_string(config_text)
    """

    def __init__(self, max_depth: int | None = DEFAULT_MAX_DEPTH):
        self.max_depth = max_depth

    def load_file(self, path: str | Path) -> Block:
        """
        Load configuration from a file.

        Args:
            path: Path to the configuration file

        Returns:
            Parsed root Block

        Raises:
            ConfigError: If file cannot be read or parsed
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.is_file():
            raise ConfigError(f"Not a file: {path}")

        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Failed to read configuration: {e}") from e

        block = self.load_string(source, str(path))
        logger.info(f"Loaded {path}: {len(block)} top-level directives")
        return block

    def load_string(self, source: str, filename: str = DEFAULT_FILENAME) -> Block:
        """
        Load configuration from a string.

        Args:
            source: Configuration source text
            filename: Filename for error messages

        Returns:
            Parsed root Block

        Raises:
            ConfigError: If configuration cannot be parsed
        """
        try:
            return parse_config(source, filename, self.max_depth)
        except ParseError as e:
            raise ConfigError(f"Failed to parse configuration: {e}") from e
