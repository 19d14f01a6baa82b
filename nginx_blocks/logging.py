"""
Logging setup for nginx-blocks.

Console output goes to stderr, colored when stderr is a terminal, so it
never mixes with printed parse results. An optional rotating log file
receives uncolored records.
"""

import logging
import logging.handlers
import sys
from dataclasses import dataclass
from pathlib import Path


ROOT_LOGGER = "nginx_blocks"

RESET = "\033[0m"

# Color per log level
LEVEL_COLORS = {
    logging.DEBUG: "\033[2m\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1m\033[91m",
}

# Color per pipeline stage, matched against the logger name
STAGE_COLORS = {
    "grouper": "\033[36m",
    "parser": "\033[35m",
    "loader": "\033[34m",
}


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level and the pipeline stage of a record."""

    def __init__(self, fmt: str | None = None, datefmt: str | None = None, use_colors: bool = True):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_colors:
            return super().format(record)

        levelname, name = record.levelname, record.name
        record.levelname = f"{LEVEL_COLORS.get(record.levelno, '')}{levelname:8}{RESET}"
        stage = next((key for key in STAGE_COLORS if key in name), None)
        if stage:
            record.name = f"{STAGE_COLORS[stage]}{name}{RESET}"

        try:
            return super().format(record)
        finally:
            # Other handlers see the record unchanged
            record.levelname, record.name = levelname, name


@dataclass
class LogConfig:
    """Logging configuration, filled from command-line flags."""

    console_level: str = "WARNING"
    console_colors: bool = True

    file_enabled: bool = False
    file_path: str = "nginx-blocks.log"
    file_level: str = "DEBUG"
    file_max_bytes: int = 1024 * 1024
    file_backup_count: int = 3

    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"


def get_log_level(level_str: str) -> int:
    """Convert string log level to logging constant."""
    levels = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "warn": logging.WARNING,
        "error": logging.ERROR,
        "critical": logging.CRITICAL,
    }
    return levels.get(level_str.lower(), logging.INFO)


def setup_logging(config: LogConfig | None = None) -> None:
    """
    Install console and file handlers on the package logger.

    Args:
        config: Logging configuration (uses defaults if None)
    """
    config = config or LogConfig()

    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(logging.DEBUG)  # Handlers do the filtering
    root_logger.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(get_log_level(config.console_level))
    console.setFormatter(
        ColoredFormatter(
            config.format,
            config.date_format,
            use_colors=config.console_colors and sys.stderr.isatty(),
        )
    )
    root_logger.addHandler(console)

    if config.file_enabled:
        Path(config.file_path).parent.mkdir(parents=True, exist_ok=True)
        log_file = logging.handlers.RotatingFileHandler(
            config.file_path,
            maxBytes=config.file_max_bytes,
            backupCount=config.file_backup_count,
        )
        log_file.setLevel(get_log_level(config.file_level))
        log_file.setFormatter(logging.Formatter(config.format, config.date_format))
        root_logger.addHandler(log_file)


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the nginx_blocks prefix."""
    if name.startswith(ROOT_LOGGER):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
