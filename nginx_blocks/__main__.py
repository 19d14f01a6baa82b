"""
Entry point for nginx-blocks.

Usage:
    python -m nginx_blocks /path/to/nginx.conf
    python -m nginx_blocks --stage tokens /path/to/nginx.conf
    python -m nginx_blocks --help
"""

import argparse
import sys
from pathlib import Path

from . import __version__
from .config.formatter import format_block, format_nodes, format_tokens
from .config.errors import ParseError
from .config.grouper import group
from .config.lexer import tokenize
from .config.loader import ConfigError, ConfigLoader
from .config.parser import Block
from .const import APP_NAME, DEFAULT_MAX_DEPTH
from .logging import LogConfig, get_logger, setup_logging


logger = get_logger("main")

STAGES = ("tokens", "groups", "tree")


def _count_directives(block: Block) -> tuple[int, int]:
    """Return (total directives, deepest nesting level) of a block."""
    total = 0
    deepest = 0
    for directive in block:
        total += 1
        if directive.body is not None:
            child_total, child_depth = _count_directives(directive.body)
            total += child_total
            deepest = max(deepest, child_depth + 1)
    return total, deepest


def check_config(config_path: str, max_depth: int | None) -> int:
    """Parse configuration file and print a summary."""
    try:
        block = ConfigLoader(max_depth).load_file(config_path)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    total, deepest = _count_directives(block)
    print("Configuration summary:")
    print(f"  Top-level directives: {len(block)}")
    print(f"  Total directives: {total}")
    print(f"  Nesting depth: {deepest}")
    print("\nConfiguration is valid!")
    return 0


def _read_source(config_path: str) -> str:
    try:
        return Path(config_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Failed to read configuration: {e}") from e


def show_stage(config_path: str, stage: str, max_depth: int | None) -> int:
    """Print one pipeline stage of the configuration file."""
    logger.debug(f"Printing {stage} stage of {config_path}")
    try:
        if stage == "tree":
            block = ConfigLoader(max_depth).load_file(config_path)
            print(format_block(block), end="")
            return 0

        tokens = tokenize(_read_source(config_path))
        if stage == "tokens":
            print(format_tokens(tokens))
            return 0

        try:
            nodes = group(tokens, max_depth)
        except ParseError as e:
            raise ConfigError(f"Failed to parse configuration: {e.with_filename(config_path)}") from e
        print(format_nodes(nodes))
        return 0
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Parse nginx-like configuration files into a directive tree",
    )

    parser.add_argument(
        "config",
        help="Path to configuration file",
    )

    parser.add_argument(
        "--stage",
        choices=STAGES,
        default="tree",
        help="Pipeline stage to print (default: tree)",
    )

    parser.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        metavar="N",
        help=f"Maximum brace nesting depth, 0 for unlimited (default: {DEFAULT_MAX_DEPTH})",
    )

    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate configuration, print a summary and exit",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging (INFO level)",
    )

    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Enable debug logging (DEBUG level)",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Quiet mode (only errors)",
    )

    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write logs to file",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args(argv)

    log_config = LogConfig()

    if args.debug:
        log_config.console_level = "debug"
    elif args.verbose:
        log_config.console_level = "info"
    elif args.quiet:
        log_config.console_level = "error"

    if args.no_color:
        log_config.console_colors = False

    if args.log_file:
        log_config.file_enabled = True
        log_config.file_path = args.log_file

    setup_logging(log_config)

    max_depth = args.max_depth if args.max_depth > 0 else None

    if args.check:
        return check_config(args.config, max_depth)

    return show_stage(args.config, args.stage, max_depth)


if __name__ == "__main__":
    sys.exit(main())
