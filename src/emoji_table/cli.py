"""
Command-Line Interface for emoji-table

Subcommands regenerate the compiled table from ``emoji-test.txt``, validate
the compiled table or an export, export to JSON or SQLite and inspect
individual symbols.
"""

import argparse
import logging
import sys
from pathlib import Path

from emoji_table.cli_handlers import (
    process_export,
    process_generate,
    process_show,
    process_stats,
    process_validate,
)
from emoji_table.config import EmojiTableConfig, load_config


def setup_logging(verbose: int) -> None:
    """
    Setup logging with multi-level verbosity.

    Verbosity levels:
        -vv and more = DEBUG (17 and lower)
        -v = INFO (20)
        default = WARNING (30)

    Args:
        verbose: Verbosity level (lower = more verbose).
    """
    level_map = {
        10: logging.DEBUG,  # -vvvvv
        12: logging.DEBUG,  # -vvvv
        15: logging.DEBUG,  # -vvv
        17: logging.DEBUG,  # -vv
        20: logging.INFO,  # -v (INFO)
        30: logging.WARNING,  # default (WARNING)
    }

    log_level = level_map.get(verbose, logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format="%(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """
    Add common arguments to a parser.

    Args:
        parser: Argument parser to add arguments to.
    """
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=argparse.SUPPRESS,
        help="Increase verbosity (-v INFO, -vv and more DEBUG). Default shows only warnings and errors.",
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=argparse.SUPPRESS,
        help="Configuration file (YAML/TOML)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="emoji-table",
        description="emoji-table - generated emoji tables for pickers and reactions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    add_common_args(parser)

    subparsers = parser.add_subparsers(dest="command", help="Subcommands")

    generate_parser = subparsers.add_parser(
        "generate",
        help="Regenerate the compiled table from emoji-test.txt",
        description="Parse emoji-test.txt, validate the result and write the emoji_data module.",
    )
    generate_parser.add_argument(
        "source",
        type=Path,
        nargs="?",
        default=None,
        help="emoji-test.txt to read (default: bundled copy)",
    )
    generate_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Module to write (default: the installed emoji_data.py)",
    )
    generate_parser.add_argument(
        "--check",
        action="store_true",
        help="Compare the generated source with OUTPUT instead of writing it",
    )
    add_common_args(generate_parser)

    validate_parser = subparsers.add_parser(
        "validate",
        help="Check table invariants",
        description="Validate the compiled table, a JSON export or a SQLite export.",
    )
    source_group = validate_parser.add_mutually_exclusive_group()
    source_group.add_argument("--json", type=Path, default=None, help="JSON export to validate")
    source_group.add_argument("--db", type=Path, default=None, help="SQLite export to validate")
    add_common_args(validate_parser)

    export_parser = subparsers.add_parser(
        "export",
        help="Export the compiled table",
        description="Export the compiled table to JSON or SQLite.",
    )
    export_parser.add_argument(
        "--format",
        choices=["json", "sqlite"],
        default="json",
        help="Export format (default: json)",
    )
    export_parser.add_argument("output", type=Path, help="Output file")
    add_common_args(export_parser)

    show_parser = subparsers.add_parser(
        "show",
        help="Show one symbol",
        description="Show a symbol by name (THUMBS_UP, 'thumbs up') or glyph.",
    )
    show_parser.add_argument("query", help="Symbol name or glyph")
    add_common_args(show_parser)

    stats_parser = subparsers.add_parser(
        "stats",
        help="Show table statistics",
        description="Show symbol and variant counts per category.",
    )
    stats_parser.add_argument(
        "--max-version",
        type=float,
        default=None,
        help="Count only symbols introduced up to this Emoji version",
    )
    add_common_args(stats_parser)

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if not hasattr(args, "verbose"):
        args.verbose = 0
    if not hasattr(args, "config"):
        args.config = None
    return args


def apply_config(args: argparse.Namespace, config: EmojiTableConfig) -> None:
    """Fill arguments left unset on the command line from ``config``."""
    if getattr(args, "source", None) is None:
        args.source = config.source
    if getattr(args, "output", None) is None and args.command == "generate":
        args.output = config.output
    if getattr(args, "max_version", None) is None:
        args.max_version = config.max_emoji_version
    args.json_indent = config.json_indent


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for CLI.

    Returns:
        Exit code of the subcommand handler.
    """
    args = parse_args(argv)

    # 0 = 30 (WARNING), 1 = 20 (INFO), 2+ = 17 and lower (DEBUG)
    verbosity_map = {
        0: 30,  # WARNING (default, quiet)
        1: 20,  # INFO
        2: 17,  # DEBUG
        3: 15,
        4: 12,
        5: 10,
    }
    verbose = verbosity_map.get(args.verbose, 10)

    setup_logging(verbose)

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1
    apply_config(args, config)

    handlers = {
        "generate": process_generate,
        "validate": process_validate,
        "export": process_export,
        "show": process_show,
        "stats": process_stats,
    }
    handler = handlers.get(args.command)
    if handler is None:
        logging.error("Unknown subcommand: %s", args.command)
        return 1
    return handler(args, verbose)


if __name__ == "__main__":
    sys.exit(main())
