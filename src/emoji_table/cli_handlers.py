"""CLI command handlers for emoji-table subcommands."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from emoji_table.exceptions import EmojiDataError

DEFAULT_OUTPUT = Path(__file__).resolve().parent / "emoji_data.py"


def _print_issues(issues: list) -> None:
    print(f"\n=== Validation Issues ({len(issues)}) ===")
    for issue in issues:
        print(f"  {issue}")


def process_generate(args: argparse.Namespace, verbose: int) -> int:
    """Handle the ``generate`` subcommand.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed CLI arguments for the generate subcommand.
    verbose : int
        Derived verbosity level.

    Returns
    -------
    int
        Exit code where ``0`` indicates success.
    """
    from emoji_table.generator import BUNDLED_SOURCE, parse_emoji_test, render_module, write_module
    from emoji_table.utils.fingerprint import calculate_file_hash
    from emoji_table.validation import validate_snapshot

    source = args.source or BUNDLED_SOURCE
    output = args.output or DEFAULT_OUTPUT
    if not source.exists():
        logging.error("Source file does not exist: %s", source)
        return 1

    logging.info("Generating emoji tables from %s", source)
    logging.debug("Verbosity level: %s", verbose)
    try:
        logging.debug("Source fingerprint (xxh64): %s", calculate_file_hash(source))
        snapshot = parse_emoji_test(source)
        report = validate_snapshot(snapshot)
        if not report.ok:
            _print_issues(report.issues)
            logging.error("Refusing to write %s: %s validation issue(s)", output, len(report.issues))
            return 1

        if args.check:
            current = output.read_text(encoding="ascii") if output.exists() else ""
            if current != render_module(snapshot):
                logging.error("%s is out of date with %s", output, source)
                return 1
            logging.info("%s is up to date", output)
            return 0

        write_module(snapshot, output)
        print(f"Wrote {len(snapshot)} symbols and {snapshot.variant_count()} variants to {output}")
        return 0
    except KeyboardInterrupt:
        logging.warning("Generation interrupted by user")
        return 130
    except Exception as exc:  # noqa: BLE001
        logging.error("Generation failed: %s", exc)
        return 1


def process_validate(args: argparse.Namespace, verbose: int) -> int:
    """Handle the ``validate`` subcommand."""

    del verbose  # Verbosity is already configured globally.

    try:
        if args.json is not None:
            from emoji_table.serialization import load_json

            label = str(args.json)
            snapshot = load_json(args.json)
        elif args.db is not None:
            from emoji_table.db import load_from_database

            label = str(args.db)
            snapshot = load_from_database(args.db)
        else:
            from emoji_table.serialization import snapshot_from_tables

            label = "compiled table"
            snapshot = snapshot_from_tables()

        from emoji_table.validation import validate_snapshot

        report = validate_snapshot(snapshot)
    except FileNotFoundError as exc:
        logging.error("File not found: %s", exc)
        return 1
    except EmojiDataError as exc:
        logging.error("Invalid emoji table: %s", exc)
        return 1
    except Exception as exc:  # noqa: BLE001
        logging.error("Validation failed: %s", exc)
        return 1

    print(f"\n=== Validation: {label} ===")
    print(f"Emoji version: {snapshot.emoji_version}")
    print(f"Symbols: {report.symbol_count}")
    print(f"Variants: {report.variant_count}")
    print(f"Uncategorized: {len(report.uncategorized)}")
    if not report.ok:
        _print_issues(report.issues)
        return 1
    print("OK")
    return 0


def process_export(args: argparse.Namespace, verbose: int) -> int:
    """Handle the ``export`` subcommand."""

    try:
        from emoji_table.serialization import dump_json, snapshot_from_tables

        snapshot = snapshot_from_tables()
        if args.format == "json":
            path = dump_json(snapshot, args.output, indent=args.json_indent)
        elif args.format == "sqlite":
            from emoji_table.db import export_to_database

            path = export_to_database(snapshot, args.output, verbose=verbose)
        else:
            logging.error("Unknown export format: %s", args.format)
            return 1
    except KeyboardInterrupt:
        logging.warning("Export interrupted by user")
        return 130
    except Exception as exc:  # noqa: BLE001
        logging.error("Export failed: %s", exc)
        return 1

    print(f"Exported {len(snapshot)} symbols to {path}")
    return 0


def process_show(args: argparse.Namespace, verbose: int) -> int:
    """Handle the ``show`` subcommand."""

    del verbose  # Verbosity is already configured globally.

    from emoji_table import lookup
    from emoji_table.variants import EmojiVariant

    variant = None
    emoji = lookup.find_emoji(args.query)
    if emoji is None:
        variant = EmojiVariant.from_glyph(args.query)
        if variant is None:
            logging.error("No emoji matches %r", args.query)
            return 1
        emoji = variant.base

    category = lookup.category_of(emoji)
    print(f"\n=== {emoji.name} ===")
    print(f"Glyph: {emoji.value}")
    print(f"Code points: {' '.join(f'U+{ord(char):04X}' for char in emoji.value)}")
    print(f"Sort rank: {lookup.sort_rank(emoji)}")
    print(f"Introduced: Emoji {lookup.introduction_version(emoji)}")
    print(f"Category: {category.display_name if category else '-'}")
    if variant is not None and variant.tones:
        print(f"Matched tones: {', '.join(tone.label for tone in variant.tones)}")

    variants = lookup.skin_tone_variants(emoji)
    if variants:
        print(f"\nSkin-tone variants ({len(variants)}):")
        for tones, text in variants.items():
            print(f"  {' + '.join(tone.label for tone in tones)}: {text}")
    return 0


def process_stats(args: argparse.Namespace, verbose: int) -> int:
    """Handle the ``stats`` subcommand."""

    del verbose  # Verbosity is already configured globally.

    from emoji_table import lookup
    from emoji_table.emoji_data import EMOJI_VERSION
    from emoji_table.model import EmojiCategory

    max_version = args.max_version
    total_symbols = 0
    total_variants = 0

    print(f"\n=== Emoji Table Statistics (Emoji {EMOJI_VERSION}) ===")
    if max_version is not None:
        print(f"Limited to Emoji {max_version}")
    print("\nSymbols per category:")
    for category in EmojiCategory:
        members = [emoji for emoji in lookup.category_members(category) if lookup.is_available(emoji, max_version)]
        variants = sum(len(lookup.skin_tone_variants(emoji)) for emoji in members)
        total_symbols += len(members)
        total_variants += variants
        print(f"  {category.display_name}: {len(members)} symbols, {variants} variants")

    print(f"\nTotal symbols: {total_symbols}")
    print(f"Total variants: {total_variants}")
    with_tones = sum(
        1 for emoji in lookup.available_emojis(max_version) if lookup.has_skin_tone_options(emoji)
    )
    print(f"Symbols with skin tones: {with_tones}")
    return 0


__all__ = [
    "process_export",
    "process_generate",
    "process_show",
    "process_stats",
    "process_validate",
]
