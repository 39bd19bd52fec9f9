"""
emoji-table - generated emoji symbol tables for pickers and reactions.

The symbol enumeration and its parallel tables (sort rank, introduction
version, skin-tone variants, categories) live in ``emoji_table.emoji_data``
and are generated from the Unicode ``emoji-test.txt`` file.
"""

__version__ = "0.1.0"


def main(argv: list[str] | None = None) -> int:
    """Run the emoji-table command-line interface.

    Returns
    -------
    int
        Exit code propagated from the CLI handler. A ``0`` is used when the
        handler completes without explicitly returning an exit status.
    """

    from emoji_table.cli import main as cli_main

    exit_code = cli_main(argv)
    return int(exit_code) if exit_code is not None else 0


__all__ = ["main"]
