"""
Generator for ``emoji_table.emoji_data``.

Reads the Unicode ``emoji-test.txt`` file and writes the compiled tables.
"""

from emoji_table.generator.naming import symbol_name
from emoji_table.generator.parser import BUNDLED_SOURCE, parse_emoji_test, parse_lines
from emoji_table.generator.writer import render_module, write_module

__all__ = [
    "BUNDLED_SOURCE",
    "parse_emoji_test",
    "parse_lines",
    "render_module",
    "symbol_name",
    "write_module",
]
