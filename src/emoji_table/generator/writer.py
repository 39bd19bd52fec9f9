"""
Render a table snapshot as the ``emoji_table.emoji_data`` module.

Glyphs are written as ASCII escapes (``ascii()``), so the generated source
survives editors and tools that would normalize or re-encode literal emoji.
"""

from __future__ import annotations

import logging
from pathlib import Path

from emoji_table.snapshot import EmojiTableSnapshot, ToneKey

logger = logging.getLogger(__name__)

_INDENT = "    "

_HEADER = '''"""
Emoji symbol tables (Emoji {version}).

Generated by ``emoji-table generate`` from emoji-test.txt. Do not edit by
hand; regenerate instead.
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from emoji_table.model import EmojiCategory, SkinTone

EMOJI_VERSION: Final[str] = {version_literal}
'''


def _tone_key(tones: ToneKey) -> str:
    members = ", ".join(f"SkinTone.{tone.name}" for tone in tones)
    return f"({members},)" if len(tones) == 1 else f"({members})"


def render_module(snapshot: EmojiTableSnapshot) -> str:
    """Return the Python source of the generated table module."""
    records = snapshot.ordered()
    out: list[str] = [
        _HEADER.format(version=snapshot.emoji_version, version_literal=ascii(snapshot.emoji_version)),
        "",
        "class Emoji(str, Enum):",
        f'{_INDENT}"""Every fully-qualified emoji, valued by its canonical glyph sequence."""',
        "",
    ]
    for record in records:
        comment = f"  # {ascii(record.cldr_name)[1:-1]}" if record.cldr_name else ""
        out.append(f"{_INDENT}{record.name} = {ascii(record.glyph)}{comment}")

    out += ["", "", "SORT_ORDER: Final[dict[Emoji, int]] = {"]
    out += [f"{_INDENT}Emoji.{record.name}: {record.sort_rank}," for record in records]
    out.append("}")

    out += ["", "EMOJI_VERSIONS: Final[dict[Emoji, float]] = {"]
    out += [f"{_INDENT}Emoji.{record.name}: {record.version!r}," for record in records]
    out.append("}")

    out += ["", "SKIN_TONE_VARIANTS: Final[dict[Emoji, dict[tuple[SkinTone, ...], str]]] = {"]
    for record in records:
        if not record.variants:
            continue
        out.append(f"{_INDENT}Emoji.{record.name}: {{")
        for tones, glyph in record.variants.items():
            out.append(f"{_INDENT * 2}{_tone_key(tones)}: {ascii(glyph)},")
        out.append(f"{_INDENT}}},")
    out.append("}")

    out += ["", "CATEGORIES: Final[dict[EmojiCategory, tuple[Emoji, ...]]] = {"]
    for category, members in snapshot.categories.items():
        out.append(f"{_INDENT}EmojiCategory.{category.name}: (")
        out += [f"{_INDENT * 2}Emoji.{name}," for name in members]
        out.append(f"{_INDENT}),")
    out.append("}")

    return "\n".join(out) + "\n"


def write_module(snapshot: EmojiTableSnapshot, output_path: Path) -> Path:
    """Write the generated module to ``output_path``.

    Returns:
        Resolved path of the written file.
    """
    output_path = Path(output_path).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    source = render_module(snapshot)
    with open(output_path, "w", encoding="ascii", newline="\n") as f:
        f.write(source)
    logger.info("Wrote %s symbols to %s", len(snapshot), output_path)
    return output_path
