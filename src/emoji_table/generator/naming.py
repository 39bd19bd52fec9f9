"""Symbolic names derived from CLDR short names."""

from __future__ import annotations

import re
import unicodedata

_SYMBOL_WORDS = {
    "#": " number sign ",
    "*": " asterisk ",
    "&": " and ",
}

_ORDINALS = {
    "1st": "first",
    "2nd": "second",
    "3rd": "third",
}

_NON_IDENTIFIER = re.compile(r"[^A-Za-z0-9]+")


def symbol_name(cldr_name: str) -> str:
    """Convert a CLDR short name into an UPPER_SNAKE_CASE identifier.

    ``"flag: Côte d’Ivoire"`` becomes ``FLAG_COTE_DIVOIRE``, ``"keycap: #"``
    becomes ``KEYCAP_NUMBER_SIGN`` and ``"1st place medal"`` becomes
    ``FIRST_PLACE_MEDAL``.

    Raises:
        ValueError: If nothing usable remains of the name.
    """
    folded = unicodedata.normalize("NFKD", cldr_name)
    folded = "".join(char for char in folded if ord(char) < 128)
    for symbol, words in _SYMBOL_WORDS.items():
        folded = folded.replace(symbol, words)
    folded = folded.replace("'", "")

    words = folded.split()
    if words and words[0].lower() in _ORDINALS:
        words[0] = _ORDINALS[words[0].lower()]

    identifier = _NON_IDENTIFIER.sub("_", " ".join(words)).strip("_").upper()
    if not identifier or identifier[0].isdigit():
        raise ValueError(f"Cannot derive a symbol name from {cldr_name!r}")
    return identifier
