"""
Data-integrity checks for emoji table snapshots.

These run when the table is generated and whenever an exported copy is
loaded, so that a regeneration against a newer ``emoji-test.txt`` cannot
silently ship a missing rank, a duplicate rank, a malformed glyph or a
variant keyed by something that is not a skin tone.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field

from emoji_table.model import VARIATION_SELECTOR_16, ZERO_WIDTH_JOINER, SkinTone, tones_in
from emoji_table.snapshot import EmojiRecord, EmojiTableSnapshot

logger = logging.getLogger(__name__)

_VARIATION_SELECTORS = {VARIATION_SELECTOR_16, "\ufe0e"}
_REGIONAL_INDICATORS = range(0x1F1E6, 0x1F200)
_TAG_CHARACTERS = range(0xE0020, 0xE007F)
_CANCEL_TAG = 0xE007F
_SURROGATES = range(0xD800, 0xE000)


@dataclass(frozen=True)
class ValidationIssue:
    """A single integrity violation."""

    check: str
    subject: str
    message: str

    def __str__(self) -> str:
        return f"[{self.check}] {self.subject}: {self.message}"


@dataclass
class ValidationReport:
    """Outcome of ``validate_snapshot``."""

    symbol_count: int = 0
    variant_count: int = 0
    issues: list[ValidationIssue] = field(default_factory=list)
    uncategorized: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues

    def add(self, check: str, subject: str, message: str) -> None:
        self.issues.append(ValidationIssue(check, subject, message))

    def checks_failed(self) -> set[str]:
        return {issue.check for issue in self.issues}


def glyph_problem(glyph: str) -> str | None:
    """Describe why ``glyph`` is not a well-formed emoji sequence, or return None."""
    if not isinstance(glyph, str) or not glyph:
        return "empty glyph"
    if glyph[0] == ZERO_WIDTH_JOINER or glyph[-1] == ZERO_WIDTH_JOINER:
        return "leading or trailing zero width joiner"
    if ZERO_WIDTH_JOINER * 2 in glyph:
        return "doubled zero width joiner"
    if glyph[0] in _VARIATION_SELECTORS:
        return "leading variation selector"
    if glyph[0] in {tone.value for tone in SkinTone}:
        return "leading skin-tone modifier"

    regional_run = 0
    in_tag_sequence = False
    for char in glyph:
        codepoint = ord(char)
        if codepoint in _SURROGATES:
            return f"lone surrogate U+{codepoint:04X}"

        if codepoint in _REGIONAL_INDICATORS:
            regional_run += 1
        else:
            if regional_run % 2:
                return "unpaired regional indicator"
            regional_run = 0

        if codepoint in _TAG_CHARACTERS:
            in_tag_sequence = True
        elif codepoint == _CANCEL_TAG:
            if not in_tag_sequence:
                return "cancel tag without tag sequence"
            in_tag_sequence = False
        elif in_tag_sequence:
            return "unterminated tag sequence"

    if regional_run % 2:
        return "unpaired regional indicator"
    if in_tag_sequence:
        return "unterminated tag sequence"
    return None


def _check_ranks(snapshot: EmojiTableSnapshot, report: ValidationReport) -> None:
    ranks = Counter(record.sort_rank for record in snapshot.records.values())
    for rank, count in sorted(ranks.items()):
        if count > 1:
            holders = sorted(r.name for r in snapshot.records.values() if r.sort_rank == rank)
            report.add("rank-duplicate", str(rank), f"shared by {', '.join(holders)}")
    missing = sorted(set(range(len(snapshot.records))) - set(ranks))
    if missing:
        preview = ", ".join(str(rank) for rank in missing[:10])
        report.add("rank-gap", "sort order", f"{len(missing)} missing rank(s): {preview}")


def _check_record(record: EmojiRecord, report: ValidationReport) -> None:
    if not record.name.isidentifier() or record.name != record.name.upper():
        report.add("name", record.name, "symbol name is not an UPPER_SNAKE_CASE identifier")
    problem = glyph_problem(record.glyph)
    if problem:
        report.add("glyph", record.name, problem)
    if not isinstance(record.sort_rank, int) or record.sort_rank < 0:
        report.add("rank", record.name, f"invalid sort rank {record.sort_rank!r}")
    if not isinstance(record.version, float) or record.version <= 0:
        report.add("version", record.name, f"invalid version {record.version!r}")
    if tones_in(record.glyph or ""):
        report.add("glyph", record.name, "base glyph carries a skin-tone modifier")

    for tones, variant in record.variants.items():
        subject = f"{record.name}{list(getattr(tone, 'name', tone) for tone in tones)}"
        if not isinstance(tones, tuple) or not 1 <= len(tones) <= 2:
            report.add("variant-key", subject, "tone combination must have one or two tones")
            continue
        if not all(isinstance(tone, SkinTone) for tone in tones):
            report.add("variant-key", subject, "tone combination contains an unknown tone")
            continue
        problem = glyph_problem(variant)
        if problem:
            report.add("variant-glyph", subject, problem)
            continue
        if variant == record.glyph:
            report.add("variant-glyph", subject, "variant glyph equals the base glyph")
        elif tones_in(variant) != tones:
            report.add("variant-glyph", subject, "variant glyph modifiers do not match its key")


def _check_glyph_uniqueness(snapshot: EmojiTableSnapshot, report: ValidationReport) -> None:
    owners: dict[str, str] = {}
    for record in snapshot.records.values():
        for text in (record.glyph, *record.variants.values()):
            if text in owners and owners[text] != record.name:
                report.add("glyph-duplicate", record.name, f"glyph also used by {owners[text]}")
            elif text in owners:
                report.add("glyph-duplicate", record.name, "glyph listed twice")
            owners.setdefault(text, record.name)


def _check_categories(snapshot: EmojiTableSnapshot, report: ValidationReport) -> None:
    seen: dict[str, str] = {}
    for category, members in snapshot.categories.items():
        previous_rank = -1
        for name in members:
            record = snapshot.records.get(name)
            if record is None:
                report.add("category", category.value, f"unknown member {name}")
                continue
            if name in seen:
                report.add("category", name, f"listed in both {seen[name]} and {category.value}")
                continue
            seen[name] = category.value
            if record.sort_rank < previous_rank:
                report.add("category-order", category.value, f"{name} is out of rank order")
            previous_rank = record.sort_rank
    report.uncategorized = [name for name in snapshot.records if name not in seen]


def validate_snapshot(snapshot: EmojiTableSnapshot) -> ValidationReport:
    """Run every integrity check over ``snapshot``.

    Args:
        snapshot: Table to check.

    Returns:
        Report listing every violation; ``report.ok`` is True when clean.
    """
    report = ValidationReport(symbol_count=len(snapshot), variant_count=snapshot.variant_count())
    _check_ranks(snapshot, report)
    for record in snapshot.records.values():
        _check_record(record, report)
    _check_glyph_uniqueness(snapshot, report)
    _check_categories(snapshot, report)

    if report.ok:
        logger.info("Validated %s symbols and %s variants", report.symbol_count, report.variant_count)
    else:
        logger.warning("Validation found %s issue(s)", len(report.issues))
        for issue in report.issues:
            logger.debug("%s", issue)
    return report
