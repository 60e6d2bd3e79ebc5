"""Case-preserving, table-ordered Cyrillic → Latin rewriting.

Every table entry is applied to the whole text in three passes: lowercase,
title case and upper case.  Each pass works on the output of the previous
one.  For a single-letter pattern the title and upper forms are the same, so
the title pass already consumes every capital and a multi-letter replacement
comes out title-cased (``ЯЛОВИЧИНА`` → ``JaLOVYČYNA``).  That output is
expected; do not "fix" it here.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Mapping

from latynka.transliteration.syllables import SYLLABLES, SubstitutionTable, Syllable


@dataclass(frozen=True, slots=True)
class CasingTriple:
    """Lowercase, title-case and uppercase spellings of one string."""

    lower: str
    title: str
    upper: str


def _title(value: str) -> str:
    return value[:1].upper() + value[1:]


def casing_triple(pattern: str, replacement: str) -> tuple[CasingTriple, CasingTriple]:
    """Return the casing triples for a pattern and its replacement."""

    pattern = pattern.lower()
    replacement = replacement.lower()
    single_pattern = len(pattern) == 1

    pattern_forms = CasingTriple(
        lower=pattern,
        title=pattern.upper() if single_pattern else _title(pattern),
        upper=pattern.upper(),
    )
    replacement_forms = CasingTriple(
        lower=replacement,
        title=replacement.upper() if single_pattern and len(replacement) == 1 else _title(replacement),
        upper=replacement.upper(),
    )
    return pattern_forms, replacement_forms


def replace_syllable(text: str, syllable: Syllable) -> str:
    """Apply one table entry to *text* in lowercase, title and upper passes."""

    pattern, replacement = casing_triple(syllable.pattern, syllable.replacement)
    text = text.replace(pattern.lower, replacement.lower)
    text = text.replace(pattern.title, replacement.title)
    return text.replace(pattern.upper, replacement.upper)


def rewrite(text: str | None, table: SubstitutionTable = SYLLABLES) -> str:
    """Transliterate one string by folding it through *table* in order."""

    if not text:
        return ""
    return reduce(replace_syllable, table, text)


def transliterate(document: Mapping[str, str | None], table: SubstitutionTable = SYLLABLES) -> dict[str, str]:
    """Return a new mapping with the same keys and transliterated values."""

    return {key: rewrite(value, table) for key, value in document.items()}
