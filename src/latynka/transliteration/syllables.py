"""Ordered Cyrillic → Latin substitution table for Ukrainian.

Entries are applied one after another over the whole text, so a cluster must
come before every single letter it contains.  ``дзь`` has to be consumed
before ``дз``, ``нь``/``ня`` before ``н`` and ``я``, and so on.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Syllable:
    """One lowercase ``pattern → replacement`` substitution."""

    pattern: str
    replacement: str


SubstitutionTable = tuple[Syllable, ...]

# Consonants that soften before ь/я/ю/є, with their Latin soft form.
_SOFT_CONSONANTS: tuple[tuple[str, str], ...] = (
    ("д", "ď"),
    ("т", "ť"),
    ("з", "ź"),
    ("с", "ś"),
    ("ц", "ć"),
    ("л", "ľ"),
    ("н", "ń"),
    ("р", "ŕ"),
)

_SOFTENING_VOWELS: tuple[tuple[str, str], ...] = (
    ("я", "a"),
    ("ю", "u"),
    ("є", "e"),
)

_LETTERS: tuple[tuple[str, str], ...] = (
    ("а", "a"),
    ("б", "b"),
    ("в", "v"),
    ("г", "h"),
    ("ґ", "g"),
    ("д", "d"),
    ("е", "e"),
    ("є", "je"),
    ("ж", "ž"),
    ("з", "z"),
    ("и", "y"),
    ("і", "i"),
    ("ї", "ji"),
    ("й", "j"),
    ("к", "k"),
    ("л", "l"),
    ("м", "m"),
    ("н", "n"),
    ("о", "o"),
    ("п", "p"),
    ("р", "r"),
    ("с", "s"),
    ("т", "t"),
    ("у", "u"),
    ("ф", "f"),
    ("х", "ch"),
    ("ц", "c"),
    ("ч", "č"),
    ("ш", "š"),
    ("щ", "šč"),
    ("ю", "ju"),
    ("я", "ja"),
)


def _build_table() -> SubstitutionTable:
    pairs: list[tuple[str, str]] = [
        ("дзь", "dź"),
        ("дз", "dz"),
        ("дж", "dž"),
    ]
    pairs.extend((consonant + "ь", soft) for consonant, soft in _SOFT_CONSONANTS)
    for vowel, latin_vowel in _SOFTENING_VOWELS:
        pairs.extend((consonant + vowel, soft + latin_vowel) for consonant, soft in _SOFT_CONSONANTS)
    pairs.extend(
        [
            ("'я", "ja"),
            ("'ю", "ju"),
            ("'є", "je"),
            ("'ї", "ji"),
            ("кс", "x"),
        ]
    )
    pairs.extend(_LETTERS)
    return tuple(Syllable(pattern, replacement) for pattern, replacement in pairs)


def validate_table(table: SubstitutionTable) -> None:
    """Raise ``ValueError`` if a pattern precedes a longer cluster containing it."""

    seen_letters: dict[str, int] = {}
    seen_clusters: list[tuple[int, str]] = []
    for position, syllable in enumerate(table):
        pattern = syllable.pattern
        if not pattern:
            raise ValueError(f"Empty pattern at position {position}")
        if pattern != pattern.lower():
            raise ValueError(f"Pattern must be lowercase: {pattern!r}")

        if len(pattern) == 1:
            seen_letters.setdefault(pattern, position)
            continue

        for letter in pattern:
            if letter in seen_letters:
                raise ValueError(
                    f"Cluster {pattern!r} at position {position} follows its letter "
                    f"{letter!r} at position {seen_letters[letter]}"
                )

        for earlier_position, earlier in seen_clusters:
            if earlier in pattern:
                raise ValueError(
                    f"Cluster {pattern!r} at position {position} follows its part "
                    f"{earlier!r} at position {earlier_position}"
                )
        seen_clusters.append((position, pattern))


SYLLABLES: SubstitutionTable = _build_table()
validate_table(SYLLABLES)
