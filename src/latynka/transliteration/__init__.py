"""Ukrainian Cyrillic → Latin transliteration engine."""

from .engine import CasingTriple, casing_triple, replace_syllable, rewrite, transliterate
from .syllables import SYLLABLES, SubstitutionTable, Syllable, validate_table

__all__ = [
    "CasingTriple",
    "SYLLABLES",
    "SubstitutionTable",
    "Syllable",
    "casing_triple",
    "replace_syllable",
    "rewrite",
    "transliterate",
    "validate_table",
]
