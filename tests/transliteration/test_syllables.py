from __future__ import annotations

import pytest

from latynka.transliteration.syllables import SYLLABLES, Syllable, validate_table


def test_default_table_passes_order_validation() -> None:
    validate_table(SYLLABLES)


def test_default_table_is_immutable_and_lowercase() -> None:
    assert isinstance(SYLLABLES, tuple)
    assert all(syllable.pattern == syllable.pattern.lower() for syllable in SYLLABLES)
    with pytest.raises(AttributeError):
        SYLLABLES[0].replacement = "x"  # type: ignore[misc]


def test_default_table_starts_with_longest_cluster() -> None:
    assert SYLLABLES[0] == Syllable("дзь", "dź")
    assert len({syllable.pattern for syllable in SYLLABLES}) == len(SYLLABLES)


def test_every_multi_letter_pattern_precedes_all_single_letters() -> None:
    last_cluster = max(i for i, syllable in enumerate(SYLLABLES) if len(syllable.pattern) > 1)
    first_letter = min(i for i, syllable in enumerate(SYLLABLES) if len(syllable.pattern) == 1)
    assert last_cluster < first_letter


def test_validation_rejects_cluster_after_its_letter() -> None:
    table = (Syllable("н", "n"), Syllable("ня", "ńa"))
    with pytest.raises(ValueError, match="ня"):
        validate_table(table)


def test_validation_rejects_empty_and_uppercase_patterns() -> None:
    with pytest.raises(ValueError, match="Empty"):
        validate_table((Syllable("", "x"),))
    with pytest.raises(ValueError, match="lowercase"):
        validate_table((Syllable("Ж", "ž"),))


def test_validation_rejects_cluster_after_shorter_cluster_inside_it() -> None:
    table = (Syllable("дз", "dz"), Syllable("дзь", "dź"), Syllable("д", "d"), Syllable("з", "z"))
    with pytest.raises(ValueError, match="дзь"):
        validate_table(table)


def test_validation_accepts_longer_cluster_first() -> None:
    validate_table((Syllable("дзь", "dź"), Syllable("дз", "dz"), Syllable("д", "d"), Syllable("з", "z")))
