"""
Loose similarity between a reference verse and a transcript.

Positional accuracy (``tilawa.core.scorer``) punishes a transcript for
every missing vowel mark and for any shift. The loose similarity here
folds letter variants, drops diacritics and whitespace, and measures
Indel similarity with rapidfuzz, so it shows how close the recited
letters are regardless of spelling and alignment. It is informational:
points never depend on it.
"""

from rapidfuzz.distance import Indel

from tilawa.core.arabic import normalize_arabic, strip_whitespace

# Below this positional accuracy, a high loose similarity is worth reporting
NEAR_MISS_SIMILARITY = 0.8


def letter_stream(text: str | None) -> str:
    """Normalized letters of text with all whitespace removed."""
    return strip_whitespace(normalize_arabic(text))


def loose_similarity(expected: str | None, actual: str | None) -> float:
    """
    Compute the diacritic-insensitive similarity of two texts.

    Args:
        expected: Reference text
        actual: Transcribed text

    Returns:
        Ratio between 0.0 (nothing in common) and 1.0 (same letters).
        Two texts with no letters at all count as identical.

    Examples:
        >>> loose_similarity("بِسمِ اللهِ", "بسم الله")
        1.0
    """
    return Indel.normalized_similarity(letter_stream(expected), letter_stream(actual))


def is_near_miss(
    accuracy: int,
    similarity: float,
    threshold: float = NEAR_MISS_SIMILARITY,
) -> bool:
    """
    Check whether a low accuracy hides a recitation with the right letters.

    True when the positional accuracy is below ``threshold`` but the loose
    similarity reaches it. Missing diacritics or a single leading
    insertion produce exactly this pattern.

    Args:
        accuracy: Positional accuracy (0-100)
        similarity: Loose similarity for the same pair (0.0-1.0)
        threshold: Ratio both values are measured against
    """
    return accuracy / 100 < threshold <= similarity
