"""
Positional accuracy scoring.

Accuracy is the share of characters of the expected text that appear
at the same index in the transcript, after all whitespace is removed.
This is deliberately not an edit distance: one extra character at the
front of the transcript shifts every later comparison. The loose,
diacritic-insensitive similarity in ``ScoredText.similarity`` is reported
alongside for inspection but never used for points.
"""

import math

from tilawa.core.arabic import strip_whitespace
from tilawa.core.matcher import loose_similarity
from tilawa.models import ScoredText


def _round_half_up(value: float) -> int:
    """Round a non-negative number with halves going up (12.5 -> 13)."""
    return math.floor(value + 0.5)


def score(expected: str | None, actual: str | None) -> int:
    """
    Score a transcript against the expected text.

    Args:
        expected: Reference text
        actual: Transcribed text

    Returns:
        Accuracy percentage in [0, 100]. 0 when either text is empty.

    Examples:
        >>> score("بسم الله", "بسم الله")
        100
        >>> score("بسم", "بسك")
        67
        >>> score("بسم", "")
        0
    """
    if not expected or not actual:
        return 0

    expected_chars = strip_whitespace(expected)
    actual_chars = strip_whitespace(actual)
    if not expected_chars:
        return 0

    # zip stops at the shorter text; excess transcript characters are ignored
    matches = sum(1 for e, a in zip(expected_chars, actual_chars) if e == a)

    return _round_half_up(matches / len(expected_chars) * 100)


def score_text(expected: str | None, actual: str | None) -> ScoredText:
    """
    Score a transcript and bundle the result with its inputs.

    Args:
        expected: Reference text
        actual: Transcribed text

    Returns:
        ScoredText with positional accuracy and loose similarity
    """
    expected = expected or ""
    actual = actual or ""
    return ScoredText(
        expected=expected,
        actual=actual,
        accuracy_percent=score(expected, actual),
        similarity=loose_similarity(expected, actual),
    )
