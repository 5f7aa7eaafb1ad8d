"""
Abjad numeral values.

Each of the 28 letters of the Arabic abjad carries a fixed weight
(1-1000). The Abjad value of a text is the sum of the weights of its
characters.
"""

from types import MappingProxyType
from typing import Mapping

from tilawa.models import AbjadComparison

# Traditional abjad order: units, tens, hundreds, then 1000.
ABJAD_MAP: Mapping[str, int] = MappingProxyType({
    "ا": 1, "ب": 2, "ج": 3, "د": 4, "ه": 5, "و": 6, "ز": 7, "ح": 8, "ط": 9,
    "ي": 10, "ك": 20, "ل": 30, "م": 40, "ن": 50, "س": 60, "ع": 70, "ف": 80,
    "ص": 90, "ق": 100, "ر": 200, "ش": 300, "ت": 400, "ث": 500, "خ": 600,
    "ذ": 700, "ض": 800, "ظ": 900, "غ": 1000,
})

DEFAULT_TOLERANCE = 5


def abjad_value(text: str | None) -> int:
    """
    Compute the Abjad value of text.

    Every code point is looked up exactly as it appears. Nothing is
    normalized: hamza-carrying alefs (أ إ آ), ta marbuta (ة), diacritics,
    spaces and non-Arabic characters all weigh zero.

    Args:
        text: Any text; None is treated as empty

    Returns:
        Sum of letter weights (0 for empty text)

    Examples:
        >>> abjad_value("بسم الله الرحمن الرحيم")
        786
        >>> abjad_value("abc")
        0
    """
    if not text:
        return 0
    return sum(ABJAD_MAP.get(char, 0) for char in text)


def compare_abjad(
    expected: str | None,
    actual: str | None,
    tolerance: int = DEFAULT_TOLERANCE,
) -> AbjadComparison:
    """
    Compare the Abjad values of an expected text and a recited one.

    Args:
        expected: Reference text
        actual: Transcribed text
        tolerance: Largest difference still counted as a match

    Returns:
        AbjadComparison with both values
    """
    return AbjadComparison(
        expected_value=abjad_value(expected),
        actual_value=abjad_value(actual),
        tolerance=tolerance,
    )
