"""
Arabic text utilities.

The scorers compare text literally: no letter folding and no diacritic
removal. Folding is only used for the loose similarity reported next to
the positional accuracy (see ``tilawa.core.matcher``), because reference
verses are usually vowelled and transcripts usually are not.
"""

import re

# Any Unicode whitespace, as JavaScript's \s and Python's str.isspace() see it
WHITESPACE_PATTERN = re.compile(r"\s+")

# Arabic diacritics (tashkeel): U+064B-U+065F, superscript alef U+0670
DIACRITICS_PATTERN = re.compile(r"[\u064B-\u065F\u0670]")

# Anything that is neither a word character nor whitespace
PUNCTUATION_PATTERN = re.compile(r"[^\w\s]")

# Letter variants that ASR output and printed mushafs spell differently
LETTER_FOLDS = str.maketrans({
    "أ": "ا", "إ": "ا", "آ": "ا", "ٱ": "ا",
    "ى": "ي",
    "ة": "ه",
    "ؤ": "و",
    "ئ": "ي",
})


def strip_whitespace(text: str | None) -> str:
    """
    Remove every whitespace character from text.

    Word boundaries are lost: the result is the bare character stream
    that positional accuracy is measured over.

    Examples:
        >>> strip_whitespace("بسم الله")
        'بسمالله'
        >>> strip_whitespace(None)
        ''
    """
    if not text:
        return ""
    return WHITESPACE_PATTERN.sub("", text)


def remove_diacritics(text: str) -> str:
    """Remove fatha, kasra, damma, shadda, sukun, tanween and superscript alef."""
    return DIACRITICS_PATTERN.sub("", text)


def normalize_arabic(text: str | None) -> str:
    """
    Fold text down to bare letters for loose comparison.

    Alef, ya, ta marbuta and hamza-carrier variants are folded to one
    letter each; diacritics and punctuation are dropped and whitespace
    runs become single spaces.

    Examples:
        >>> normalize_arabic("بِسمِ اللهِ الرَحمٰنِ الرَحِيمِ")
        'بسم الله الرحمن الرحيم'
        >>> normalize_arabic("أَعُوذُ")
        'اعوذ'
    """
    if not text:
        return ""

    bare = remove_diacritics(text.translate(LETTER_FOLDS))
    bare = PUNCTUATION_PATTERN.sub("", bare)
    return WHITESPACE_PATTERN.sub(" ", bare).strip()
