"""
Verse lookup by surah and ayah.

Expected texts come from a small built-in sample or from a CSV file
with the columns::

    surah_number, ayah_number, arabic_text[, english_translation,
    abjad_value, tajweed_rules, difficulty_level]
"""

import csv
import logging
from pathlib import Path
from typing import Iterable

from tilawa.exceptions import InvalidArgumentError, VerseDataError, VerseNotFoundError
from tilawa.models import Ayah

logger = logging.getLogger(__name__)

# Opening verses of Al-Fatiha, with the spelling the scorer compares against
DEFAULT_VERSES: dict[str, str] = {
    "1:1": "بِسمِ اللهِ الرَحمٰنِ الرَحِيمِ",
    "1:2": "الحَمدُ لِلهِ رَبِّ العَالَمِينَ",
    "1:3": "الرَحمٰنِ الرَحِيمِ",
}

REQUIRED_COLUMNS = ("surah_number", "ayah_number", "arabic_text")


def verse_key(surah: int, ayah: int) -> str:
    """Build a ``surah:ayah`` key."""
    return f"{surah}:{ayah}"


def parse_verse_key(key: str) -> tuple[int, int]:
    """
    Split a ``surah:ayah`` key into its numbers.

    Examples:
        >>> parse_verse_key("1:2")
        (1, 2)

    Raises:
        InvalidArgumentError: If the key is not two positive integers joined by ':'
    """
    parts = key.split(":")
    if len(parts) != 2:
        raise InvalidArgumentError("key", key, "expected 'surah:ayah'")
    try:
        surah, ayah = int(parts[0]), int(parts[1])
    except ValueError:
        raise InvalidArgumentError("key", key, "surah and ayah must be integers") from None
    if surah < 1 or ayah < 1:
        raise InvalidArgumentError("key", key, "surah and ayah must be positive")
    return surah, ayah


def _row_to_ayah(row: dict[str, str], source: str, line: int) -> Ayah:
    try:
        return Ayah(
            surah_id=int(row["surah_number"]),
            ayah_number=int(row["ayah_number"]),
            text=row["arabic_text"],
            translation=row.get("english_translation") or None,
            difficulty_level=int(row.get("difficulty_level") or 1),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise VerseDataError(source, f"line {line}: {e}") from e


def load_verses_csv(path: str | Path) -> list[Ayah]:
    """
    Load verses from a CSV file.

    Args:
        path: CSV file with a header row

    Returns:
        List of Ayah objects in file order

    Raises:
        VerseDataError: If the file is missing or unreadable, is not UTF-8,
            lacks required columns, or a row cannot be parsed
    """
    path = Path(path)
    if not path.exists():
        raise VerseDataError(str(path), "file not found")

    try:
        with open(path, encoding="utf-8", newline="") as f:
            reader = csv.DictReader(f)
            missing = [c for c in REQUIRED_COLUMNS if c not in (reader.fieldnames or [])]
            if missing:
                raise VerseDataError(str(path), f"missing columns: {', '.join(missing)}")

            # Line 1 is the header
            ayahs = [_row_to_ayah(row, str(path), i) for i, row in enumerate(reader, start=2)]
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise VerseDataError(str(path), str(e)) from e

    logger.info("Loaded %d verses from %s", len(ayahs), path)
    return ayahs


def _default_ayahs() -> list[Ayah]:
    ayahs = []
    for key, text in DEFAULT_VERSES.items():
        surah, ayah = parse_verse_key(key)
        ayahs.append(Ayah(surah_id=surah, ayah_number=ayah, text=text))
    return ayahs


class VerseLookup:
    """
    Expected-text lookup keyed by surah and ayah.

    Example:
        verses = VerseLookup()                       # built-in sample
        verses = VerseLookup.from_csv("quran.csv")   # full data
        text = verses.expected_text(1, 1)
    """

    def __init__(self, ayahs: Iterable[Ayah] | None = None):
        if ayahs is None:
            ayahs = _default_ayahs()
        self._ayahs: dict[str, Ayah] = {ayah.key: ayah for ayah in ayahs}

    @classmethod
    def from_csv(cls, path: str | Path) -> "VerseLookup":
        """Create a lookup from a verse CSV file."""
        return cls(load_verses_csv(path))

    def get(self, surah: int, ayah: int) -> Ayah:
        """
        Get a verse.

        Raises:
            VerseNotFoundError: If the verse is not known
        """
        try:
            return self._ayahs[verse_key(surah, ayah)]
        except KeyError:
            raise VerseNotFoundError(surah, ayah) from None

    def expected_text(self, surah: int, ayah: int) -> str:
        """Get a verse's text, or an empty string when it is not known."""
        found = self._ayahs.get(verse_key(surah, ayah))
        return found.text if found else ""

    def __contains__(self, key: str) -> bool:
        return key in self._ayahs

    def __len__(self) -> int:
        return len(self._ayahs)

    def __iter__(self):
        return iter(self._ayahs.values())
