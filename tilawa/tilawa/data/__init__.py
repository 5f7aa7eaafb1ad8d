"""
Verse data for Tilawa library.

Provides the expected texts recitations are scored against.
"""

from tilawa.data.verses import (
    DEFAULT_VERSES,
    VerseLookup,
    load_verses_csv,
    parse_verse_key,
    verse_key,
)

__all__ = [
    "DEFAULT_VERSES",
    "VerseLookup",
    "load_verses_csv",
    "parse_verse_key",
    "verse_key",
]
