"""
Shared fixtures and test configuration for Tilawa tests.
"""

import pytest

import tilawa.config
from tilawa.config import TilawaSettings
from tilawa.data import VerseLookup
from tilawa.models import Ayah, RecitationRecord
from tilawa.session import InMemoryRecitationStore


@pytest.fixture(autouse=True)
def reset_default_settings(monkeypatch):
    """Keep configure() calls and TILAWA_ variables from leaking between tests."""
    monkeypatch.setattr(tilawa.config, "_default_settings", None)
    yield


@pytest.fixture
def settings():
    """Settings with defaults, ignoring any .env file."""
    return TilawaSettings(_env_file=None)


@pytest.fixture
def basmala():
    """Basmala as the transcription service typically returns it (no diacritics)."""
    return "بسم الله الرحمن الرحيم"


@pytest.fixture
def sample_ayahs():
    """Sample ayah objects for testing (Surah Al-Fatiha first 3 ayahs)."""
    return [
        Ayah(surah_id=1, ayah_number=1, text="بِسمِ اللهِ الرَحمٰنِ الرَحِيمِ"),
        Ayah(surah_id=1, ayah_number=2, text="الحَمدُ لِلهِ رَبِّ العَالَمِينَ"),
        Ayah(surah_id=1, ayah_number=3, text="الرَحمٰنِ الرَحِيمِ"),
    ]


@pytest.fixture
def verses(sample_ayahs):
    """Verse lookup over the sample ayahs."""
    return VerseLookup(sample_ayahs)


@pytest.fixture
def store():
    """Empty in-memory recitation store."""
    return InMemoryRecitationStore()


@pytest.fixture
def make_record():
    """Factory for recitation records with sensible defaults."""
    def _make(**overrides):
        fields = {
            "user_id": "user-1",
            "surah": 1,
            "ayah": 1,
            "transcript": "بسم الله",
            "expected_text": "بسم الله الرحمن الرحيم",
            "accuracy": 80,
            "abjad_value": 168,
            "jannah_points": 801,
        }
        fields.update(overrides)
        return RecitationRecord(**fields)

    return _make


@pytest.fixture
def verses_csv(tmp_path):
    """A small verse CSV in the column layout the loader expects."""
    path = tmp_path / "verses.csv"
    path.write_text(
        "surah_number,ayah_number,arabic_text,english_translation,abjad_value,tajweed_rules,difficulty_level\n"
        "1,1,بسم الله الرحمن الرحيم,In the name of Allah,786,madd,1\n"
        "2,1,الم,Alif Lam Meem,71,madd,\n"
        "112,1,قل هو الله احد,Say: He is Allah,,qalqalah,2\n",
        encoding="utf-8",
    )
    return path
