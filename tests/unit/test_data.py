"""
Unit tests for verse data loading and lookup.
"""

import pytest
from tilawa.data import DEFAULT_VERSES, VerseLookup, load_verses_csv, parse_verse_key, verse_key
from tilawa.exceptions import InvalidArgumentError, VerseDataError, VerseNotFoundError


class TestVerseKeys:
    """Test surah:ayah key helpers."""

    def test_verse_key(self):
        """Keys join surah and ayah with a colon."""
        assert verse_key(2, 255) == "2:255"

    def test_parse_round_trip(self):
        """Parsing a built key gives the numbers back."""
        assert parse_verse_key(verse_key(114, 6)) == (114, 6)

    @pytest.mark.parametrize("key", ["1", "1:2:3", "a:1", "1:b", "0:1", "1:-2", ""])
    def test_parse_invalid(self, key):
        """Malformed keys are invalid arguments."""
        with pytest.raises(InvalidArgumentError):
            parse_verse_key(key)


class TestLoadVersesCsv:
    """Test loading verses from CSV."""

    def test_load(self, verses_csv):
        """Rows become ayahs in file order."""
        ayahs = load_verses_csv(verses_csv)

        assert [a.key for a in ayahs] == ["1:1", "2:1", "112:1"]
        assert ayahs[0].text == "بسم الله الرحمن الرحيم"
        assert ayahs[0].translation == "In the name of Allah"
        assert ayahs[2].difficulty_level == 2

    def test_blank_difficulty_defaults_to_one(self, verses_csv):
        """An empty difficulty cell means the easiest level."""
        assert load_verses_csv(verses_csv)[1].difficulty_level == 1

    def test_missing_file(self, tmp_path):
        """A missing file is a data error."""
        with pytest.raises(VerseDataError):
            load_verses_csv(tmp_path / "nope.csv")

    def test_missing_columns(self, tmp_path):
        """Required columns must be present."""
        path = tmp_path / "bad.csv"
        path.write_text("surah_number,text\n1,بسم\n", encoding="utf-8")
        with pytest.raises(VerseDataError, match="ayah_number"):
            load_verses_csv(path)

    def test_bad_row(self, tmp_path):
        """Unparseable rows report their line number."""
        path = tmp_path / "bad.csv"
        path.write_text(
            "surah_number,ayah_number,arabic_text\n1,1,بسم\n1,x,الحمد\n",
            encoding="utf-8",
        )
        with pytest.raises(VerseDataError, match="line 3"):
            load_verses_csv(path)

    def test_invalid_utf8(self, tmp_path):
        """Bytes that are not UTF-8 are a data error."""
        path = tmp_path / "latin.csv"
        path.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(VerseDataError):
            load_verses_csv(path)

    def test_directory_path(self, tmp_path):
        """A directory is not a verse file."""
        with pytest.raises(VerseDataError):
            load_verses_csv(tmp_path)


class TestVerseLookup:
    """Test VerseLookup."""

    def test_default_verses(self):
        """Without data the built-in Al-Fatiha sample is used."""
        verses = VerseLookup()
        assert len(verses) == len(DEFAULT_VERSES)
        assert verses.expected_text(1, 1) == DEFAULT_VERSES["1:1"]

    def test_get(self, verses):
        """Known verses are returned as Ayah objects."""
        ayah = verses.get(1, 2)
        assert ayah.surah_id == 1
        assert ayah.ayah_number == 2

    def test_get_unknown(self, verses):
        """Unknown verses raise VerseNotFoundError, which is also a KeyError."""
        with pytest.raises(VerseNotFoundError):
            verses.get(2, 1)
        with pytest.raises(KeyError):
            verses.get(2, 1)

    def test_expected_text_unknown_is_empty(self, verses):
        """Unknown verses have no expected text."""
        assert verses.expected_text(2, 1) == ""

    def test_contains_and_iter(self, verses, sample_ayahs):
        """Lookups support membership by key and iteration."""
        assert "1:3" in verses
        assert "1:4" not in verses
        assert list(verses) == sample_ayahs

    def test_from_csv(self, verses_csv):
        """A lookup can be built straight from a CSV file."""
        verses = VerseLookup.from_csv(verses_csv)
        assert verses.expected_text(112, 1) == "قل هو الله احد"
