"""Tests for the three-line card file format."""

import tempfile
from pathlib import Path

import pytest

from flashcards.card_store import CardStore
from flashcards.codec import CardRecord, apply_records, decode, encode, read_lines, write_lines
from flashcards.errors import FileAccessError, FileNotFound, MalformedRecord
from flashcards.stats import StatsLedger


def make_state():
    ledger = StatsLedger()
    store = CardStore(ledger=ledger)
    store.add("cat", "Katze")
    store.add("dog", "Hund")
    store.add("house", "Haus")
    ledger.record_error("house")
    ledger.record_error("house")
    ledger.record_error("cat")
    return store, ledger


class TestEncode:
    def test_three_lines_per_card_in_store_order(self):
        """Terms without mistakes are written with a zero count."""
        store, ledger = make_state()
        assert encode(store, ledger) == [
            "cat", "Katze", "1",
            "dog", "Hund", "0",
            "house", "Haus", "2",
        ]

    def test_empty_store(self):
        assert encode(CardStore(), StatsLedger()) == []


class TestDecode:
    def test_parses_records(self):
        assert decode(["a", "1", "0", "b", "2", "5"]) == [
            CardRecord("a", "1", 0),
            CardRecord("b", "2", 5),
        ]

    def test_line_count_not_multiple_of_three(self):
        with pytest.raises(MalformedRecord):
            decode(["a", "1", "0", "b"])

    @pytest.mark.parametrize("raw", ["x", "-1", "1.5", "", " 2"])
    def test_bad_error_count(self, raw):
        """Error counts must be plain non-negative integers."""
        with pytest.raises(MalformedRecord) as exc:
            decode(["a", "1", "0", "b", "2", raw])
        assert exc.value.line_no == 6

    def test_empty_input(self):
        assert decode([]) == []


class TestApplyRecords:
    """Test import semantics."""

    def test_round_trip(self):
        """Decoding an encoded state rebuilds the same cards and stats."""
        store, ledger = make_state()
        fresh_ledger = StatsLedger()
        fresh = CardStore(ledger=fresh_ledger)
        apply_records(decode(encode(store, ledger)), fresh, fresh_ledger)
        assert fresh.items() == store.items()
        assert fresh_ledger.as_dict() == ledger.as_dict()
        assert "dog" not in fresh_ledger

    def test_last_duplicate_wins(self):
        ledger = StatsLedger()
        store = CardStore(ledger=ledger)
        count = apply_records(decode(["a", "1", "3", "a", "2", "4"]), store, ledger)
        assert count == 2
        assert store.items() == [("a", "2")]
        assert ledger.count("a") == 4

    def test_counts_overwrite_and_zero_clears(self):
        """Imported counts replace existing ones; zero removes the entry."""
        store, ledger = make_state()
        apply_records([CardRecord("cat", "Katze", 0), CardRecord("dog", "Hund", 9)], store, ledger)
        assert "cat" not in ledger
        assert ledger.count("dog") == 9
        assert ledger.count("house") == 2

    def test_merges_into_existing_store(self):
        store, ledger = make_state()
        apply_records([CardRecord("bird", "Vogel", 0), CardRecord("cat", "Kater", 1)], store, ledger)
        assert store.items() == [
            ("cat", "Kater"),
            ("dog", "Hund"),
            ("house", "Haus"),
            ("bird", "Vogel"),
        ]


class TestFiles:
    """Test reading and writing card files."""

    def test_write_then_read(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "cards.txt"
            write_lines(path, ["a", "1", "0"])
            assert path.read_text(encoding="utf-8") == "a\n1\n0\n"
            assert read_lines(path) == ["a", "1", "0"]

    def test_read_without_trailing_newline(self, tmp_path):
        path = tmp_path / "cards.txt"
        path.write_text("a\n1\n0", encoding="utf-8")
        assert read_lines(path) == ["a", "1", "0"]

    def test_read_empty_file(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("", encoding="utf-8")
        assert read_lines(path) == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFound) as exc:
            read_lines(tmp_path / "missing.txt")
        assert str(exc.value) == "File not found."

    def test_write_to_directory_fails(self, tmp_path):
        with pytest.raises(FileAccessError):
            write_lines(tmp_path, ["a", "1", "0"])
