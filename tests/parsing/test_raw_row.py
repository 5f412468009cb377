"""Tests for catalog_feed/parsing/raw_row.py"""

from catalog_feed.parsing import RawRow


class TestRawRow:
    def test_splits_on_tabs(self):
        row = RawRow.from_line("a\tb\tc")
        assert len(row) == 3
        assert row[0] == "a"
        assert row[2] == "c"

    def test_out_of_range_is_empty(self):
        row = RawRow.from_line("a\tb")
        assert row[20] == ""
        assert row.get(23) == ""

    def test_negative_index_is_empty(self):
        assert RawRow.from_line("a\tb").get(-1) == ""

    def test_empty_fields_preserved(self):
        row = RawRow.from_line("\t\tx")
        assert row[0] == ""
        assert row[2] == "x"

    def test_spaces_not_delimiters(self):
        row = RawRow.from_line("a b\tc d")
        assert row[0] == "a b"

    def test_strips_carriage_return(self):
        row = RawRow.from_line("a\tb\r")
        assert row[1] == "b"

    def test_is_short(self):
        assert RawRow.from_line("a\tb").is_short is True
        assert RawRow.from_line("\t" * 23).is_short is False
