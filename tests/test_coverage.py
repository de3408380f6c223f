"""Tests for the table integrity checks (coverage.py)."""

import csv

from geez_input.coverage import TableReport, check_tables
from geez_input.mapping import MappingTables


def test_default_tables_pass():
    report = check_tables()
    assert report.ok
    assert report.unreachable_rows == []
    assert report.non_ascii_keys == []
    assert report.duplicate_glyphs == {}
    assert report.rows == len(MappingTables.default().syllables)


def test_default_carriers_without_rows():
    # ኡ ኢ ኦ ኣ ኤ are forms of the አ row; እ and ዖ have no row
    assert check_tables().missing_rows == ["እ", "ዖ"]


def test_unreachable_row_fails():
    tables = MappingTables.default().overlay(syllables={"ሕ": {"a": "ሓ"}})
    report = check_tables(tables)
    assert report.unreachable_rows == ["ሕ"]
    assert not report.ok


def test_shared_glyph_reported_but_not_fatal():
    tables = MappingTables.default().overlay(syllables={"ም": {"x": "ሃ"}})
    report = check_tables(tables)
    assert report.duplicate_glyphs == {"ሃ": ["ህ", "ም"]}
    assert report.ok


def test_repeated_glyph_within_a_row_is_not_shared():
    report = check_tables()
    assert "ኃ" not in report.duplicate_glyphs


def test_non_ascii_key_fails():
    tables = MappingTables.default().overlay(consonants={"å": "ኧ"})
    report = check_tables(tables)
    assert report.non_ascii_keys == ["å"]
    assert "ኧ" in report.missing_rows
    assert not report.ok


def test_summary_ok_and_failed():
    assert check_tables().summary().endswith("OK")
    tables = MappingTables.default().overlay(syllables={"ሕ": {"a": "ሓ"}})
    s = check_tables(tables).summary()
    assert "Unreachable rows" in s
    assert s.endswith("FAILED")


def test_write_tsv(tmp_path):
    report = TableReport(
        unreachable_rows=["ሕ"],
        missing_rows=["እ"],
        duplicate_glyphs={"ሃ": ["ህ", "ም"]},
        non_ascii_keys=["å"],
    )
    out = tmp_path / "review.tsv"
    report.write_tsv(out)

    with open(out, encoding="utf-8", newline="") as f:
        rows = list(csv.reader(f, delimiter="\t"))
    assert rows[0] == ["issue", "glyph", "detail"]
    assert rows[1:] == [
        ["unreachable_row", "ሕ", ""],
        ["missing_row", "እ", ""],
        ["duplicate_glyph", "ሃ", "ህ, ም"],
        ["non_ascii_key", "å", ""],
    ]
