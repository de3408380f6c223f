"""
Integrity checks for the mapping tables.

The engine trusts its tables: a syllable row nobody can type is dead data,
and a glyph listed under two rows makes the reverse lookup depend on table
order.  check_tables() reports both, plus consonant glyphs that have no row
at all and keys that break the 1-2 ASCII character rule.

Usage:
    from geez_input.coverage import check_tables

    report = check_tables()
    print(report.summary())
    report.write_tsv(Path("table_review.tsv"))   # for a domain reviewer
"""

from __future__ import annotations

import csv
from dataclasses import dataclass, field
from pathlib import Path

from geez_input.mapping import MappingTables


@dataclass
class TableReport:
    """Result of checking one MappingTables instance."""

    rows: int = 0
    forms: int = 0
    unreachable_rows: list[str] = field(default_factory=list)  # row key no key sequence produces
    missing_rows: list[str] = field(default_factory=list)  # produced glyph with no row and no form
    duplicate_glyphs: dict[str, list[str]] = field(default_factory=dict)  # glyph → rows listing it
    non_ascii_keys: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.unreachable_rows and not self.non_ascii_keys

    def summary(self) -> str:
        lines = [
            "═══ Table Report ═══",
            "",
            f"Syllable rows:      {self.rows}",
            f"Syllable forms:     {self.forms}",
            f"Unreachable rows:   {len(self.unreachable_rows)}",
            f"Glyphs without row: {len(self.missing_rows)}",
            f"Shared glyphs:      {len(self.duplicate_glyphs)}",
            f"Non-ASCII keys:     {len(self.non_ascii_keys)}",
        ]

        if self.unreachable_rows:
            lines.append("")
            lines.append("─── Unreachable rows ───")
            lines.extend(f"  {glyph}" for glyph in self.unreachable_rows)

        if self.missing_rows:
            lines.append("")
            lines.append("─── Produced glyphs with no syllable row ───")
            lines.extend(f"  {glyph}" for glyph in self.missing_rows)

        if self.duplicate_glyphs:
            lines.append("")
            lines.append("─── Glyphs listed under several rows (first row wins) ───")
            for glyph, owners in self.duplicate_glyphs.items():
                lines.append(f"  {glyph}  {', '.join(owners)}")

        if self.non_ascii_keys:
            lines.append("")
            lines.append("─── Consonant keys that are not 1-2 ASCII characters ───")
            lines.extend(f"  {key!r}" for key in self.non_ascii_keys)

        lines.append("")
        lines.append("OK" if self.ok else "FAILED")
        return "\n".join(lines)

    def write_tsv(self, path: Path) -> None:
        """Write every finding to a TSV file, one row per finding.

        Columns: issue, glyph, detail
        """
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f, delimiter="\t")
            writer.writerow(["issue", "glyph", "detail"])
            for glyph in self.unreachable_rows:
                writer.writerow(["unreachable_row", glyph, ""])
            for glyph in self.missing_rows:
                writer.writerow(["missing_row", glyph, ""])
            for glyph, owners in self.duplicate_glyphs.items():
                writer.writerow(["duplicate_glyph", glyph, ", ".join(owners)])
            for key in self.non_ascii_keys:
                writer.writerow(["non_ascii_key", key, ""])


def check_tables(tables: MappingTables | None = None) -> TableReport:
    """Check the data-model invariants of a set of tables."""
    tables = tables or MappingTables.default()
    report = TableReport(rows=len(tables.syllables))

    produced = list(tables.consonants.values()) + list(tables.multi_consonants.values())

    owners: dict[str, list[str]] = {}
    for consonant, forms in tables.syllables.items():
        report.forms += len(forms)
        # a row may list the same glyph twice (ኃ for e and a); count it once
        for glyph in dict.fromkeys([consonant, *forms.values()]):
            owners.setdefault(glyph, []).append(consonant)

    for consonant in tables.syllables:
        if consonant not in produced:
            report.unreachable_rows.append(consonant)

    for glyph in dict.fromkeys(produced):
        if glyph not in owners:
            report.missing_rows.append(glyph)

    report.duplicate_glyphs = {g: rows for g, rows in owners.items() if len(rows) > 1}

    for key in tables.consonants:
        if not (1 <= len(key) <= 2 and key.isascii()):
            report.non_ascii_keys.append(key)

    return report
