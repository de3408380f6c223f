"""
Phonetic guide: which Latin key sequences type which Geez syllables.

The guide is not a second copy of the tables.  Every candidate sequence is
replayed through the engine and kept only when it really produces the
table glyph, so the guide cannot drift from the rules.
"""

from __future__ import annotations

from dataclasses import dataclass

from geez_input.binding import type_keys
from geez_input.engine import GeezEngine


# Vowel key -> Latin suffixes that may type it, tried in order
_TYPED_AS: dict[str, tuple[str, ...]] = {
    "e": ("e",),
    "u": ("u",),
    "i": ("i",),
    "a": ("a",),
    "ee": ("ee", "ie"),
    "o": ("o",),
    "we": ("we",),
    "wu": ("wu",),
    "wi": ("wi",),
    "wa": ("wa",),
    "wee": ("wee",),
    "aa": ("aa",),
    "ii": ("ii",),
}


@dataclass(slots=True)
class GuideEntry:
    """One typeable syllable."""
    latin: str        # key sequence, e.g. "kwa"
    glyph: str        # what it produces, e.g. "ኳ"
    consonant: str    # syllable row, e.g. "ክ"
    vowel: str        # vowel key within the row, e.g. "wa"


def _consonant_sequences(engine: GeezEngine) -> dict[str, str]:
    """Latin sequence -> consonant glyph, including multi-consonant digraphs."""
    tables = engine.tables
    sequences = dict(tables.consonants)
    for pair, glyph in tables.multi_consonants.items():
        produced, letter = pair[:-1], pair[-1]
        for latin, consonant in tables.consonants.items():
            if consonant == produced:
                sequences.setdefault(latin + letter, glyph)
    return sequences


def phonetic_guide(engine: GeezEngine | None = None) -> list[GuideEntry]:
    """Build the guide for every consonant row reachable from the keyboard."""
    engine = engine or GeezEngine()
    entries: list[GuideEntry] = []
    seen: set[tuple[str, str]] = set()

    for latin, consonant in _consonant_sequences(engine).items():
        if type_keys(latin, engine).transformed_value != consonant:
            continue  # e.g. "gn" types ግን, not ኝ
        row = engine.tables.syllables.get(consonant)
        if not row:
            continue

        for vowel, glyph in row.items():
            if (consonant, vowel) in seen:
                continue  # first spelling wins: "ch" over "chh"
            for suffix in _TYPED_AS.get(vowel, ()):
                sequence = latin + suffix
                if type_keys(sequence, engine).transformed_value == glyph:
                    seen.add((consonant, vowel))
                    entries.append(GuideEntry(sequence, glyph, consonant, vowel))
                    break

    return entries


def format_guide(entries: list[GuideEntry]) -> str:
    """Render the guide as one line per consonant row."""
    rows: dict[str, list[GuideEntry]] = {}
    for entry in entries:
        rows.setdefault(entry.consonant, []).append(entry)

    lines = []
    for consonant, row in rows.items():
        cells = "  ".join(f"{e.latin}={e.glyph}" for e in row)
        lines.append(f"  {consonant}  {cells}")
    return "\n".join(lines)
