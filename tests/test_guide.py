"""Tests for the phonetic guide (guide.py)."""

from geez_input.binding import type_keys
from geez_input.engine import GeezEngine
from geez_input.guide import GuideEntry, format_guide, phonetic_guide
from geez_input.mapping import MappingTables


def _by_row(entries):
    rows = {}
    for e in entries:
        rows.setdefault(e.consonant, {})[e.vowel] = e
    return rows


def test_guide_contains_common_syllables():
    entries = phonetic_guide()
    assert GuideEntry("he", "ሀ", "ህ", "e") in entries
    assert GuideEntry("hee", "ሄ", "ህ", "ee") in entries
    assert GuideEntry("kwa", "ኳ", "ክ", "wa") in entries
    assert GuideEntry("sha", "ሻ", "ሽ", "a") in entries


def test_guide_includes_rows_reached_through_multi_consonants():
    rows = _by_row(phonetic_guide())
    assert rows["ፅ"]["e"].latin == "She"


def test_ee_falls_back_to_ie():
    rows = _by_row(phonetic_guide())
    assert rows["ኃ"]["ee"] == GuideEntry("Hie", "ኄ", "ኃ", "ee")
    assert rows["አ"]["ee"].latin == "aie"


def test_every_entry_replays_through_engine():
    engine = GeezEngine()
    for e in phonetic_guide(engine):
        assert type_keys(e.latin, engine).transformed_value == e.glyph, e


def test_one_entry_per_row_and_vowel():
    entries = phonetic_guide()
    keys = [(e.consonant, e.vowel) for e in entries]
    assert len(keys) == len(set(keys))


def test_first_spelling_wins():
    rows = _by_row(phonetic_guide())
    assert rows["ች"]["a"].latin == "cha"


def test_untypeable_sequences_left_out():
    latins = {e.latin for e in phonetic_guide()}
    assert not any(l.startswith(("gn", "rR")) for l in latins)


def test_guide_follows_overlay():
    tables = MappingTables.default().overlay(syllables={"ል": {"aa": "ሏ"}})
    rows = _by_row(phonetic_guide(GeezEngine(tables)))
    assert rows["ል"]["aa"] == GuideEntry("laa", "ሏ", "ል", "aa")
    assert "aa" not in _by_row(phonetic_guide())["ል"]


def test_format_guide_one_line_per_row():
    entries = [
        GuideEntry("he", "ሀ", "ህ", "e"),
        GuideEntry("hu", "ሁ", "ህ", "u"),
        GuideEntry("le", "ለ", "ል", "e"),
    ]
    text = format_guide(entries)
    assert text.splitlines() == ["  ህ  he=ሀ  hu=ሁ", "  ል  le=ለ"]


def test_format_guide_empty():
    assert format_guide([]) == ""
