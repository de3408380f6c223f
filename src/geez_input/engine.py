"""
Keystroke transformation engine: Latin phonetic input to Geez script.

Given the text on either side of the cursor and the key just pressed, the
engine decides whether to append a glyph, replace the glyph(s) before the
cursor with a more specific syllable form, or pass the key through.  It
keeps no state between calls; the text already in the field is its only
memory, so it is safe to call from any thread.

Usage:
    from geez_input.engine import GeezEngine, transform

    transform("", "", "h")            # EngineResult("ህ", 1, False)
    transform("ህ", "", "a")           # EngineResult("ሃ", 1, True)

    engine = GeezEngine.from_config("geez_input.toml")   # table overrides
    engine.transform("ክው", "", "a")   # EngineResult("ኳ", 1, True)
"""

from __future__ import annotations

import logging
import string
import tomllib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from geez_input.mapping import MappingTables


logger = logging.getLogger(__name__)

# Vowel key -> labialized form selected after consonant + w
_WA_SERIES = {"a": "wa", "i": "wi", "e": "we", "u": "wu"}

# Keys that select a doubled-vowel form (a + a -> aa)
_DOUBLED_VOWELS = ("a", "i")

_TABLE_SECTIONS = ("consonants", "multi_consonants", "punctuation")


class TransformType(str, Enum):
    """Which family of rules produced a result."""

    PUNCTUATION = "punctuation"
    MULTI_CONSONANT = "multi-consonant"
    CONSONANT = "consonant"
    LABIALIZED = "labialized"
    SYLLABLE = "syllable"
    DOUBLE_VOWEL = "double-vowel"
    PASSTHROUGH = "passthrough"


@dataclass(frozen=True, slots=True)
class EngineResult:
    """Outcome of one keystroke.

    transformed_value is the full field text (before + insertion + after).
    removed counts the characters taken off the end of the text before the
    cursor: 0 for an append, 1 or 2 for a replacement.
    """

    transformed_value: str
    new_cursor_position: int
    is_replacement: bool
    transform_type: TransformType = TransformType.PASSTHROUGH
    removed: int = 0


@dataclass(frozen=True, slots=True)
class TransformStats:
    """What a single keystroke turned into, for callbacks and diagnostics."""

    input_char: str
    output_char: str
    transform_type: TransformType

    @classmethod
    def from_result(cls, key: str, before: str, result: EngineResult) -> TransformStats:
        """Recover the inserted text from a result and the text it was computed on."""
        start = len(before) - result.removed
        return cls(
            input_char=key,
            output_char=result.transformed_value[start:result.new_cursor_position],
            transform_type=result.transform_type,
        )


def _is_latin_letter(ch: str) -> bool:
    return len(ch) == 1 and ch in string.ascii_letters


class GeezEngine:
    """Applies the phonetic rules to one keystroke at a time.

    Rules are tried in a fixed order and the first match wins:

     1. punctuation pair      (፡ + : -> ።)
     2. punctuation key       (: -> ፡)
     3. multi-consonant pair  (ስ + h -> ሽ)
     4. Latin digraph         (c + h -> ች)
     5. labialized form       (ክ ው + a -> ኳ), looks back two characters
     6. labialized wee        (ኰ + e -> ኴ)
     7. syllable              (ህ + a -> ሃ)
     8. ee form               (ሂ + e -> ሄ)
     9. doubled vowel         (form + a -> aa form, when the row has one)
    10. consonant             (h -> ህ)
    11. passthrough           (anything else is appended unchanged)
    """

    def __init__(self, tables: MappingTables | None = None):
        self.tables = tables or MappingTables.default()

    @classmethod
    def from_config(cls, config_path: str | Path = "geez_input.toml") -> GeezEngine:
        """Build an engine whose tables are the defaults plus TOML overrides.

        Recognised sections: [consonants], [multi_consonants], [punctuation]
        (string -> string), and [syllables."<glyph>"] (vowel key -> glyph).
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        with config_path.open("rb") as f:
            cfg = tomllib.load(f)

        overrides = {name: _string_table(cfg, name) for name in _TABLE_SECTIONS}

        syllables: dict[str, dict[str, str]] = {}
        raw_rows = cfg.get("syllables", {})
        if not isinstance(raw_rows, dict):
            raise ValueError("Config section [syllables] must be a table")
        for consonant in raw_rows:
            syllables[consonant] = _string_table(raw_rows, consonant, prefix="syllables.")

        tables = MappingTables.default().overlay(syllables=syllables, **overrides)
        logger.info("Loaded table overrides from %s", config_path)
        return cls(tables)

    # ── Transformation ───────────────────────────────────────────────────

    def transform(self, text_before_cursor: str, text_after_cursor: str, key: str) -> EngineResult:
        """Apply one keystroke and return the new text and cursor position."""
        before, after = text_before_cursor, text_after_cursor
        tables = self.tables

        if not key:
            return self._append(before, after, "", TransformType.PASSTHROUGH)

        last = before[-1:]
        combined = last + key

        # 1. Punctuation pair (፡ + : -> ።)
        if last and combined in tables.punctuation:
            return self._replace(before, after, 1, tables.punctuation[combined],
                                 TransformType.PUNCTUATION)

        # 2. Punctuation key on its own
        if key in tables.punctuation:
            return self._append(before, after, tables.punctuation[key], TransformType.PUNCTUATION)

        # 3. Produced glyph + Latin letter (ስ + h -> ሽ)
        if last and combined in tables.multi_consonants:
            return self._replace(before, after, 1, tables.multi_consonants[combined],
                                 TransformType.MULTI_CONSONANT)

        # 4. Two Latin letters forming a digraph consonant (c + h -> ች).
        #    Both sides must still be Latin, or an Ethiopic glyph could re-fire.
        if combined in tables.consonants and _is_latin_letter(last) and _is_latin_letter(key):
            return self._replace(before, after, 1, tables.consonants[combined],
                                 TransformType.CONSONANT)

        # 5. Consonant + ው + vowel -> labialized form.  Must run before the
        #    syllable rule, which would otherwise turn ው + a into ዋ.
        glide = tables.consonants.get("w")
        if last and last == glide and key in _WA_SERIES:
            row = tables.syllables.get(before[-2:-1])
            form = row.get(_WA_SERIES[key]) if row else None
            if form:
                return self._replace(before, after, 2, form, TransformType.LABIALIZED)

        # 6. we form + e -> wee form (ኰ + e -> ኴ)
        if key == "e" and last:
            base = self.find_we_base(last)
            if base is not None:
                form = tables.syllables[base].get("wee")
                if form:
                    return self._replace(before, after, 1, form, TransformType.LABIALIZED)

        # 7. Consonant + vowel key (ህ + a -> ሃ)
        row = tables.syllables.get(last)
        if row and key in row:
            return self._replace(before, after, 1, row[key], TransformType.SYLLABLE)

        # 8. Vowel form + e -> ee form (ሂ + e -> ሄ); the bare consonant
        #    was already handled by rule 7 (ህ + e -> ሀ).
        if key == "e" and last:
            base = self.find_base(last)
            if base is not None and base != last:
                form = tables.syllables[base].get("ee")
                if form:
                    return self._replace(before, after, 1, form, TransformType.SYLLABLE)

        # 9. Doubled vowel (form + a -> aa form)
        if key in _DOUBLED_VOWELS and last:
            base = self.find_base(last)
            if base is not None:
                form = tables.syllables[base].get(key + key)
                if form:
                    return self._replace(before, after, 1, form, TransformType.DOUBLE_VOWEL)

        # 10. New consonant
        if key in tables.consonants:
            return self._append(before, after, tables.consonants[key], TransformType.CONSONANT)

        # 11. Passthrough
        return self._append(before, after, key, TransformType.PASSTHROUGH)

    # ── Reverse lookups ──────────────────────────────────────────────────

    def find_base(self, glyph: str) -> str | None:
        """Find the consonant row a glyph belongs to (ሃ -> ህ, ህ -> ህ).

        This is a linear scan over the forward table, not a true inverse:
        the first row in table order that has the glyph as its key or as
        any of its forms wins.  Table order is insertion order, so the
        answer is deterministic for a given MappingTables.
        """
        for consonant, forms in self.tables.syllables.items():
            if consonant == glyph or glyph in forms.values():
                return consonant
        return None

    def find_we_base(self, glyph: str) -> str | None:
        """Find the consonant whose ``we`` form is this glyph (ኰ -> ክ)."""
        for consonant, forms in self.tables.syllables.items():
            if forms.get("we") == glyph:
                return consonant
        return None

    # ── Result builders ──────────────────────────────────────────────────

    @staticmethod
    def _replace(before: str, after: str, removed: int, glyph: str,
                 kind: TransformType) -> EngineResult:
        head = before[:-removed]
        logger.debug("replace %r with %r (%s)", before[-removed:], glyph, kind.value)
        return EngineResult(
            transformed_value=head + glyph + after,
            new_cursor_position=len(head) + len(glyph),
            is_replacement=True,
            transform_type=kind,
            removed=removed,
        )

    @staticmethod
    def _append(before: str, after: str, text: str, kind: TransformType) -> EngineResult:
        logger.debug("append %r (%s)", text, kind.value)
        return EngineResult(
            transformed_value=before + text + after,
            new_cursor_position=len(before) + len(text),
            is_replacement=False,
            transform_type=kind,
        )

    def summary(self) -> str:
        lines = ["GeezEngine"]
        for sub_line in self.tables.summary().split("\n"):
            lines.append(f"  {sub_line}")
        return "\n".join(lines)


# ── Module-level shortcut ────────────────────────────────────────────────

_default_engine = GeezEngine()


def transform(text_before_cursor: str, text_after_cursor: str, key: str) -> EngineResult:
    """Transform one keystroke with the default tables."""
    return _default_engine.transform(text_before_cursor, text_after_cursor, key)


# ── Config helpers ───────────────────────────────────────────────────────

def _string_table(cfg: dict[str, Any], name: str, prefix: str = "") -> dict[str, str]:
    """Return cfg[name] as a str -> str dict, or raise ValueError naming the section."""
    section = cfg.get(name, {})
    if not isinstance(section, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in section.items()
    ):
        raise ValueError(f"Config section [{prefix}{name}] must map strings to strings")
    return dict(section)
