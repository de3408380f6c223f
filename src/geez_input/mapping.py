"""
Latin-to-Geez phonetic mapping tables for geez_input.

Principles:
- Made for natural Latin keyboard input by Amharic / Tigrinya typists
- Case selects the consonant: t -> ት, T -> ጥ (ejective)
- Consonants are produced in their 6th (sadis) form; vowels typed after
  them select the syllable form from SYLLABLES
- Digraphs typed as separate keys (s, h) are resolved against the glyph
  already produced (ስ + h -> ሽ) via MULTI_CONSONANTS

All tables are read-only.  Per-session changes go through
MappingTables.overlay(), which copies and layers instead of mutating.

Usage:
    from geez_input.mapping import CONSONANTS, SYLLABLES, MappingTables
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


# ── Consonant table ─────────────────────────────────────────────────
# Each entry: (latin_input, geez_sadis_form, notes)

_CONSONANT_ENTRIES = [
    ("h",   "ህ",  "ha   - voiceless glottal fricative"),
    ("l",   "ል",  "le"),
    ("m",   "ም",  "me"),
    ("r",   "ር",  "re"),
    ("s",   "ስ",  "se"),
    ("rR",  "ር",  "re   - alias, only reachable from literal Latin text"),
    ("sh",  "ሽ",  "she  - voiceless postalveolar fricative"),
    ("q",   "ቅ",  "qe   - ejective velar"),
    ("b",   "ብ",  "be"),
    ("t",   "ት",  "te"),
    ("ch",  "ች",  "che  - c alone passes through, c + h -> ች"),
    ("n",   "ን",  "ne"),
    ("gn",  "ኝ",  "nye  - palatal nasal, literal Latin digraph"),
    ("N",   "ኝ",  "nye  - palatal nasal"),
    ("k",   "ክ",  "ke"),
    ("w",   "ው",  "we   - semivowel, also the labialization glide"),
    ("z",   "ዝ",  "ze"),
    ("zh",  "ዥ",  "zhe"),
    ("y",   "ይ",  "ye"),
    ("d",   "ድ",  "de"),
    ("j",   "ጅ",  "je"),
    ("g",   "ግ",  "ge"),
    ("T",   "ጥ",  "Te   - ejective alveolar"),
    ("C",   "ጭ",  "Che  - ejective postalveolar affricate"),
    ("P",   "ጵ",  "Pe   - ejective bilabial"),
    ("S",   "ጽ",  "Tse  - ejective alveolar affricate"),
    ("f",   "ፍ",  "fe"),
    ("p",   "ፕ",  "pe"),
    ("v",   "ቭ",  "ve"),
    ("x",   "ኽ",  "xe   - voiceless velar fricative"),
    ("H",   "ኃ",  "Ha   - 4th form of the ኀ series, kept as-is"),

    # Vowel carriers
    ("a",   "አ",  "a"),
    ("u",   "ኡ",  "u"),
    ("i",   "ኢ",  "i"),
    ("e",   "እ",  "e    - 6th form of the glottal carrier"),
    ("o",   "ኦ",  "o"),
    ("A",   "ኣ",  "aa"),
    ("E",   "ኤ",  "ee"),
    ("O",   "ዖ",  "o    - pharyngeal carrier"),
]


# ── Syllable table ──────────────────────────────────────────────────
# Vowel keys, in traditional order:
#   e   1st form (ግዕዝ/Geez)
#   u   2nd form (ካዕብ/Kaeb)
#   i   3rd form (ሳልስ/Salis)
#   a   4th form (ራብዕ/Rabee)
#   ee  5th form (ኃምስ/Hamis)
#   o   7th form (ሳብዕ/Sabei)
# Labialized keys follow the Unicode names: we = XWA (1st), wi = XWI,
# wa = XWAA (4th), wee = XWEE, wu = wei = XWE (6th).
# Doubled keys aa / ii are honoured by the engine when a row defines them.

def _forms(e: str, u: str, i: str, a: str, ee: str, o: str, **labialized: str) -> dict[str, str]:
    row = {"e": e, "u": u, "i": i, "a": a, "ee": ee, "o": o}
    row.update(labialized)
    return row


def _velar(wa: str, wi: str, we: str, wee: str, wu: str) -> dict[str, str]:
    """The full labialized set carried by the velar / glottal rows."""
    return {"wa": wa, "wi": wi, "we": we, "wee": wee, "wu": wu, "wei": wu}


_SYLLABLE_ROWS: dict[str, dict[str, str]] = {
    "አ": _forms("አ", "ኡ", "ኢ", "ኣ", "ኤ", "ኦ"),
    "ህ": _forms("ሀ", "ሁ", "ሂ", "ሃ", "ሄ", "ሆ", **_velar("ኋ", "ኊ", "ኈ", "ኌ", "ኍ")),
    # ኃ is already a 4th form; its e and a entries both stay on ኃ
    "ኃ": _forms("ኃ", "ኁ", "ኂ", "ኃ", "ኄ", "ኆ"),
    "ል": _forms("ለ", "ሉ", "ሊ", "ላ", "ሌ", "ሎ", wa="ሏ"),
    "ም": _forms("መ", "ሙ", "ሚ", "ማ", "ሜ", "ሞ", wa="ሟ"),
    "ር": _forms("ረ", "ሩ", "ሪ", "ራ", "ሬ", "ሮ", wa="ሯ"),
    "ስ": _forms("ሰ", "ሱ", "ሲ", "ሳ", "ሴ", "ሶ", wa="ሷ"),
    "ሽ": _forms("ሸ", "ሹ", "ሺ", "ሻ", "ሼ", "ሾ", wa="ሿ"),
    "ቅ": _forms("ቀ", "ቁ", "ቂ", "ቃ", "ቄ", "ቆ", **_velar("ቋ", "ቊ", "ቈ", "ቌ", "ቍ")),
    "ብ": _forms("በ", "ቡ", "ቢ", "ባ", "ቤ", "ቦ", wa="ቧ"),
    "ት": _forms("ተ", "ቱ", "ቲ", "ታ", "ቴ", "ቶ", wa="ቷ"),
    "ች": _forms("ቸ", "ቹ", "ቺ", "ቻ", "ቼ", "ቾ", wa="ቿ"),
    "ን": _forms("ነ", "ኑ", "ኒ", "ና", "ኔ", "ኖ", wa="ኗ"),
    "ኝ": _forms("ኘ", "ኙ", "ኚ", "ኛ", "ኜ", "ኞ", wa="ኟ"),
    "ክ": _forms("ከ", "ኩ", "ኪ", "ካ", "ኬ", "ኮ", **_velar("ኳ", "ኲ", "ኰ", "ኴ", "ኵ")),
    "ኽ": _forms("ኸ", "ኹ", "ኺ", "ኻ", "ኼ", "ኾ", **_velar("ዃ", "ዂ", "ዀ", "ዄ", "ዅ")),
    # no labialized forms: ው is the glide itself
    "ው": _forms("ወ", "ዉ", "ዊ", "ዋ", "ዌ", "ዎ"),
    "ዝ": _forms("ዘ", "ዙ", "ዚ", "ዛ", "ዜ", "ዞ", wa="ዟ"),
    "ዥ": _forms("ዠ", "ዡ", "ዢ", "ዣ", "ዤ", "ዦ", wa="ዧ"),
    "ይ": _forms("የ", "ዩ", "ዪ", "ያ", "ዬ", "ዮ"),
    "ጅ": _forms("ጀ", "ጁ", "ጂ", "ጃ", "ጄ", "ጆ", wa="ጇ"),
    "ድ": _forms("ደ", "ዱ", "ዲ", "ዳ", "ዴ", "ዶ", wa="ዷ"),
    "ግ": _forms("ገ", "ጉ", "ጊ", "ጋ", "ጌ", "ጎ", **_velar("ጓ", "ጒ", "ጐ", "ጔ", "ጕ")),
    "ጥ": _forms("ጠ", "ጡ", "ጢ", "ጣ", "ጤ", "ጦ", wa="ጧ"),
    "ጭ": _forms("ጨ", "ጩ", "ጪ", "ጫ", "ጬ", "ጮ", wa="ጯ"),
    "ጵ": _forms("ጰ", "ጱ", "ጲ", "ጳ", "ጴ", "ጶ", wa="ጷ"),
    "ጽ": _forms("ጸ", "ጹ", "ጺ", "ጻ", "ጼ", "ጾ", wa="ጿ"),
    "ፅ": _forms("ፀ", "ፁ", "ፂ", "ፃ", "ፄ", "ፆ", wa="ፇ"),
    "ፍ": _forms("ፈ", "ፉ", "ፊ", "ፋ", "ፌ", "ፎ", wa="ፏ"),
    "ፕ": _forms("ፐ", "ፑ", "ፒ", "ፓ", "ፔ", "ፖ", wa="ፗ"),
    "ቭ": _forms("ቨ", "ቩ", "ቪ", "ቫ", "ቬ", "ቮ", wa="ቯ"),
}


# ── Multi-consonant table ───────────────────────────────────────────
# Produced glyph + Latin letter -> replacement consonant.

_MULTI_CONSONANT_ENTRIES = [
    ("ስh",  "ሽ",  "s + h  -> she"),
    ("ችh",  "ች",  "c + h + h stays on che"),
    ("ንy",  "ኝ",  "n + y  -> nye"),
    ("ዝh",  "ዥ",  "z + h  -> zhe"),
    ("ጽh",  "ፅ",  "S + h  -> Tse of the ፀ series"),
]


# ── Punctuation table ───────────────────────────────────────────────
# Single keys, and (previous Geez mark + key) chains.

_PUNCTUATION_ENTRIES = [
    (":",   "፡",  "word separator (ሁለት ነጥብ)"),
    ("፡:",  "።",  "second : -> full stop (አራት ነጥብ)"),
    ("።:",  "፡",  "third : cycles back to the word separator"),
    (",",   "፣",  "comma (ነጠላ ሰረዝ)"),
    ("፣,",  "፤",  "second , -> semicolon (ድርብ ሰረዝ)"),
    (";",   "፤",  "semicolon"),
]


# ── Read-only container ─────────────────────────────────────────────

def _freeze_syllables(rows: Mapping[str, Mapping[str, str]]) -> Mapping[str, Mapping[str, str]]:
    return MappingProxyType({c: MappingProxyType(dict(forms)) for c, forms in rows.items()})


@dataclass(frozen=True, slots=True)
class MappingTables:
    """The four lookup tables the engine reads, as read-only mappings.

    Iteration order is insertion order and is part of the contract: the
    engine's reverse lookup scans SYLLABLES in this order.
    """

    consonants: Mapping[str, str]
    syllables: Mapping[str, Mapping[str, str]]
    multi_consonants: Mapping[str, str]
    punctuation: Mapping[str, str]

    @classmethod
    def build(
        cls,
        consonants: Mapping[str, str],
        syllables: Mapping[str, Mapping[str, str]],
        multi_consonants: Mapping[str, str],
        punctuation: Mapping[str, str],
    ) -> MappingTables:
        """Copy plain dicts into a frozen MappingTables."""
        return cls(
            consonants=MappingProxyType(dict(consonants)),
            syllables=_freeze_syllables(syllables),
            multi_consonants=MappingProxyType(dict(multi_consonants)),
            punctuation=MappingProxyType(dict(punctuation)),
        )

    @classmethod
    def default(cls) -> MappingTables:
        """The shared, process-wide tables."""
        return DEFAULT_TABLES

    def overlay(
        self,
        consonants: Mapping[str, str] | None = None,
        syllables: Mapping[str, Mapping[str, str]] | None = None,
        multi_consonants: Mapping[str, str] | None = None,
        punctuation: Mapping[str, str] | None = None,
    ) -> MappingTables:
        """Return new tables with the given entries layered on top.

        Syllable overrides merge per consonant, so ``{"ል": {"aa": "ሏ"}}``
        adds one form without dropping the rest of the row.  Existing keys
        keep their position; new keys are appended.
        """
        rows = {c: dict(forms) for c, forms in self.syllables.items()}
        for consonant, forms in (syllables or {}).items():
            rows.setdefault(consonant, {}).update(forms)

        return MappingTables.build(
            consonants={**self.consonants, **(consonants or {})},
            syllables=rows,
            multi_consonants={**self.multi_consonants, **(multi_consonants or {})},
            punctuation={**self.punctuation, **(punctuation or {})},
        )

    def summary(self) -> str:
        forms = sum(len(row) for row in self.syllables.values())
        lines = ["Geez mapping tables"]
        lines.append(f"  Consonants:        {len(self.consonants)} keys")
        lines.append(f"  Syllable rows:     {len(self.syllables)} rows, {forms} forms")
        lines.append(f"  Multi-consonants:  {len(self.multi_consonants)} pairs")
        lines.append(f"  Punctuation:       {len(self.punctuation)} keys")
        return "\n".join(lines)


DEFAULT_TABLES = MappingTables.build(
    consonants={lat: geez for lat, geez, _ in _CONSONANT_ENTRIES},
    syllables=_SYLLABLE_ROWS,
    multi_consonants={pair: geez for pair, geez, _ in _MULTI_CONSONANT_ENTRIES},
    punctuation={seq: mark for seq, mark, _ in _PUNCTUATION_ENTRIES},
)

CONSONANTS = DEFAULT_TABLES.consonants
SYLLABLES = DEFAULT_TABLES.syllables
MULTI_CONSONANTS = DEFAULT_TABLES.multi_consonants
PUNCTUATION = DEFAULT_TABLES.punctuation


# ── Convenience accessors ───────────────────────────────────────────

def get_sorted_keys(tables: MappingTables | None = None) -> list[str]:
    """Return Latin consonant keys sorted longest-first."""
    tables = tables or DEFAULT_TABLES
    return sorted(tables.consonants, key=len, reverse=True)


def get_vowel_keys(tables: MappingTables | None = None) -> list[str]:
    """Return every vowel-suffix key used in the syllable table, first-seen order."""
    tables = tables or DEFAULT_TABLES
    keys: dict[str, None] = {}
    for forms in tables.syllables.values():
        for vowel in forms:
            keys.setdefault(vowel, None)
    return list(keys)


def get_notes() -> dict[str, str]:
    """Return the notes column of the consonant table, keyed by Latin input."""
    return {lat: note for lat, _, note in _CONSONANT_ENTRIES}


# ── Quick sanity check ──────────────────────────────────────────────

if __name__ == "__main__":
    print("=== Latin -> Geez consonant table ===\n")

    for lat, geez, note in sorted(_CONSONANT_ENTRIES, key=lambda x: (-len(x[0]), x[0])):
        row = SYLLABLES.get(geez, {})
        forms = " ".join(row.values()) if row else "-"
        print(f"  {lat:>3s} → {geez}  {forms}  ({note})")

    print()
    print(DEFAULT_TABLES.summary())
    print(f"Keys (longest first): {get_sorted_keys()[:10]}...")
