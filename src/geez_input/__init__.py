"""geez-input: Latin phonetic keyboard engine for Geez (Ethiopic) script."""

from geez_input.mapping import (
    MappingTables, CONSONANTS, SYLLABLES, MULTI_CONSONANTS, PUNCTUATION,
)
from geez_input.engine import (
    GeezEngine, EngineResult, TransformType, TransformStats, transform,
)
from geez_input.binding import GeezBinding, TextField, type_keys
from geez_input.guide import phonetic_guide, GuideEntry
from geez_input.coverage import check_tables, TableReport

__all__ = [
    "MappingTables",
    "CONSONANTS", "SYLLABLES", "MULTI_CONSONANTS", "PUNCTUATION",
    "GeezEngine", "EngineResult", "TransformType", "TransformStats", "transform",
    "GeezBinding", "TextField", "type_keys",
    "phonetic_guide", "GuideEntry",
    "check_tables", "TableReport",
]
