"""
Rune and Gothic transliteration submodule.

Re-exports the script registry and the table-driven transducer.
"""

from scribe_runes.runes._tables import (
    ScriptId,
    load_digraphs,
    load_script,
    load_table,
    validate_table,
)
from scribe_runes.runes._transducer import (
    Segment,
    Transducer,
    TransliterationResult,
    get_transducer,
    to_elder_futhark,
    to_futhorc,
    to_gothic,
    to_medieval_runes,
    to_younger_futhark,
    transliterate,
)

__all__ = [
    "ScriptId",
    "Transducer",
    "TransliterationResult",
    "Segment",
    "get_transducer",
    "transliterate",
    "to_futhorc",
    "to_elder_futhark",
    "to_younger_futhark",
    "to_medieval_runes",
    "to_gothic",
    "load_script",
    "load_table",
    "load_digraphs",
    "validate_table",
]
