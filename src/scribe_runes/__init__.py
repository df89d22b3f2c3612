"""
scribe-runes: Latin-alphabet text into runes, Gothic and classical Latin.

Transliterates into Anglo-Saxon Futhorc, the Elder and Younger Futhark,
medieval Nordic runes and the Gothic alphabet, rewrites Latin in classical
inscription style, and finds ``<Marker>...</Marker>`` blocks and
``@marker`` lines in documents.

Basic usage:
    >>> from scribe_runes import transliterate
    >>> transliterate("futhorc", "thing")
    'ᚦᛁᛝ'

Per-module usage:
    >>> from scribe_runes.latin import to_classical_latin
    >>> to_classical_latin("veni vidi vici 9")
    'VENI VIDI VICI IX'

    >>> from scribe_runes.markers import parse_blocks
    >>> [b.content for b in parse_blocks("<Gothic> guth </Gothic>")]
    ['guth']
"""

from scribe_runes._casing import CasingPattern, apply_casing, detect_casing
from scribe_runes._strip import strip_diacritics
from scribe_runes._substitute import (
    DigraphMatch,
    find_digraph_match,
    old_english_substitutions,
    substitute_trailing_digraph,
)
from scribe_runes.latin import to_classical_latin, to_classical_latin_extended, to_roman
from scribe_runes.markers import (
    LineCommand,
    MarkerBlock,
    convert_blocks,
    convert_line_commands,
    parse_blocks,
    parse_line_commands,
)
from scribe_runes.runes import (
    ScriptId,
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

__version__ = "0.1.0"
__all__ = [
    "ScriptId",
    "Transducer",
    "TransliterationResult",
    "get_transducer",
    "transliterate",
    "to_futhorc",
    "to_elder_futhark",
    "to_younger_futhark",
    "to_medieval_runes",
    "to_gothic",
    "strip_diacritics",
    "CasingPattern",
    "apply_casing",
    "detect_casing",
    "DigraphMatch",
    "find_digraph_match",
    "old_english_substitutions",
    "substitute_trailing_digraph",
    "to_roman",
    "to_classical_latin",
    "to_classical_latin_extended",
    "MarkerBlock",
    "LineCommand",
    "parse_blocks",
    "parse_line_commands",
    "convert_blocks",
    "convert_line_commands",
]

_SPACY_COMPONENTS = (
    "RuneTransliteratorComponent",
    "ClassicalLatinComponent",
    "MarkerBlockComponent",
)


# Lazy import for spaCy components (only when spacy is installed)
def __getattr__(name: str):
    if name in _SPACY_COMPONENTS:
        try:
            from scribe_runes import spacy as _spacy_components
        except ImportError:
            raise ImportError(
                "spaCy integration requires spacy. "
                "Install with: pip install scribe-runes[spacy]"
            )
        return getattr(_spacy_components, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
