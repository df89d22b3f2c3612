"""
Diacritic folding for transliteration input.

Reduces accented and special historical letters to the plain-ASCII working
form the rune tables are keyed on.

No external dependencies: pure Python + unicodedata.
"""

from __future__ import annotations

import unicodedata

__all__ = ["strip_diacritics"]

# Block of generic combining diacritical marks removed after NFD
_COMBINING_START = 0x0300
_COMBINING_END = 0x036F

# Special historical letters → working form. Applied after decomposition,
# so precomposed and decomposed inputs end up here the same way.
_FOLD_MAP = str.maketrans(
    {
        "ǣ": "ae",
        "Ǣ": "ae",
        "æ": "ae",
        "ā": "a",
        "ă": "a",
        "ē": "e",
        "ĕ": "e",
        "ī": "i",
        "ĭ": "i",
        "ō": "o",
        "ŏ": "o",
        "ū": "u",
        "ŭ": "u",
        "ȳ": "y",
        "ċ": "c",
        "ġ": "g",
        "ƿ": "w",
        "þ": "th",
        "ð": "th",
    }
)


def _is_stripped_mark(char: str) -> bool:
    return _COMBINING_START <= ord(char) <= _COMBINING_END


def strip_diacritics(text: str) -> str:
    """
    Fold text to the lowercase working form used by the transducers.

    Lowercases, decomposes to NFD, drops combining diacritical marks
    (U+0300-U+036F), then folds the special letters (æ, þ, ð, ƿ, ċ, ġ and
    the macron/breve vowels). Anything else passes through.

    Args:
        text: Input text (any script, any casing)

    Returns:
        Lowercased, folded text

    Example:
        >>> strip_diacritics("Þæt wæs gōd")
        'thaet waes god'
        >>> strip_diacritics("café")
        'cafe'
    """
    if not text:
        return text
    # Lowercase first: some uppercase letters lowercase to base + mark
    decomposed = unicodedata.normalize("NFD", text.lower())
    stripped = "".join(c for c in decomposed if not _is_stripped_mark(c))
    folded = stripped.translate(_FOLD_MAP)
    # Recompose whatever non-Latin text remains
    return unicodedata.normalize("NFC", folded)
