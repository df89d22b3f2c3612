"""
Classical Latin orthography.

Rewrites modern Latin text in the style of Roman inscriptions: Arabic
numerals become Roman numerals, everything is set in capitals, U and J
collapse onto V and I, and most punctuation is dropped.

Example:
    >>> from scribe_runes.latin import to_classical_latin
    >>> to_classical_latin("Veni, vidi, vici 9")
    'VENI VIDI VICI IX'
"""

import re

__all__ = ["to_roman", "to_classical_latin", "to_classical_latin_extended"]

# =============================================================================
# Roman Numerals
# =============================================================================

_ROMAN_PAIRS = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

# Standard subtractive notation stops at 3999
_ROMAN_MAX = 3999

# A run of ASCII digits not glued to other word characters
_NUMBER_RE = re.compile(r"(?<!\w)\d+(?!\w)", re.ASCII)

# Punctuation dropped from inscriptions
_PUNCTUATION_RE = re.compile(r"[.,;:!?'\"()\[\]{}]")

_DASH_RE = re.compile(r"[-–—]")

_WHITESPACE_RE = re.compile(r"\s+")

# Rewrites applied by the extended transform, in order. AE and OE are
# already classical and map to themselves; QU cannot survive the base
# transform's U→V step.
_EXTENDED_REWRITES = (
    ("AE", "AE"),
    ("OE", "OE"),
    ("QU", "QV"),
)


def to_roman(number: int) -> str:
    """
    Convert an integer to Roman numerals.

    Numbers outside 1..3999 are returned in decimal.

    Example:
        >>> to_roman(1999)
        'MCMXCIX'
        >>> to_roman(4000)
        '4000'
    """
    if number <= 0 or number > _ROMAN_MAX:
        return str(number)

    result = []
    for value, numeral in _ROMAN_PAIRS:
        while number >= value:
            result.append(numeral)
            number -= value
    return "".join(result)


def _replace_number(match: re.Match) -> str:
    digits = match.group(0)
    # Anything longer than four significant digits is out of range
    if len(digits.lstrip("0")) > 4:
        return digits
    number = int(digits)
    if number <= 0 or number > _ROMAN_MAX:
        # Keep the original spelling, leading zeros included
        return digits
    return to_roman(number)


# =============================================================================
# Transforms
# =============================================================================


def to_classical_latin(text: str) -> str:
    """
    Transform text to classical Roman inscription style.

    Steps, in order:
        1. Standalone numbers 1-3999 → Roman numerals
        2. Uppercase
        3. U → V, J → I
        4. Drop . , ; : ! ? ' " ( ) [ ] { }
        5. Collapse whitespace and trim

    Args:
        text: Modern Latin text

    Returns:
        Classical-style text

    Example:
        >>> to_classical_latin("room 4000")
        'ROOM 4000'
    """
    text = _NUMBER_RE.sub(_replace_number, text)
    text = text.upper()
    text = text.replace("U", "V").replace("J", "I")
    text = _PUNCTUATION_RE.sub("", text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def to_classical_latin_extended(text: str) -> str:
    """
    Classical transform plus digraph and dash handling.

    Runs to_classical_latin(), applies the AE/OE/QU rewrites, turns
    hyphens and en/em dashes into spaces, then collapses whitespace again.

    Example:
        >>> to_classical_latin_extended("senatus-populusque")
        'SENATVS POPVLVSQVE'
    """
    text = to_classical_latin(text)
    for pattern, replacement in _EXTENDED_REWRITES:
        text = text.replace(pattern, replacement)
    text = _DASH_RE.sub(" ", text)
    return _WHITESPACE_RE.sub(" ", text).strip()
