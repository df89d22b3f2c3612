"""
Live digraph substitution for typed text.

While writing Old English, a digraph typed at the cursor ("th", "ae", ...)
is swapped for its letter (þ, æ, ...) in the writer's casing. Lines that
are @marker commands are left alone; they get transliterated as a whole.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from scribe_runes._casing import apply_casing
from scribe_runes.markers import is_at_command

__all__ = [
    "DigraphMatch",
    "OLD_ENGLISH_SUBSTITUTIONS",
    "find_digraph_match",
    "old_english_substitutions",
    "substitute_trailing_digraph",
]

OLD_ENGLISH_SUBSTITUTIONS = {
    "th": "þ",
    "dh": "ð",
    "ae": "æ",
}

_WYNN_SUBSTITUTIONS = {
    "w": "ƿ",
    "W": "Ƿ",
}


@dataclass(frozen=True)
class DigraphMatch:
    """A substitution key found at the end of typed text."""

    match: str  # the text as typed
    digraph: str  # the substitution key
    replacement: str  # the substitution, cased like `match`


def old_english_substitutions(enable_wynn: bool = False) -> dict[str, str]:
    """
    Return the Old English typing substitutions.

    Args:
        enable_wynn: Also substitute w → ƿ (and W → Ƿ)
    """
    substitutions = dict(OLD_ENGLISH_SUBSTITUTIONS)
    if enable_wynn:
        substitutions.update(_WYNN_SUBSTITUTIONS)
    return substitutions


def find_digraph_match(
    before_cursor: str, substitutions: Mapping[str, str]
) -> Optional[DigraphMatch]:
    """
    Find the longest substitution key that ends the typed text.

    Matching ignores case. Keys are tried longest first.

    Example:
        >>> find_digraph_match("hello TH", {"th": "þ"})
        DigraphMatch(match='TH', digraph='th', replacement='Þ')
    """
    if not substitutions or not before_cursor:
        return None

    for digraph in sorted(substitutions, key=len, reverse=True):
        if not digraph:
            continue
        typed = before_cursor[-len(digraph):]
        if len(typed) == len(digraph) and typed.lower() == digraph.lower():
            return DigraphMatch(
                match=typed,
                digraph=digraph,
                replacement=apply_casing(typed, substitutions[digraph]),
            )
    return None


def substitute_trailing_digraph(
    before_cursor: str, substitutions: Mapping[str, str]
) -> str:
    """
    Replace a substitution key at the end of the typed text.

    Example:
        >>> substitute_trailing_digraph("Th", OLD_ENGLISH_SUBSTITUTIONS)
        'Þ'
    """
    line_start = before_cursor.rfind("\n") + 1
    if is_at_command(before_cursor[line_start:]):
        return before_cursor

    found = find_digraph_match(before_cursor, substitutions)
    if found is None:
        return before_cursor
    return before_cursor[: -len(found.match)] + found.replacement
