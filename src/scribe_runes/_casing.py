"""
Casing transfer between a typed token and its replacement.

The transducers work on lowercase text only; callers that substitute a
word or digraph while keeping the writer's casing use apply_casing().
"""

from __future__ import annotations

from enum import Enum

__all__ = ["CasingPattern", "apply_casing", "detect_casing"]


class CasingPattern(Enum):
    """Casing of an input token, as far as replacement is concerned."""

    ALL_LOWER = "lower"
    INITIAL_CAPITAL = "initial"
    ALL_UPPER = "upper"


def detect_casing(token: str) -> CasingPattern:
    """
    Classify the casing of a token.

    A multi-character token equal to its own upper-case form is ALL_UPPER.
    Otherwise an upper-case first character makes it INITIAL_CAPITAL
    (this covers single capitals like "T"). Everything else, including the
    empty string, is ALL_LOWER.
    """
    if not token:
        return CasingPattern.ALL_LOWER
    if len(token) > 1 and token == token.upper():
        return CasingPattern.ALL_UPPER
    if token[0] == token[0].upper():
        return CasingPattern.INITIAL_CAPITAL
    return CasingPattern.ALL_LOWER


def apply_casing(token: str, replacement: str) -> str:
    """
    Reapply the casing pattern of `token` onto `replacement`.

    Args:
        token: The text the writer typed
        replacement: The lowercase replacement string

    Returns:
        The replacement upper-cased in full, with its first character
        capitalized, or unchanged, following detect_casing()

    Example:
        >>> apply_casing("Test", "example")
        'Example'
        >>> apply_casing("TEST", "example")
        'EXAMPLE'
        >>> apply_casing("test", "example")
        'example'
    """
    if not replacement:
        return replacement

    pattern = detect_casing(token)
    if pattern is CasingPattern.ALL_UPPER:
        return replacement.upper()
    if pattern is CasingPattern.INITIAL_CAPITAL:
        return replacement[0].upper() + replacement[1:]
    return replacement
