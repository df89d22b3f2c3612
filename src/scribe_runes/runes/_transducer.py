"""
Table-driven rune transducer.

One scanner serves every script: it is parameterized by a mapping table and
its digraph set, and converts folded lowercase text left to right, always
preferring the longest table key that matches at the cursor.

Example:
    >>> from scribe_runes.runes import transliterate
    >>> transliterate("futhorc", "thing")
    'ᚦᛁᛝ'

    >>> from scribe_runes.runes import Transducer
    >>> t = Transducer({"a": "X", "aa": "Y"})
    >>> t.transliterate("aaa")
    'YX'
"""

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional, Union

from scribe_runes._strip import strip_diacritics
from scribe_runes.runes._tables import ScriptId, load_script, validate_table

__all__ = [
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
]

# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class Segment:
    """One unit of transducer output and the source text it came from."""

    position: int
    source: str
    target: str
    rule: str  # "digraph", "letter" or "passthrough"


@dataclass
class TransliterationResult:
    """Detailed result from transliteration."""

    original: str
    normalized: str
    output: str
    segments: list[Segment] = field(default_factory=list)

    @property
    def unmapped(self) -> list[str]:
        """Letters that had no table entry and were passed through."""
        return [
            s.source for s in self.segments
            if s.rule == "passthrough" and s.source.isalpha()
        ]


# =============================================================================
# Transducer
# =============================================================================


class Transducer:
    """
    Longest-match-first transducer over a single mapping table.

    Args:
        table: Source token → target string. Keys are lowercase.
        digraphs: Multi-character keys to try before single characters.
            Defaults to every key of length 2 or more.

    Raises:
        ValueError: if the table has an empty key or a digraph is not a key
    """

    def __init__(
        self,
        table: Mapping[str, str],
        digraphs: Optional[Iterable[str]] = None,
    ):
        if digraphs is None:
            digraphs = [key for key in table if len(key) > 1]
        digraphs = frozenset(digraphs)
        validate_table(table, digraphs)

        self.table = table
        self.digraphs = digraphs
        # Candidate lengths, strictly decreasing
        self._lengths = sorted({len(d) for d in digraphs}, reverse=True)

    def _match(self, text: str, idx: int) -> tuple[str, str, str]:
        """Return (source, target, rule) for the unit starting at idx."""
        for length in self._lengths:
            candidate = text[idx : idx + length]
            if len(candidate) == length and candidate in self.digraphs:
                return (candidate, self.table[candidate], "digraph")

        char = text[idx]
        target = self.table.get(char)
        if target is None:
            return (char, char, "passthrough")
        return (char, target, "letter")

    def transliterate(self, text: str) -> str:
        """
        Convert text to the target script.

        The text is folded with strip_diacritics() first; characters with no
        table entry (digits, punctuation, whitespace, foreign letters) pass
        through unchanged.

        Args:
            text: Input text in any casing

        Returns:
            Transliterated text
        """
        text = strip_diacritics(text)
        if not text:
            return text

        out = []
        i = 0
        while i < len(text):
            source, target, _ = self._match(text, i)
            out.append(target)
            i += len(source)

        return "".join(out)

    def transliterate_detailed(self, text: str) -> TransliterationResult:
        """
        Transliterate with a record of every emitted unit.

        Segment positions index into the normalized text.

        Example:
            >>> result = get_transducer("futhorc").transliterate_detailed("king")
            >>> result.output
            'kᛁᛝ'
            >>> result.unmapped
            ['k']
        """
        normalized = strip_diacritics(text)
        segments = []
        i = 0
        while i < len(normalized):
            source, target, rule = self._match(normalized, i)
            segments.append(Segment(position=i, source=source, target=target, rule=rule))
            i += len(source)

        return TransliterationResult(
            original=text,
            normalized=normalized,
            output="".join(s.target for s in segments),
            segments=segments,
        )

    def __repr__(self) -> str:
        return f"Transducer(keys={len(self.table)}, digraphs={sorted(self.digraphs)})"


# =============================================================================
# Module-level Convenience Functions
# =============================================================================

# Shared instances, created on first use
_transducers: dict[ScriptId, Transducer] = {}


def get_transducer(script: Union[str, ScriptId]) -> Transducer:
    """Return the shared transducer for a script."""
    script = ScriptId.from_name(script)
    transducer = _transducers.get(script)
    if transducer is None:
        transducer = Transducer(*load_script(script))
        _transducers[script] = transducer
    return transducer


def transliterate(script: Union[str, ScriptId], text: str) -> str:
    """
    Transliterate text into the given script.

    Args:
        script: A ScriptId or any name accepted by ScriptId.from_name
        text: Latin-alphabet input

    Returns:
        Text in the target script

    Example:
        >>> transliterate(ScriptId.FUTHORC, "the king!")
        'ᚦᛖ kᛁᛝ!'
    """
    return get_transducer(script).transliterate(text)


def to_futhorc(text: str) -> str:
    """Transliterate into Anglo-Saxon Futhorc."""
    return transliterate(ScriptId.FUTHORC, text)


def to_elder_futhark(text: str) -> str:
    """Transliterate into the Elder Futhark."""
    return transliterate(ScriptId.ELDER_FUTHARK, text)


def to_younger_futhark(text: str) -> str:
    """Transliterate into the Younger Futhark."""
    return transliterate(ScriptId.YOUNGER_FUTHARK, text)


def to_medieval_runes(text: str) -> str:
    return transliterate(ScriptId.MEDIEVAL_RUNES, text)


def to_gothic(text: str) -> str:
    return transliterate(ScriptId.GOTHIC, text)
