"""
spaCy integration for scribe-runes.

Provides pipeline components for rune transliteration, classical Latin
orthography and marker block conversion.

Example:
    >>> import spacy
    >>> nlp = spacy.blank("en")
    >>> nlp.add_pipe("rune_transliterator", config={"script": "futhorc"})
    >>> doc = nlp("the thing")
    >>> doc._.runes
    'ᚦᛖ ᚦᛁᛝ'
"""

from typing import List, Optional

from spacy.language import Language
from spacy.tokens import Doc, Token

from scribe_runes.latin._rules import to_classical_latin, to_classical_latin_extended
from scribe_runes.markers._parser import convert_blocks, parse_blocks
from scribe_runes.runes._tables import ScriptId
from scribe_runes.runes._transducer import get_transducer

__all__ = [
    "RuneTransliteratorComponent",
    "ClassicalLatinComponent",
    "MarkerBlockComponent",
    "create_rune_transliterator",
    "create_classical_latin",
    "create_marker_blocks",
]


# =============================================================================
# Rune Transliterator Component
# =============================================================================


@Language.factory(
    "rune_transliterator",
    default_config={"script": "futhorc"},
    assigns=["doc._.runes", "token._.runes"],
)
def create_rune_transliterator(
    nlp: Language,
    name: str,
    script: str = "futhorc",
) -> "RuneTransliteratorComponent":
    """Create a rune transliterator pipeline component."""
    return RuneTransliteratorComponent(nlp, name, script=script)


class RuneTransliteratorComponent:
    """
    spaCy pipeline component for rune transliteration.

    Extensions:
        - Doc._.runes: Full transliterated text.
        - Token._.runes: Transliterated token text.
    """

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        script: str = "futhorc",
    ) -> None:
        self.name = name
        # Raises ValueError for unknown scripts
        self.script = ScriptId.from_name(script)
        self._transducer = get_transducer(self.script)

        if not Doc.has_extension("runes"):
            Doc.set_extension("runes", default=None)
        if not Token.has_extension("runes"):
            Token.set_extension("runes", default=None)

    def __call__(self, doc: Doc) -> Doc:
        doc._.runes = self._transducer.transliterate(doc.text)

        for token in doc:
            token._.runes = self._transducer.transliterate(token.text)

        return doc

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "RuneTransliteratorComponent":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "RuneTransliteratorComponent":
        return self


# =============================================================================
# Classical Latin Component
# =============================================================================


@Language.factory(
    "classical_latin",
    default_config={"extended": False},
    assigns=["doc._.classical_latin", "token._.classical_latin"],
)
def create_classical_latin(
    nlp: Language,
    name: str,
    extended: bool = False,
) -> "ClassicalLatinComponent":
    """Create a classical Latin orthography pipeline component."""
    return ClassicalLatinComponent(nlp, name, extended=extended)


class ClassicalLatinComponent:
    """
    spaCy pipeline component for classical Latin orthography.

    Extensions:
        - Doc._.classical_latin: Full transformed text.
        - Token._.classical_latin: Transformed token text. Tokens that are
          pure punctuation transform to the empty string.
    """

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        extended: bool = False,
    ) -> None:
        self.name = name
        self.extended = extended
        self._transform = to_classical_latin_extended if extended else to_classical_latin

        if not Doc.has_extension("classical_latin"):
            Doc.set_extension("classical_latin", default=None)
        if not Token.has_extension("classical_latin"):
            Token.set_extension("classical_latin", default=None)

    def __call__(self, doc: Doc) -> Doc:
        doc._.classical_latin = self._transform(doc.text)

        for token in doc:
            token._.classical_latin = self._transform(token.text)

        return doc

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "ClassicalLatinComponent":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "ClassicalLatinComponent":
        return self


# =============================================================================
# Marker Block Component
# =============================================================================


@Language.factory(
    "marker_blocks",
    default_config={"markers": None},
    assigns=["doc._.marker_blocks", "doc._.converted"],
)
def create_marker_blocks(
    nlp: Language,
    name: str,
    markers: Optional[List[str]] = None,
) -> "MarkerBlockComponent":
    """Create a marker block pipeline component."""
    return MarkerBlockComponent(nlp, name, markers=markers)


class MarkerBlockComponent:
    """
    spaCy pipeline component that finds and converts marker blocks.

    Extensions:
        - Doc._.marker_blocks: List of MarkerBlock found in the text.
        - Doc._.converted: Text with every block replaced by its
          transliteration.
    """

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        markers: Optional[List[str]] = None,
    ) -> None:
        self.name = name
        self.markers = tuple(markers) if markers is not None else None

        if not Doc.has_extension("marker_blocks"):
            Doc.set_extension("marker_blocks", default=None)
        if not Doc.has_extension("converted"):
            Doc.set_extension("converted", default=None)

    def __call__(self, doc: Doc) -> Doc:
        doc._.marker_blocks = parse_blocks(doc.text, self.markers)
        doc._.converted = convert_blocks(doc.text, self.markers)
        return doc

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "MarkerBlockComponent":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "MarkerBlockComponent":
        return self


# =============================================================================
# Utility Functions
# =============================================================================


def get_transliterator_pipe(nlp: Language) -> Optional[RuneTransliteratorComponent]:
    """Get the rune transliterator component from a pipeline."""
    if "rune_transliterator" in nlp.pipe_names:
        return nlp.get_pipe("rune_transliterator")
    return None
