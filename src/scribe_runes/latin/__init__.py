"""
Classical Latin submodule.

Re-exports the inscription-style transforms.
"""

from scribe_runes.latin._rules import (
    to_classical_latin,
    to_classical_latin_extended,
    to_roman,
)

__all__ = [
    "to_classical_latin",
    "to_classical_latin_extended",
    "to_roman",
]
