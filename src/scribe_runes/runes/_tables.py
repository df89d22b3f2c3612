"""
Script identifiers and the bundled rune mapping tables.

Each table is a JSON file in ``data/`` of the form::

    {"name": "...", "digraphs": ["th", ...], "table": {"th": "ᚦ", ...}}

Tables are loaded once, validated, and handed out as read-only mappings.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping, Union

__all__ = ["ScriptId", "load_script", "load_table", "load_digraphs", "validate_table"]

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"


class ScriptId(str, Enum):
    """Target scripts with a bundled mapping table."""

    FUTHORC = "futhorc"
    ELDER_FUTHARK = "elder_futhark"
    YOUNGER_FUTHARK = "younger_futhark"
    MEDIEVAL_RUNES = "medieval_runes"
    GOTHIC = "gothic"

    @classmethod
    def from_name(cls, name: Union[str, "ScriptId"]) -> "ScriptId":
        """
        Resolve a script from an enum value, enum name or document marker.

        Matching ignores case, so "Futhorc", "ElderFuthark", "elder" and
        "ELDER_FUTHARK" all resolve.

        Raises:
            ValueError: if the name does not identify a script
        """
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        script = _ALIASES.get(key)
        if script is None:
            raise ValueError(
                f"Unknown script: {name!r}. "
                f"Expected one of: {', '.join(s.value for s in cls)}"
            )
        return script


# Lowercased names accepted by ScriptId.from_name
_ALIASES = {
    "futhorc": ScriptId.FUTHORC,
    "elder_futhark": ScriptId.ELDER_FUTHARK,
    "elderfuthark": ScriptId.ELDER_FUTHARK,
    "elder": ScriptId.ELDER_FUTHARK,
    "younger_futhark": ScriptId.YOUNGER_FUTHARK,
    "youngerfuthark": ScriptId.YOUNGER_FUTHARK,
    "younger": ScriptId.YOUNGER_FUTHARK,
    "medieval_runes": ScriptId.MEDIEVAL_RUNES,
    "medievalrunes": ScriptId.MEDIEVAL_RUNES,
    "medieval": ScriptId.MEDIEVAL_RUNES,
    "gothic": ScriptId.GOTHIC,
}


def validate_table(table: Mapping[str, str], digraphs: Iterable[str]) -> None:
    """
    Check the invariants every mapping table must hold.

    Raises:
        ValueError: on an empty or non-lowercase key, a digraph shorter
            than two characters, or a digraph that is not a key of the table
    """
    for key in table:
        if not key:
            raise ValueError("Mapping table keys must not be empty")
        # Input is folded to lowercase, so other keys could never match
        if key != key.lower():
            raise ValueError(f"Mapping table key must be lowercase: {key!r}")
    for digraph in digraphs:
        if len(digraph) < 2:
            raise ValueError(f"Digraph must have at least 2 characters: {digraph!r}")
        if digraph not in table:
            raise ValueError(f"Digraph {digraph!r} has no entry in the mapping table")


def _load_data(script: ScriptId) -> dict:
    """Load the raw JSON document for a script."""
    filepath = DATA_DIR / f"{script.value}.json"

    if not filepath.exists():
        raise FileNotFoundError(f"Mapping table not found: {filepath}")

    with open(filepath, "r", encoding="utf-8") as f:
        data = json.load(f)

    validate_table(data["table"], data["digraphs"])
    logger.debug(
        "Loaded %s table: %d keys, %d digraphs",
        script.value,
        len(data["table"]),
        len(data["digraphs"]),
    )
    return data


def load_script(
    script: Union[str, ScriptId],
) -> tuple[Mapping[str, str], tuple[str, ...]]:
    """Return the read-only mapping table and digraph set for a script."""
    data = _load_data(ScriptId.from_name(script))
    return MappingProxyType(dict(data["table"])), tuple(data["digraphs"])


def load_table(script: Union[str, ScriptId]) -> Mapping[str, str]:
    """Return the read-only mapping table for a script."""
    return load_script(script)[0]


def load_digraphs(script: Union[str, ScriptId]) -> tuple[str, ...]:
    """Return the digraph set declared for a script."""
    return load_script(script)[1]
