"""
Marker block and @marker line parsing.

Documents mark text for transliteration in two ways:

- Blocks: ``<Futhorc>text</Futhorc>``. The opening and closing tags must
  carry the same marker, the marker must be in the allow-list, and a block
  ends at the first matching close tag (no nesting).
- Line commands: ``@futhorc text`` at the start of a line. The whole line
  is replaced by the transliterated payload.

Parsing is permissive: unknown markers, stray angle brackets and unmatched
tags produce nothing and never raise.

Example:
    >>> from scribe_runes.markers import parse_blocks
    >>> parse_blocks("<Futhorc>hello</Futhorc>", ["Futhorc", "Gothic"])
    [MarkerBlock(marker='Futhorc', content='hello', start_offset=0, end_offset=24)]
"""

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Optional, Union

from scribe_runes.runes import ScriptId, get_transducer

__all__ = [
    "MarkerBlock",
    "LineCommand",
    "parse_blocks",
    "parse_line_commands",
    "is_at_command",
    "load_markers",
    "resolve_converter",
    "convert_blocks",
    "convert_line_commands",
]

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"

# Generic line marker that needs a caller-chosen script
RUNES_MARKER = "runes"

_AT_COMMAND_RE = re.compile(r"^@\w+")
_LINE_COMMAND_RE = re.compile(r"^@(\w+)\s+(.+)")

# =============================================================================
# Data Classes
# =============================================================================


@dataclass(frozen=True)
class MarkerBlock:
    """A paired ``<marker>...</marker>`` region of a document."""

    marker: str
    content: str
    start_offset: int
    end_offset: int

    @property
    def span(self) -> tuple[int, int]:
        return (self.start_offset, self.end_offset)


@dataclass(frozen=True)
class LineCommand:
    """An ``@marker payload`` line. Offsets exclude the line break."""

    marker: str
    payload: str
    line_number: int
    start_offset: int
    end_offset: int


# =============================================================================
# Marker Allow-list
# =============================================================================

_default_markers: Optional[tuple[str, ...]] = None


def load_markers() -> tuple[str, ...]:
    """Return the bundled block marker allow-list."""
    global _default_markers
    if _default_markers is None:
        filepath = DATA_DIR / "markers.json"
        if not filepath.exists():
            raise FileNotFoundError(f"Marker list not found: {filepath}")
        with open(filepath, "r", encoding="utf-8") as f:
            _default_markers = tuple(json.load(f))
        logger.debug("Loaded %d block markers", len(_default_markers))
    return _default_markers


# =============================================================================
# Parsing
# =============================================================================


def parse_blocks(
    text: str, allowed_markers: Optional[Iterable[str]] = None
) -> list[MarkerBlock]:
    """
    Find every ``<marker>...</marker>`` block in text.

    Blocks are found left to right and never overlap. Only opening tags of
    allowed markers are candidates; one with no matching close tag is
    skipped. Runs in time linear in the length of text.

    Args:
        text: Document text
        allowed_markers: Marker names to recognize (exact spelling). A
            single string is one marker. Defaults to the bundled allow-list.

    Returns:
        Blocks with trimmed content and offsets into text
    """
    if allowed_markers is None:
        allowed_markers = load_markers()
    elif isinstance(allowed_markers, str):
        allowed_markers = (allowed_markers,)
    allowed = frozenset(m for m in allowed_markers if m)
    if not allowed:
        return []

    open_tag_re = _open_tag_pattern(allowed)
    # Next known close tag per marker; -1 once a marker has none left
    next_close: dict[str, int] = {}
    blocks = []

    pos = 0
    while True:
        opening = open_tag_re.search(text, pos)
        if opening is None:
            break
        start, content_start = opening.span()
        marker = opening.group(1)
        close_tag = f"</{marker}>"

        close = next_close.get(marker)
        if close is None or (close != -1 and close < content_start):
            close = text.find(close_tag, content_start)
            next_close[marker] = close

        if close == -1:
            pos = start + 1
            continue

        end = close + len(close_tag)
        blocks.append(
            MarkerBlock(
                marker=marker,
                content=text[content_start:close].strip(),
                start_offset=start,
                end_offset=end,
            )
        )
        pos = end

    logger.debug("Parsed %d marker blocks", len(blocks))
    return blocks


def _open_tag_pattern(markers: frozenset[str]) -> re.Pattern:
    """Compile a pattern matching ``<marker>`` for any of the markers."""
    alternatives = "|".join(re.escape(m) for m in sorted(markers, key=len, reverse=True))
    return re.compile(f"<({alternatives})>")


def is_at_command(line: str) -> bool:
    """Check if a line starts with an ``@marker`` command."""
    return _AT_COMMAND_RE.match(line) is not None


def parse_line_commands(text: str) -> list[LineCommand]:
    """
    Find every ``@marker payload`` line in text.

    Marker names are lowercased. Lines with a marker but no payload are
    not commands.
    """
    commands = []
    offset = 0
    for line_number, raw_line in enumerate(text.split("\n")):
        line = raw_line[:-1] if raw_line.endswith("\r") else raw_line
        match = _LINE_COMMAND_RE.match(line)
        if match:
            commands.append(
                LineCommand(
                    marker=match.group(1).lower(),
                    payload=match.group(2),
                    line_number=line_number,
                    start_offset=offset,
                    end_offset=offset + len(line),
                )
            )
        offset += len(raw_line) + 1
    return commands


# =============================================================================
# Conversion
# =============================================================================


def resolve_converter(marker: str) -> Optional[Callable[[str], str]]:
    """Return the transliteration function for a marker, or None."""
    try:
        script = ScriptId.from_name(marker)
    except ValueError:
        return None
    return get_transducer(script).transliterate


def _substitute(text: str, edits: list[tuple[int, int, str]]) -> str:
    """Apply non-overlapping (start, end, replacement) edits sorted by start."""
    parts = []
    pos = 0
    for start, end, replacement in edits:
        parts.append(text[pos:start])
        parts.append(replacement)
        pos = end
    parts.append(text[pos:])
    return "".join(parts)


def convert_blocks(text: str, allowed_markers: Optional[Iterable[str]] = None) -> str:
    """
    Replace every marker block with its transliterated content.

    Blocks whose marker has no transducer are left as they are.

    Example:
        >>> convert_blocks("A <Futhorc>thing</Futhorc>.")
        'A ᚦᛁᛝ.'
    """
    edits = []
    for block in parse_blocks(text, allowed_markers):
        convert = resolve_converter(block.marker)
        if convert is None:
            logger.debug("No transducer for marker %r", block.marker)
            continue
        edits.append((block.start_offset, block.end_offset, convert(block.content)))
    return _substitute(text, edits)


def convert_line_commands(
    text: str, default_script: Optional[Union[str, ScriptId]] = None
) -> str:
    """
    Replace every ``@marker payload`` line with its transliterated payload.

    Args:
        text: Document text
        default_script: Script used for generic ``@runes`` lines. Without
            one those lines are left unchanged.

    Returns:
        Text with command lines converted; line breaks are preserved
    """
    edits = []
    for command in parse_line_commands(text):
        if command.marker == RUNES_MARKER:
            if default_script is None:
                logger.info(
                    "Skipping @runes on line %d: no default script",
                    command.line_number + 1,
                )
                continue
            convert = get_transducer(default_script).transliterate
        else:
            convert = resolve_converter(command.marker)
            if convert is None:
                continue
        edits.append((command.start_offset, command.end_offset, convert(command.payload)))
    return _substitute(text, edits)
