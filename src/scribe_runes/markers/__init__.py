"""
Marker parsing submodule.

Re-exports the block and line-command parsers and the converters built on
them.
"""

from scribe_runes.markers._parser import (
    LineCommand,
    MarkerBlock,
    convert_blocks,
    convert_line_commands,
    is_at_command,
    load_markers,
    parse_blocks,
    parse_line_commands,
    resolve_converter,
)

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
