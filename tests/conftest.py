"""Shared fixtures for scribe-runes tests."""

import pytest

from scribe_runes.runes import ScriptId, Transducer, get_transducer


@pytest.fixture
def futhorc() -> Transducer:
    """Return the shared Futhorc transducer."""
    return get_transducer(ScriptId.FUTHORC)


@pytest.fixture
def toy_transducer() -> Transducer:
    """Return a small transducer with nested digraph keys."""
    return Transducer({"a": "1", "ab": "2", "abc": "3", "b": "4"})


@pytest.fixture
def odd_inputs() -> list[str]:
    """Strings that exercise pass-through and edge handling."""
    return [
        "",
        " ",
        "\t\n  ",
        "12345",
        "!?.,;:",
        "日本語",
        "ἄνθρωπος",
        "Привет",
        "\U0001F600",
        "a\u0304\u0301",
        "<Futhorc>",
    ]


@pytest.fixture
def sample_document() -> str:
    """A document mixing blocks, line commands and plain text."""
    return (
        "Title line\n"
        "<Futhorc>\n"
        "  the thing\n"
        "</Futhorc>\n"
        "@gothic guth\n"
        "<Gothic>hvas</Gothic> and <Unknown>x</Unknown>\n"
    )
