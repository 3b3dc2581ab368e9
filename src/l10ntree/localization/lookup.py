"""Lookup string grammar.

A lookup addresses a node in a tree of translations by a period-separated
path of keys prefixed with "@", optionally followed by an inline fallback:

    @animal.name
    @ animal.name = Fox, used when no translation exists

Strings not matching this grammar are not lookups at all; they are passed
through unchanged by Localization.lookup().

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from l10ntree.constants import LOOKUP_PATTERN

__all__ = ["ParsedLookup", "is_valid_lookup", "parse_lookup"]


@dataclass(frozen=True, slots=True)
class ParsedLookup:
    """Components of a valid lookup string.

    Attributes:
        segments: Lower-cased keys of the addressed path
        inline_fallback: Text following "=", None if the lookup has none.
            May be empty: "@missing=" falls back to "".
    """

    segments: tuple[str, ...]
    inline_fallback: str | None = None

    @property
    def path(self) -> str:
        """Period-separated path of keys."""
        return ".".join(self.segments)


def parse_lookup(text: object) -> ParsedLookup | None:
    """Parse a lookup string.

    Args:
        text: Candidate lookup string

    Returns:
        ParsedLookup, or None if text is not a string matching the grammar

    Example:
        >>> parse_lookup("@Animal.Name=The fox")
        ParsedLookup(segments=('animal', 'name'), inline_fallback='The fox')
        >>> parse_lookup("plain text") is None
        True
    """
    if not isinstance(text, str):
        return None

    match = LOOKUP_PATTERN.fullmatch(text)
    if match is None:
        return None

    path, assignment, fallback = match.groups()
    return ParsedLookup(
        segments=tuple(segment.lower() for segment in path.split(".")),
        inline_fallback=fallback if assignment is not None else None,
    )


def is_valid_lookup(text: object) -> bool:
    """Detect if a value is a proper lookup string.

    Args:
        text: Value to test

    Returns:
        True if text is a string matching the lookup grammar
    """
    return parse_lookup(text) is not None
