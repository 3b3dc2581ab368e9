"""Enumerations for l10ntree type-safe constants.

Python 3.13+.
"""

from enum import IntEnum, StrEnum


class LocaleMatch(IntEnum):
    """Specificity of a match between two locale identifiers.

    IntEnum members compare as plain integers: LocaleMatch.EXACT == 3 and
    higher values always describe a more specific match.
    """

    UNRELATED = 0
    """Different or missing language: "de" vs. "en"."""

    LANGUAGE = 1
    """Same language, both sides carry differing regions: "de-de" vs. "de-by"."""

    PARTIAL = 2
    """Same language, exactly one side lacks a region: "de" vs. "de-de"."""

    EXACT = 3
    """Same language and same region, or neither side has a region."""


class TranslationTier(StrEnum):
    """Tier of translations managed by a Localization.

    Tiers are listed in lookup priority order.
    """

    TEMPORARY = "temporary"
    """Highest-priority overlay, replaceable wholesale."""

    REGISTERED = "registered"
    """Primary translations provided on registration."""

    FALLBACK = "fallback"
    """Secondary translations consulted after the registered ones."""


__all__ = [
    "LocaleMatch",
    "TranslationTier",
]
