"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating call sites.

Python 3.13+.
"""

from collections.abc import Awaitable, Callable

from l10ntree.locale import Locale, LocaleLike
from l10ntree.tree import TranslationNode, TranslationTree

__all__ = [
    "AcceptedLocalesDetector",
    "LocaleLike",
    "LookupPath",
    "LookupResult",
    "NumerusSelector",
    "TranslationNode",
    "TranslationTree",
    "TranslationsLoader",
]

type LookupPath = str
"""Lookup string, e.g. '@animal.name' or '@animal.name=Fox'."""

type LookupResult = TranslationNode | None
"""Resolved translation, subtree, pass-through input or None on mismatch."""

type NumerusSelector = Callable[[float], str]
"""Maps a number of subjects to the key of the matching numerus variant."""

type TranslationsLoader = Callable[
    [Locale], TranslationTree | Awaitable[TranslationTree | None] | None
]
"""Provides translations of a locale synchronously or as awaitable, None if unsupported."""

type AcceptedLocalesDetector = Callable[[], list[str]]
"""Lists identifiers of locales accepted by the environment in preference order."""
