"""Hypothesis strategies for l10ntree property-based testing.

Strategies are organized by domain:

- locales: Locale identifiers in all accepted spellings
- trees: Translation trees, keys and lookup strings

Usage:
    from tests.strategies import locale_identifiers, translation_trees
    from tests.strategies.trees import tree_keys, lookup_strings

Event-Emitting Strategies (HypoFuzz-Optimized):
    - locale_identifiers: Emits locale_shape=language|region|encoding|full
    - translation_trees: Emits tree_depth=N
"""

from .locales import (
    LANGUAGES,
    REGIONS,
    invalid_locale_identifiers,
    locale_identifiers,
    locale_tags,
)
from .trees import (
    lookup_paths,
    lookup_strings,
    translation_trees,
    tree_keys,
)

__all__ = [
    "LANGUAGES",
    "REGIONS",
    "invalid_locale_identifiers",
    "locale_identifiers",
    "locale_tags",
    "lookup_paths",
    "lookup_strings",
    "translation_trees",
    "tree_keys",
]
