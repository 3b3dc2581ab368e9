"""Localization package: translations per locale and their registry.

Submodules:
    types        - PEP 695 type aliases (TranslationTree, NumerusSelector, ...)
    lookup       - Lookup string grammar
    localization - Localization (tiered translations of one locale)
    notifier     - Notifier protocol, InProcessNotifier, LocaleChangedEvent
    loading      - Translations loader boundary
    registry     - LocaleRegistry (registration, selection, current locale)

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from l10ntree.localization.loading import MappingTranslationsLoader
from l10ntree.localization.localization import Localization, default_numerus_selector
from l10ntree.localization.lookup import ParsedLookup, is_valid_lookup, parse_lookup
from l10ntree.localization.notifier import (
    InProcessNotifier,
    Listener,
    LocaleChangedEvent,
    Notifier,
)
from l10ntree.localization.registry import LocaleRegistry, default_registry
from l10ntree.localization.types import (
    AcceptedLocalesDetector,
    LookupPath,
    LookupResult,
    NumerusSelector,
    TranslationNode,
    TranslationsLoader,
    TranslationTree,
)

__all__ = [
    # Registry and translations
    "LocaleRegistry",
    "Localization",
    "default_registry",
    "default_numerus_selector",
    # Lookup grammar
    "ParsedLookup",
    "is_valid_lookup",
    "parse_lookup",
    # Notifications
    "InProcessNotifier",
    "Listener",
    "LocaleChangedEvent",
    "Notifier",
    # Loaders
    "MappingTranslationsLoader",
    # Type aliases for user code type annotations
    "AcceptedLocalesDetector",
    "LookupPath",
    "LookupResult",
    "NumerusSelector",
    "TranslationNode",
    "TranslationTree",
    "TranslationsLoader",
]
