"""l10ntree - Hierarchical translation lookups with numerus and gender variants.

Resolves lookup strings such as "@animal.name" against per-locale trees of
translations, selecting plural and gender variants, falling back across
temporary, registered and fallback translations, and picking the best
registered locale for a list of accepted locales.

Public API:
    Locale - Parsed locale identifier with specificity comparison
    Localization - Tiered translations of a single locale
    LocaleRegistry - Registration, selection and current locale
    default_registry - Process-wide LocaleRegistry
    merge - Validated deep merge of translation trees
    translate - Translate using a registry's current locale
    format_template - printf-style placeholder substitution

Exceptions:
    L10nError - Base exception class
    InvalidLocaleError - Malformed locale identifier
    TranslationTreeError - Malformed tree or merge conflict
    DuplicateLocaleError - Locale registered twice
    NoAcceptedLocaleError - No accepted locale could be loaded

Submodules:
    l10ntree.localization - Registry, lookup grammar, notifier, loaders
    l10ntree.diagnostics - Error types and diagnostic codes
    l10ntree.locale_utils - Environment locale detection, Babel helpers
"""

from .diagnostics import (
    DuplicateLocaleError,
    InvalidLocaleError,
    L10nError,
    NoAcceptedLocaleError,
    TranslationTreeError,
)
from .enums import LocaleMatch
from .filters import format_template, translate
from .locale import Locale
from .localization import Localization, LocaleRegistry, default_registry
from .tree import merge

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("l10ntree")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DuplicateLocaleError",
    "InvalidLocaleError",
    "L10nError",
    "Locale",
    "LocaleMatch",
    "LocaleRegistry",
    "Localization",
    "NoAcceptedLocaleError",
    "TranslationTreeError",
    "__version__",
    "default_registry",
    "format_template",
    "merge",
    "translate",
]
