"""Shared constants for l10ntree.

Centralized configuration constants used across the locale, tree and
localization modules. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Grammars: Locale identifier and lookup string patterns
- Locale defaults: Encoding, wildcard keys, placeholder locale
- Depth limits: Recursion protection for merging untrusted trees
- Events: Notification types published by the registry

Python 3.13+. Zero external dependencies.
"""

import re

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Grammars
    "LOCALE_PATTERN",
    "LOOKUP_PATTERN",
    # Locale defaults
    "DEFAULT_ENCODING",
    "DEFAULT_LOCALE_KEY",
    "WILDCARD_KEYS",
    "PLACEHOLDER_LOCALE",
    "DEFAULT_ACCEPTED_LOCALE",
    # Tree keys
    "FORBIDDEN_KEY",
    "SELECTOR_WILDCARD",
    "NUMERUS_SINGULAR",
    "NUMERUS_PLURAL",
    # Depth limits
    "MAX_TREE_DEPTH",
    # Events
    "LOCALE_CHANGED",
]

# ============================================================================
# GRAMMARS
# ============================================================================

# language[-_region][@.encoding], e.g. "de", "de-DE", "de_de@utf8", "en.UTF-8".
# re.ASCII keeps [a-z] under re.IGNORECASE from matching Unicode case folds
# such as U+212A KELVIN SIGN.
LOCALE_PATTERN: re.Pattern[str] = re.compile(
    r"\s*([a-z]{2,3})(?:[-_]([a-z]{2,3}))?(?:[@.]([a-z0-9-]+))?\s*",
    re.IGNORECASE | re.ASCII,
)

# "@some.path" optionally followed by "=inline fallback" consuming the rest.
LOOKUP_PATTERN: re.Pattern[str] = re.compile(
    r"\s*@\s*((?:[a-z0-9_-]+\.)*[a-z0-9_-]+)(\s*=\s*([\s\S]*))?\s*",
    re.IGNORECASE | re.ASCII,
)

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

DEFAULT_ENCODING: str = "utf8"

# Keys of a localized value mapping applying to every locale.
WILDCARD_KEYS: frozenset[str] = frozenset({"*", "any"})

# Key of a localized value mapping used when neither own tag nor wildcard match.
DEFAULT_LOCALE_KEY: str = "en"

# Locale of the empty localization synthesized when nothing is registered.
PLACEHOLDER_LOCALE: str = "any"

# Last resort of accepted-locale detection when environment provides nothing.
DEFAULT_ACCEPTED_LOCALE: str = "en"

# ============================================================================
# TREE KEYS
# ============================================================================

# Never merged into a tree of translations.
FORBIDDEN_KEY: str = "__proto__"

# Variant key matching any numerus or gender.
SELECTOR_WILDCARD: str = "*"

NUMERUS_SINGULAR: str = "singular"
NUMERUS_PLURAL: str = "plural"

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting of a translation tree accepted by merge().
# Real trees rarely exceed 6 levels (module.section.key.numerus.gender).
# 100 levels is almost certainly adversarial or malformed input.
MAX_TREE_DEPTH: int = 100

# ============================================================================
# EVENTS
# ============================================================================

LOCALE_CHANGED: str = "locale-changed"
