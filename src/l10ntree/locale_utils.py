"""Locale utilities backed by Babel and the process environment.

Centralizes the environment-specific parts of locale handling:
- Detection of the locales accepted by the runtime environment
- Cached access to Babel's CLDR data for informational lookups

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from l10ntree.constants import DEFAULT_ACCEPTED_LOCALE, LOCALE_PATTERN

if TYPE_CHECKING:
    from babel import Locale as BabelLocale

__all__ = [
    "clear_locale_cache",
    "get_accepted_locales",
    "get_babel_locale",
    "get_display_name",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert a hyphenated locale tag to POSIX format for Babel.

    Args:
        locale_code: Locale tag (e.g., "de-de", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "de_de", "pt_BR")

    Example:
        >>> normalize_locale("en-us")
        'en_us'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> BabelLocale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (hyphenated or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Drop all cached Babel Locale objects."""
    get_babel_locale.cache_clear()


def get_display_name(locale_code: str, display_locale: str = "en") -> str | None:
    """Look up the human-readable name of a locale in CLDR data.

    Args:
        locale_code: Locale whose name is requested
        display_locale: Locale the name is rendered in

    Returns:
        Display name (e.g., "German (Germany)"), None if Babel doesn't know
        either locale.

    Example:
        >>> get_display_name("de-de")
        'German (Germany)'
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    try:
        locale = get_babel_locale(locale_code)
        return locale.get_display_name(get_babel_locale(display_locale))
    except (UnknownLocaleError, ValueError):
        return None


def get_accepted_locales() -> list[str]:
    """Detect locales accepted by the runtime environment in preference order.

    Detection order:
    1. LANGUAGE environment variable (colon-separated list, GNU gettext)
    2. Babel's default_locale() for LC_MESSAGES (LC_ALL, LC_MESSAGES, LANG)
    3. LOCALE environment variable
    4. DEFAULT_ACCEPTED_LOCALE ("en") if nothing else applies

    Entries not matching the locale grammar (e.g. "C", "POSIX",
    "en_US_POSIX") are dropped; duplicates are removed keeping the first
    occurrence.

    Returns:
        Non-empty list of locale identifiers

    Example:
        >>> import os
        >>> os.environ["LANGUAGE"] = "de_DE:en"
        >>> get_accepted_locales()[:2]
        ['de_DE', 'en']
    """
    from babel.core import default_locale  # noqa: PLC0415

    candidates: list[str] = []

    language = os.environ.get("LANGUAGE", "")
    candidates.extend(part for part in language.split(":") if part)

    detected = default_locale("LC_MESSAGES")
    if detected:
        candidates.append(detected)

    explicit = os.environ.get("LOCALE")
    if explicit:
        candidates.append(explicit)

    accepted = [code for code in candidates if LOCALE_PATTERN.fullmatch(code)]
    if not accepted:
        return [DEFAULT_ACCEPTED_LOCALE]

    # dict.fromkeys() removes duplicates while maintaining insertion order
    return list(dict.fromkeys(accepted))
