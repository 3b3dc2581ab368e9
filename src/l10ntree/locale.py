"""Locale identifiers: parsing, specificity comparison and value selection.

A Locale is an immutable value describing language, optional region and
encoding of a locale. Identifiers follow the compact grammar

    language[-_region][@.encoding]

with 2-3 letter language and region, matched case-insensitively. All parts
are lower-cased, so "de-DE", "de_de" and "DE-de@UTF8" describe the same
locale tag "de-de".

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from l10ntree.constants import (
    DEFAULT_ENCODING,
    DEFAULT_LOCALE_KEY,
    LOCALE_PATTERN,
    WILDCARD_KEYS,
)
from l10ntree.diagnostics import ErrorTemplate, InvalidLocaleError
from l10ntree.enums import LocaleMatch
from l10ntree.locale_utils import get_accepted_locales, get_display_name

if TYPE_CHECKING:
    import re

__all__ = ["Locale", "LocaleLike"]

type LocaleLike = str | Locale
"""Locale identifier string or already parsed Locale."""


def _join_tag(language: str, region: str | None) -> str:
    return f"{language}-{region}" if region else language


@dataclass(frozen=True, slots=True)
class Locale:
    """Immutable description of a single locale.

    Construct via Locale.parse() rather than directly; the constructor does
    not validate its arguments.

    Example:
        >>> locale = Locale.parse("de_DE.UTF-8")
        >>> locale.tag
        'de-de'
        >>> locale.full_tag
        'de-de@utf-8'
        >>> Locale.compare("de", "de-at")
        <LocaleMatch.PARTIAL: 2>

    Attributes:
        language: 2-3 lowercase letters, always present
        region: 2-3 lowercase letters or None
        explicit_encoding: Encoding as given in the identifier, or None
    """

    language: str
    region: str | None = None
    explicit_encoding: str | None = None

    @classmethod
    def parse(cls, identifier: LocaleLike, case_insensitive: bool = False) -> Locale:
        """Parse a locale identifier.

        Args:
            identifier: Identifier string, or a Locale returned unchanged
            case_insensitive: Accepted for API compatibility only; matching always ignores case

        Returns:
            Parsed Locale

        Raises:
            InvalidLocaleError: If identifier doesn't match the locale grammar
        """
        if isinstance(identifier, Locale):
            return identifier
        if not isinstance(identifier, str):
            raise InvalidLocaleError(ErrorTemplate.invalid_locale(identifier))

        match = cls._match(identifier.lower() if case_insensitive else identifier)
        if match is None:
            raise InvalidLocaleError(ErrorTemplate.invalid_locale(identifier))

        language, region, encoding = match.groups()
        return cls(
            language=language.lower(),
            region=region.lower() if region else None,
            explicit_encoding=encoding.lower() if encoding else None,
        )

    @staticmethod
    def _match(identifier: str) -> re.Match[str] | None:
        return LOCALE_PATTERN.fullmatch(identifier)

    @classmethod
    def is_valid(cls, identifier: object) -> bool:
        """Detect if a value is a locale identifier string.

        Args:
            identifier: Value to test

        Returns:
            True if identifier is a string matching the locale grammar
        """
        return isinstance(identifier, str) and cls._match(identifier) is not None

    @property
    def encoding(self) -> str:
        """Encoding to use with the locale, "utf8" unless given explicitly."""
        return self.explicit_encoding or DEFAULT_ENCODING

    @property
    def tag(self) -> str:
        """Tag of the locale: language[-region]."""
        return _join_tag(self.language, self.region)

    @property
    def full_tag(self) -> str:
        """Tag of the locale including its explicitly given encoding."""
        if self.explicit_encoding:
            return f"{self.tag}@{self.explicit_encoding}"
        return self.tag

    @property
    def display_name(self) -> str | None:
        """English name of the locale from CLDR data, None if unknown."""
        return get_display_name(self.tag)

    def __str__(self) -> str:
        return self.tag

    @classmethod
    def compare(cls, first: LocaleLike | None, second: LocaleLike | None) -> LocaleMatch:
        """Rank how specifically two locale identifiers match each other.

        Never raises: missing or malformed identifiers are UNRELATED.

        Args:
            first: First locale to compare
            second: Second locale to compare

        Returns:
            UNRELATED if languages differ or either side is invalid,
            LANGUAGE if languages match but both regions differ,
            PARTIAL if exactly one side lacks a region,
            EXACT if regions match or both sides lack one.

        Example:
            >>> Locale.compare("de-de", "de-by")
            <LocaleMatch.LANGUAGE: 1>
            >>> Locale.compare("de", "de-de")
            <LocaleMatch.PARTIAL: 2>
        """
        if not first or not second:
            return LocaleMatch.UNRELATED

        try:
            one = cls.parse(first)
            other = cls.parse(second)
        except InvalidLocaleError:
            return LocaleMatch.UNRELATED

        if one.language != other.language:
            return LocaleMatch.UNRELATED

        if one.region and other.region:
            return LocaleMatch.EXACT if one.region == other.region else LocaleMatch.LANGUAGE

        return LocaleMatch.PARTIAL if one.region or other.region else LocaleMatch.EXACT

    @staticmethod
    def list_accepted(detector: Callable[[], list[str]] | None = None) -> list[str]:
        """List identifiers of locales preferred by the runtime environment.

        Args:
            detector: Callable providing the list; defaults to environment
                detection via get_accepted_locales()

        Returns:
            Locale identifiers in preference order
        """
        return (detector or get_accepted_locales)()

    def select_localized[T](self, value: Mapping[str, T] | T) -> T | Mapping[str, T]:
        """Pick this locale's variant of a value providing one per locale.

        Keys of a mapping are normalized to language[-region] before being
        compared with this locale's tag. Without exact match the wildcard
        entry ("*" or "any") is used, then an "en" entry. Values that are
        not mappings, or provide none of these keys, are returned unchanged.

        Args:
            value: Mapping of locale keys to values, or any other value

        Returns:
            Selected variant or the provided value

        Example:
            >>> Locale.parse("de").select_localized({"en": "Fox", "de": "Fuchs"})
            'Fuchs'
            >>> Locale.parse("fr").select_localized({"en": "Fox", "de": "Fuchs"})
            'Fox'
        """
        if not isinstance(value, Mapping):
            return value

        wildcard: T | None = None
        fallback: T | None = None

        for key, variant in value.items():
            if not isinstance(key, str):
                continue

            normalized = key.strip().lower()
            match = self._match(normalized)
            if match:
                normalized = _join_tag(match.group(1), match.group(2))

            if normalized == self.tag:
                return variant
            if normalized in WILDCARD_KEYS:
                wildcard = variant
            elif normalized == DEFAULT_LOCALE_KEY:
                fallback = variant

        if wildcard is not None:
            return wildcard
        if fallback is not None:
            return fallback
        return value
