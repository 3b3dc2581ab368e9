"""Single-locale translations with tiered lookup resolution.

A Localization manages three independent trees of translations for one
locale, consulted in priority order on every lookup:

1. temporary  - overlay replaceable at any time (e.g. preview of edits)
2. registered - primary translations provided on registration
3. fallback   - secondary translations (e.g. generic texts of a product)

After the trees, the lookup's inline fallback ("@key=text") or the
explicitly provided fallback is used.

Numerus and gender variants:
    A node may provide variants per numerus and, nested below, per gender:

        name:
          singular: {male: Fuchs, female: Füchsin}
          plural:   {male: Füchse, female: Füchsinnen}

    Numerus is resolved before gender. A tree nesting gender above numerus
    doesn't resolve when both are requested. Either level may provide a
    "*" variant matching any numerus or gender.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from l10ntree.constants import NUMERUS_PLURAL, NUMERUS_SINGULAR, SELECTOR_WILDCARD
from l10ntree.diagnostics import ErrorTemplate, InvalidTranslationsError
from l10ntree.enums import TranslationTier
from l10ntree.locale import Locale
from l10ntree.localization.lookup import parse_lookup
from l10ntree.tree import merge

if TYPE_CHECKING:
    from l10ntree.localization.types import (
        LookupPath,
        LookupResult,
        NumerusSelector,
        TranslationNode,
        TranslationTree,
    )

__all__ = ["Localization", "default_numerus_selector"]

logger = logging.getLogger(__name__)


def default_numerus_selector(number: float) -> str:
    """Select "singular" for exactly one subject, "plural" otherwise.

    Args:
        number: Number of subjects

    Returns:
        Key of the numerus variant
    """
    return NUMERUS_SINGULAR if float(number) == 1 else NUMERUS_PLURAL


def _select_variant(node: TranslationNode | None, key: str) -> TranslationNode | None:
    """Descend into the variant named key, or the wildcard variant."""
    if not isinstance(node, dict):
        return node
    if key in node:
        return node[key]
    return node.get(SELECTOR_WILDCARD)


class Localization:
    """Translations of a single locale.

    Usually created via LocaleRegistry.register() rather than directly.

    Example:
        >>> l10n = Localization(Locale.parse("de"), {
        ...     "animal": {"name": {"singular": "Fuchs", "plural": "Füchse"}},
        ... })
        >>> l10n.lookup("@animal.name", number=2)
        'Füchse'
        >>> l10n.lookup("@animal.color=brown")
        'brown'
        >>> l10n.lookup("not a lookup", "ignored")
        'not a lookup'

    Attributes:
        locale: Managed locale
        numerus_selector: Maps a number of subjects to a numerus variant key
    """

    __slots__ = ("_fallback", "_locale", "_numerus_selector", "_temporary", "_tree")

    def __init__(
        self,
        locale: Locale,
        tree: Mapping[str, Any],
        *,
        numerus_selector: NumerusSelector | None = None,
        fallback: Mapping[str, Any] | None = None,
        temporary: Mapping[str, Any] | None = None,
    ) -> None:
        """Initialize translations of a locale.

        All provided trees are merged into fresh trees, so later changes to
        the provided mappings don't affect this localization.

        Args:
            locale: Managed locale
            tree: Initial registered translations
            numerus_selector: Numerus policy, default_numerus_selector if None
            fallback: Initial fallback translations
            temporary: Initial temporary translations

        Raises:
            InvalidTranslationsError: If tree is not a mapping
            TypeError: If locale is not a Locale or numerus_selector not callable
            TranslationTreeError: If any tree is malformed
        """
        if not isinstance(locale, Locale):
            msg = f"Expected Locale, got {type(locale).__name__}"
            raise TypeError(msg)

        if not isinstance(tree, Mapping):
            raise InvalidTranslationsError(ErrorTemplate.invalid_translations(tree))

        if numerus_selector is not None and not callable(numerus_selector):
            msg = "Invalid numerus selector callback"
            raise TypeError(msg)

        self._locale = locale
        self._numerus_selector: NumerusSelector = numerus_selector or default_numerus_selector
        self._tree: TranslationTree = merge({}, tree)
        self._fallback: TranslationTree = merge({}, fallback)
        self._temporary: TranslationTree = merge({}, temporary)

    def __repr__(self) -> str:
        return f"Localization(locale={self._locale.tag!r})"

    @property
    def locale(self) -> Locale:
        """Managed locale."""
        return self._locale

    @property
    def tag(self) -> str:
        """Tag of managed locale."""
        return self._locale.tag

    @property
    def numerus_selector(self) -> NumerusSelector:
        """Numerus policy of this locale."""
        return self._numerus_selector

    @property
    def tree(self) -> TranslationTree:
        """Registered translations (live; prefer update_translations() to modify)."""
        return self._tree

    @property
    def fallback(self) -> TranslationTree:
        """Fallback translations (live)."""
        return self._fallback

    @property
    def temporary(self) -> TranslationTree:
        """Temporary translations (live)."""
        return self._temporary

    def update_translations(self, tree: Mapping[str, Any] | None) -> Localization:
        """Merge tree into the registered translations.

        Returns:
            self, for chaining
        """
        merge(self._tree, tree)
        return self

    def update_fallbacks(self, tree: Mapping[str, Any] | None) -> Localization:
        """Merge tree into the fallback translations.

        Returns:
            self, for chaining
        """
        merge(self._fallback, tree)
        return self

    def update_temporary(self, tree: Mapping[str, Any] | None) -> Localization:
        """Merge tree into the temporary translations.

        Returns:
            self, for chaining
        """
        merge(self._temporary, tree)
        return self

    def drop_temporary(self) -> Localization:
        """Discard all temporary translations.

        Returns:
            self, for chaining
        """
        self._temporary = {}
        return self

    def _tiers(self) -> tuple[tuple[TranslationTier, TranslationTree], ...]:
        return (
            (TranslationTier.TEMPORARY, self._temporary),
            (TranslationTier.REGISTERED, self._tree),
            (TranslationTier.FALLBACK, self._fallback),
        )

    @staticmethod
    def _walk(tree: TranslationTree, segments: tuple[str, ...]) -> TranslationNode | None:
        node: TranslationNode = tree
        for segment in segments:
            if not isinstance(node, dict) or segment not in node:
                return None
            node = node[segment]
        return node

    def has(self, path: str) -> bool:
        """Detect if any tier provides a node for a lookup string.

        Args:
            path: Lookup string; its inline fallback is ignored

        Returns:
            True if temporary, registered or fallback translations
            contain the addressed node
        """
        parsed = parse_lookup(path)
        if parsed is None:
            return False
        return any(self._walk(tree, parsed.segments) is not None for _, tree in self._tiers())

    def lookup(
        self,
        path: LookupPath | Mapping[str, LookupPath],
        fallback: str | None = None,
        *,
        number: float | None = None,
        gender: str | None = None,
    ) -> LookupResult | Mapping[str, str]:
        """Look up the translation addressed by a lookup string.

        Candidates are tried in order: temporary, registered and fallback
        translations, then the lookup's inline fallback or else the provided
        fallback. The first candidate that exists is used:

        - Without number and gender, it is returned as is (possibly a subtree).
        - With number, its numerus variant (or "*") is selected first.
        - With gender, its gender variant (or "*") is selected next.
        - If selection yields a string, that's the result. Otherwise the
          candidate is rejected and the next one is tried.

        Args:
            path: Lookup string, or mapping of per-locale lookup strings
            fallback: Returned if no tier provides a translation and the
                lookup has no inline fallback
            number: Number of subjects for numerus selection
            gender: Gender for gender selection

        Returns:
            Translation string or subtree; None if nothing matched. Input
            that isn't a lookup string is returned unchanged.
        """
        path = self._locale.select_localized(path)

        parsed = parse_lookup(path)
        if parsed is None:
            return path

        candidates: list[TranslationNode | None] = [
            self._walk(tree, parsed.segments) for _, tree in self._tiers()
        ]
        candidates.append(
            parsed.inline_fallback if parsed.inline_fallback is not None else fallback
        )

        for index, candidate in enumerate(candidates):
            if candidate is None:
                continue

            node: TranslationNode | None = candidate
            if number is not None:
                node = _select_variant(node, self._numerus_selector(number))
            if gender is not None:
                node = _select_variant(node, gender)

            if node is candidate:
                self._log_resolution(parsed.path, index)
                return candidate
            if isinstance(node, str):
                self._log_resolution(parsed.path, index)
                return node

        return None

    def _log_resolution(self, path: str, index: int) -> None:
        if index <= 1:
            return
        source = TranslationTier.FALLBACK if index == 2 else "inline or explicit fallback"
        logger.debug("Lookup '%s' for %s resolved from %s", path, self._locale.tag, source)
