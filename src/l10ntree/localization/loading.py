"""Translations loader boundary.

A translations loader is any callable accepting a Locale and returning its
tree of translations, either directly or as an awaitable (coroutine, Task,
Future). Returning None signals that the loader doesn't support the locale.

Components:
    TranslationsLoader - Type alias of loader callables
    MappingTranslationsLoader - Loader serving preloaded trees by locale tag
    resolve_loaded - Normalizes sync and async loader results

Python 3.13+.
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from l10ntree.locale import Locale

if TYPE_CHECKING:
    from l10ntree.localization.types import TranslationsLoader, TranslationTree

__all__ = [
    "MappingTranslationsLoader",
    "load_translations",
    "resolve_loaded",
]


async def resolve_loaded(result: object) -> Mapping[str, Any] | None:
    """Normalize the result of a translations loader.

    Args:
        result: Tree, None, or awaitable providing either

    Returns:
        Loaded tree, None if the loader doesn't support the locale
    """
    if inspect.isawaitable(result):
        result = await result
    return result  # type: ignore[return-value]


async def load_translations(
    loader: TranslationsLoader, locale: Locale
) -> Mapping[str, Any] | None:
    """Invoke a loader for a locale and await its result if necessary.

    Exceptions raised by the loader or its awaitable propagate to the caller.

    Args:
        loader: Translations loader
        locale: Locale to load translations for

    Returns:
        Loaded tree, None if the loader doesn't support the locale
    """
    return await resolve_loaded(loader(locale))


@dataclass(frozen=True, slots=True)
class MappingTranslationsLoader:
    """Translations loader serving preloaded trees.

    Trees are looked up by locale tag first, then by language only, so a
    tree registered for "de" also serves requests for "de-at".

    Uses frozen dataclass with slots for low memory overhead.

    Example:
        >>> loader = MappingTranslationsLoader({"de": {"hello": "Hallo"}})
        >>> loader(Locale.parse("de-AT"))
        {'hello': 'Hallo'}
        >>> loader(Locale.parse("fr")) is None
        True

    Attributes:
        trees: Trees of translations keyed by locale identifier
    """

    trees: Mapping[str, TranslationTree]
    _by_tag: dict[str, TranslationTree] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Index trees by normalized tag.

        Raises:
            InvalidLocaleError: If a key is not a locale identifier
        """
        by_tag = {Locale.parse(key).tag: tree for key, tree in self.trees.items()}
        object.__setattr__(self, "_by_tag", by_tag)

    def __call__(self, locale: Locale) -> TranslationTree | None:
        tree = self._by_tag.get(locale.tag)
        if tree is None:
            tree = self._by_tag.get(locale.language)
        return tree
