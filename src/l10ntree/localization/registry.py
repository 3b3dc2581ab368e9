"""Registry of localizations with locale selection.

LocaleRegistry maps locale tags to Localization instances, picks the best
registered locale for a list of accepted locales and tracks the current
locale of an application.

Key architectural decisions:
- Explicit registry object passed to consumers; default_registry() offers a
  process-wide instance for applications that want one
- Asynchronous selection: select() and initialize() await loaders that may
  fetch translations lazily (HTTP, database, import of large modules)
- Notifier protocol for locale change announcements (dependency inversion)
- current never fails: without any registered locale, lookups run against a
  synthesized empty placeholder localization

Concurrency:
    Registries are meant for a single thread running an event loop. Overlapping
    select() calls suspend only while awaiting a loader; the last one to
    finish determines the current locale and the order of notifications.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Iterator, Mapping, Sequence
from typing import TYPE_CHECKING, Any

from l10ntree.constants import PLACEHOLDER_LOCALE
from l10ntree.diagnostics import (
    DuplicateLocaleError,
    ErrorTemplate,
    InvalidLocaleError,
    InvalidTranslationsError,
    NoAcceptedLocaleError,
    TranslationTreeError,
)
from l10ntree.enums import LocaleMatch
from l10ntree.locale import Locale
from l10ntree.localization.loading import load_translations
from l10ntree.localization.localization import Localization
from l10ntree.localization.notifier import InProcessNotifier, LocaleChangedEvent
from l10ntree.tree import merge

if TYPE_CHECKING:
    from l10ntree.localization.notifier import Notifier
    from l10ntree.localization.types import (
        AcceptedLocalesDetector,
        LocaleLike,
        NumerusSelector,
        TranslationsLoader,
    )

__all__ = ["LocaleRegistry", "default_registry"]

logger = logging.getLogger(__name__)


class LocaleRegistry:
    """Registry of localizations and the current locale.

    Example:
        >>> registry = LocaleRegistry()
        >>> _ = registry.register("de", {"hello": "Hallo"})
        >>> _ = registry.register("en-GB", {"hello": "Hello"})
        >>> l10n = asyncio.run(registry.select(["fr", "en-US"]))
        >>> l10n.lookup("@hello")
        'Hello'
        >>> registry.current.tag
        'de'

    Attributes:
        notifier: Receives a LocaleChangedEvent whenever current changes
        loader: Provides translations of locales not registered yet (optional)
    """

    __slots__ = ("_accepted_locales", "_current", "_loader", "_localizations", "_notifier")

    def __init__(
        self,
        notifier: Notifier | None = None,
        accepted_locales: AcceptedLocalesDetector | None = None,
    ) -> None:
        """Initialize an empty registry.

        Args:
            notifier: Transport of locale change events, InProcessNotifier if None
            accepted_locales: Detector of locales accepted by the environment,
                environment detection via Babel if None
        """
        self._notifier: Notifier = notifier if notifier is not None else InProcessNotifier()
        self._accepted_locales = accepted_locales
        # dict preserves registration order for tie-breaking in select()
        self._localizations: dict[str, Localization] = {}
        self._current: Localization | None = None
        self._loader: TranslationsLoader | None = None

    def __repr__(self) -> str:
        current = self._current.tag if self._current else None
        return f"LocaleRegistry(tags={self.tags!r}, current={current!r})"

    def __len__(self) -> int:
        return len(self._localizations)

    def __iter__(self) -> Iterator[Localization]:
        return iter(tuple(self._localizations.values()))

    def __contains__(self, locale: object) -> bool:
        try:
            return Locale.parse(locale).tag in self._localizations  # type: ignore[arg-type]
        except InvalidLocaleError:
            return False

    @property
    def notifier(self) -> Notifier:
        """Transport of locale change events."""
        return self._notifier

    @property
    def loader(self) -> TranslationsLoader | None:
        """Loader consulted by select() for locales not registered yet."""
        return self._loader

    def set_loader(self, loader: TranslationsLoader | None) -> None:
        """Configure the loader consulted by select(), None to disable loading."""
        self._loader = loader

    @property
    def tags(self) -> tuple[str, ...]:
        """Tags of registered locales in registration order."""
        return tuple(self._localizations)

    @property
    def has_current(self) -> bool:
        """Whether a current locale has been established."""
        return self._current is not None

    @property
    def current(self) -> Localization:
        """Current localization, selected lazily on first access.

        Without current locale, the registered locale best matching the
        environment's accepted locales becomes current (without consulting
        the loader). Falls back to the first registered locale. If nothing is
        registered, an empty placeholder is returned without becoming current.
        """
        if self._current is None:
            match = self._best_match(Locale.list_accepted(self._accepted_locales))
            if match is None:
                match = self._first_registered()
            if match is None:
                return self._placeholder()
            self._set_current(match)
        return self._current  # type: ignore[return-value]

    def get(self, locale: LocaleLike) -> Localization | None:
        """Fetch the localization registered for exactly the tag of locale.

        Raises:
            InvalidLocaleError: If locale is malformed
        """
        return self._localizations.get(Locale.parse(locale).tag)

    def register(
        self,
        locale: LocaleLike,
        translations: Mapping[str, Any],
        numerus_selector: NumerusSelector | None = None,
        *,
        fallback: Mapping[str, Any] | None = None,
        temporary: Mapping[str, Any] | None = None,
    ) -> Localization:
        """Register translations of another locale.

        The first locale registered becomes current unless a current locale
        has been selected before.

        Args:
            locale: Locale identifier or Locale
            translations: Registered translations of the locale
            numerus_selector: Numerus policy, "singular"/"plural" if None
            fallback: Initial fallback translations
            temporary: Initial temporary translations

        Returns:
            New localization

        Raises:
            InvalidLocaleError: If locale is malformed
            DuplicateLocaleError: If translations for the locale's tag exist
            InvalidTranslationsError: If translations is not a mapping
            TranslationTreeError: If any of the trees is malformed
            Exception: Whatever a locale-changed listener raises when the
                first registration becomes current. The localization is
                registered and current at that point.
        """
        parsed = Locale.parse(locale)

        if parsed.tag in self._localizations:
            raise DuplicateLocaleError(ErrorTemplate.duplicate_locale(parsed.tag))

        if not isinstance(translations, Mapping):
            raise InvalidTranslationsError(ErrorTemplate.invalid_translations(translations))

        localization = Localization(
            parsed,
            translations,
            numerus_selector=numerus_selector,
            fallback=fallback,
            temporary=temporary,
        )
        self._localizations[parsed.tag] = localization
        logger.debug("Registered translations for locale %s", parsed.tag)

        if self._current is None:
            self._set_current(localization)

        return localization

    def update_translations(self, locale: LocaleLike, tree: Mapping[str, Any]) -> int:
        """Merge tree into every registered localization related to locale.

        Related means sharing the language: updating "de" affects "de",
        "de-de" and "de-at".

        Args:
            locale: Locale the tree belongs to
            tree: Translations to merge

        Returns:
            Number of localizations updated
        """
        updated = 0
        for tag, localization in tuple(self._localizations.items()):
            if Locale.compare(locale, tag) > LocaleMatch.UNRELATED:
                merge(localization.tree, tree)
                updated += 1
        return updated

    async def select(
        self, selector: LocaleLike | Sequence[LocaleLike], persist: bool = False
    ) -> Localization:
        """Select the registered localization best matching accepted locales.

        Accepted locales are processed in order. For each one, the registered
        locale with highest Locale.compare() rank is picked, ties going to
        the one registered first. If none relates to it and a loader is
        configured, the loader is asked for its translations; loaded
        translations are registered and picked. Loader failures are logged
        and the next accepted locale is tried.

        Without any match, the first registered localization is picked, or
        an empty placeholder if nothing is registered.

        Args:
            selector: Accepted locale or locales in preference order
            persist: Make the picked localization current. Placeholders never
                become current.

        Returns:
            Picked localization
        """
        requested: Sequence[LocaleLike] = (
            [selector] if isinstance(selector, (str, Locale)) else selector
        )

        match: Localization | None = None
        for candidate in requested:
            match = self._best_match([candidate])
            if match is None and self._loader is not None:
                match = await self._load(candidate, self._loader)
            if match is not None:
                break

        if match is None:
            match = self._first_registered()
        if match is None:
            return self._placeholder()

        if persist:
            self._set_current(match)
        return match

    async def initialize(
        self,
        loader: TranslationsLoader,
        locales_detector: Callable[[], Sequence[LocaleLike]] | None = None,
        fallback_locale: LocaleLike | None = None,
    ) -> Locale:
        """Load and select the first accepted locale the loader supports.

        The loader is remembered for later select() calls. The fallback
        locale is appended to the accepted locales unless one of them
        already covers it (same language, at most one region given).

        Args:
            loader: Provides translations of a locale, None if unsupported
            locales_detector: Lists accepted locales, environment if None
            fallback_locale: Locale to try after all accepted ones

        Returns:
            Locale that became current

        Raises:
            InvalidLocaleError: If the detector doesn't return a list of
                valid locales, or fallback_locale is malformed
            NoAcceptedLocaleError: If the loader supports none of the locales
        """
        detected = (
            locales_detector()
            if locales_detector is not None
            else Locale.list_accepted(self._accepted_locales)
        )
        if not isinstance(detected, (list, tuple)):
            raise InvalidLocaleError(ErrorTemplate.invalid_locale_list(detected))

        candidates = [Locale.parse(locale) for locale in detected]

        if fallback_locale is not None:
            forced = Locale.parse(fallback_locale)
            if all(Locale.compare(listed, forced) < LocaleMatch.PARTIAL for listed in candidates):
                candidates.append(forced)

        self._loader = loader

        for candidate in candidates:
            localization = self.get(candidate)
            if localization is None:
                localization = await self._load(candidate, loader)
            if localization is not None:
                self._set_current(localization)
                return localization.locale

        raise NoAcceptedLocaleError(
            ErrorTemplate.no_accepted_locale(tuple(locale.tag for locale in candidates))
        )

    def clear(self) -> None:
        """Forget all localizations, the current locale and the loader.

        Publishes a LocaleChangedEvent with detail None.
        """
        self._localizations.clear()
        self._current = None
        self._loader = None
        logger.info("Locale registry cleared")
        self._notifier.publish(LocaleChangedEvent(detail=None))

    def _best_match(self, accepted: Sequence[LocaleLike]) -> Localization | None:
        for candidate in accepted:
            best: Localization | None = None
            best_level = LocaleMatch.UNRELATED
            for tag, localization in self._localizations.items():
                level = Locale.compare(candidate, tag)
                if level > best_level:
                    best, best_level = localization, level
            if best is not None:
                return best
        return None

    def _first_registered(self) -> Localization | None:
        return next(iter(self._localizations.values()), None)

    async def _load(
        self, candidate: LocaleLike, loader: TranslationsLoader
    ) -> Localization | None:
        """Load and register translations of a locale, None on failure."""
        try:
            locale = Locale.parse(candidate)
        except InvalidLocaleError:
            logger.warning("Skipping invalid accepted locale %r", candidate)
            return None

        try:
            translations = await load_translations(loader, locale)
        except Exception:  # noqa: BLE001 - loader is user code
            logger.warning("Loading translations for %s failed", locale.tag, exc_info=True)
            return None

        if translations is None:
            logger.debug("Loader provides no translations for %s", locale.tag)
            return None

        # Another selection may have registered the locale while loading.
        existing = self._localizations.get(locale.tag)
        if existing is not None:
            return existing

        try:
            return self.register(locale, translations)
        except TranslationTreeError as error:
            logger.warning("Loaded translations for %s rejected: %s", locale.tag, error)
            return None

    def _placeholder(self) -> Localization:
        return Localization(Locale.parse(PLACEHOLDER_LOCALE), {})

    def _set_current(self, localization: Localization) -> None:
        if localization is self._current:
            return
        self._current = localization
        logger.info("Current locale changed to %s", localization.tag)
        self._notifier.publish(LocaleChangedEvent(detail=localization))


@functools.cache
def default_registry() -> LocaleRegistry:
    """Process-wide registry for applications without explicit wiring.

    Returns:
        The same LocaleRegistry on every call
    """
    return LocaleRegistry()
