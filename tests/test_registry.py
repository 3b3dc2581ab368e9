"""Tests for LocaleRegistry: registration, current locale, selection.

Async operations run via asyncio.run() inside synchronous tests.

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import pytest

from l10ntree import Locale
from l10ntree.constants import LOCALE_CHANGED
from l10ntree.diagnostics import (
    DuplicateLocaleError,
    InvalidKeyError,
    InvalidLocaleError,
    InvalidTranslationsError,
    NoAcceptedLocaleError,
)
from l10ntree.localization import (
    InProcessNotifier,
    LocaleChangedEvent,
    LocaleRegistry,
    Localization,
    MappingTranslationsLoader,
    default_registry,
)


def _events(notifier: InProcessNotifier) -> list[LocaleChangedEvent]:
    seen: list[LocaleChangedEvent] = []
    notifier.subscribe(LOCALE_CHANGED, seen.append)
    return seen


class TestRegister:
    """register() and registry inspection."""

    def test_register_returns_localization(self, registry: LocaleRegistry) -> None:
        """Registration creates a Localization of the parsed locale."""
        localization = registry.register("de-DE", {"hello": "Hallo"})
        assert isinstance(localization, Localization)
        assert localization.tag == "de-de"
        assert localization.lookup("@hello") == "Hallo"

    def test_tags_in_registration_order(self, registry: LocaleRegistry) -> None:
        """tags lists registered tags in order."""
        registry.register("fr", {})
        registry.register("de_AT", {})
        assert registry.tags == ("fr", "de-at")
        assert len(registry) == 2
        assert [localization.tag for localization in registry] == ["fr", "de-at"]

    def test_contains_and_get(self, registry: LocaleRegistry) -> None:
        """Membership and get() compare normalized tags exactly."""
        localization = registry.register("de-at", {})
        assert "DE_at" in registry
        assert "de" not in registry
        assert "not a locale" not in registry
        assert registry.get("de-AT@utf8") is localization
        assert registry.get("de") is None

    def test_get_invalid_raises(self, registry: LocaleRegistry) -> None:
        """get() rejects malformed identifiers."""
        with pytest.raises(InvalidLocaleError):
            registry.get("x")

    def test_duplicate_rejected(self, registry: LocaleRegistry) -> None:
        """A tag can only be registered once."""
        registry.register("de-DE", {})
        with pytest.raises(DuplicateLocaleError):
            registry.register("de_de", {})

    def test_invalid_locale_rejected(self, registry: LocaleRegistry) -> None:
        """Malformed identifiers are rejected."""
        with pytest.raises(InvalidLocaleError):
            registry.register("german", {})

    def test_invalid_translations_rejected(self, registry: LocaleRegistry) -> None:
        """Non-mapping translations are rejected without registering."""
        with pytest.raises(InvalidTranslationsError):
            registry.register("de", "Hallo")  # type: ignore[arg-type]
        assert len(registry) == 0

    def test_malformed_tree_rejected(self, registry: LocaleRegistry) -> None:
        """Tree errors propagate without registering."""
        with pytest.raises(InvalidKeyError):
            registry.register("de", {"a b": "x"})
        assert "de" not in registry

    def test_numerus_selector_and_tiers(self, registry: LocaleRegistry) -> None:
        """Optional arguments reach the localization."""
        localization = registry.register(
            "en",
            {"a": {"one": "1", "many": "n"}},
            lambda number: "one" if number == 1 else "many",
            fallback={"b": "fb"},
            temporary={"c": "tmp"},
        )
        assert localization.lookup("@a", number=5) == "n"
        assert localization.lookup("@b") == "fb"
        assert localization.lookup("@c") == "tmp"

    def test_repr(self, registry: LocaleRegistry) -> None:
        """repr shows tags and current locale."""
        registry.register("en", {})
        assert repr(registry) == "LocaleRegistry(tags=('en',), current='en')"

    def test_listener_error_after_registration(self, registry: LocaleRegistry) -> None:
        """A failing listener surfaces from register() once the locale is stored."""

        def failing(_: LocaleChangedEvent) -> None:
            msg = "listener failed"
            raise RuntimeError(msg)

        registry.notifier.subscribe(LOCALE_CHANGED, failing)
        with pytest.raises(RuntimeError, match="listener failed"):
            registry.register("de", {"a": "b"})
        assert "de" in registry
        assert registry.current.lookup("@a") == "b"


class TestCurrent:
    """The current localization."""

    def test_first_registration_becomes_current(self, registry: LocaleRegistry) -> None:
        """Registering into an empty registry sets current and notifies."""
        events = _events(registry.notifier)  # type: ignore[arg-type]
        first = registry.register("de", {})
        registry.register("en", {})
        assert registry.current is first
        assert [event.detail for event in events] == [first]

    def test_placeholder_when_empty(self, registry: LocaleRegistry) -> None:
        """Without registrations, an empty placeholder is returned."""
        placeholder = registry.current
        assert placeholder.tag == "any"
        assert placeholder.lookup("@a=b") == "b"
        assert not registry.has_current

    def test_lazy_best_match(self) -> None:
        """Lazy selection prefers the best match for accepted locales."""
        registry = LocaleRegistry(accepted_locales=lambda: ["fr-CA", "en"])
        german = registry.register("de", {})
        french = registry.register("fr", {})
        registry._current = None  # reset implicit selection of first registration
        assert registry.current is french
        assert registry.current is not german

    def test_lazy_falls_back_to_first_registered(self) -> None:
        """Without related locale, the first registered one is used."""
        registry = LocaleRegistry(accepted_locales=lambda: ["ja"])
        german = registry.register("de", {})
        registry.register("fr", {})
        registry._current = None
        assert registry.current is german

    def test_clear(self, registry: LocaleRegistry) -> None:
        """clear() forgets everything and publishes None."""
        registry.register("de", {})
        registry.set_loader(lambda locale: None)
        events = _events(registry.notifier)  # type: ignore[arg-type]
        registry.clear()
        assert len(registry) == 0
        assert not registry.has_current
        assert registry.loader is None
        assert [event.detail for event in events] == [None]


class TestUpdateTranslations:
    """Merging into related localizations."""

    def test_updates_same_language(self, registry: LocaleRegistry) -> None:
        """Every locale sharing the language is updated."""
        registry.register("de", {})
        registry.register("de-AT", {})
        registry.register("en", {})
        assert registry.update_translations("de", {"a": "x"}) == 2
        assert registry.get("de-at").lookup("@a") == "x"  # type: ignore[union-attr]
        assert registry.get("en").lookup("@a") is None  # type: ignore[union-attr]

    def test_regional_update_reaches_language(self, registry: LocaleRegistry) -> None:
        """A regional tree also updates other regions of the language."""
        registry.register("de-de", {})
        registry.register("de-ch", {})
        assert registry.update_translations("de-at", {"a": "x"}) == 2

    def test_invalid_locale_updates_nothing(self, registry: LocaleRegistry) -> None:
        """Malformed identifiers relate to nothing."""
        registry.register("de", {})
        assert registry.update_translations("bogus!", {"a": "x"}) == 0


class TestSelect:
    """async select()."""

    def test_best_match_per_accepted_locale(self, registry: LocaleRegistry) -> None:
        """Accepted locales are processed in order, best rank wins."""
        registry.register("de", {})
        british = registry.register("en-GB", {})
        registry.register("en", {})
        registry.register("en-US", {})
        assert asyncio.run(registry.select(["fr", "en-gb"])) is british

    def test_partial_before_language(self, registry: LocaleRegistry) -> None:
        """A language-only locale beats another region."""
        registry.register("de-de", {})
        german = registry.register("de", {})
        assert asyncio.run(registry.select("de-at")) is german

    def test_ties_go_to_first_registered(self, registry: LocaleRegistry) -> None:
        """Equal ranks keep the earlier registration."""
        swiss = registry.register("de-ch", {})
        registry.register("de-de", {})
        assert asyncio.run(registry.select("de-at")) is swiss

    def test_not_persisted_by_default(self, registry: LocaleRegistry) -> None:
        """select() doesn't change current unless asked."""
        english = registry.register("en", {})
        german = registry.register("de", {})
        assert asyncio.run(registry.select("de")) is german
        assert registry.current is english

    def test_persist(self, registry: LocaleRegistry) -> None:
        """persist=True makes the result current and notifies once."""
        registry.register("en", {})
        german = registry.register("de", {})
        events = _events(registry.notifier)  # type: ignore[arg-type]
        asyncio.run(registry.select("de", persist=True))
        asyncio.run(registry.select("de", persist=True))
        assert registry.current is german
        assert [event.detail for event in events] == [german]

    def test_no_match_uses_first_registered(self, registry: LocaleRegistry) -> None:
        """Unrelated accepted locales fall back to the first registration."""
        first = registry.register("lv", {})
        registry.register("lt", {})
        assert asyncio.run(registry.select(["ja", "ko"])) is first

    def test_empty_registry_placeholder_not_persisted(self, registry: LocaleRegistry) -> None:
        """The placeholder never becomes current."""
        placeholder = asyncio.run(registry.select("de", persist=True))
        assert placeholder.tag == "any"
        assert not registry.has_current

    def test_accepts_locale_instances(self, registry: LocaleRegistry) -> None:
        """Selectors may be Locale instances."""
        german = registry.register("de", {})
        assert asyncio.run(registry.select(Locale.parse("de-de"))) is german

    def test_sync_loader(self, registry: LocaleRegistry) -> None:
        """Unregistered locales are loaded and registered."""
        registry.set_loader(MappingTranslationsLoader({"de": {"hello": "Hallo"}}))
        german = asyncio.run(registry.select("de-AT"))
        assert german.tag == "de-at"
        assert german.lookup("@hello") == "Hallo"
        assert "de-at" in registry

    def test_async_loader(self, registry: LocaleRegistry) -> None:
        """Coroutine loaders are awaited."""

        async def loader(locale: Locale) -> dict[str, Any] | None:
            await asyncio.sleep(0)
            return {"hello": f"hello {locale.tag}"} if locale.language == "fr" else None

        registry.set_loader(loader)
        french = asyncio.run(registry.select(["ja", "fr"]))
        assert french.lookup("@hello") == "hello fr"
        assert registry.tags == ("fr",)

    def test_loader_not_consulted_for_related_locale(self, registry: LocaleRegistry) -> None:
        """Registered related locales are preferred over loading."""
        calls: list[str] = []

        def loader(locale: Locale) -> dict[str, Any]:
            calls.append(locale.tag)
            return {}

        german = registry.register("de", {})
        registry.set_loader(loader)
        assert asyncio.run(registry.select("de-at")) is german
        assert calls == []

    def test_failing_loader_logged_and_skipped(
        self, registry: LocaleRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Loader exceptions are logged and the next locale is tried."""

        def loader(locale: Locale) -> dict[str, Any]:
            if locale.language == "de":
                msg = "network down"
                raise OSError(msg)
            return {"hello": "Hello"}

        registry.set_loader(loader)
        with caplog.at_level(logging.WARNING, logger="l10ntree.localization.registry"):
            english = asyncio.run(registry.select(["de", "en"]))
        assert english.tag == "en"
        assert "Loading translations for de failed" in caplog.text

    def test_malformed_loaded_tree_skipped(self, registry: LocaleRegistry) -> None:
        """Loaded trees violating merge rules are not registered."""
        registry.set_loader(lambda locale: {"bad": ["list"]})
        placeholder = asyncio.run(registry.select("de"))
        assert placeholder.tag == "any"
        assert len(registry) == 0

    def test_invalid_accepted_locale_skipped(self, registry: LocaleRegistry) -> None:
        """Malformed accepted locales are skipped when loading."""
        registry.set_loader(MappingTranslationsLoader({"en": {}}))
        assert asyncio.run(registry.select(["not valid", "en"])).tag == "en"

    def test_overlapping_selection_adopts_registered_locale(
        self, registry: LocaleRegistry
    ) -> None:
        """Two selections loading the same locale share one registration."""
        calls: list[str] = []

        async def loader(locale: Locale) -> dict[str, Any]:
            calls.append(locale.tag)
            await asyncio.sleep(0)
            return {"hello": "Bonjour"}

        registry.set_loader(loader)

        async def run() -> list[Localization]:
            return await asyncio.gather(
                registry.select("fr", True), registry.select("fr", True)
            )

        first, second = asyncio.run(run())
        assert calls == ["fr", "fr"]
        assert first is second
        assert registry.tags == ("fr",)
        assert registry.current is first

    def test_overlapping_selection_last_to_finish_wins(
        self, registry: LocaleRegistry
    ) -> None:
        """current follows completion order, not call order."""
        delays = {"fr": 3, "de": 1}

        async def loader(locale: Locale) -> dict[str, Any]:
            for _ in range(delays[locale.tag]):
                await asyncio.sleep(0)
            return {}

        registry.set_loader(loader)
        events = _events(registry.notifier)  # type: ignore[arg-type]

        async def run() -> list[Localization]:
            return await asyncio.gather(
                registry.select("fr", True), registry.select("de", True)
            )

        french, german = asyncio.run(run())
        assert registry.tags == ("de", "fr")
        assert registry.current is french
        assert [event.detail for event in events] == [german, french]


class TestInitialize:
    """async initialize()."""

    def test_loads_first_supported(self, registry: LocaleRegistry) -> None:
        """The first accepted locale the loader supports becomes current."""
        loader = MappingTranslationsLoader({"fr": {"a": "b"}, "en": {}})
        events = _events(registry.notifier)  # type: ignore[arg-type]
        locale = asyncio.run(registry.initialize(loader, lambda: ["ja", "fr-CA", "en"]))
        assert locale == Locale.parse("fr-ca")
        assert registry.current.lookup("@a") == "b"
        assert registry.loader is loader
        assert len(events) == 1

    def test_environment_detector_default(self) -> None:
        """Without detector, the registry's accepted locales are used."""
        registry = LocaleRegistry(accepted_locales=lambda: ["lv"])
        locale = asyncio.run(registry.initialize(MappingTranslationsLoader({"lv": {}})))
        assert locale.tag == "lv"

    def test_fallback_locale_appended(self, registry: LocaleRegistry) -> None:
        """The fallback locale is tried after all accepted ones."""
        loader = MappingTranslationsLoader({"en": {}})
        locale = asyncio.run(registry.initialize(loader, lambda: ["de", "fr"], "en"))
        assert locale.tag == "en"

    def test_fallback_locale_covered(self, registry: LocaleRegistry) -> None:
        """A fallback covered by an accepted locale isn't appended again."""
        tried: list[str] = []

        def loader(locale: Locale) -> None:
            tried.append(locale.tag)

        with pytest.raises(NoAcceptedLocaleError):
            asyncio.run(registry.initialize(loader, lambda: ["en-US"], "en"))
        assert tried == ["en-us"]

    def test_fallback_locale_other_region_appended(self, registry: LocaleRegistry) -> None:
        """A fallback with a different region is still tried."""
        tried: list[str] = []

        def loader(locale: Locale) -> dict[str, Any] | None:
            tried.append(locale.tag)
            return {} if locale.tag == "en-gb" else None

        locale = asyncio.run(registry.initialize(loader, lambda: ["en-US"], "en-GB"))
        assert locale.tag == "en-gb"
        assert tried == ["en-us", "en-gb"]

    def test_registered_locale_adopted(self, registry: LocaleRegistry) -> None:
        """Already registered locales are selected without loading."""
        registry.register("en", {})
        german = registry.register("de", {})
        locale = asyncio.run(registry.initialize(lambda locale: None, lambda: ["de"]))
        assert locale.tag == "de"
        assert registry.current is german

    def test_nothing_supported(self, registry: LocaleRegistry) -> None:
        """NoAcceptedLocaleError lists every tried locale."""
        with pytest.raises(NoAcceptedLocaleError, match="de, fr"):
            asyncio.run(registry.initialize(lambda locale: None, lambda: ["de", "fr"]))

    def test_detector_must_return_list(self, registry: LocaleRegistry) -> None:
        """Detectors returning anything but a list or tuple are rejected."""
        with pytest.raises(InvalidLocaleError):
            asyncio.run(registry.initialize(lambda locale: {}, lambda: "de"))  # type: ignore[arg-type,return-value]

    def test_detector_entries_validated(self, registry: LocaleRegistry) -> None:
        """Malformed detected locales are rejected."""
        with pytest.raises(InvalidLocaleError):
            asyncio.run(registry.initialize(lambda locale: {}, lambda: ["de", "nope!"]))

    def test_loader_kept_for_select(self, registry: LocaleRegistry) -> None:
        """Later selections use the initialization loader."""
        loader = MappingTranslationsLoader({"en": {}, "de": {"a": "b"}})
        asyncio.run(registry.initialize(loader, lambda: ["en"]))
        assert asyncio.run(registry.select("de")).lookup("@a") == "b"


class TestDefaultRegistry:
    """Process-wide registry."""

    def test_singleton(self) -> None:
        """default_registry() always returns the same instance."""
        assert default_registry() is default_registry()
        assert isinstance(default_registry(), LocaleRegistry)
