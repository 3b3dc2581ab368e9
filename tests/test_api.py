"""Tests for the public package surface.

Python 3.13+.
"""

from __future__ import annotations

import asyncio

import l10ntree
from l10ntree import Locale, LocaleRegistry, format_template, translate


class TestPublicApi:
    """Top-level exports."""

    def test_all_exported(self) -> None:
        """Every name in __all__ is importable from the package."""
        for name in l10ntree.__all__:
            assert hasattr(l10ntree, name), name

    def test_version(self) -> None:
        """A version string is always available."""
        assert isinstance(l10ntree.__version__, str)
        assert l10ntree.__version__


class TestEndToEnd:
    """Typical application flow."""

    def test_initialize_translate_and_switch(self) -> None:
        """Initialize from a loader, render, then switch locales."""
        trees = {
            "en": {"basket": {"singular": "%d apple", "plural": "%d apples"}},
            "de": {"basket": {"singular": "%d Apfel", "plural": "%d Äpfel"}},
        }
        registry = LocaleRegistry(accepted_locales=lambda: ["de-DE", "en"])
        seen: list[str | None] = []
        registry.notifier.subscribe(
            "locale-changed", lambda event: seen.append(event.detail and event.detail.tag)
        )

        locale = asyncio.run(registry.initialize(lambda locale: trees.get(locale.language)))
        assert locale == Locale.parse("de-de")
        assert format_template(translate("@basket", number=3, registry=registry), 3) == "3 Äpfel"

        asyncio.run(registry.select("en", persist=True))
        assert format_template(translate("@basket", number=1, registry=registry), 1) == "1 apple"
        assert seen == ["de-de", "en"]
