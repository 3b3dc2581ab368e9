"""Quickstart example for l10ntree.

This example demonstrates registering translations, looking up numerus and
gender variants, selecting locales and rendering with the template filters.

Note: Examples use asyncio.run() for brevity. Applications running an event
loop already should await select() and initialize() directly.
"""

import asyncio

from l10ntree import (
    Locale,
    LocaleRegistry,
    TranslationTreeError,
    format_template,
    translate,
)
from l10ntree.localization import MappingTranslationsLoader

# Example 1: Simple lookups
print("=" * 50)
print("Example 1: Simple Lookups")
print("=" * 50)

registry = LocaleRegistry()
german = registry.register("de", {
    "greeting": "Hallo, %s!",
    "animal": {
        "fox": {
            "singular": {"male": "Fuchs", "female": "Füchsin"},
            "plural": {"male": "Füchse", "female": "Füchsinnen"},
        },
    },
})

print(format_template(german.lookup("@greeting"), "Anna"))
# Output: Hallo, Anna!

print(german.lookup("@farewell=Tschüss"))
# Output: Tschüss

print(german.lookup("Plain text passes through"))
# Output: Plain text passes through

# Example 2: Numerus and gender
print("\n" + "=" * 50)
print("Example 2: Numerus and Gender Variants")
print("=" * 50)

for number, gender in [(1, "male"), (1, "female"), (3, "male"), (3, "female")]:
    print(number, gender, german.lookup("@animal.fox", number=number, gender=gender))
# Output:
# 1 male Fuchs
# 1 female Füchsin
# 3 male Füchse
# 3 female Füchsinnen

# Example 3: Custom numerus policy
print("\n" + "=" * 50)
print("Example 3: Custom Numerus Policy")
print("=" * 50)


def latvian_numerus(number: float) -> str:
    if number == 0:
        return "zero"
    if number % 10 == 1 and number % 100 != 11:
        return "one"
    return "other"


latvian = registry.register(
    "lv",
    {"apples": {"zero": "%d ābolu", "one": "%d ābols", "other": "%d āboli"}},
    latvian_numerus,
)
for count in (0, 1, 21, 5):
    print(format_template(latvian.lookup("@apples", number=count), count))
# Output:
# 0 ābolu
# 1 ābols
# 21 ābols
# 5 āboli

# Example 4: Locale selection with lazy loading
print("\n" + "=" * 50)
print("Example 4: Locale Selection")
print("=" * 50)

print(Locale.compare("de", "de-AT"))
# Output: 2

registry.notifier.subscribe(
    "locale-changed", lambda event: print("current locale:", event.detail and event.detail.tag)
)
registry.set_loader(MappingTranslationsLoader({"fr": {"greeting": "Bonjour, %s !"}}))

french = asyncio.run(registry.select(["fr-CA", "en"], persist=True))
# Output: current locale: fr-ca
print(format_template(translate("@greeting", registry=registry), "Anna"))
# Output: Bonjour, Anna !

# Example 5: Tiers and errors
print("\n" + "=" * 50)
print("Example 5: Temporary Overlays and Tree Errors")
print("=" * 50)

french.update_temporary({"greeting": "Salut, %s !"})
print(format_template(french.lookup("@greeting"), "Anna"))
# Output: Salut, Anna !
french.drop_temporary()

try:
    french.update_translations({"greeting": {"formal": "Bonjour"}})
except TranslationTreeError as error:
    print(error)
# Output:
# error[OBJECT_OVER_SCALAR]: Invalid non-scalar replacement for existing leaf of translations tree
#   = path: greeting
#   = help: Translations must keep their shape across merges
