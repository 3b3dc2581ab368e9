"""Template filters for rendering layers.

Small functions suitable for registration as filters with template engines
(Jinja2 environment filters, GUI data bindings):

    translate - Translate a lookup string using a registry's current locale
    format_template - Substitute printf-style markers with arguments

Python 3.13+.
"""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING

from l10ntree.localization.registry import default_registry

if TYPE_CHECKING:
    from l10ntree.localization.registry import LocaleRegistry
    from l10ntree.localization.types import LookupResult

__all__ = ["format_template", "translate"]

# %[fill][width][sep precision][$index]marker, e.g. %s, %05d, %$2s, %8.2f, %,2f
_MARKER_PATTERN = re.compile(
    r"%([0 _-])?([1-9][0-9]*)?(?:([.,])([0-9]+))?(?:\$(\d+))?([%sdfxX.])"
)

_NOT_A_NUMBER = "NaN"


def translate(
    lookup: str,
    *,
    number: float | None = None,
    gender: str | None = None,
    registry: LocaleRegistry | None = None,
) -> LookupResult:
    """Translate a lookup string using the current localization of a registry.

    The lookup itself serves as fallback, so a missing translation renders
    as its inline fallback or, lacking one, as the lookup string.

    Args:
        lookup: Lookup string, other strings pass through
        number: Number of subjects for numerus selection
        gender: Gender for gender selection
        registry: Registry to use, default_registry() if None

    Returns:
        Translation, or the provided string if nothing matched

    Example:
        >>> registry = LocaleRegistry()
        >>> _ = registry.register("de", {"hello": "Hallo"})
        >>> translate("@hello", registry=registry)
        'Hallo'
        >>> translate("@bye=Goodbye", registry=registry)
        'Goodbye'
    """
    localization = (registry or default_registry()).current
    return localization.lookup(lookup, lookup, number=number, gender=gender)  # type: ignore[return-value]


def _argument(args: tuple[object, ...], cursor: list[int], ref: str | None) -> object:
    if ref is not None:
        index = int(ref) - 1
    else:
        index = cursor[0]
        cursor[0] += 1
    return args[index] if 0 <= index < len(args) else None


def _number(value: object) -> float | None:
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    return None if math.isnan(number) or math.isinf(number) else number


def format_template(template: object, *args: object) -> str:
    """Replace printf-style markers in a template with arguments.

    Supported markers:
        %s        argument as string
        %d        argument as decimal integer (truncated)
        %x, %X    argument as hexadecimal integer
        %f        argument as float without trailing zeros
        %.        skip one argument
        %%        literal percent sign

    Markers accept a fill character and minimum width (%05d, % 8s), a
    precision with decimal separator for floats (%.2f, %,2f, %8.2f) and
    an explicit 1-based argument reference ($n) before the marker (%$2s).
    Missing arguments render as "None" with %s; numeric markers render
    missing or non-numeric arguments as "NaN".

    Unlike classic JavaScript sprintf-style filters, "." is not a fill
    character: "%.2f" sets a precision without width and "%,2f" uses a
    comma as decimal separator. Fractions are never right-padded.

    Args:
        template: Template, converted to string
        *args: Values to inject

    Returns:
        Template with all markers replaced

    Example:
        >>> format_template("%s has %d %s", "Anna", 3.7, "apples")
        'Anna has 3 apples'
        >>> format_template("%$2s before %$1s", "b", "a")
        'a before b'
        >>> format_template("%,2f EUR", 3.14159)
        '3,14 EUR'
    """
    cursor = [0]

    def _replace(match: re.Match[str]) -> str:
        fill, width, separator, precision, ref, marker = match.groups()

        if marker == "%":
            return "%"
        if marker == ".":
            cursor[0] += 1
            return ""

        value = _argument(args, cursor, ref)
        if marker == "s":
            text = str(value)
        else:
            number = _number(value)
            if number is None:
                text = _NOT_A_NUMBER
            elif marker == "d":
                text = str(int(number))
            elif marker in "xX":
                text = format(int(number), marker)
            else:
                text = _format_float(number, separator, precision)

        if width:
            text = text.rjust(int(width), fill or " ")
        return text

    return _MARKER_PATTERN.sub(_replace, str(template))


def _format_float(value: float, separator: str | None, precision: str | None) -> str:
    """Render a float with optional fixed precision and decimal separator."""
    text = f"{value:.{int(precision)}f}" if precision is not None else f"{value:.10f}"
    integral, _, fraction = text.partition(".")
    if precision is None:
        fraction = fraction.rstrip("0")
    if not fraction:
        return integral
    return f"{integral}{separator or '.'}{fraction}"
