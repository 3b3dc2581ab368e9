"""Translation trees and their validated deep merge.

A translation tree is a nested mapping whose leaves are strings:

    {"animal": {"name": {"singular": "Fuchs", "plural": "Füchse"}}}

Trees usually originate from untrusted sources (JSON files, HTTP responses),
so merge() validates every key and value before touching the destination
and never coerces a subtree into a scalar or vice versa.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from l10ntree.constants import FORBIDDEN_KEY
from l10ntree.core import DepthGuard
from l10ntree.diagnostics import (
    ErrorTemplate,
    InvalidArrayError,
    InvalidKeyError,
    InvalidSourceError,
    ObjectOverScalarError,
    ScalarOverObjectError,
)

__all__ = [
    "TranslationNode",
    "TranslationTree",
    "is_valid_key",
    "merge",
]

logger = logging.getLogger(__name__)

type TranslationNode = str | TranslationTree
"""Leaf translation or nested subtree."""

type TranslationTree = dict[str, TranslationNode]
"""Mapping of lower-case keys to translation nodes."""


def is_valid_key(key: object) -> bool:
    """Detect if a value is usable as key of a translation tree.

    Args:
        key: Candidate key

    Returns:
        True for non-empty strings without whitespace and periods
    """
    return isinstance(key, str) and bool(key) and "." not in key and not any(
        char.isspace() for char in key
    )


def _scalar_text(value: int | float | Decimal | str) -> str:
    """Render a scalar source value as translation string.

    Integral floats render without fractional part, so 2.0 becomes "2".
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def merge(destination: TranslationTree, source: Mapping[str, Any] | None) -> TranslationTree:
    """Deeply merge a source tree of translations into a destination tree.

    Source wins over destination at leaf level. Keys are lower-cased in the
    destination. Numbers are coerced to strings; None values are skipped.

    The merge is validated per key but not transactional: when a later key
    fails, earlier keys of the same call remain merged.

    Args:
        destination: Tree to merge into, modified in place
        source: Tree to merge, None for no-op

    Returns:
        The provided destination

    Raises:
        InvalidSourceError: If source (or a nested value) has an unsupported type
        InvalidKeyError: If a key is empty, not a string, or contains
            whitespace or a period
        InvalidArrayError: If a list or tuple is found
        ScalarOverObjectError: If a scalar would replace an existing subtree
        ObjectOverScalarError: If a subtree would replace an existing scalar
        TreeDepthExceededError: If source nests deeper than MAX_TREE_DEPTH

    Example:
        >>> merge({}, {"a": "x", "b": {"C": 1}})
        {'a': 'x', 'b': {'c': '1'}}
    """
    if source is None:
        return destination

    _merge_into(destination, source, DepthGuard(), ())
    return destination


def _merge_into(
    destination: TranslationTree,
    source: object,
    guard: DepthGuard,
    key_path: tuple[str, ...],
) -> None:
    if not isinstance(source, Mapping):
        raise InvalidSourceError(ErrorTemplate.invalid_source(source, key_path))

    with guard:
        for key, value in source.items():
            if key == FORBIDDEN_KEY:
                continue

            if not is_valid_key(key):
                raise InvalidKeyError(ErrorTemplate.invalid_key(key, key_path))

            target_key = key.lower()
            path = (*key_path, target_key)
            existing = destination.get(target_key)

            match value:
                case None:
                    continue

                case bool():
                    raise InvalidSourceError(ErrorTemplate.invalid_source(value, path))

                case str() | int() | float() | Decimal():
                    if isinstance(existing, dict):
                        raise ScalarOverObjectError(ErrorTemplate.scalar_over_object(path))
                    destination[target_key] = _scalar_text(value)

                case list() | tuple():
                    raise InvalidArrayError(ErrorTemplate.invalid_array(path))

                case Mapping():
                    if existing is None:
                        existing = destination[target_key] = {}
                    elif not isinstance(existing, dict):
                        raise ObjectOverScalarError(ErrorTemplate.object_over_scalar(path))
                    _merge_into(existing, value, guard, path)

                case _:
                    raise InvalidSourceError(ErrorTemplate.invalid_source(value, path))

    if not key_path:
        logger.debug("Merged %d top-level key(s) into tree of translations", len(source))
