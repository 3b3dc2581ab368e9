"""Diagnostic system for l10ntree errors.

Provides structured error diagnostics with codes, hints and key paths.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    DuplicateLocaleError,
    InvalidArrayError,
    InvalidKeyError,
    InvalidLocaleError,
    InvalidSourceError,
    InvalidTranslationsError,
    L10nError,
    MergeConflictError,
    NoAcceptedLocaleError,
    ObjectOverScalarError,
    ScalarOverObjectError,
    TranslationTreeError,
    TreeDepthExceededError,
)
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DuplicateLocaleError",
    "ErrorTemplate",
    "InvalidArrayError",
    "InvalidKeyError",
    "InvalidLocaleError",
    "InvalidSourceError",
    "InvalidTranslationsError",
    "L10nError",
    "MergeConflictError",
    "NoAcceptedLocaleError",
    "ObjectOverScalarError",
    "ScalarOverObjectError",
    "TranslationTreeError",
    "TreeDepthExceededError",
]
