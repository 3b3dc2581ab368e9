"""l10ntree exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class L10nError(Exception):
    """Base exception for all l10ntree errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize L10nError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidLocaleError(L10nError):
    """Malformed locale identifier or list of locale identifiers."""


class DuplicateLocaleError(L10nError):
    """Translations for a locale tag have been registered before."""


class NoAcceptedLocaleError(L10nError):
    """Initialization could not load translations for any accepted locale."""


class TranslationTreeError(L10nError):
    """Base class for violations of the translation tree shape."""


class InvalidTranslationsError(TranslationTreeError):
    """Registered translations are not a mapping."""


class InvalidSourceError(TranslationTreeError):
    """Source of a merge is not a mapping, or holds an unsupported value."""


class InvalidKeyError(TranslationTreeError):
    """Key is empty, not a string, or contains whitespace or a period."""


class InvalidArrayError(TranslationTreeError):
    """Sequence found where a string or a mapping was expected."""


class TreeDepthExceededError(TranslationTreeError):
    """Source tree nests deeper than the configured limit.

    Indicates adversarial or malformed input rather than real translations.
    """


class MergeConflictError(TranslationTreeError):
    """Scalar and subtree collide at the same key of a merge."""


class ScalarOverObjectError(MergeConflictError):
    """Merging a scalar onto an existing subtree."""


class ObjectOverScalarError(MergeConflictError):
    """Merging a subtree onto an existing scalar."""
