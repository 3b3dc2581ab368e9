"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and consistent across modules raising the same
    error for different reasons.
    """

    @staticmethod
    def invalid_locale(identifier: object) -> Diagnostic:
        """Locale identifier does not match language[-region][@encoding].

        Args:
            identifier: The rejected identifier

        Returns:
            Diagnostic for INVALID_LOCALE
        """
        msg = f"Invalid locale identifier: {identifier!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LOCALE,
            message=msg,
            hint="Use a 2-3 letter language, optional region and encoding, e.g. 'de-DE@utf8'",
        )

    @staticmethod
    def invalid_locale_list(value: object) -> Diagnostic:
        """Accepted-locales detector returned something other than a list.

        Args:
            value: The value returned by the detector

        Returns:
            Diagnostic for INVALID_LOCALE_LIST
        """
        msg = f"Not a list of accepted locales: {type(value).__name__}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LOCALE_LIST,
            message=msg,
            hint="Return a list of locale identifiers or Locale instances",
        )

    @staticmethod
    def duplicate_locale(tag: str) -> Diagnostic:
        """Locale tag registered twice.

        Args:
            tag: Normalized tag of the locale

        Returns:
            Diagnostic for DUPLICATE_LOCALE
        """
        msg = f"Translations for locale '{tag}' have been registered before"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_LOCALE,
            message=msg,
            hint="Use update_translations() to extend translations of a registered locale",
        )

    @staticmethod
    def no_accepted_locale(tags: tuple[str, ...]) -> Diagnostic:
        """Loader did not provide translations for any accepted locale.

        Args:
            tags: Tags of all locales tried in order

        Returns:
            Diagnostic for NO_ACCEPTED_LOCALE
        """
        tried = ", ".join(tags) if tags else "none"
        msg = f"Missing support for any accepted locale (tried: {tried})"
        return Diagnostic(
            code=DiagnosticCode.NO_ACCEPTED_LOCALE,
            message=msg,
            hint="Provide a fallback locale the loader is known to support",
        )

    @staticmethod
    def invalid_translations(value: object) -> Diagnostic:
        """Registered translations are not a mapping.

        Args:
            value: The rejected translations

        Returns:
            Diagnostic for INVALID_TRANSLATIONS
        """
        msg = f"Invalid type of translations map: {type(value).__name__}"
        return Diagnostic(code=DiagnosticCode.INVALID_TRANSLATIONS, message=msg)

    @staticmethod
    def invalid_source(value: object, key_path: tuple[str, ...] = ()) -> Diagnostic:
        """Merge source or one of its values has an unsupported type.

        Args:
            value: The rejected value
            key_path: Keys leading to the value

        Returns:
            Diagnostic for INVALID_SOURCE
        """
        msg = f"Invalid type of source: {type(value).__name__}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_SOURCE,
            message=msg,
            hint="Translations consist of strings, numbers and mappings only",
            key_path=key_path or None,
        )

    @staticmethod
    def invalid_key(key: object, key_path: tuple[str, ...] = ()) -> Diagnostic:
        """Key of a translation tree is malformed.

        Args:
            key: The rejected key
            key_path: Keys leading to the mapping containing the key

        Returns:
            Diagnostic for INVALID_KEY
        """
        msg = f"Invalid key in tree of translations: {key!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_KEY,
            message=msg,
            hint="Keys must be non-empty strings without whitespace or periods",
            key_path=key_path or None,
        )

    @staticmethod
    def invalid_array(key_path: tuple[str, ...]) -> Diagnostic:
        """Sequence found in a translation tree.

        Args:
            key_path: Keys leading to the sequence

        Returns:
            Diagnostic for INVALID_ARRAY
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_ARRAY,
            message="Invalid array in tree of translations",
            hint="Use a mapping with named variants instead of a list",
            key_path=key_path,
        )

    @staticmethod
    def scalar_over_object(key_path: tuple[str, ...]) -> Diagnostic:
        """Scalar merged onto an existing subtree.

        Args:
            key_path: Keys leading to the subtree

        Returns:
            Diagnostic for SCALAR_OVER_OBJECT
        """
        return Diagnostic(
            code=DiagnosticCode.SCALAR_OVER_OBJECT,
            message="Invalid scalar replacement for existing thread of translations",
            hint="Merge a mapping of variants instead of a single string",
            key_path=key_path,
        )

    @staticmethod
    def object_over_scalar(key_path: tuple[str, ...]) -> Diagnostic:
        """Subtree merged onto an existing scalar.

        Args:
            key_path: Keys leading to the scalar

        Returns:
            Diagnostic for OBJECT_OVER_SCALAR
        """
        return Diagnostic(
            code=DiagnosticCode.OBJECT_OVER_SCALAR,
            message="Invalid non-scalar replacement for existing leaf of translations tree",
            hint="Translations must keep their shape across merges",
            key_path=key_path,
        )

    @staticmethod
    def tree_depth_exceeded(max_depth: int) -> Diagnostic:
        """Source tree nests deeper than allowed.

        Args:
            max_depth: Configured maximum depth

        Returns:
            Diagnostic for TREE_DEPTH_EXCEEDED
        """
        msg = f"Maximum tree depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.TREE_DEPTH_EXCEEDED,
            message=msg,
            hint="Check for adversarial or programmatically generated input",
        )
