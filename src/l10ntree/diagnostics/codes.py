"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Locale errors (identifiers, registration, selection)
        2000-2999: Translation tree errors (shape violations, merge conflicts)
    """

    # Locale errors (1000-1999)
    INVALID_LOCALE = 1001
    DUPLICATE_LOCALE = 1002
    NO_ACCEPTED_LOCALE = 1003
    INVALID_LOCALE_LIST = 1004

    # Translation tree errors (2000-2999)
    INVALID_TRANSLATIONS = 2001
    INVALID_SOURCE = 2002
    INVALID_KEY = 2003
    INVALID_ARRAY = 2004
    SCALAR_OVER_OBJECT = 2005
    OBJECT_OVER_SCALAR = 2006
    TREE_DEPTH_EXCEEDED = 2007


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        key_path: Keys leading to the offending node of a translation tree
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    key_path: tuple[str, ...] | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[SCALAR_OVER_OBJECT]: Cannot replace subtree 'name' with a scalar
              = path: animals.name
              = help: Merge a mapping of variants instead of a single string

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {_escape(self.message)}"]
        if self.key_path:
            lines.append(f"  = path: {_escape('.'.join(self.key_path))}")
        if self.hint:
            lines.append(f"  = help: {_escape(self.hint)}")
        return "\n".join(lines)


def _escape(text: str) -> str:
    """Escape control characters so untrusted keys cannot forge log lines."""
    return "".join(char if char.isprintable() else repr(char)[1:-1] for char in text)
