"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Reference errors (missing messages)
        2000-2999: Formatting errors (placeholder substitution)
        3000-3999: Syntax errors (unreadable TS documents)
    """

    # Reference errors (1000-1999)
    MESSAGE_NOT_FOUND = 1001
    TRANSLATION_UNFINISHED = 1002
    TRANSLATION_EMPTY = 1003

    # Formatting errors (2000-2999)
    ARGUMENT_MISSING = 2001
    ARGUMENT_UNUSED = 2002
    COUNT_NOT_PROVIDED = 2003
    NUMBER_FORMAT_FAILED = 2004

    # Syntax errors (3000-3999)
    XML_MALFORMED = 3001
    ROOT_ELEMENT_INVALID = 3002
    SOURCE_TOO_LARGE = 3003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        context: TS context name the error relates to
        source_text: Source string of the message the error relates to
        line: Line number in the TS document (1-indexed), if known
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    context: str | None = None
    source_text: str | None = None
    line: int | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[MESSAGE_NOT_FOUND]: Message 'About' not found in context 'AboutPage'
              --> context AboutPage
              = help: Check that the catalog for this locale contains the message

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
