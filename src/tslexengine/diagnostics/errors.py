"""TS exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class TSError(Exception):
    """Base exception for all TSLexEngine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TSError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class TSSyntaxError(TSError):
    """TS document could not be read.

    Raised for malformed XML, a root element other than <TS>, or input
    larger than the configured limit. Problems inside single messages do
    not raise; they become Junk entries in the catalog.
    """


class TSReferenceError(TSError):
    """Unknown translation unit.

    Returned (not raised) when a (context, source, comment) key has no
    usable translation. Fallback: the source text.
    """


class TSFormatError(TSError):
    """Placeholder substitution error.

    Returned (not raised) when an argument is missing or left unused, or
    when a %L argument cannot be formatted for the locale.

    Attributes:
        placeholder: The placeholder token involved (e.g. "%2"), if any
    """

    def __init__(self, message: str | Diagnostic, *, placeholder: str = "") -> None:
        super().__init__(message)
        self.placeholder = placeholder
