"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable, consistently formatted, and documents every
    error case in one place.
    """

    @staticmethod
    def message_not_found(context: str, source: str, comment: str = "") -> Diagnostic:
        """Translation unit not found in any loaded catalog.

        Args:
            context: Context name used for the lookup
            source: Source text used for the lookup
            comment: Disambiguation comment used for the lookup

        Returns:
            Diagnostic for MESSAGE_NOT_FOUND
        """
        disambiguation = f" (comment {comment!r})" if comment else ""
        msg = f"Message {source!r}{disambiguation} not found in context '{context}'"
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_NOT_FOUND,
            message=msg,
            hint="Check that the catalog for this locale contains the message",
            context=context,
            source_text=source,
        )

    @staticmethod
    def translation_unfinished(context: str, source: str) -> Diagnostic:
        """Translation exists but is marked unfinished and unfinished are excluded."""
        msg = f"Translation of {source!r} in context '{context}' is unfinished"
        return Diagnostic(
            code=DiagnosticCode.TRANSLATION_UNFINISHED,
            message=msg,
            hint="Finish the translation or load catalogs with include_unfinished=True",
            context=context,
            source_text=source,
            severity="warning",
        )

    @staticmethod
    def translation_empty(context: str, source: str) -> Diagnostic:
        """Translation element exists but has no text."""
        msg = f"Translation of {source!r} in context '{context}' is empty"
        return Diagnostic(
            code=DiagnosticCode.TRANSLATION_EMPTY,
            message=msg,
            hint="Empty translations fall back to the source text",
            context=context,
            source_text=source,
            severity="warning",
        )

    @staticmethod
    def argument_missing(placeholder: str, provided: int) -> Diagnostic:
        """Placeholder has no matching positional argument.

        Args:
            placeholder: The placeholder token (e.g. "%3")
            provided: Number of positional arguments supplied
        """
        msg = f"No argument for placeholder {placeholder} ({provided} argument(s) provided)"
        return Diagnostic(
            code=DiagnosticCode.ARGUMENT_MISSING,
            message=msg,
            hint="Pass one argument per distinct %N placeholder",
        )

    @staticmethod
    def argument_unused(index: int, placeholders: int) -> Diagnostic:
        """Positional argument has no placeholder to fill.

        Args:
            index: Zero-based index of the first unused argument
            placeholders: Number of distinct positional placeholders found
        """
        msg = (
            f"Argument {index + 1} is unused: the text has only "
            f"{placeholders} distinct placeholder(s)"
        )
        return Diagnostic(
            code=DiagnosticCode.ARGUMENT_UNUSED,
            message=msg,
            severity="warning",
        )

    @staticmethod
    def count_not_provided(placeholder: str) -> Diagnostic:
        """%n used but no count was given."""
        msg = f"Placeholder {placeholder} requires a count but none was provided"
        return Diagnostic(
            code=DiagnosticCode.COUNT_NOT_PROVIDED,
            message=msg,
            hint="Pass n=<count> when translating numerus messages",
        )

    @staticmethod
    def number_format_failed(placeholder: str, value: object, locale: str) -> Diagnostic:
        """%L placeholder value could not be formatted for the locale."""
        msg = f"Cannot format {value!r} for {placeholder} in locale '{locale}'"
        return Diagnostic(
            code=DiagnosticCode.NUMBER_FORMAT_FAILED,
            message=msg,
            hint="%L placeholders expect int, float or Decimal values",
            severity="warning",
        )

    @staticmethod
    def xml_malformed(detail: str, line: int | None = None) -> Diagnostic:
        """TS document is not well-formed XML."""
        msg = f"Malformed TS document: {detail}"
        return Diagnostic(
            code=DiagnosticCode.XML_MALFORMED,
            message=msg,
            hint="TS files must be well-formed XML as written by lupdate or Qt Linguist",
            line=line,
        )

    @staticmethod
    def root_element_invalid(tag: str) -> Diagnostic:
        """XML root element is not <TS>."""
        msg = f"Expected root element <TS>, found <{tag}>"
        return Diagnostic(
            code=DiagnosticCode.ROOT_ELEMENT_INVALID,
            message=msg,
            hint="Only Qt Linguist TS documents are supported",
        )

    @staticmethod
    def source_too_large(size: int, limit: int) -> Diagnostic:
        """Source exceeds the configured size limit."""
        msg = f"TS source is {size} bytes, limit is {limit} bytes"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            hint="Raise max_source_size if the document is trusted",
        )
